import asyncio
from hashlib import sha256
from typing import List, Optional

import aiohttp
from loguru import logger

from py_sage.constants import METADATA_FETCH_TIMEOUT, METADATA_MAX_SIZE
from py_sage.nft.metadata import compute_nft_info
from py_sage.nft.models import ComputedNftInfo


class MetadataFetcher(object):
    """
    Downloads off-chain NFT metadata.

    Tries each metadata URI in order and accepts the first response whose
    sha256 matches the on-chain metadata hash.
    """

    def __init__(
        self, timeout=METADATA_FETCH_TIMEOUT, headers=None, max_size=METADATA_MAX_SIZE
    ):
        """
        Initialize metadata fetcher.

        Args:
            timeout: Request timeout in seconds
            headers: Extra HTTP headers sent with every request
            max_size: Largest accepted response body in bytes
        """
        self.timeout = timeout
        self.max_size = max_size
        self._headers = headers or dict()
        self._client: aiohttp.ClientSession = None

    async def __aenter__(self):
        await self.startup()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()

    async def startup(self):
        self._client = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )

    async def shutdown(self):
        if self._client and not self._client.closed:
            await self._client.close()

    async def fetch(
        self, uris: List[str], expected_hash: Optional[bytes] = None
    ) -> Optional[bytes]:
        """
        Fetch the metadata blob.

        Args:
            uris: Metadata URIs, in priority order
            expected_hash: sha256 of the metadata recorded on chain

        Returns:
            First blob matching the hash, or None if no URI served one
        """
        if not self._client:
            await self.startup()
        for uri in uris:
            try:
                async with self._client.get(uri, headers=self._headers) as r:
                    if r.status != 200:
                        logger.warning(f"Metadata fetch failed {r.status}: {uri}")
                        continue
                    blob = await self._read_limited(r)
                    if blob is None:
                        logger.warning(f"Metadata larger than {self.max_size} bytes: {uri}")
                        continue
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(f"Metadata fetch error {uri}: {e}")
                continue
            if expected_hash is not None and sha256(blob).digest() != expected_hash:
                logger.warning(f"Metadata hash mismatch: {uri}")
                continue
            return blob
        return None

    async def _read_limited(self, r: aiohttp.ClientResponse) -> Optional[bytes]:
        """Read the body, or return None once it exceeds max_size."""
        if r.content_length is not None and r.content_length > self.max_size:
            return None
        chunks = []
        size = 0
        async for chunk in r.content.iter_chunked(64 * 1024):
            size += len(chunk)
            if size > self.max_size:
                return None
            chunks.append(chunk)
        return b"".join(chunks)

    async def fetch_nft_info(
        self,
        owner_identity: Optional[bytes],
        uris: List[str],
        expected_hash: Optional[bytes] = None,
    ) -> ComputedNftInfo:
        blob = await self.fetch(uris, expected_hash)
        return compute_nft_info(owner_identity, blob)
