from .fetcher import MetadataFetcher
from .metadata import calculate_collection_id, compute_nft_info, parse_metadata
from .models import (
    Chip0007Metadata,
    Collection,
    CollectionAttribute,
    CollectionRecord,
    ComputedNftInfo,
    NftAttribute,
)
