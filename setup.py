from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="py-sage",
    packages=find_packages("src"),
    package_dir={"": "src"},
    version="0.1.0",
    description="Off-chain NFT metadata resolution and sync notifications for Chia light wallets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.10",
    install_requires=["pydantic>=2", "loguru", "aiohttp"],
    extras_require={"test": ["pytest", "pytest-asyncio"]},
)
