"""
Upload an image to nft.storage and print its CID.

Usage:
    nft-storage-upload <image_path> [--name NAME] [--description TEXT]

Example:
    NFT_STORAGE_TOKEN=... nft-storage-upload art/card.png --name "My NFT"

The token is read from --token or NFT_STORAGE_TOKEN. With --offline (or a
file:// endpoint) nothing is sent and the placeholder CID is printed.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from nft_storage.core.config import get_settings
from nft_storage.core.logger import logger, setup_logger
from nft_storage.domain.entities import Metadata
from nft_storage.domain.errors import NFTStorageError
from nft_storage.services.client import NFTStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nft-storage-upload",
        description="Upload an image to nft.storage and print its CID",
    )
    parser.add_argument("image", type=Path, help="Path to the image file")
    parser.add_argument("--name", default="", help="NFT name")
    parser.add_argument("--description", default="", help="NFT description")
    parser.add_argument("--url", default=None, help="External URL of the NFT")
    parser.add_argument("--token", default=None, help="API token (default: NFT_STORAGE_TOKEN)")
    parser.add_argument("--endpoint", default=None, help="API endpoint override")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the network and return the placeholder CID",
    )
    return parser


async def upload(client: NFTStorage, metadata: Metadata) -> str:
    async with client:
        return await client.store(metadata)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logger(settings)

    token = args.token or settings.token
    if not token:
        parser.error("an API token is required (--token or NFT_STORAGE_TOKEN)")

    if not args.image.is_file():
        logger.error(f"File not found: {args.image}")
        return 1

    try:
        client = NFTStorage(
            token,
            args.endpoint or settings.endpoint,
            offline_mode=args.offline or settings.offline_mode,
            timeout=settings.request_timeout,
            chunk_size=settings.chunk_size,
        )
        with open(args.image, "rb") as image:
            metadata = Metadata(
                name=args.name or args.image.stem,
                description=args.description,
                image=image,
                url=args.url,
            )
            cid = asyncio.run(upload(client, metadata))
    except (NFTStorageError, OSError) as e:
        logger.error(f"Upload failed: {e}")
        return 1

    print(cid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
