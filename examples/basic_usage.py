#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from stardots.sdk import (
    FileAccessTicketRequest,
    SpaceFileListRequest,
    SpaceListRequest,
    StarDots,
    StarDotsError,
    UploadFileRequest,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List spaces and files, optionally upload one")
    p.add_argument("space", nargs="?", default="demo")
    p.add_argument("--upload", metavar="PATH", help="file to upload into the space")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Reads STARDOTS_CLIENT_KEY / STARDOTS_CLIENT_SECRET / STARDOTS_ENDPOINT
    async with StarDots.from_env() as client:
        try:
            spaces = await client.get_space_list(SpaceListRequest(page=1, page_size=50))
            print("=" * 65)
            print(f"Spaces     : success={spaces.success} code={spaces.code} message={spaces.message}")
            for space in spaces.data or []:
                visibility = "public" if space.is_public else "private"
                print(f"  {space.name:<16} {visibility:<8} files={space.file_count}")

            if args.upload:
                with open(args.upload, "rb") as fh:
                    content = fh.read()
                uploaded = await client.upload_file(
                    UploadFileRequest(filename=args.upload.rsplit("/", 1)[-1], space=args.space, file_content=content)
                )
                print(f"Upload     : success={uploaded.success} message={uploaded.message}")
                if uploaded.data:
                    print(f"  url      : {uploaded.data.url}")

            files = await client.get_space_file_list(SpaceFileListRequest(space=args.space))
            print(f"Files      : success={files.success} code={files.code}")
            for info in files.data.files if files.data else []:
                print(f"  {info.name:<24} {info.size:>10}  {info.url}")
                ticket = await client.file_access_ticket(
                    FileAccessTicketRequest(filename=info.name, space=args.space)
                )
                if ticket.data:
                    print(f"    ticket : {ticket.data.ticket}")
            print("=" * 65)
        except StarDotsError as e:
            print(f"Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
