#!/usr/bin/env python3
"""Render the blog as static files. Usage: python -m scripts.build_site [--output DIR]"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from spacetraveling.clients.prismic import PrismicClient, PrismicError
from spacetraveling.config import get_settings
from spacetraveling.services.site_builder import build_site


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Build the static site")
    parser.add_argument("--output", default=settings.STATIC_OUTPUT_DIR or "out")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = PrismicClient(
        settings.PRISMIC_API_ENDPOINT,
        access_token=settings.PRISMIC_ACCESS_TOKEN,
        timeout=settings.REQUEST_TIMEOUT,
    )
    try:
        stats = build_site(client, args.output, settings)
    except PrismicError as e:
        print(f"Build failed: {e}")
        sys.exit(1)
    finally:
        client.close()

    print(f"Built {stats['posts']} posts over {stats['pages']} pages into {args.output}")
    if stats["failed"]:
        print(f"{stats['failed']} posts failed, see log")
        sys.exit(1)


if __name__ == "__main__":
    main()
