#!/usr/bin/env python3
"""Write sample video catalogs for every configured product.

Usage:
    python scripts/seed_videos.py
    # catalogs land in GRANTDESK_VIDEOS_DIR (default: current directory)
"""

import json
import pathlib
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from grantdesk.access.products import PRODUCTS
from grantdesk.common.config import get_settings
from grantdesk.content.videos import catalog_path


def sample_videos(product: str) -> list[dict]:
    base = f"https://videos.example.com/{product.lower()}"
    return [
        {
            "type": "basic",
            "url": f"{base}/welcome",
            "thumbnail": f"{base}/welcome.png",
            "title": f"Welcome to {product}",
            "product_name": product,
        },
        {
            "type": "premium",
            "url": f"{base}/deep-dive",
            "thumbnail": f"{base}/deep-dive.png",
            "title": f"{product} deep dive",
            "product_name": product,
        },
    ]


def seed_videos(videos_dir: pathlib.Path, overwrite: bool = False) -> list[pathlib.Path]:
    videos_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for product in PRODUCTS:
        path = catalog_path(videos_dir, product.name)
        if path.exists() and not overwrite:
            print(f"  [skip] {path.name} already exists")
            continue
        path.write_text(json.dumps(sample_videos(product.name), indent=2))
        print(f"  [created] {path.name}")
        written.append(path)
    return written


if __name__ == "__main__":
    written = seed_videos(get_settings().videos_path)
    print(f"\nDone. {len(written)} catalogs written.")
