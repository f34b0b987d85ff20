#!/usr/bin/env python3
"""
Overwrite playlist.json with an empty default playlist.

Usage:
  python scripts/reset_playlist.py [--dir /var/lib/marquee] [--keep-brightness]
"""
from __future__ import annotations

import argparse
import sys

from marquee.core.log import configure_logging
from marquee.domain.models import Playlist
from marquee.repositories.playlist_storage import create_storage


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset the sign playlist")
    ap.add_argument("--dir", help="Storage directory (default: MARQUEE_STORAGE_DIR or ~/.marquee)")
    ap.add_argument(
        "--keep-brightness",
        action="store_true",
        help="Carry the brightness of the current playlist into the new one",
    )
    args = ap.parse_args()

    configure_logging()
    storage = create_storage(args.dir)
    with storage.lock() as store:
        fresh = Playlist()
        if args.keep_brightness:
            current = store.load_playlist()
            if current is not None:
                fresh = Playlist(brightness=current.brightness)
        if not store.save_playlist(fresh):
            raise SystemExit("Could not save playlist (see log)")
    print("OK: playlist reset")
    print(f"  Brightness: {fresh.brightness}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
