#!/usr/bin/env python3
"""
Write the standalone brightness setting (brightness.json) without touching the playlist.

Usage:
  python scripts/set_brightness.py --value 180 [--dir /var/lib/marquee]
"""
from __future__ import annotations

import argparse
import sys

from marquee.core.log import configure_logging
from marquee.domain.models import BRIGHTNESS_MAX, BRIGHTNESS_MIN
from marquee.repositories.playlist_storage import create_storage


def main() -> None:
    ap = argparse.ArgumentParser(description="Set the sign brightness")
    ap.add_argument("--value", type=int, required=True, help=f"Brightness {BRIGHTNESS_MIN}-{BRIGHTNESS_MAX}")
    ap.add_argument("--dir", help="Storage directory (default: MARQUEE_STORAGE_DIR or ~/.marquee)")
    args = ap.parse_args()

    if not BRIGHTNESS_MIN <= args.value <= BRIGHTNESS_MAX:
        raise SystemExit(f"Brightness must be between {BRIGHTNESS_MIN} and {BRIGHTNESS_MAX}")

    configure_logging()
    storage = create_storage(args.dir)
    with storage.lock() as store:
        if not store.save_brightness(args.value):
            raise SystemExit("Could not save brightness (see log)")
    print(f"OK: brightness set to {args.value}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
