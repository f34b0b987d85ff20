#!/usr/bin/env python3
"""
Print the stored playlist and the standalone brightness.

Usage:
  python scripts/show_playlist.py [--dir /var/lib/marquee]
"""
from __future__ import annotations

import argparse
import sys

from marquee.repositories.playlist_storage import create_storage


def main() -> None:
    ap = argparse.ArgumentParser(description="Show the stored sign playlist")
    ap.add_argument("--dir", help="Storage directory (default: MARQUEE_STORAGE_DIR or ~/.marquee)")
    args = ap.parse_args()

    storage = create_storage(args.dir)
    with storage.lock() as store:
        playlist = store.read_playlist()
        brightness = store.read_brightness()
        location = store.location

    print(f"Storage: {location}")
    if brightness.ok:
        print(f"Brightness: {brightness.value}")
    else:
        print(f"Brightness: unavailable ({brightness.reason})")

    if not playlist.ok:
        print(f"Playlist: unavailable ({playlist.reason})")
        return
    pl = playlist.value
    print(f"Playlist: {len(pl.items)} item(s), active={pl.active_index}, repeat={pl.repeat}, brightness={pl.brightness}")
    for i, item in enumerate(pl.items):
        marker = "*" if i == pl.active_index else " "
        mode = f"scroll {item.speed:g}px/s" if item.scroll else "static"
        effect = item.border_effect.kind.value if item.border_effect else "-"
        print(f" {marker} {i}: {item.text[:50]!r} [{mode}, color={item.color}, border={effect}]")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
