"""
Marquee – playlist and brightness state for a scrolling-text sign.

  from marquee.repositories.playlist_storage import create_storage
  storage = create_storage()
  with storage.lock() as store:
      playlist = store.load_playlist()
"""

__version__ = "0.1.0"
