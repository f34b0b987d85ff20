"""Playlist and brightness use cases on top of the shared storage."""

from __future__ import annotations

import logging
from typing import Optional

from marquee.domain.models import DEFAULT_BRIGHTNESS, DisplayContent, Playlist
from marquee.repositories.playlist_storage import SharedStorage

logger = logging.getLogger(__name__)


class PlaylistEditError(ValueError):
    """Raised when an edit points at an item that does not exist."""


class PlaylistService:
    """
    Applies the fallback policy callers expect: a missing or unreadable
    playlist is an empty default one, and the standalone brightness file wins
    over the brightness stored inside the playlist.
    """

    def __init__(self, storage: SharedStorage) -> None:
        self.storage = storage

    def current_playlist(self) -> Playlist:
        with self.storage.lock() as store:
            playlist = store.load_playlist() or Playlist()
            brightness = store.load_brightness()
        if brightness is not None and brightness != playlist.brightness:
            playlist = playlist.model_copy(update={"brightness": brightness})
        return playlist

    def replace_playlist(self, playlist: Playlist) -> bool:
        with self.storage.lock() as store:
            return store.save_playlist(playlist)

    def add_item(self, content: DisplayContent) -> Optional[Playlist]:
        with self.storage.lock() as store:
            playlist = store.load_playlist() or Playlist()
            updated = playlist.model_copy(update={"items": [*playlist.items, content]})
            return updated if store.save_playlist(updated) else None

    def remove_item(self, index: int) -> Optional[Playlist]:
        with self.storage.lock() as store:
            playlist = store.load_playlist() or Playlist()
            self._check_index(playlist, index)
            items = [item for i, item in enumerate(playlist.items) if i != index]
            active = playlist.active_index
            if index < active or active >= len(items):
                active = max(0, active - 1)
            updated = playlist.model_copy(update={"items": items, "active_index": active})
            return updated if store.save_playlist(updated) else None

    def select(self, index: int) -> Optional[Playlist]:
        with self.storage.lock() as store:
            playlist = store.load_playlist() or Playlist()
            self._check_index(playlist, index)
            updated = playlist.model_copy(update={"active_index": index})
            return updated if store.save_playlist(updated) else None

    def current_brightness(self) -> int:
        with self.storage.lock() as store:
            brightness = store.load_brightness()
            if brightness is not None:
                return brightness
            playlist = store.load_playlist()
        if playlist is not None:
            return playlist.brightness
        return DEFAULT_BRIGHTNESS

    def set_brightness(self, value: int) -> bool:
        with self.storage.lock() as store:
            return store.save_brightness(value)

    @staticmethod
    def _check_index(playlist: Playlist, index: int) -> None:
        if not 0 <= index < len(playlist.items):
            logger.debug("Rejected playlist index %s (items: %d)", index, len(playlist.items))
            raise PlaylistEditError(f"No playlist item at index {index}")
