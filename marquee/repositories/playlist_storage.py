"""
Durable playlist and brightness state.

The playlist and the brightness live in two independent JSON documents in the
same directory, so a brightness change never rewrites the playlist and a
corrupt playlist never hides the last brightness. Failures never escape:
loads return None and saves return False, with the cause logged.
"""

from __future__ import annotations

import json
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Generic, Iterator, Optional, Protocol, TypeVar

from pydantic import BaseModel, Field, NonNegativeInt, StrictInt, ValidationError

from marquee.domain.models import BRIGHTNESS_MAX, BRIGHTNESS_MIN, Brightness, DisplayContent, Playlist
from marquee.repositories.file_storage import FileStorage

logger = logging.getLogger(__name__)

PLAYLIST_FILE = "playlist.json"
BRIGHTNESS_FILE = "brightness.json"

NOT_FOUND = "not_found"
IO_ERROR = "io_error"
PARSE_ERROR = "parse_error"

T = TypeVar("T")


class FileAccess(Protocol):
    def file_exists(self, name: str) -> bool: ...

    def read_file(self, name: str) -> str: ...

    def write_file(self, name: str, text: str) -> None: ...

    def get_file_path(self, name: str) -> Path: ...


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of a load: the value, or the reason (not_found/io_error/parse_error) it is missing."""

    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


class BrightnessSetting(BaseModel):
    brightness: Annotated[StrictInt, Field(ge=BRIGHTNESS_MIN, le=BRIGHTNESS_MAX)]


class StoredPlaylist(BaseModel):
    """playlist.json as written by save_playlist: every top-level key is required."""

    items: list[DisplayContent]
    active_index: NonNegativeInt
    repeat: bool
    brightness: Brightness

    def to_playlist(self) -> Playlist:
        return Playlist(
            items=self.items,
            active_index=self.active_index,
            repeat=self.repeat,
            brightness=self.brightness,
        )


def _encode(model: BaseModel) -> str:
    return json.dumps(model.model_dump(mode="json"), ensure_ascii=False, indent=2, allow_nan=False)


class PlaylistStorage:
    """Load/save helpers for playlist.json and brightness.json."""

    def __init__(self, files: FileAccess) -> None:
        logger.debug("Initializing PlaylistStorage")
        self._files = files

    @property
    def location(self) -> Path:
        return self._files.get_file_path(PLAYLIST_FILE).parent

    # -------------------------- playlist --------------------------
    def read_playlist(self) -> LoadResult[Playlist]:
        raw = self._read(PLAYLIST_FILE, "playlist")
        if not raw.ok:
            return LoadResult(reason=raw.reason)
        logger.debug("Loaded playlist file, attempting to parse")
        try:
            playlist = StoredPlaylist.model_validate_json(raw.value).to_playlist()
        except ValidationError as exc:
            logger.error("Error parsing playlist file: %s", exc)
            return LoadResult(reason=PARSE_ERROR)
        logger.info("Successfully loaded playlist with %d items", len(playlist.items))
        return LoadResult(value=playlist)

    def load_playlist(self) -> Optional[Playlist]:
        return self.read_playlist().value

    def save_playlist(self, playlist: Playlist) -> bool:
        logger.debug("Saving playlist with %d items", len(playlist.items))
        # Nested lists and model_construct() bypass assignment checks; re-check
        # so nothing is written that load_playlist() would refuse.
        try:
            checked = StoredPlaylist.model_validate(playlist.model_dump())
        except (TypeError, ValueError) as exc:
            logger.error("Error serializing playlist: %s", exc)
            return False
        if not self._write(PLAYLIST_FILE, "playlist", checked):
            return False
        logger.info("Playlist saved to: %s", self._files.get_file_path(PLAYLIST_FILE))
        return True

    # -------------------------- brightness --------------------------
    def read_brightness(self) -> LoadResult[int]:
        logger.debug("Loading brightness setting")
        raw = self._read(BRIGHTNESS_FILE, "brightness")
        if not raw.ok:
            return LoadResult(reason=raw.reason)
        try:
            setting = BrightnessSetting.model_validate_json(raw.value)
        except ValidationError as exc:
            logger.error("Error parsing brightness file: %s", exc)
            return LoadResult(reason=PARSE_ERROR)
        logger.info("Loaded brightness setting: %d", setting.brightness)
        return LoadResult(value=setting.brightness)

    def load_brightness(self) -> Optional[int]:
        return self.read_brightness().value

    def save_brightness(self, brightness: int) -> bool:
        logger.debug("Saving brightness setting: %s", brightness)
        try:
            setting = BrightnessSetting(brightness=brightness)
        except ValidationError as exc:
            logger.error("Error serializing brightness: %s", exc)
            return False
        if not self._write(BRIGHTNESS_FILE, "brightness", setting):
            return False
        logger.info("Brightness saved: %d", brightness)
        return True

    # -------------------------- helpers --------------------------
    def _read(self, name: str, label: str) -> LoadResult[str]:
        try:
            if not self._files.file_exists(name):
                logger.info("No %s file found", label)
                return LoadResult(reason=NOT_FOUND)
            return LoadResult(value=self._files.read_file(name))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading %s file: %s", label, exc)
            return LoadResult(reason=IO_ERROR)

    def _write(self, name: str, label: str, model: BaseModel) -> bool:
        try:
            text = _encode(model)
        except (TypeError, ValueError) as exc:
            logger.error("Error serializing %s: %s", label, exc)
            return False
        try:
            self._files.write_file(name, text)
        except OSError as exc:
            logger.error("Error writing %s file: %s", label, exc)
            return False
        return True


class SharedStorage:
    """
    The single handle callers share across threads.

    PlaylistStorage holds no lock of its own; every access goes through
    lock(), which yields the storage while the mutex is held.
    """

    def __init__(self, storage: PlaylistStorage) -> None:
        self._storage = storage
        self._mutex = threading.Lock()

    @contextmanager
    def lock(self) -> Iterator[PlaylistStorage]:
        with self._mutex:
            yield self._storage


def create_storage(custom_dir: str | Path | None = None) -> SharedStorage:
    """Build the file access, the playlist storage and its shared guard."""
    logger.info("Creating storage system")
    files = FileStorage(custom_dir)
    return SharedStorage(PlaylistStorage(files))
