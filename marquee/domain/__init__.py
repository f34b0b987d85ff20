"""Domain entities for the sign playlist."""

from marquee.domain.models import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    DEFAULT_BRIGHTNESS,
    BorderEffect,
    BorderEffectKind,
    ColoredSegment,
    DisplayContent,
    Playlist,
    Rgb,
)

__all__ = [
    "BRIGHTNESS_MAX",
    "BRIGHTNESS_MIN",
    "DEFAULT_BRIGHTNESS",
    "BorderEffect",
    "BorderEffectKind",
    "ColoredSegment",
    "DisplayContent",
    "Playlist",
    "Rgb",
]
