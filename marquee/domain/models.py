"""Sign content entities: display items, border effects and the playlist."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_serializer, model_validator

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 255
DEFAULT_BRIGHTNESS = 100

Channel = Annotated[int, Field(ge=0, le=255)]
Rgb = tuple[Channel, Channel, Channel]
Brightness = Annotated[int, Field(ge=BRIGHTNESS_MIN, le=BRIGHTNESS_MAX)]


class BorderEffectKind(str, Enum):
    NONE = "None"
    RAINBOW = "Rainbow"
    PULSE = "Pulse"
    SPARKLE = "Sparkle"
    GRADIENT = "Gradient"


_BORDER_TAGS = {kind.value for kind in BorderEffectKind}


class BorderEffect(BaseModel):
    """
    Border styling drawn around the text.

    Stored externally tagged: unit variants are the bare tag string
    ("Rainbow") and the gradient keeps its payload under the tag
    ({"Gradient": {"colors": [[r, g, b], ...]}}).
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    kind: BorderEffectKind = BorderEffectKind.NONE
    colors: list[Rgb] | None = None

    @classmethod
    def none(cls) -> "BorderEffect":
        return cls(kind=BorderEffectKind.NONE)

    @classmethod
    def rainbow(cls) -> "BorderEffect":
        return cls(kind=BorderEffectKind.RAINBOW)

    @classmethod
    def pulse(cls) -> "BorderEffect":
        return cls(kind=BorderEffectKind.PULSE)

    @classmethod
    def sparkle(cls) -> "BorderEffect":
        return cls(kind=BorderEffectKind.SPARKLE)

    @classmethod
    def gradient(cls, colors: list[Rgb]) -> "BorderEffect":
        return cls(kind=BorderEffectKind.GRADIENT, colors=list(colors))

    @model_validator(mode="before")
    @classmethod
    def _untag(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"kind": data}
        if isinstance(data, dict) and len(data) == 1:
            tag, body = next(iter(data.items()))
            if tag in _BORDER_TAGS and isinstance(body, dict):
                return {"kind": tag, **body}
        return data

    @model_validator(mode="after")
    def _check_colors(self) -> "BorderEffect":
        if self.kind is BorderEffectKind.GRADIENT:
            if self.colors is None:
                raise ValueError("Gradient border effect requires a colors list")
        elif self.colors is not None:
            raise ValueError(f"{self.kind.value} border effect takes no colors")
        return self

    @model_serializer(mode="plain")
    def _tag(self) -> str | dict[str, Any]:
        if self.kind is BorderEffectKind.GRADIENT:
            return {self.kind.value: {"colors": [list(color) for color in self.colors or []]}}
        return self.kind.value


class ColoredSegment(BaseModel):
    """Character span [start, end) of the owning text drawn in its own color."""

    model_config = ConfigDict(validate_assignment=True)

    start: NonNegativeInt
    end: NonNegativeInt
    color: Rgb

    @model_validator(mode="after")
    def _check_span(self) -> "ColoredSegment":
        if self.start >= self.end:
            raise ValueError(f"segment start ({self.start}) must be lower than end ({self.end})")
        return self


class DisplayContent(BaseModel):
    """One unit of content shown on the sign."""

    model_config = ConfigDict(allow_inf_nan=False, validate_assignment=True)

    text: str
    scroll: bool
    color: Rgb
    speed: float  # pixels per second, used only when scrolling
    duration: NonNegativeInt  # seconds, 0 = indefinite
    repeat_count: NonNegativeInt  # 0 = indefinite
    border_effect: BorderEffect | None = None
    # Segments may overlap or leave gaps; the renderer resolves them.
    colored_segments: list[ColoredSegment] | None = None


class Playlist(BaseModel):
    """Ordered display items plus the playback and brightness settings."""

    model_config = ConfigDict(validate_assignment=True)

    items: list[DisplayContent] = Field(default_factory=list)
    # Not checked against len(items); see active_item().
    active_index: NonNegativeInt = 0
    repeat: bool = True
    brightness: Brightness = DEFAULT_BRIGHTNESS

    def active_item(self) -> DisplayContent | None:
        """Return the item under active_index, or None when it points past the list."""
        if 0 <= self.active_index < len(self.items):
            return self.items[self.active_index]
        return None
