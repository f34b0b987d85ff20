"""
Defaults, validation and the on-disk shape of the sign entities.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Make the marquee package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marquee.domain.models import (  # noqa: E402
    BorderEffect,
    BorderEffectKind,
    ColoredSegment,
    DisplayContent,
    Playlist,
)


def _content(**overrides) -> DisplayContent:
    fields = dict(text="Hello", scroll=True, color=(255, 0, 0), speed=20.0, duration=0, repeat_count=0)
    fields.update(overrides)
    return DisplayContent(**fields)


def test_playlist_defaults():
    playlist = Playlist()
    assert playlist.items == []
    assert playlist.active_index == 0
    assert playlist.repeat is True
    assert playlist.brightness == 100


def test_border_effect_defaults_to_none_variant():
    effect = BorderEffect()
    assert effect.kind is BorderEffectKind.NONE
    assert effect.colors is None
    assert effect == BorderEffect.none()


def test_border_effect_unit_variants_serialize_as_tag():
    for effect, tag in [
        (BorderEffect.none(), "None"),
        (BorderEffect.rainbow(), "Rainbow"),
        (BorderEffect.pulse(), "Pulse"),
        (BorderEffect.sparkle(), "Sparkle"),
    ]:
        dumped = _content(border_effect=effect).model_dump(mode="json")
        assert dumped["border_effect"] == tag


def test_gradient_serializes_under_its_tag():
    effect = BorderEffect.gradient([(255, 0, 0), (0, 0, 255)])
    dumped = _content(border_effect=effect).model_dump(mode="json")
    assert dumped["border_effect"] == {"Gradient": {"colors": [[255, 0, 0], [0, 0, 255]]}}


def test_border_effect_parses_tagged_forms():
    assert BorderEffect.model_validate("Pulse").kind is BorderEffectKind.PULSE
    gradient = BorderEffect.model_validate({"Gradient": {"colors": [[1, 2, 3], [4, 5, 6]]}})
    assert gradient.kind is BorderEffectKind.GRADIENT
    assert gradient.colors == [(1, 2, 3), (4, 5, 6)]


def test_border_effect_rejects_unknown_tag():
    with pytest.raises(ValidationError):
        BorderEffect.model_validate("Blink")


def test_gradient_requires_colors_and_others_refuse_them():
    with pytest.raises(ValidationError):
        BorderEffect(kind=BorderEffectKind.GRADIENT)
    with pytest.raises(ValidationError):
        BorderEffect(kind=BorderEffectKind.RAINBOW, colors=[(1, 2, 3)])
    assert BorderEffect.gradient([]).colors == []


def test_absent_and_explicit_none_border_stay_distinct():
    absent = _content()
    explicit = _content(border_effect=BorderEffect.none())
    assert absent.model_dump(mode="json")["border_effect"] is None
    assert explicit.model_dump(mode="json")["border_effect"] == "None"
    assert DisplayContent.model_validate_json(absent.model_dump_json()) == absent
    assert DisplayContent.model_validate_json(explicit.model_dump_json()) == explicit


def test_missing_optional_keys_load_as_absent():
    content = DisplayContent.model_validate(
        {"text": "hi", "scroll": False, "color": [1, 2, 3], "speed": 0, "duration": 5, "repeat_count": 2}
    )
    assert content.border_effect is None
    assert content.colored_segments is None
    assert content.color == (1, 2, 3)


def test_segment_requires_start_before_end():
    with pytest.raises(ValidationError):
        ColoredSegment(start=3, end=3, color=(0, 0, 0))
    with pytest.raises(ValidationError):
        ColoredSegment(start=5, end=2, color=(0, 0, 0))


def test_segments_may_overlap_and_exceed_text():
    content = _content(
        text="Hi",
        colored_segments=[
            ColoredSegment(start=0, end=5, color=(255, 0, 0)),
            ColoredSegment(start=1, end=40, color=(0, 255, 0)),
        ],
    )
    assert [s.end for s in content.colored_segments] == [5, 40]


def test_color_channels_are_bytes():
    with pytest.raises(ValidationError):
        _content(color=(256, 0, 0))
    with pytest.raises(ValidationError):
        _content(color=(0, -1, 0))
    with pytest.raises(ValidationError):
        _content(color=(0, 0))


def test_counts_must_not_be_negative():
    with pytest.raises(ValidationError):
        _content(duration=-1)
    with pytest.raises(ValidationError):
        _content(repeat_count=-3)


def test_speed_must_be_finite():
    with pytest.raises(ValidationError):
        _content(speed=float("nan"))


def test_playlist_brightness_range():
    assert Playlist(brightness=0).brightness == 0
    assert Playlist(brightness=255).brightness == 255
    with pytest.raises(ValidationError):
        Playlist(brightness=256)


def test_active_index_is_not_bounded_by_items():
    playlist = Playlist(items=[_content()], active_index=7)
    assert playlist.active_index == 7
    assert playlist.active_item() is None
    assert Playlist(items=[_content(text="a")]).active_item().text == "a"
    assert Playlist().active_item() is None


def test_assignment_is_validated():
    playlist = Playlist(items=[_content()])
    with pytest.raises(ValidationError):
        playlist.brightness = 300
    assert playlist.brightness == 100

    segment = ColoredSegment(start=0, end=4, color=(1, 2, 3))
    with pytest.raises(ValidationError):
        segment.end = 0

    content = _content()
    with pytest.raises(ValidationError):
        content.color = (0, 0, 300)
    with pytest.raises(ValidationError):
        content.speed = float("inf")

    effect = BorderEffect.rainbow()
    with pytest.raises(ValidationError):
        effect.colors = [(1, 2, 3)]
