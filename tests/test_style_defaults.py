"""Tests for layered style resolution."""

import pytest

from inkpress.core.annotations import AnnotationKind, HighlightStyle, ShapeType
from inkpress.core.style import (
    ExportConfiguration,
    freetext_style_for,
    highlight_style_for,
    parse_color,
    parse_font_size,
    resolve,
    shape_style_for,
)


def test_resolve_prefers_record_then_config_then_builtin() -> None:
    assert resolve("record", "config", "builtin") == "record"
    assert resolve(None, "config", "builtin") == "config"
    assert resolve("", "", "builtin") == "builtin"


@pytest.mark.parametrize(
    "value, expected",
    [(14, 14.0), ("18", 18.0), ("12.5px", 12.5), ("big", None), ("0", None), (None, None)],
)
def test_parse_font_size(value, expected) -> None:
    assert parse_font_size(value) == expected


def test_highlight_uses_kind_specific_default(make_record) -> None:
    config = ExportConfiguration(text_highlight_color="#00ff00", area_highlight_color="#0000ff")
    record = make_record(kind=AnnotationKind.AREA)

    assert highlight_style_for(record, config).color == parse_color("#00ff00")
    assert highlight_style_for(record, config, area=True).color == parse_color("#0000ff")


def test_highlight_record_override_wins(make_record) -> None:
    record = make_record(highlight_color="#ff0000", highlight_style=HighlightStyle.UNDERLINE)

    appearance = highlight_style_for(record, ExportConfiguration(text_highlight_color="#00ff00"))

    assert appearance.color == parse_color("#ff0000")
    assert appearance.style is HighlightStyle.UNDERLINE


def test_freetext_builtin_defaults(make_record) -> None:
    appearance = freetext_style_for(make_record(kind=AnnotationKind.FREETEXT), ExportConfiguration())

    assert appearance.text_color == parse_color("#333333")
    assert appearance.background_color == parse_color("#ffffc8")
    assert appearance.font_size == 14.0
    assert appearance.padding == 4.0


def test_freetext_bad_font_size_falls_through_to_config(make_record) -> None:
    record = make_record(kind=AnnotationKind.FREETEXT, font_size="huge")

    appearance = freetext_style_for(record, ExportConfiguration(freetext_font_size=20))

    assert appearance.font_size == 20.0


def test_shape_defaults_and_overrides(make_record) -> None:
    plain = shape_style_for(make_record(kind=AnnotationKind.SHAPE), ExportConfiguration())
    custom = shape_style_for(
        make_record(kind=AnnotationKind.SHAPE, shape_type=ShapeType.CIRCLE, stroke_width=5),
        ExportConfiguration(shape_stroke_color="#ff0000"),
    )

    assert plain.shape_type is ShapeType.RECTANGLE
    assert plain.stroke_width == 2.0
    assert custom.shape_type is ShapeType.CIRCLE
    assert custom.stroke_color == parse_color("#ff0000")
    assert custom.stroke_width == 5


def test_configuration_from_option_keys() -> None:
    calls = []
    config = ExportConfiguration.from_dict({
        "textHighlightColor": "#111111",
        "defaultFreetextFontSize": 9,
        "onProgress": lambda done, total: calls.append((done, total)),
    })

    config.on_progress(1, 2)

    assert config.text_highlight_color == "#111111"
    assert config.freetext_font_size == 9
    assert config.area_highlight_color is None
    assert calls == [(1, 2)]
