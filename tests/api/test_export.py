"""公開 API（decorate / Export）のテスト。"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from line_straddler import Color, Export, Glyph, GlyphStyle, LineType, decorate
from line_straddler.core.runtime_config import set_config_path

_STYLE = GlyphStyle(bold=False, color=Color.rgba(0, 0, 0, 255))
_GLYPHS = [
    Glyph(line_y=0.0, font_size=4.0, width=2.0, x=0.0, style=_STYLE),
    Glyph(line_y=0.0, font_size=4.0, width=2.0, x=3.0, style=_STYLE),
    Glyph(line_y=5.0, font_size=4.0, width=2.0, x=0.0, style=_STYLE),
    Glyph(line_y=5.0, font_size=4.0, width=2.0, x=3.0, style=_STYLE),
]


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def test_decorate_uses_config_default_line_type() -> None:
    lines = decorate(_GLYPHS)
    assert [ln.y for ln in lines] == [4.0, 9.0]


def test_decorate_with_several_line_types_keeps_order() -> None:
    lines = decorate(iter(_GLYPHS), [LineType.OVERLINE, "strike_through"])
    assert [ln.y for ln in lines] == [0.0, 5.0, 2.0, 7.0]


def test_decorate_accepts_single_line_type() -> None:
    assert [ln.y for ln in decorate(_GLYPHS, "overline")] == [0.0, 5.0]


def test_export_writes_to_configured_output_dir(tmp_path: Path) -> None:
    exported = Export(_GLYPHS, canvas_size=(20, 20))

    assert exported.path == Path("data") / "output" / "svg" / "decorations.svg"
    assert (tmp_path / exported.path).is_file()
    assert len(exported.lines) == 2


def test_export_to_explicit_path(tmp_path: Path) -> None:
    out = tmp_path / "deco.svg"
    exported = Export(_GLYPHS, out, line_types=[LineType.UNDERLINE, LineType.OVERLINE])

    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert len(root.findall("{http://www.w3.org/2000/svg}path")) == 4
    assert exported.path == out
