# どこで: `src/line_straddler/__init__.py`。
# 何を: ルート `line_straddler` パッケージを定義する。
# なぜ: import 起点を `line_straddler` に統一するため。

from __future__ import annotations

from line_straddler.api import Export, decorate
from line_straddler.core.color import Color
from line_straddler.core.glyph import Glyph, GlyphStyle, Line
from line_straddler.core.line_generator import LineGenerator, generate_lines
from line_straddler.core.line_type import LineType

__all__ = [
    "Color",
    "Export",
    "Glyph",
    "GlyphStyle",
    "Line",
    "LineGenerator",
    "LineType",
    "decorate",
    "generate_lines",
]
