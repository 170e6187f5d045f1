"""
どこで: `src/line_straddler/api/export.py`。
何を: グリフ列から装飾線を生成して SVG に書き出す公開導線 `decorate` / `Export` を提供する。
なぜ: LineGenerator の駆動（全グリフ投入と終端の pop_line）を利用者が毎回書かずに済むようにするため。
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from line_straddler.core.glyph import Glyph, Line
from line_straddler.core.line_generator import generate_lines
from line_straddler.core.line_type import LineType
from line_straddler.core.runtime_config import output_root_dir, runtime_config
from line_straddler.export.svg import export_svg


def _resolve_line_types(line_types: Iterable[LineType | str] | None) -> tuple[LineType, ...]:
    if line_types is None:
        return (runtime_config().default_line_type,)
    if isinstance(line_types, (str, LineType)):
        return (LineType.parse(line_types),)
    return tuple(LineType.parse(t) for t in line_types)


def decorate(
    glyphs: Iterable[Glyph],
    line_types: Iterable[LineType | str] | LineType | str | None = None,
) -> list[Line]:
    """グリフ列に対し、指定種類ごとの装飾線を生成して返す。

    Parameters
    ----------
    glyphs : Iterable[Glyph]
        レイアウト順のグリフ列。
    line_types : optional
        生成する装飾線の種類。None の場合は config の `generator.default_line_type`。

    Returns
    -------
    list[Line]
        `line_types` の順に連結した Line 列。
    """

    types = _resolve_line_types(line_types)
    glyph_seq: Sequence[Glyph] = list(glyphs)
    out: list[Line] = []
    for line_type in types:
        out.extend(generate_lines(glyph_seq, line_type))
    return out


class Export:
    """グリフ列の装飾線を SVG へ書き出す。"""

    def __init__(
        self,
        glyphs: Iterable[Glyph],
        path: str | Path | None = None,
        *,
        line_types: Iterable[LineType | str] | LineType | str | None = None,
        canvas_size: tuple[int, int] = (800, 800),
    ) -> None:
        """export を実行する。

        Parameters
        ----------
        glyphs : Iterable[Glyph]
            レイアウト順のグリフ列。
        path : str or Path or None
            出力先パス。None の場合は `output_root_dir() / "svg" / "decorations.svg"`。
        line_types : optional
            生成する装飾線の種類。
        canvas_size : tuple[int, int]
            SVG のキャンバス寸法。
        """
        if path is None:
            path = output_root_dir() / "svg" / "decorations.svg"
        self.lines: list[Line] = decorate(glyphs, line_types)
        self.path = export_svg(self.lines, path, canvas_size=canvas_size)
