"""
どこで: `src/line_straddler/core/line_generator.py`。
何を: グリフ列を順に受け取り、同一行・同一サイズ・同一スタイルで連続する run を 1 本の Line に結合する。
なぜ: レンダラ側が描く装飾線を、グリフ単位ではなく最小本数の線分として得るため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from line_straddler.core.glyph import Glyph, GlyphStyle, Line
from line_straddler.core.line_type import LineType

logger = logging.getLogger(__name__)

# 上流レイアウトの丸め誤差を吸収する固定閾値（設定不可）。
EPSILON = 0.001


def approx_eq(a: float, b: float) -> bool:
    """2 つの float が EPSILON 未満の差なら True を返す。"""

    return abs(a - b) < EPSILON


@dataclass(slots=True)
class _OngoingLine:
    """結合途中の run。閉じた時点で Line に変換して破棄する。"""

    y: float
    start_x: float
    end_x: float
    style: GlyphStyle
    # 直近に取り込んだグリフの line_y と font_size。
    last_line_y: float
    font_size: float

    def accepts(self, glyph: Glyph) -> bool:
        return (
            approx_eq(self.last_line_y, glyph.line_y)
            and self.end_x <= glyph.x
            and approx_eq(self.font_size, glyph.font_size)
            and self.style == glyph.style
        )

    def to_line(self) -> Line:
        return Line(y=self.y, start_x=self.start_x, end_x=self.end_x, style=self.style)


class LineGenerator:
    """1 種類の装飾線を生成するストリーミング結合器。

    Notes
    -----
    状態は「run なし」か「run 1 本を結合中」のどちらか。
    最後の run は自動では出力されないため、入力の終端で必ず `pop_line()` を呼ぶ。
    """

    def __init__(self, line_type: LineType) -> None:
        self._line_type = line_type
        self._ongoing: _OngoingLine | None = None

    def __repr__(self) -> str:
        return f"LineGenerator(line_type={self._line_type!r}, ongoing={self._ongoing!r})"

    @property
    def line_type(self) -> LineType:
        return self._line_type

    @property
    def is_idle(self) -> bool:
        """結合中の run が無ければ True。"""

        return self._ongoing is None

    def pop_line(self) -> Line | None:
        """結合中の run を閉じて返す。run が無ければ None を返す。"""

        ongoing, self._ongoing = self._ongoing, None
        if ongoing is None:
            return None
        return ongoing.to_line()

    def add_glyph(self, glyph: Glyph) -> Line | None:
        """グリフを 1 つ取り込み、閉じた run があればそれを Line として返す。

        Parameters
        ----------
        glyph : Glyph
            取り込むグリフ。

        Returns
        -------
        Line or None
            このグリフにより閉じられた直前の run。延長した場合や初回は None。
        """

        ongoing = self._ongoing
        if ongoing is not None and ongoing.accepts(glyph):
            ongoing.end_x = glyph.x + glyph.width
            ongoing.last_line_y = glyph.line_y
            ongoing.font_size = glyph.font_size
            return None

        # 旧 run の取り外しと新 run の設置を 1 回の代入で行う。
        old, self._ongoing = ongoing, _OngoingLine(
            y=glyph.line_y + self._line_type.offset(glyph.font_size),
            start_x=glyph.x,
            end_x=glyph.x + glyph.width,
            style=glyph.style,
            last_line_y=glyph.line_y,
            font_size=glyph.font_size,
        )
        if old is None:
            return None

        # 同じ行でのスタイル/サイズ切り替えなら、旧 run の終端を新グリフの始点に揃える。
        if approx_eq(old.last_line_y, glyph.line_y):
            old.end_x = glyph.x
        return old.to_line()


def generate_lines(glyphs: Iterable[Glyph], line_type: LineType) -> Iterator[Line]:
    """グリフ列全体から Line を順に生成する。

    最後に `pop_line()` まで行うため、返り値を最後まで消費すれば run の取りこぼしは無い。
    """

    generator = LineGenerator(line_type)
    n_glyphs = 0
    n_lines = 0
    for glyph in glyphs:
        n_glyphs += 1
        line = generator.add_glyph(glyph)
        if line is not None:
            n_lines += 1
            yield line

    last = generator.pop_line()
    if last is not None:
        n_lines += 1
        yield last

    logger.debug(
        "generate_lines: line_type=%s glyphs=%d lines=%d",
        line_type.value,
        n_glyphs,
        n_lines,
    )


__all__ = ["EPSILON", "LineGenerator", "approx_eq", "generate_lines"]
