"""
どこで: `src/line_straddler/core/glyph.py`。
何を: 入力レコード `Glyph`、その描画スタイル `GlyphStyle`、出力レコード `Line` を定義する。
なぜ: レイアウトエンジンとレンダラの間で受け渡す値を、依存のない不変データとして固定するため。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from line_straddler.core.color import Color


@dataclass(frozen=True, slots=True)
class GlyphStyle:
    """グリフのスタイル。run 結合時の等価キーとして使う。"""

    bold: bool = False
    color: Color = field(default_factory=Color)


@dataclass(frozen=True, slots=True)
class Glyph:
    """描画対象のグリフ 1 つ分の配置情報。

    Parameters
    ----------
    line_y : float
        グリフが属するテキスト行の y 座標（装飾線自体の y ではない）。
    font_size : float
        フォントサイズ [px]。装飾線のオフセット算出に使う。
    width : float
        グリフ矩形の幅。
    x : float
        グリフ矩形の左端 x 座標。
    style : GlyphStyle
        グリフのスタイル。

    Notes
    -----
    検証は行わない。同じ line_y の中で x が非減少となる順序で渡すのは呼び出し側の責務。
    """

    line_y: float
    font_size: float
    width: float
    x: float
    style: GlyphStyle


@dataclass(frozen=True, slots=True)
class Line:
    """描画すべき水平線 1 本。"""

    y: float
    start_x: float
    end_x: float
    style: GlyphStyle

    @property
    def length(self) -> float:
        return self.end_x - self.start_x

    def endpoints(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """((start_x, y), (end_x, y)) を返す。"""

        return (self.start_x, self.y), (self.end_x, self.y)


__all__ = ["Glyph", "GlyphStyle", "Line"]
