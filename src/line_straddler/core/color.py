"""
どこで: `src/line_straddler/core/color.py`。
何を: RGBA 4 チャンネルを 32bit 整数 1 つに詰めた色値 `Color` を定義する。
なぜ: GlyphStyle の等価比較キーとして安価に比較・ハッシュできる不変値を持つため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast


def _clamp_channel(value: object) -> int:
    iv = int(cast(Any, value))
    return 0 if iv < 0 else 255 if iv > 255 else iv


@dataclass(frozen=True, slots=True)
class Color:
    """32bit RGBA 色。

    Parameters
    ----------
    value : int, optional
        上位バイトから R, G, B, A の順に詰めた値。既定は 0（透明な黒）。
    """

    value: int = 0

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """RGBA（各 0..255）から Color を生成する。範囲外は clamp する。"""

        return cls(
            (_clamp_channel(r) << 24)
            | (_clamp_channel(g) << 16)
            | (_clamp_channel(b) << 8)
            | _clamp_channel(a)
        )

    @property
    def red(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def blue(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def alpha(self) -> int:
        return self.value & 0xFF

    def components(self) -> tuple[int, int, int, int]:
        """(r, g, b, a) を返す。"""

        return self.red, self.green, self.blue, self.alpha

    def to_rgb01(self) -> tuple[float, float, float]:
        """0..1 float の RGB を返す。"""

        return self.red / 255.0, self.green / 255.0, self.blue / 255.0

    def alpha01(self) -> float:
        return self.alpha / 255.0

    def to_hex(self) -> str:
        """`#RRGGBB` 形式の文字列を返す（alpha は含めない）。"""

        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


__all__ = ["Color"]
