"""
どこで: `src/line_straddler/core/line_type.py`。
何を: 生成する装飾線の種類と、font_size から縦オフセットを決める方針を定義する。
"""

from __future__ import annotations

from enum import Enum

_ALIASES = {
    "strike-through": "strike_through",
    "strikethrough": "strike_through",
    "line-through": "strike_through",
}


class LineType(Enum):
    """装飾線の種類。"""

    OVERLINE = "overline"
    STRIKE_THROUGH = "strike_through"
    UNDERLINE = "underline"

    def offset(self, font_size: float) -> float:
        """行の y から装飾線までの縦オフセットを返す。"""

        if self is LineType.OVERLINE:
            return 0.0
        if self is LineType.STRIKE_THROUGH:
            return font_size / 2.0
        return font_size

    @classmethod
    def parse(cls, value: "LineType | str") -> "LineType":
        """LineType または名前（大文字小文字は無視）から LineType を返す。

        Raises
        ------
        ValueError
            未知の名前の場合。
        """

        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"未知の line type です: {value!r}（{choices}）") from exc


__all__ = ["LineType"]
