"""
どこで: `src/line_straddler/export/svg.py`。
何を: LineGenerator が生成した Line 列を SVG として保存する関数を提供する。
なぜ: 依存の少ない参照レンダラとして、装飾線の結合結果を目視・差分確認できるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from line_straddler.core.glyph import GlyphStyle, Line
from line_straddler.core.realized_geometry import lines_to_realized
from line_straddler.core.runtime_config import runtime_config

logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, *, decimals: int) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _iter_segments(*, coords: np.ndarray, offsets: np.ndarray) -> Iterator[np.ndarray]:
    """coords/offsets から 2 点の線分（shape (2,2)）を列挙する。"""
    for start, end in zip(offsets[:-1], offsets[1:]):
        yield coords[int(start) : int(end), :2]


def _stroke_attrs(style: GlyphStyle, *, stroke_width: float, bold_scale: float, decimals: int) -> str:
    width = stroke_width * bold_scale if style.bold else stroke_width
    attrs = f'stroke="{style.color.to_hex()}" stroke-width="{_fmt(width, decimals=decimals)}"'
    if style.color.alpha < 255:
        attrs += f' stroke-opacity="{_fmt(style.color.alpha01(), decimals=decimals)}"'
    return attrs


def export_svg(
    lines: Sequence[Line],
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
    stroke_width: float | None = None,
    bold_scale: float | None = None,
    decimals: int | None = None,
) -> Path:
    """Line 列を SVG として保存する。

    Parameters
    ----------
    lines : Sequence[Line]
        描画する線分列。
    path : str or Path
        出力先パス。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法。None は未対応。
    stroke_width, bold_scale, decimals : optional
        None の場合は `runtime_config()` の `export.svg.*` を使う。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が None または正でない場合。

    Notes
    -----
    座標は `RealizedGeometry` と同じ float32 に丸めてから書き出す。
    float32 の有効桁（約 7 桁）を超える座標、例えば 100000.0015 は 100000.000 として出力される。
    """
    _path = Path(path)
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    if stroke_width is None or bold_scale is None or decimals is None:
        cfg = runtime_config()
        stroke_width = cfg.svg_stroke_width if stroke_width is None else stroke_width
        bold_scale = cfg.svg_bold_scale if bold_scale is None else bold_scale
        decimals = cfg.svg_decimals if decimals is None else decimals

    lines = list(lines)
    realized = lines_to_realized(lines)

    out: list[str] = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )

    n_written = 0
    segments = _iter_segments(coords=realized.coords, offsets=realized.offsets)
    for line, seg in zip(lines, segments):
        (x0, y0), (x1, y1) = seg
        # 長さ 0 の線分は描画しても見えないため出力しない。
        if float(x0) == float(x1):
            continue
        d = (
            f"M {_fmt(x0, decimals=decimals)} {_fmt(y0, decimals=decimals)} "
            f"L {_fmt(x1, decimals=decimals)} {_fmt(y1, decimals=decimals)}"
        )
        stroke = _stroke_attrs(
            line.style,
            stroke_width=float(stroke_width),
            bold_scale=float(bold_scale),
            decimals=decimals,
        )
        out.append(f'  <path d="{d}" fill="none" {stroke} stroke-linecap="butt" />')
        n_written += 1

    out.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(out) + "\n")

    logger.debug("SVG を保存しました: %s (lines=%d)", _path, n_written)
    return _path
