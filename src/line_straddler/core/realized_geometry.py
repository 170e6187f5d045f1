# src/line_straddler/core/realized_geometry.py
# Line 列をレンダラへ渡すための RealizedGeometry 配列モデルと変換。

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from line_straddler.core.glyph import Line


@dataclass(frozen=True, slots=True)
class RealizedGeometry:
    """ポリライン列を表現する実体配列。

    Parameters
    ----------
    coords : np.ndarray
        float32 型 shape (N, 3) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で保持する。
    offsets と coords の整合性はコンストラクタ内で検証する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        coords = np.asarray(self.coords)
        offsets = np.asarray(self.offsets)

        if coords.ndim == 2 and coords.shape[1] == 2:
            # 2D 入力は z=0 を補完して (N,3) に揃える。
            z = np.zeros((coords.shape[0], 1), dtype=coords.dtype)
            coords = np.concatenate([coords, z], axis=1)

        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError("coords は shape (N,3) の 2 次元配列である必要がある")

        if coords.dtype != np.float32:
            coords = coords.astype(np.float32, copy=False)

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")

        if offsets.dtype != np.int32:
            offsets = offsets.astype(np.int32, copy=False)

        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")

        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")

        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")

        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)


def _empty_geometry() -> RealizedGeometry:
    coords = np.zeros((0, 3), dtype=np.float32)
    offsets = np.zeros((1,), dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)


def lines_to_realized(lines: Iterable[Line]) -> RealizedGeometry:
    """Line 列を 2 点ポリラインの列に変換する。

    Parameters
    ----------
    lines : Iterable[Line]
        変換対象の線分列。

    Returns
    -------
    RealizedGeometry
        Line 1 本につき `[(start_x, y, 0), (end_x, y, 0)]` の 1 ポリライン。
    """
    points = [xy for line in lines for xy in line.endpoints()]
    if not points:
        return _empty_geometry()

    coords = np.asarray(points, dtype=np.float32)
    offsets = np.arange(0, coords.shape[0] + 1, 2, dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)

