# どこで: `src/line_straddler/api/__init__.py`。
# 何を: 公開 API（decorate / Export）を再エクスポートする。

from __future__ import annotations

from .export import Export, decorate

__all__ = ["Export", "decorate"]
