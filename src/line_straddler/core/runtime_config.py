# どこで: `src/line_straddler/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 既定の装飾線種類や SVG 出力のスタイルを、コードを変えずに差し替えられるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from line_straddler.core.line_type import LineType


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """line_straddler の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    default_line_type: LineType
    svg_stroke_width: float
    svg_bold_scale: float
    svg_decimals: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    _CONFIG_CACHE = None
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".line_straddler" / "config.yaml",
        home / ".config" / "line_straddler" / "config.yaml",
    )


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(os.path.expandvars(os.path.expanduser(s)))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _require(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(
            f"{key} が未設定です（同梱 default_config.yaml を確認してください）"
        )
    return value


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping を再帰的にマージする（後勝ち）。"""

    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    blob = (
        resources.files("line_straddler")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="line_straddler/resource/default_config.yaml")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = _as_int(_require(payload.get("version"), key="version"), key="version")
    if version != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _require(
        _as_optional_path(paths.get("output_dir")), key="paths.output_dir"
    )

    generator = _as_mapping(payload.get("generator"), key="generator")
    line_type_text = _require(
        generator.get("default_line_type"), key="generator.default_line_type"
    )
    try:
        default_line_type = LineType.parse(line_type_text)
    except ValueError as exc:
        raise RuntimeError(f"generator.default_line_type が不正です: {exc}") from exc

    export = _as_mapping(payload.get("export"), key="export")
    svg = _as_mapping(export.get("svg"), key="export.svg")
    stroke_width = _require(
        _as_float(svg.get("stroke_width"), key="export.svg.stroke_width"),
        key="export.svg.stroke_width",
    )
    if stroke_width <= 0:
        raise ValueError(f"export.svg.stroke_width は正の値である必要があります: got={stroke_width}")
    bold_scale = _require(
        _as_float(svg.get("bold_scale"), key="export.svg.bold_scale"),
        key="export.svg.bold_scale",
    )
    if bold_scale <= 0:
        raise ValueError(f"export.svg.bold_scale は正の値である必要があります: got={bold_scale}")
    decimals = _require(
        _as_int(svg.get("decimals"), key="export.svg.decimals"),
        key="export.svg.decimals",
    )
    if decimals < 0:
        raise ValueError(f"export.svg.decimals は 0 以上である必要があります: got={decimals}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        default_line_type=default_line_type,
        svg_stroke_width=float(stroke_width),
        svg_bold_scale=float(bold_scale),
        svg_decimals=int(decimals),
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.line_straddler/config.yaml` / `~/.config/line_straddler/config.yaml`
    3) `set_config_path(...)` で指定した config
    """

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
