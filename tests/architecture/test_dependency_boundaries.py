"""依存境界（core は export/api に依存しない）の破りを検出するテスト。"""

from __future__ import annotations

import ast
import sys
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(str(alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module is not None:
            if node.level:
                # core 内の相対 import は core 外を指さない前提で許容する。
                modules.add("." * node.level + node.module)
            else:
                modules.add(str(node.module))
    return modules


def test_core_does_not_import_export_or_api() -> None:
    core_root = _repo_root() / "src" / "line_straddler" / "core"
    forbidden = ("line_straddler.export", "line_straddler.api")

    violations: list[str] = []
    for path in sorted(core_root.rglob("*.py")):
        for module in _imported_modules(path):
            if module.startswith(forbidden) or module.startswith(".."):
                violations.append(f"{path.name}: {module}")

    assert not violations, "\n".join(violations)


def test_core_only_uses_numpy_and_yaml_from_third_party() -> None:
    core_root = _repo_root() / "src" / "line_straddler" / "core"
    allowed_third_party = {"numpy", "yaml"}

    stdlib = set(sys.stdlib_module_names)
    offenders: list[str] = []
    for path in sorted(core_root.rglob("*.py")):
        for module in _imported_modules(path):
            top = module.split(".")[0]
            if not top or top == "line_straddler" or top in stdlib or top == "__future__":
                continue
            if top not in allowed_third_party:
                offenders.append(f"{path.name}: {module}")

    assert not offenders, "\n".join(offenders)
