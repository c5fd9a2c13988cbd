"""Boundary check: keep the backend, the engine and its extras apart.

Run from repo root:

    python scripts/check_engine_boundary.py

Rules:

1) backend/app/**/*.py may import the engine only through ``crossframe.api``
   and ``crossframe.contracts.*``.
2) crossframe/**/*.py must not import ``backend`` or ``fastapi``.
3) Only ``crossframe.extras`` itself may import ``crossframe.extras``; the
   synthetic datasets are for scripts, notebooks and tests.
"""

from __future__ import annotations

import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional


@dataclass(frozen=True)
class Violation:
    file: Path
    lineno: int
    kind: str
    detail: str


# (lineno, module, file) -> detail or None
Rule = Callable[[int, str, Path], Optional[str]]


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _is_under(mod: str, package: str) -> bool:
    return mod == package or mod.startswith(package + ".")


def _iter_imports(py_file: Path) -> Iterator[tuple[int, str]]:
    tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for a in node.names:
                yield node.lineno or 1, a.name
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            yield node.lineno or 1, node.module


def _backend_rule(lineno: int, mod: str, py_file: Path) -> Optional[str]:
    if not _is_under(mod, "crossframe"):
        return None
    if mod == "crossframe.api" or _is_under(mod, "crossframe.contracts"):
        return None
    return f"Disallowed engine import '{mod}'. Allowed: crossframe.api, crossframe.contracts.*"


def _engine_rule(lineno: int, mod: str, py_file: Path) -> Optional[str]:
    for forbidden in ("backend", "fastapi"):
        if _is_under(mod, forbidden):
            return f"Engine must not import {forbidden} ('{mod}')."
    if _is_under(mod, "crossframe.extras") and "extras" not in py_file.parts:
        return f"Core engine module imports optional extras ('{mod}')."
    return None


def _scan(root: Path, kind: str, rule: Rule) -> list[Violation]:
    if not root.exists():
        return []

    violations: list[Violation] = []
    for py_file in sorted(root.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        try:
            imports = list(_iter_imports(py_file))
        except SyntaxError as e:
            violations.append(Violation(py_file, int(e.lineno or 1), "syntax", str(e)))
            continue
        for lineno, mod in imports:
            detail = rule(lineno, mod, py_file)
            if detail is not None:
                violations.append(Violation(py_file, lineno, kind, detail))
    return violations


def find_violations(repo_root: Path) -> list[Violation]:
    return _scan(repo_root / "backend" / "app", "backend->engine", _backend_rule) + _scan(
        repo_root / "crossframe", "engine", _engine_rule
    )


def main() -> int:
    repo_root = _repo_root()
    violations = find_violations(repo_root)

    if not violations:
        print("ENGINE BOUNDARY CHECK: OK")
        return 0

    print("ENGINE BOUNDARY CHECK: FAILED\n")
    for v in violations:
        print(f"- {v.file.relative_to(repo_root)}:{v.lineno} [{v.kind}] {v.detail}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
