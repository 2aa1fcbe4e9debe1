#!/usr/bin/env python3
"""Reject exception handlers that swallow failures without a log record.

Modal disposal is fire-and-forget, so a handler that neither re-raises nor
logs hides a broken unmount. Rules:

* bare ``except:`` and ``except BaseException`` are rejected outright;
* any other handler must re-raise, or call ``log_recoverable(...)``, or log
  through ``.exception(...)`` / ``.warning|error|critical(..., exc_info=...)``.

Handlers for ``ValueError`` are exempt; config parsing falls back to defaults.
"""

from __future__ import annotations

import argparse
import ast
from pathlib import Path

EXEMPT_TYPES = frozenset({"ValueError"})
LOG_METHODS = frozenset({"warning", "error", "critical"})


def _type_names(handler: ast.ExceptHandler) -> set[str]:
    node = handler.type
    elements = node.elts if isinstance(node, ast.Tuple) else [node]
    names: set[str] = set()
    for element in elements:
        if isinstance(element, ast.Name):
            names.add(element.id)
        elif isinstance(element, ast.Attribute):
            names.add(element.attr)
    return names


def _records_failure(call: ast.Call) -> bool:
    func = call.func
    if isinstance(func, ast.Name):
        return func.id == "log_recoverable"
    if not isinstance(func, ast.Attribute):
        return False
    if func.attr == "log_recoverable" or func.attr == "exception":
        return True
    if func.attr in LOG_METHODS:
        return any(kw.arg == "exc_info" for kw in call.keywords)
    return False


class _HandlerVisitor(ast.NodeVisitor):
    def __init__(self, rel: str) -> None:
        self.rel = rel
        self.violations: list[str] = []

    def visit_ExceptHandler(self, node: ast.ExceptHandler) -> None:
        self.generic_visit(node)
        if node.type is None:
            self.violations.append(f"{self.rel}:{node.lineno} bare except")
            return
        names = _type_names(node)
        if "BaseException" in names:
            self.violations.append(f"{self.rel}:{node.lineno} except BaseException")
            return
        if names and names <= EXEMPT_TYPES:
            return

        body = ast.Module(body=node.body, type_ignores=[])
        for inner in ast.walk(body):
            if isinstance(inner, ast.Raise):
                return
            if isinstance(inner, ast.Call) and _records_failure(inner):
                return
        self.violations.append(
            f"{self.rel}:{node.lineno} handler for {', '.join(sorted(names))} swallows the failure silently"
        )


def check_file(path: Path, rel: str) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=rel)
    visitor = _HandlerVisitor(rel)
    visitor.visit(tree)
    return visitor.violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check that handled exceptions stay observable.")
    parser.add_argument("--root", default="modalstack")
    args = parser.parse_args()

    violations: list[str] = []
    for path in sorted(Path(args.root).rglob("*.py")):
        violations.extend(check_file(path, path.as_posix()))

    if violations:
        print("Swallowed error violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
