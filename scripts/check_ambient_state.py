#!/usr/bin/env python3
"""Keep process-wide ambient state in the modules that own it.

Environment variables are read only by the runtime config module, and
``ContextVar`` slots are created and assigned only by the config and
context modules. Everything else receives config through
``get_modal_config()`` and services through ``use_modal()``.
"""

from __future__ import annotations

import argparse
import ast
from pathlib import Path

ENV_OWNERS = frozenset({"modalstack/runtime/config.py"})
CONTEXTVAR_OWNERS = frozenset({"modalstack/runtime/config.py", "modalstack/runtime/context.py"})


def _is_os_environ(node: ast.AST) -> bool:
    return (
        isinstance(node, ast.Attribute)
        and node.attr == "environ"
        and isinstance(node.value, ast.Name)
        and node.value.id == "os"
    )


def _env_access(node: ast.AST) -> bool:
    if isinstance(node, ast.Subscript):
        return _is_os_environ(node.value)
    if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Attribute):
        return False
    func = node.func
    if func.attr == "getenv":
        return isinstance(func.value, ast.Name) and func.value.id == "os"
    return func.attr in {"get", "setdefault", "pop"} and _is_os_environ(func.value)


def _imported_slots(tree: ast.Module) -> set[str]:
    """Private names imported from the modules that own ContextVar slots."""
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module is not None:
            if f"{node.module.replace('.', '/')}.py" in CONTEXTVAR_OWNERS:
                names.update(
                    alias.asname or alias.name for alias in node.names if alias.name.startswith("_")
                )
    return names


def _creates_contextvar(node: ast.AST) -> bool:
    if not isinstance(node, ast.Call):
        return False
    func = node.func
    if isinstance(func, ast.Name):
        return func.id == "ContextVar"
    return isinstance(func, ast.Attribute) and func.attr == "ContextVar"


def check_file(path: Path, rel: str) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=rel)
    violations: list[str] = []
    slots = _imported_slots(tree)

    for node in ast.walk(tree):
        if rel not in ENV_OWNERS and _env_access(node):
            violations.append(f"{rel}:{node.lineno} environment access outside runtime config")
        if rel in CONTEXTVAR_OWNERS or not isinstance(node, ast.Call):
            continue
        if _creates_contextvar(node):
            violations.append(f"{rel}:{node.lineno} ContextVar created outside config/context modules")
        func = node.func
        if (
            isinstance(func, ast.Attribute)
            and func.attr in {"set", "reset"}
            and isinstance(func.value, ast.Name)
            and func.value.id in slots
        ):
            violations.append(f"{rel}:{node.lineno} ContextVar assigned outside config/context modules")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check ambient state ownership.")
    parser.add_argument("--root", default="modalstack")
    args = parser.parse_args()

    violations: list[str] = []
    for path in sorted(Path(args.root).rglob("*.py")):
        violations.extend(check_file(path, path.as_posix()))

    if violations:
        print("Ambient state violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
