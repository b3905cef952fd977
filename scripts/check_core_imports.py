#!/usr/bin/env python3
"""
Fail if the lifecycle core imports transport or environment libraries.
Only client.py, config.py and record.py may reach httpx / dotenv.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = REPO_ROOT / "src" / "api_record"

CORE_MODULES = (
    "collection.py",
    "error_list.py",
    "errors.py",
    "intents.py",
    "messages.py",
    "naming.py",
    "outcome.py",
    "reconcile.py",
    "response.py",
)

FORBIDDEN_PREFIXES = (
    "httpx",
    "dotenv",
    "api_record.client",
    "api_record.config",
)

FORBIDDEN_RELATIVE = ("client", "config")


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level and mod in FORBIDDEN_RELATIVE:
                errors.append(f"{path}: forbidden import '.{mod}'")
            elif mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for name in CORE_MODULES:
        py_file = PACKAGE_DIR / name
        if not py_file.is_file():
            violations.append(f"{py_file}: missing core module")
            continue
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
