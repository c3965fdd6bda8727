from __future__ import annotations

import sys
from pathlib import Path

PACKAGE_DIR = "pwmeter"


def _resolve_repo_root(script_file: str | Path) -> Path:
    # Only the direct parent of scripts/ counts; an ancestor checkout must not shadow it.
    repo_root = Path(script_file).resolve().parent.parent
    if not (repo_root / PACKAGE_DIR / "core").is_dir():
        raise RuntimeError(
            "unable to resolve repository root from wrapper location; "
            f"expected wrapper under '<repo>/scripts/' with '<repo>/{PACKAGE_DIR}/core/' present"
        )
    return repo_root


def bootstrap_repo_path(script_file: str | Path | None = None) -> Path:
    repo_root = _resolve_repo_root(__file__ if script_file is None else script_file)
    root = str(repo_root)
    if root not in sys.path:
        sys.path.insert(0, root)
    return repo_root
