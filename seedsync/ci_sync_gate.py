#!/usr/bin/env python3
# =============================================================================
# SEEDSYNC -- CI SYNC GATE
# File:   seedsync/ci_sync_gate.py
# =============================================================================
#
# PURPOSE
# -------
# CI enforcement script. Runs the constant synchronization check on the
# project rooted at the current working directory and exits with code
# 0 (PASS) or 1 (FAIL / ERROR).
#
# Intended for CI integration:
#   python -m seedsync.ci_sync_gate
#
# Exit codes:
#   0 -- All constants synchronized.
#   1 -- Out of sync, unreadable source, or internal error: CI must block merge.
# =============================================================================

from __future__ import annotations

import pathlib
import sys
from typing import Optional

from seedsync.run_check import run_check
from seedsync.sync_config import pda_sync_config


def main(project_root: Optional[pathlib.Path] = None) -> int:
    """
    Run the check and return the gate exit code.

    Returns:
        0 if every constant is synchronized.
        1 on any mismatch, missing constant, read failure or exception.
    """
    root = project_root if project_root is not None else pathlib.Path.cwd()
    try:
        result = run_check(pda_sync_config(root))
    except Exception as exc:  # noqa: BLE001
        print(f"CI-SYNC-GATE EXCEPTION: {exc}", file=sys.stderr)
        return 1

    if result == 0:
        print("CI-SYNC-GATE: result=PASS. Merge permitted.")
        return 0
    print(f"CI-SYNC-GATE: result={result}. Merge BLOCKED.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
