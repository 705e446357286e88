#!/usr/bin/env python3
# =============================================================================
# SEEDSYNC -- PDA SEED CHECK
# File:   scripts/check_pda_sync.py
# =============================================================================
#
# Checks that PDA seed constants are synchronized between the TypeScript
# and Rust implementations of the project being checked. Arguments are
# forwarded to seedsync.run_check, so the project root is the current
# working directory unless --project-root is given.
#
# Usage (from the checked project, or with an explicit root):
#   python scripts/check_pda_sync.py
#   python scripts/check_pda_sync.py --project-root path/to/project
# =============================================================================

from __future__ import annotations

import sys

from seedsync.run_check import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
