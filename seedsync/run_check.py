# seedsync/run_check.py
# Constant synchronization check -- Entry Point.
#
# Standard invocation (from the project root):
#   python -m seedsync.run_check
#
# Explicit layout:
#   python -m seedsync.run_check \
#       --project-root path/to/project \
#       --ts-path neuro-shared/src/pda.ts \
#       --rust-path neuro-program/src/lib.rs
#
# EXIT CODES:
#   0  -- All constants of source A synchronized.
#   1  -- At least one mismatched or missing constant.
#   2  -- READ_FAILURE (a source file is missing or unreadable).
#   3  -- CONFIG_VIOLATION (unknown or malformed arguments).
#
# Single-threaded. No writes beyond stdout/stderr.

import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, TextIO

from seedsync.tool_version import TOOL_VERSION
from seedsync.sync_config import SyncConfig, pda_sync_config
from seedsync.source_loader import SourceLoader
from seedsync.constant_extractor import ConstantExtractor
from seedsync.constant_comparator import ConstantComparator
from seedsync.sync_reporter import SyncReporter
from seedsync.data_models.failure_types import exit_code_for


class _CheckArgumentParser(argparse.ArgumentParser):
    """Reports usage errors as CONFIG_VIOLATION instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise RuntimeError(f"CONFIG_VIOLATION: {self.prog}: {message}")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = _CheckArgumentParser(
        description=f"Constant synchronization check v{TOOL_VERSION}",
        prog="python -m seedsync.run_check",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Directory the source paths are relative to. Default: current directory.",
    )
    parser.add_argument(
        "--ts-path",
        default=None,
        help="TypeScript source declaring PDA_SEEDS. Default: neuro-shared/src/pda.ts.",
    )
    parser.add_argument(
        "--rust-path",
        default=None,
        help="Rust source declaring byte-string seeds. Default: neuro-program/src/lib.rs.",
    )
    return parser.parse_args(argv)


def run_check(config: SyncConfig, stream: Optional[TextIO] = None) -> int:
    """
    Run the pipeline once and return the exit code.

    Pipeline sequence:
      SourceLoader -> ConstantExtractor (x2) -> ConstantComparator -> SyncReporter

    Raises RuntimeError(READ_FAILURE) before any output if a source
    cannot be read.
    """
    text_a, text_b = SourceLoader(config).load()

    extractor = ConstantExtractor()
    set_a = extractor.extract(config.source_a, text_a)
    set_b = extractor.extract(config.source_b, text_b)

    report = ConstantComparator().compare(set_a, set_b)
    return SyncReporter(subject=config.subject, stream=stream).emit(set_a, set_b, report)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the exit code."""
    try:
        args = _parse_args(argv)
        root = Path(args.project_root) if args.project_root else Path.cwd()
        config = pda_sync_config(root, ts_path=args.ts_path, rust_path=args.rust_path)
        return run_check(config)
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return exit_code_for(exc)


if __name__ == "__main__":
    sys.exit(main())
