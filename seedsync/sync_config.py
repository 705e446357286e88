# seedsync/sync_config.py
# SyncConfig -- which two files to compare and how to read each of them.
#
# The default layout is the convention of the project being checked:
#   <project root>/neuro-shared/src/pda.ts    (source A, "TS")
#   <project root>/neuro-program/src/lib.rs   (source B, "Rust")

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from seedsync.extraction_rules import (
    ExtractionRule,
    RUST_BYTE_CONST_RULE,
    TS_PDA_SEEDS_RULE,
)

_DEFAULT_TS_RELPATH   = Path("neuro-shared") / "src" / "pda.ts"
_DEFAULT_RUST_RELPATH = Path("neuro-program") / "src" / "lib.rs"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SourceSpec:
    label: str
    path:  Path
    rule:  ExtractionRule


@dataclass(frozen=True)
class SyncConfig:
    """
    Source A is the reference set: its keys decide pass/fail.
    Keys only in source B are reported as extras.
    """
    source_a: SourceSpec
    source_b: SourceSpec
    subject:  str = "PDA constants"

    def __post_init__(self) -> None:
        for side in (self.source_a, self.source_b):
            if not isinstance(side.rule, ExtractionRule):
                raise RuntimeError(
                    f"CONFIG_VIOLATION: source '{side.label}' rule must be an "
                    f"ExtractionRule; got {type(side.rule).__name__}."
                )
            if not side.label:
                raise RuntimeError("CONFIG_VIOLATION: source label must be non-empty.")
        if self.source_a.label == self.source_b.label:
            raise RuntimeError(
                f"CONFIG_VIOLATION: source labels must differ; both are "
                f"'{self.source_a.label}'."
            )


def pda_sync_config(
    project_root: PathLike,
    ts_path:      Optional[PathLike] = None,
    rust_path:    Optional[PathLike] = None,
) -> SyncConfig:
    """
    Build the PDA seed layout rooted at project_root.
    Relative override paths are resolved against project_root.
    """
    root = Path(project_root)
    ts   = root / (ts_path if ts_path is not None else _DEFAULT_TS_RELPATH)
    rust = root / (rust_path if rust_path is not None else _DEFAULT_RUST_RELPATH)
    return SyncConfig(
        source_a=SourceSpec(label="TS", path=ts, rule=TS_PDA_SEEDS_RULE),
        source_b=SourceSpec(label="Rust", path=rust, rule=RUST_BYTE_CONST_RULE),
    )
