# seedsync/__init__.py
# Constant synchronization checker.
#
# Verifies that constants declared in two independently maintained source
# files (TypeScript PDA_SEEDS and Rust byte-string consts) hold identical
# values for matching names.
#
# ENTRY POINT:
#   python -m seedsync.run_check [--project-root DIR]
#
# CI GATE:
#   python -m seedsync.ci_sync_gate

from .tool_version import TOOL_VERSION
from .extraction_rules import (
    BlockRule,
    DeclarationRule,
    ExtractionRule,
    RUST_BYTE_CONST_RULE,
    TS_PDA_SEEDS_RULE,
)
from .sync_config import SourceSpec, SyncConfig, pda_sync_config
from .source_loader import SourceLoader
from .constant_extractor import ConstantExtractor
from .constant_comparator import ConstantComparator
from .sync_reporter import SyncReporter
from .data_models import ComparisonReport, ConstantSet, KeyComparison, KeyOutcome
from .run_check import run_check
from .ci_sync_gate import main as run_ci_gate

__all__ = [
    # Version constant
    "TOOL_VERSION",
    # Extraction rules
    "ExtractionRule",
    "BlockRule",
    "DeclarationRule",
    "TS_PDA_SEEDS_RULE",
    "RUST_BYTE_CONST_RULE",
    # Configuration
    "SourceSpec",
    "SyncConfig",
    "pda_sync_config",
    # Pipeline components
    "SourceLoader",
    "ConstantExtractor",
    "ConstantComparator",
    "SyncReporter",
    # Data models
    "ConstantSet",
    "ComparisonReport",
    "KeyComparison",
    "KeyOutcome",
    # Entry points
    "run_check",
    "run_ci_gate",
]
