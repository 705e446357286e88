# seedsync/data_models/__init__.py
# Immutable records passed between pipeline stages.

from .constant_set import ConstantSet
from .comparison_report import ComparisonReport, KeyComparison, KeyOutcome
from .failure_types import FAILURE_TYPES, exit_code_for

__all__ = [
    "ConstantSet",
    "ComparisonReport",
    "KeyComparison",
    "KeyOutcome",
    "FAILURE_TYPES",
    "exit_code_for",
]
