# seedsync/constant_comparator.py
# ConstantComparator -- key-wise comparison of two ConstantSets.
#
# Source A is the reference: every key of A receives an outcome.
# Keys present only in source B are extra keys and never fail the check.
# Values are compared with exact string equality. No case, whitespace or
# encoding normalization is applied.

from typing import List

from seedsync.data_models.constant_set import ConstantSet
from seedsync.data_models.comparison_report import (
    ComparisonReport,
    KeyComparison,
    KeyOutcome,
)


def _outcome(value_a: str, b: ConstantSet, name: str) -> KeyComparison:
    if name not in b:
        return KeyComparison(name, KeyOutcome.MISSING_IN_B, value_a, None)
    value_b = b.get(name)
    if value_b == value_a:
        return KeyComparison(name, KeyOutcome.MATCHED, value_a, value_b)
    return KeyComparison(name, KeyOutcome.MISMATCHED, value_a, value_b)


class ConstantComparator:
    """
    Compares source A against source B.

    Method:
      compare(a, b) -> ComparisonReport
    """

    def compare(self, a: ConstantSet, b: ConstantSet) -> ComparisonReport:
        comparisons = tuple(_outcome(value, b, name) for name, value in a.entries)
        extra_keys  = tuple(name for name in b.names() if name not in a)

        notes: List[str] = []
        for side in (a, b):
            if len(side) == 0:
                notes.append(f"No {side.label} constants extracted from {side.path}.")
            for name in side.duplicates:
                notes.append(
                    f"Duplicate {side.label} declaration (last value wins): {name}"
                )

        passed = all(c.outcome is KeyOutcome.MATCHED for c in comparisons)
        return ComparisonReport(
            passed=passed,
            total_keys=len(a),
            comparisons=comparisons,
            extra_keys=extra_keys,
            notes=tuple(notes),
        )
