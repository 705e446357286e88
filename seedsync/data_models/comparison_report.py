# seedsync/data_models/comparison_report.py
# ComparisonReport data class for ConstantComparator output.

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyOutcome(Enum):
    MATCHED      = "MATCHED"
    MISMATCHED   = "MISMATCHED"
    MISSING_IN_B = "MISSING_IN_B"


@dataclass(frozen=True)
class KeyComparison:
    """
    Outcome for a single key declared by source A.
    value_b is None when the key is MISSING_IN_B.
    """
    name:    str
    outcome: KeyOutcome
    value_a: str
    value_b: Optional[str]


@dataclass(frozen=True)
class ComparisonReport:
    """
    Full comparison report produced by the comparator.

    Fields:
      passed      -- True iff no key is MISMATCHED or MISSING_IN_B.
      total_keys  -- Number of keys declared by source A.
      comparisons -- KeyComparison per key of source A, in A's order.
      extra_keys  -- Names present only in source B, in B's order.
                     Informational; never affects passed.
      notes       -- Informational strings (duplicates, empty extraction).
    """
    passed:      bool
    total_keys:  int
    comparisons: tuple    # tuple of KeyComparison, immutable
    extra_keys:  tuple    # tuple of str, immutable
    notes:       tuple    # tuple of str, immutable

    @property
    def failures(self) -> tuple:
        return tuple(c for c in self.comparisons if c.outcome is not KeyOutcome.MATCHED)
