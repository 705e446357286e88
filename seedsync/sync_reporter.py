# seedsync/sync_reporter.py
# SyncReporter -- renders ConstantSets and a ComparisonReport as text lines.
#
# Output is diagnostic only. It is not a contract for downstream tooling.
# ASCII only.

import sys
from typing import List, Optional, TextIO

from seedsync.data_models.constant_set import ConstantSet
from seedsync.data_models.comparison_report import (
    ComparisonReport,
    KeyComparison,
    KeyOutcome,
)
from seedsync.data_models.failure_types import FAILURE_TYPES

_MISSING = "(missing)"


class SyncReporter:
    """
    Method:
      render(a, b, report) -> list of lines
      emit(a, b, report)   -> exit code (0 or 1), lines written to stream
    """

    def __init__(self, subject: str = "PDA constants", stream: Optional[TextIO] = None):
        self.subject = subject
        self._stream = stream

    @staticmethod
    def exit_code(report: ComparisonReport) -> int:
        if report.passed:
            return 0
        if any(c.outcome is KeyOutcome.MISMATCHED for c in report.comparisons):
            return FAILURE_TYPES["CONSTANT_MISMATCH"]
        return FAILURE_TYPES["CONSTANT_MISSING"]

    @staticmethod
    def _listing(constants: ConstantSet) -> List[str]:
        lines = [f"{constants.label} seeds:"]
        for name, value in constants.entries:
            lines.append(f'  {name}: "{value}"')
        return lines

    @staticmethod
    def _key_line(c: KeyComparison, label_a: str, label_b: str) -> str:
        if c.outcome is KeyOutcome.MATCHED:
            return f"[OK]   {c.name}: synchronized"
        value_b = _MISSING if c.value_b is None else f'"{c.value_b}"'
        return f'[FAIL] {c.name}: {label_a}="{c.value_a}" vs {label_b}={value_b}'

    def render(
        self,
        a:      ConstantSet,
        b:      ConstantSet,
        report: ComparisonReport,
    ) -> List[str]:
        lines = [f"Checking {self.subject} synchronization...", ""]
        lines.extend(self._listing(a))
        lines.append("")
        lines.extend(self._listing(b))
        lines.append("")
        lines.append("Comparison:")
        for c in report.comparisons:
            lines.append(self._key_line(c, a.label, b.label))
        for name in report.extra_keys:
            lines.append(f"[WARN] Extra {b.label} key: {name}")
        for note in report.notes:
            lines.append(f"[NOTE] {note}")
        lines.append("")
        if report.passed:
            lines.append(f"All {self.subject} are synchronized!")
        else:
            lines.append(
                f"{self.subject} are out of sync! "
                f"({len(report.failures)} of {report.total_keys} key(s) failed)"
            )
        return lines

    def emit(
        self,
        a:      ConstantSet,
        b:      ConstantSet,
        report: ComparisonReport,
    ) -> int:
        stream = self._stream if self._stream is not None else sys.stdout
        for line in self.render(a, b, report):
            print(line, file=stream)
        stream.flush()
        return self.exit_code(report)
