# seedsync/source_loader.py
# SourceLoader -- first stage of the check pipeline.
#
# Reads both source files before any extraction begins. A missing,
# unreadable or non-UTF-8 file is a hard failure: RuntimeError with the
# READ_FAILURE prefix. There is no recovery path for missing inputs.

from pathlib import Path
from typing import Tuple

from seedsync.sync_config import SyncConfig


class SourceLoader:
    """
    Reads the raw text of the two sources named by a SyncConfig.

    Method:
      load() -> (text_a, text_b)
    """

    def __init__(self, config: SyncConfig):
        self.config = config

    @staticmethod
    def read_text(path: Path, label: str) -> str:
        """Read one file as UTF-8. Raises RuntimeError(READ_FAILURE) on error."""
        if not path.is_file():
            raise RuntimeError(
                f"READ_FAILURE: {label} source not found at {path}. "
                "Check cannot start without both sources."
            )
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RuntimeError(
                f"READ_FAILURE: Failed to read {label} source {path}: {exc}"
            ) from exc

    def load(self) -> Tuple[str, str]:
        text_a = self.read_text(self.config.source_a.path, self.config.source_a.label)
        text_b = self.read_text(self.config.source_b.path, self.config.source_b.label)
        return text_a, text_b
