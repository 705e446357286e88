# seedsync/constant_extractor.py
# ConstantExtractor -- applies a source's extraction rule to its raw text.
#
# Extraction never fails: a block that is absent or malformed produces an
# empty ConstantSet. No side effects.

from seedsync.data_models.constant_set import ConstantSet
from seedsync.sync_config import SourceSpec


class ConstantExtractor:

    def extract(self, source: SourceSpec, text: str) -> ConstantSet:
        """Return the constants declared in text under source.rule."""
        return ConstantSet.from_pairs(
            label=source.label,
            path=str(source.path),
            pairs=source.rule.iter_pairs(text),
        )
