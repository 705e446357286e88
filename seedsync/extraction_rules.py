# seedsync/extraction_rules.py
# Extraction rules -- declared, per-source strategies for scraping constants.
#
# A rule turns raw source text into (name, value) pairs. It never raises on
# malformed input: an absent block or zero matches yields no pairs, which the
# comparator later surfaces as missing or mismatched keys.
#
# New source formats are supported by declaring a new rule instance (or a new
# ExtractionRule subclass). ConstantExtractor never hardcodes a pattern.

import re
from dataclasses import dataclass
from typing import Iterator, Tuple


class ExtractionRule:
    """
    Strategy interface. Subclasses implement iter_pairs().

    Method:
      iter_pairs(text) -> iterator of (name, value) in encounter order
    """

    def iter_pairs(self, text: str) -> Iterator[Tuple[str, str]]:
        raise NotImplementedError


@dataclass(frozen=True)
class BlockRule(ExtractionRule):
    """
    Locate a single aggregate block, then read one key/value pair per line.

    Fields:
      block_pattern -- Compiled pattern whose group 1 is the block body.
                       Only the first match is used.
      delimiter     -- Key/value separator. Lines without it are skipped.
      strip_chars   -- Quoting and punctuation removed from key and value.

    The key is the text before the first delimiter and the value the text
    between the first and second delimiter. Pairs with an empty key or an
    empty value are skipped.
    """
    block_pattern: re.Pattern
    delimiter:     str = ":"
    strip_chars:   str = "'\","

    def _clean(self, part: str) -> str:
        part = part.strip()
        for ch in self.strip_chars:
            part = part.replace(ch, "")
        return part

    def iter_pairs(self, text: str) -> Iterator[Tuple[str, str]]:
        match = self.block_pattern.search(text)
        if match is None:
            return
        for line in match.group(1).split("\n"):
            line = line.strip()
            if self.delimiter not in line:
                continue
            parts = line.split(self.delimiter)
            key   = self._clean(parts[0])
            value = self._clean(parts[1])
            if key and value:
                yield key, value


@dataclass(frozen=True)
class DeclarationRule(ExtractionRule):
    """
    Scan the whole text for every occurrence of a declaration pattern.

    Fields:
      pattern     -- Compiled pattern with named groups.
      name_group  -- Group holding the constant name.
      value_group -- Group holding the literal contents.
    """
    pattern:     re.Pattern
    name_group:  str = "name"
    value_group: str = "value"

    def iter_pairs(self, text: str) -> Iterator[Tuple[str, str]]:
        for match in self.pattern.finditer(text):
            yield match.group(self.name_group), match.group(self.value_group)


# ---------------------------------------------------------------------------
# Rules for the PDA seed layout
# ---------------------------------------------------------------------------

# export const PDA_SEEDS = { MANIFEST: 'manifest', ... }
TS_PDA_SEEDS_RULE = BlockRule(
    block_pattern=re.compile(r"export const PDA_SEEDS = \{([^}]+)\}", re.DOTALL),
)

# pub const MANIFEST_SEED: &[u8] = b"manifest";
RUST_BYTE_CONST_RULE = DeclarationRule(
    pattern=re.compile(r'pub const (?P<name>[A-Z_]+): &\[u8\] = b"(?P<value>[^"]+)"'),
)
