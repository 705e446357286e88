# seedsync/data_models/constant_set.py
# ConstantSet data class -- constants extracted from one source file.

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ConstantSet:
    """
    Named constants declared by one source, in encounter order.

    Fields:
      label      -- Display name of the source, e.g. "TS" or "Rust".
      path       -- Path string of the file the constants were read from.
      entries    -- tuple of (name, value) pairs. Names are unique; a name
                    declared more than once keeps its last value at the
                    position of its first declaration.
      duplicates -- tuple of names that were declared more than once.
    """
    label:      str
    path:       str
    entries:    tuple    # tuple of (str, str), immutable
    duplicates: tuple = ()
    _index:     dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", dict(self.entries))

    @classmethod
    def from_pairs(cls, label: str, path: str, pairs) -> "ConstantSet":
        """Build a ConstantSet from (name, value) pairs. Last write wins."""
        values: Dict[str, str] = {}
        duplicates = []
        for name, value in pairs:
            if name in values and name not in duplicates:
                duplicates.append(name)
            values[name] = value
        return cls(
            label=label,
            path=path,
            entries=tuple(values.items()),
            duplicates=tuple(duplicates),
        )

    def as_dict(self) -> Dict[str, str]:
        return dict(self._index)

    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def get(self, name: str) -> Optional[str]:
        return self._index.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self.entries)
