from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from exactrref.matrix.format import object_array_to_string
from exactrref.matrix.matrix import Matrix


INITIAL = "initial"
SCALED = "scaled"
SHEARED = "sheared"
REDUCED = "reduced"

LABELS = (INITIAL, SCALED, SHEARED, REDUCED)

_HEADINGS = {
    INITIAL: "initial matrix:",
    SCALED: "scaled rows:",
    SHEARED: "sheared rows:",
    REDUCED: "reduced rows:",
}


@dataclass(frozen=True)
class TraceEntry:
    label: str
    snapshot: Matrix


@dataclass
class Trace:
    """
    Chronological record of a row reduction.

    entries: (label, snapshot) pairs; snapshots are independent clones.
    pivots:  (pivot_row, pivot_col) of every pivot step performed.
    """

    entries: List[TraceEntry] = field(default_factory=list)
    pivots: List[Tuple[int, int]] = field(default_factory=list)

    def record(self, label: str, matrix: Matrix) -> None:
        if label not in LABELS:
            raise ValueError(f"unknown trace label {label!r}")
        self.entries.append(TraceEntry(label, matrix.clone()))

    @property
    def steps(self) -> int:
        return len(self.pivots)

    @property
    def final(self) -> Optional[Matrix]:
        return self.entries[-1].snapshot if self.entries else None

    def labels(self) -> List[str]:
        return [e.label for e in self.entries]

    def snapshots(self, label: str) -> List[Matrix]:
        return [e.snapshot for e in self.entries if e.label == label]

    def last(self, label: str) -> Optional[Matrix]:
        for e in reversed(self.entries):
            if e.label == label:
                return e.snapshot
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> TraceEntry:
        return self.entries[i]


def format_trace(trace: Trace) -> str:
    """Text dump: a heading line then the matrix, for every entry."""
    parts: List[str] = []
    for e in trace:
        parts.append(_HEADINGS[e.label])
        parts.append(str(e.snapshot))
    return object_array_to_string(parts)
