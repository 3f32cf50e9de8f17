from __future__ import annotations

from typing import Iterable, Sequence


def pad_string(text: str, width: int = 0) -> str:
    """Left-pad text with spaces up to width characters."""
    return text.rjust(width)


def array_to_string(values: Sequence[object], width: int = 3, separator: str = " ") -> str:
    """Render values as "[a b c]" with every entry right-aligned to width."""
    return "[" + separator.join(pad_string(str(v), width) for v in values) + "]"


def object_array_to_string(objects: Iterable[object]) -> str:
    """One str() per object, each followed by a newline."""
    return "".join(f"{obj}\n" for obj in objects)
