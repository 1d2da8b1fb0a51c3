from __future__ import annotations

from typing import Dict, Literal, Tuple

IdKind = Literal["vertex", "edge"]

ID_KINDS: Tuple[IdKind, ...] = ("vertex", "edge")


class IdAllocator:
    """Hands out monotonically increasing integer ids, one counter per kind.

    Vertex and edge ids are independent: both start at 0 and never collide
    with ids of the same kind. Ids are never reused.
    """

    def __init__(self) -> None:
        self._next: Dict[str, int] = {kind: 0 for kind in ID_KINDS}

    def next_id(self, kind: IdKind) -> int:
        value = self.peek(kind)
        self._next[kind] = value + 1
        return value

    def peek(self, kind: IdKind) -> int:
        try:
            return self._next[kind]
        except KeyError as e:
            raise ValueError(f"Unknown id kind {kind!r}. Choose one of: {', '.join(ID_KINDS)}") from e

    def reset(self) -> None:
        for kind in ID_KINDS:
            self._next[kind] = 0


DEFAULT_ALLOCATOR = IdAllocator()
