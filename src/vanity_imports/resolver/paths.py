"""Longest-prefix lookup over the sorted set of configured paths."""

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from vanity_imports.core.models.config import PathEntry


class PathConfigSet(Sequence[PathEntry]):
    """Configured entries sorted by path, searchable by request path.

    An entry owns a request path when the request equals the entry path or
    starts with the entry path followed by ``/``. When several entries own
    a path, the longest one wins.
    """

    def __init__(self, entries: Iterable[PathEntry]) -> None:
        self._entries = tuple(sorted(entries, key=lambda e: e.path))

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> PathEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PathEntry, ...]: ...

    def __getitem__(self, index: int | slice) -> PathEntry | tuple[PathEntry, ...]:
        return self._entries[index]

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(self._entries)

    def find(self, path: str) -> tuple[PathEntry | None, str]:
        """Return the entry owning ``path`` and the remaining subpath.

        Returns ``(None, "")`` when no entry owns the path.
        """
        entries = self._entries

        # Fast path: exact match, or the immediate predecessor is an ancestor.
        # e.g. given ["/abc", "/xyz"], "/abc/foo" sorts right after "/abc".
        i = bisect_left(entries, path, key=lambda e: e.path)
        if i < len(entries) and entries[i].path == path:
            return entries[i], ""
        if i > 0 and path.startswith(entries[i - 1].path + "/"):
            return entries[i - 1], path[len(entries[i - 1].path) + 1 :]

        # Slow path: the predecessor was not an ancestor, e.g. given
        # ["/abc", "/abc-x"], "/abc/foo" sorts after "/abc-x".
        # Nothing at or after i can be a prefix of path.
        best: PathEntry | None = None
        subpath = ""
        shortest = len(path)
        for entry in entries[:i]:
            if len(entry.path) >= len(path):
                continue
            if not path.startswith(entry.path + "/"):
                continue
            candidate = path[len(entry.path) + 1 :]
            # Strict comparison keeps the first (lowest index) on ties.
            if len(candidate) < shortest:
                best = entry
                subpath = candidate
                shortest = len(candidate)
        return best, subpath
