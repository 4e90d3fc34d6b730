from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any


def _fold(key: Hashable) -> Hashable:
    return key.lower() if isinstance(key, str) else key


class CaseInsensitiveDict(MutableMapping[Hashable, Any]):
    """Mapping whose string keys compare case-insensitively.

    The most recently written spelling of a key is the one reported by
    iteration. The data is copied from the initial mapping, so writes do not
    reach it.
    """

    def __init__(
        self,
        data: Mapping[Hashable, Any] | Iterable[tuple[Hashable, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        self._store: dict[Hashable, tuple[Hashable, Any]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: Hashable) -> Any:
        return self._store[_fold(key)][1]

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._store[_fold(key)] = (key, value)

    def __delitem__(self, key: Hashable) -> None:
        del self._store[_fold(key)]

    def __iter__(self) -> Iterator[Hashable]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Hashable) and _fold(key) in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        other_folded = {_fold(k): v for k, v in other.items()}
        return {k: v for k, (_, v) in self._store.items()} == other_folded

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def copy(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self)
