"""String-keyed tables with per-entry visibility, and deep copying between them."""

from __future__ import annotations

import copy
import types
from dataclasses import dataclass
from typing import Any, Iterator

from crux.values import CruxError, Result


@dataclass
class _Entry:
    value: Any
    is_public: bool


class Table:
    """A mapping from names to values where each entry may be public or private."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def set(self, key: str, value: Any, is_public: bool = False) -> bool:
        """Store ``value`` under ``key``.

        Returns False only when an existing key that held nil is overwritten.
        """
        previous = self._entries.get(key)
        self._entries[key] = _Entry(value, is_public)
        return previous is None or previous.value is not None

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        return self._entries[key].value

    def public_get(self, key: str) -> Any:
        """Return the value under ``key`` if it is public; raise KeyError otherwise."""
        entry = self._entries[key]
        if not entry.is_public:
            raise KeyError(key)
        return entry.value

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._entries.pop(key, None) is not None

    def add_all(self, other: "Table") -> None:
        """Copy every entry of this table into ``other``, keeping visibility."""
        for key, entry in self._entries.items():
            other.set(key, entry.value, entry.is_public)

    def find_string(self, chars: str) -> str | None:
        """Return the stored key equal to ``chars``, or None."""
        for key in self._entries:
            if key == chars:
                return key
        return None

    def is_public(self, key: str) -> bool:
        """Whether ``key`` is present and public."""
        entry = self._entries.get(key)
        return entry is not None and entry.is_public

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


def deep_copy_value(value: Any, memo: dict[int, Any] | None = None) -> Any:
    """Copy a value and everything it refers to.

    Shared references and cycles are preserved through ``memo``. Values that
    cannot be carried across (functions, methods, modules) copy to nil.
    """
    if memo is None:
        memo = {}
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    existing = memo.get(id(value))
    if existing is not None:
        return existing

    if isinstance(value, list):
        result: list[Any] = []
        memo[id(value)] = result
        result.extend(deep_copy_value(item, memo) for item in value)
        return result

    if isinstance(value, dict):
        table: dict[Any, Any] = {}
        memo[id(value)] = table
        for key, item in value.items():
            table[deep_copy_value(key, memo)] = deep_copy_value(item, memo)
        return table

    if isinstance(value, CruxError):
        error_copy = CruxError(value.message, value.type, value.is_panic)
        memo[id(value)] = error_copy
        return error_copy

    if isinstance(value, Result):
        if value.is_ok:
            result_copy = Result.ok(deep_copy_value(value.value, memo))
        else:
            assert value.error is not None
            error = value.error
            result_copy = Result.err(CruxError(error.message, error.type, error.is_panic))
        memo[id(value)] = result_copy
        return result_copy

    if isinstance(value, types.ModuleType) or callable(value):
        return None

    if hasattr(value, "__deepcopy__"):
        try:
            duplicate = copy.deepcopy(value, {})
        except (OSError, TypeError):
            return None
        memo[id(value)] = duplicate
        return duplicate

    return None


def deep_copy(from_table: Table, to_table: Table, key: str, new_key: str) -> bool:
    """Copy the public entry ``key`` of ``from_table`` into ``to_table`` as ``new_key``.

    The copied entry is private. Returns whether the copy succeeded.
    """
    if len(from_table) == 0 or key is None or from_table is to_table:
        return False
    if key not in from_table or not from_table.is_public(key):
        return False

    value = from_table.get(key)
    if value is None:
        to_table.set(new_key, None, False)
        return True

    copied = deep_copy_value(value, {})
    if copied is None:
        return False
    return to_table.set(new_key, copied, False)