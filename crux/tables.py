"""Methods on table values (Python dicts)."""

from __future__ import annotations

from typing import Any


def table_values(table: dict) -> list[Any]:
    """All values of the table."""
    return list(table.values())


def table_keys(table: dict) -> list[Any]:
    """All keys of the table."""
    return list(table.keys())


def table_pairs(table: dict) -> list[list[Any]]:
    """All entries of the table as two-element ``[key, value]`` arrays."""
    return [[key, value] for key, value in table.items()]