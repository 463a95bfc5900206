"""Tokenizer, value model, tables and native standard library of the Crux scripting language."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "clock",
    "core",
    "errors",
    "mathlib",
    "random",
    "scanner",
    "std",
    "stdio",
    "strings",
    "system",
    "table",
    "tables",
    "values",
]