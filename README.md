# crux

Building blocks of the Crux scripting language: a tokenizer, the runtime
value model with its equality and formatting rules, a string-keyed table with
per-entry visibility, and the native standard library (strings, arrays,
tables, math, random numbers, I/O, time and system functions).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tokenizing source

```python
from crux.scanner import tokenize, TokenType

for token in tokenize("let x = 1 + 2.5;"):
    print(token.type, token.lexeme, token.line)
```

`Scanner` produces tokens one at a time through `scan_token()`, or by
iterating over it; iteration stops after the `TokenType.EOF` token. Input the
scanner cannot handle, such as an unterminated string or an unexpected
character, produces a `TokenType.ERROR` token whose `lexeme` is the message.
`//` starts a comment that runs to the end of the line.

## Values

Crux values are plain Python objects (see `crux.values`): `None` is nil,
`bool`, `int` (treated as signed 32-bit), `float`, `str`, `list` for arrays
and `dict` for tables, plus `CruxError` and `Result`. `values_equal` and
`format_value` give the language's own equality and text form.

## Fallible functions and results

Standard-library functions that can fail return a `Result` rather than
raising. A `Result` holds either a value (`Result.ok`) or a `CruxError`
(`Result.err`); `Result.unwrap()` returns the value or raises the error.
Every error carries an `ErrorType`:

```python
from crux import strings

result = strings.substring("hello", 1, 3)
print(result.value)          # el

bad = strings.get("abc", 10)
print(bad.error.message)
print(bad.error.type)        # ErrorType.INDEX_OUT_OF_BOUNDS
```

## The standard library

`initialize_stdlib()` builds a `StdLib` holding the global functions, the
methods of each built-in type (`string`, `array`, `table`, `error`,
`random`, `file`) and the native modules `math`, `io`, `time`, `random` and
`sys`. Each entry is a `NativeCallable` that checks its argument count;
fallible ones return a `Result`, infallible ones a plain value. For methods,
the receiver is the first argument.

```python
from crux.std import initialize_stdlib

lib = initialize_stdlib(argv=["script.crux"])

length = lib.lookup_global("len")
print(length("hello").value)            # 5

sqrt = lib.module("math").get("sqrt")
print(sqrt(16).value)                   # 4.0

upper = lib.lookup_method("string", "upper")
print(upper("abc").value)               # ABC

print(lib.module_names())               # ['math', 'io', 'time', 'random', 'sys']
```

`argv` is what the `sys` module's `args` function reports; `base_path` is
the directory against which `io.open_file` resolves relative paths (the
current directory when not given).

The modules can also be used on their own: `crux.arrays`, `crux.strings`,
`crux.tables`, `crux.core`, `crux.errors`, `crux.mathlib`, `crux.random`,
`crux.stdio`, `crux.clock` and `crux.system`. `crux.table` provides the
`Table` class and `deep_copy`, which copies a public entry, and everything it
refers to, from one table into another.

### Random numbers

`crux.random.Random` is a seeded 48-bit linear congruential generator, so a
given seed always produces the same sequence:

```python
from crux.random import Random

rng = Random(42)
print(rng.next())                 # a float in [0, 1)
print(rng.next_int(1, 6).value)   # an int from 1 to 6
```

## What this package does not do

There is no parser, compiler or virtual machine here, and no command to run
Crux scripts: the package tokenizes source and provides the runtime values and
native library functions, but it does not execute programs.