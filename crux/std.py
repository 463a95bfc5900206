"""Registry of the standard library: globals, per-type methods and native modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from crux import arrays, clock, core, errors, mathlib, stdio, strings, system, tables
from crux.random import Random
from crux.stdio import CruxFile
from crux.table import Table
from crux.values import Result


@dataclass(frozen=True)
class NativeCallable:
    """A built-in function or method with a fixed arity.

    Fallible callables return a :class:`Result`; infallible ones return a plain value.
    For methods the receiver counts towards the arity.
    """

    name: str
    function: Callable[..., Any]
    arity: int
    fallible: bool = True
    is_method: bool = False

    def __call__(self, *args: Any) -> Any:
        if len(args) != self.arity:
            raise TypeError(f"{self.name} expects {self.arity} arguments but got {len(args)}")
        return self.function(*args)


_Spec = tuple[str, Callable[..., Any], int]


def _ok(function: Callable[..., Any]) -> Callable[..., Result]:
    def wrapped(*args: Any) -> Result:
        return Result.ok(function(*args))

    return wrapped


def _value_of(function: Callable[..., Result]) -> Callable[..., Any]:
    def wrapped(*args: Any) -> Any:
        return function(*args).value

    return wrapped


_STRING_METHODS: list[_Spec] = [
    ("first", strings.first, 1),
    ("last", strings.last, 1),
    ("get", strings.get, 2),
    ("upper", strings.upper, 1),
    ("lower", strings.lower, 1),
    ("strip", strings.strip, 1),
    ("starts_with", strings.starts_with, 2),
    ("ends_with", strings.ends_with, 2),
    ("contains", strings.contains, 2),
    ("replace", strings.replace, 3),
    ("split", strings.split, 2),
    ("substring", strings.substring, 3),
]

_STRING_INFALLIBLE: list[_Spec] = [
    ("_is_empty", strings.is_empty, 1),
    ("_is_alpha", strings.is_alpha, 1),
    ("_is_digit", strings.is_digit, 1),
    ("_is_lower", strings.is_lower, 1),
    ("_is_upper", strings.is_upper, 1),
    ("_is_space", strings.is_space, 1),
    ("_is_alnum", strings.is_alnum, 1),
]

_ARRAY_METHODS: list[_Spec] = [
    ("pop", arrays.pop, 1),
    ("push", arrays.push, 2),
    ("insert", arrays.insert, 3),
    ("remove", arrays.remove_at, 2),
    ("concat", arrays.concat, 2),
    ("slice", arrays.slice_, 3),
    ("reverse", arrays.reverse, 1),
    ("index", arrays.index_of, 2),
]

_ARRAY_INFALLIBLE: list[_Spec] = [
    ("_contains", arrays.contains, 2),
    ("_clear", arrays.clear, 1),
    ("_equals", arrays.equals, 2),
]

_TABLE_METHODS: list[_Spec] = [
    ("values", _ok(tables.table_values), 1),
    ("keys", _ok(tables.table_keys), 1),
    ("pairs", _ok(tables.table_pairs), 1),
]

_ERROR_METHODS: list[_Spec] = [
    ("message", errors.error_message, 1),
    ("type", errors.error_type, 1),
]

_RANDOM_METHODS: list[_Spec] = [
    ("seed", Random.set_seed, 2),
    ("int", Random.next_int, 3),
    ("double", Random.next_double, 3),
    ("bool", Random.next_bool, 2),
    ("choice", Random.choice, 2),
]

_RANDOM_INFALLIBLE: list[_Spec] = [("_next", Random.next, 1)]

_FILE_METHODS: list[_Spec] = [
    ("readln", CruxFile.readln, 1),
    ("read_all", CruxFile.read_all, 1),
    ("write", CruxFile.write, 2),
    ("writeln", CruxFile.writeln, 2),
    ("close", CruxFile.close, 1),
]

_CORE_FUNCTIONS: list[_Spec] = [
    ("scanln", stdio.scanln, 0),
    ("panic", errors.panic, 1),
    ("len", core.length, 1),
    ("error", errors.error_function, 1),
    ("assert", errors.assert_, 2),
    # "err" is bound to the same function as "error".
    ("err", errors.error_function, 1),
    ("ok", errors.ok, 1),
    ("int", core.to_int, 1),
    ("float", core.to_float, 1),
    ("string", core.to_string, 1),
    ("table", core.to_table, 1),
    ("array", core.to_array, 1),
]

_CORE_INFALLIBLE: list[_Spec] = [
    ("_len", core.length_or_nil, 1),
    ("println", stdio.println, 1),
    ("print", stdio.print_, 1),
    ("type", core.type_of, 1),
    ("_int", core.try_int, 1),
    ("_float", core.try_float, 1),
    ("_string", _value_of(core.to_string), 1),
    ("_table", _value_of(core.to_table), 1),
    ("_array", core.try_array, 1),
]

_MATH_FUNCTIONS: list[_Spec] = [
    ("pow", mathlib.pow_, 2),
    ("sqrt", mathlib.sqrt, 1),
    ("ceil", mathlib.ceil, 1),
    ("floor", mathlib.floor, 1),
    ("abs", mathlib.abs_, 1),
    ("sin", mathlib.sin, 1),
    ("cos", mathlib.cos, 1),
    ("tan", mathlib.tan, 1),
    ("atan", mathlib.atan, 1),
    ("acos", mathlib.acos, 1),
    ("asin", mathlib.asin, 1),
    ("exp", mathlib.exp, 1),
    ("ln", mathlib.ln, 1),
    ("log", mathlib.log10, 1),
    ("round", mathlib.round_, 1),
]

_MATH_INFALLIBLE: list[_Spec] = [
    ("_e", mathlib.e, 0),
    ("_pi", mathlib.pi, 0),
]

_TIME_FUNCTIONS: list[_Spec] = [
    ("sleep_s", clock.sleep_seconds, 1),
    ("sleep_ms", clock.sleep_milliseconds, 1),
]

_TIME_INFALLIBLE: list[_Spec] = [
    ("_time_s", clock.time_seconds, 0),
    ("_time_ms", clock.time_milliseconds, 0),
    ("_year", clock.year, 0),
    ("_month", clock.month, 0),
    ("_day", clock.day, 0),
    ("_hour", clock.hour, 0),
    ("_minute", clock.minute, 0),
    ("_second", clock.second, 0),
    ("_weekday", clock.weekday, 0),
    ("_day_of_year", clock.day_of_year, 0),
]

_RANDOM_FUNCTIONS_INFALLIBLE: list[_Spec] = [("Random", Random, 0)]

_SYSTEM_INFALLIBLE: list[_Spec] = [
    ("platform", system.platform_name, 0),
    ("arch", system.arch, 0),
    ("pid", system.pid, 0),
    ("exit", system.exit_, 1),
]


def _register(
    table: Table,
    specs: Sequence[_Spec] | None,
    fallible: bool,
    is_method: bool,
) -> None:
    for name, function, arity in specs or ():
        table.set(name, NativeCallable(name, function, arity, fallible, is_method), False)


class StdLib:
    """The standard library of one interpreter instance."""

    def __init__(self, argv: Sequence[str] | None = None, base_path: str | None = None) -> None:
        self.argv = list(argv) if argv is not None else None
        self.base_path = base_path
        self.globals = Table()
        self.type_methods: dict[str, Table] = {}
        self.modules: dict[str, Table] = {}

        _register(self.globals, _CORE_FUNCTIONS, True, False)
        _register(self.globals, _CORE_INFALLIBLE, False, False)

        self._init_type("string", _STRING_METHODS, _STRING_INFALLIBLE)
        self._init_type("array", _ARRAY_METHODS, _ARRAY_INFALLIBLE)
        self._init_type("table", _TABLE_METHODS, None)
        self._init_type("error", _ERROR_METHODS, None)
        self._init_type("random", _RANDOM_METHODS, _RANDOM_INFALLIBLE)
        self._init_type("file", _FILE_METHODS, None)

        io_functions: list[_Spec] = [
            ("print_to", stdio.print_to, 2),
            ("scan", stdio.scan, 0),
            ("scanln", stdio.scanln, 0),
            ("scan_from", stdio.scan_from, 1),
            ("scanln_from", stdio.scanln_from, 1),
            ("nscan", stdio.nscan, 1),
            ("nscan_from", stdio.nscan_from, 2),
            ("open_file", self._open_file, 2),
        ]
        system_functions: list[_Spec] = [
            ("args", self._args, 0),
            ("get_env", system.get_env, 1),
            ("sleep", system.sleep, 1),
        ]

        self._init_module("math", _MATH_FUNCTIONS, _MATH_INFALLIBLE)
        self._init_module("io", io_functions, None)
        self._init_module("time", _TIME_FUNCTIONS, _TIME_INFALLIBLE)
        self._init_module("random", None, _RANDOM_FUNCTIONS_INFALLIBLE)
        self._init_module("sys", system_functions, _SYSTEM_INFALLIBLE)

    def _open_file(self, path: Any, mode: Any) -> Result:
        return stdio.open_file(path, mode, self.base_path)

    def _args(self) -> Result:
        return system.program_args(self.argv)

    def _init_type(
        self, type_name: str, methods: Sequence[_Spec] | None, infallible: Sequence[_Spec] | None
    ) -> None:
        table = Table()
        _register(table, methods, True, True)
        _register(table, infallible, False, True)
        self.type_methods[type_name] = table

    def _init_module(
        self, name: str, functions: Sequence[_Spec] | None, infallible: Sequence[_Spec] | None
    ) -> None:
        table = Table()
        _register(table, functions, True, False)
        _register(table, infallible, False, False)
        self.modules[name] = table

    def lookup_global(self, name: str) -> NativeCallable:
        """The global built-in called ``name``; raise KeyError if there is none."""
        return self.globals.get(name)

    def lookup_method(self, type_name: str, name: str) -> NativeCallable:
        """The method ``name`` of the built-in type ``type_name``; raise KeyError if absent."""
        return self.type_methods[type_name].get(name)

    def module(self, name: str) -> Table:
        """The native module called ``name``; raise KeyError if there is none."""
        return self.modules[name]

    def module_names(self) -> list[str]:
        """Names of the native modules, in registration order."""
        return list(self.modules)


def initialize_stdlib(
    argv: Sequence[str] | None = None, base_path: str | None = None
) -> StdLib:
    """Build the standard library for one interpreter instance."""
    return StdLib(argv, base_path)