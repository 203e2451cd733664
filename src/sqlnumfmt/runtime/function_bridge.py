"""Function call bridge between a SQL evaluator and Python callables.

Provides the calling convention a query engine uses to invoke scalar
functions by their SQL name:
    - SQL: case-insensitive names, positional arguments, NULL as None
    - Python: plain callables with positional parameters

Architecture:
    - FunctionRegistry: Manages function registration and calling
    - Arity (minimum/maximum argument count) inferred from signatures
    - Trailing optional arguments omitted by the caller default to NULL

Example:
    # Python function:
    def format_number(value, precision, locale=None):
        ...

    # SQL call:
    SELECT FORMAT(12332.123456, 4, 'en_US')

    # Bridge call:
    registry.call("FORMAT", (12332.123456, 4, "en_US"))

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from inspect import Parameter, signature
from typing import TypeAlias

from sqlnumfmt.diagnostics import ArityMismatchError, ErrorTemplate, UnknownFunctionError

__all__ = ["FunctionRegistry", "FunctionSignature", "SqlValue"]

# Type alias for values crossing the SQL/Python boundary. None is SQL NULL.
SqlValue: TypeAlias = str | int | float | bool | Decimal | datetime | date | None

_POSITIONAL_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True, slots=True)
class FunctionSignature:
    """Function metadata with calling convention mappings.

    Attributes:
        sql_name: Function name in SQL (UPPERCASE)
        python_name: Function name in Python
        min_args: Minimum number of positional arguments
        max_args: Maximum number of positional arguments
        callable: The actual Python function
    """

    sql_name: str
    python_name: str
    min_args: int
    max_args: int
    callable: Callable[..., SqlValue]

    def accepts(self, arg_count: int) -> bool:
        """Check whether ``arg_count`` positional arguments are allowed."""
        return self.min_args <= arg_count <= self.max_args


class FunctionRegistry:
    """Registry of SQL scalar functions.

    Supports dict-like introspection:
        - list_functions(): List all registered function names
        - get_function_info(name): Get function metadata
        - __iter__: Iterate over function names
        - __len__: Count registered functions
        - __contains__: Check if function exists (supports 'in' operator)

    Name lookups are case-insensitive, as SQL identifiers are.

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = FunctionRegistry()
        >>> registry.register(lambda value: str(value), sql_name="TO_TEXT")
        >>> "to_text" in registry
        True
        >>> registry.call("TO_TEXT", (42,))
        '42'
    """

    __slots__ = ("_frozen", "_functions")

    def __init__(self) -> None:
        """Initialize empty function registry."""
        self._functions: dict[str, FunctionSignature] = {}
        self._frozen = False

    def register(
        self,
        func: Callable[..., SqlValue],
        *,
        sql_name: str | None = None,
        min_args: int | None = None,
        max_args: int | None = None,
    ) -> None:
        """Register a Python function under a SQL name.

        Args:
            func: Python function to register
            sql_name: Function name in SQL (default: func.__name__.upper())
            min_args: Minimum argument count (default: required positional
                parameters of ``func``)
            max_args: Maximum argument count (default: all positional
                parameters of ``func``)

        Raises:
            TypeError: If the registry is frozen
            ValueError: If the arity cannot be inferred or is inconsistent

        Example:
            >>> def format_number(value, precision, locale=None):
            ...     return f"{value:.{precision}f}"
            >>> registry = FunctionRegistry()
            >>> registry.register(format_number, sql_name="FORMAT")
            >>> registry.get_function_info("FORMAT").max_args
            3
        """
        if self._frozen:
            msg = "Cannot register functions on a frozen FunctionRegistry; use copy()"
            raise TypeError(msg)

        python_name = getattr(func, "__name__", "unknown")
        if sql_name is None:
            sql_name = python_name.upper()

        inferred_min, inferred_max = self._infer_arity(func)
        final_min = inferred_min if min_args is None else min_args
        final_max = inferred_max if max_args is None else max_args
        if final_max is None:
            msg = f"Cannot infer max_args for variadic function '{python_name}'"
            raise ValueError(msg)
        if not 0 <= final_min <= final_max:
            msg = f"Invalid arity for '{sql_name}': min_args={final_min}, max_args={final_max}"
            raise ValueError(msg)

        key = sql_name.upper()
        self._functions[key] = FunctionSignature(
            sql_name=key,
            python_name=python_name,
            min_args=final_min,
            max_args=final_max,
            callable=func,
        )

    def call(self, sql_name: str, args: Sequence[SqlValue]) -> SqlValue:
        """Call a registered function with SQL positional arguments.

        Arguments beyond those supplied are left to the Python defaults,
        which for optional SQL arguments means NULL.

        Args:
            sql_name: Function name from SQL (any case, e.g. "format")
            args: Positional argument values

        Returns:
            Function result (None for SQL NULL)

        Raises:
            UnknownFunctionError: If function not found
            ArityMismatchError: If the argument count is not accepted
        """
        func_sig = self._functions.get(sql_name.upper())
        if func_sig is None:
            raise UnknownFunctionError(ErrorTemplate.function_not_found(sql_name))

        if not func_sig.accepts(len(args)):
            raise ArityMismatchError(
                ErrorTemplate.arity_mismatch(
                    func_sig.sql_name, func_sig.min_args, func_sig.max_args, len(args)
                )
            )

        return func_sig.callable(*args)

    def evaluate_rows(
        self, sql_name: str, rows: Iterable[Sequence[SqlValue]]
    ) -> Iterator[SqlValue]:
        """Apply a function to every row of a row source.

        Args:
            sql_name: Function name from SQL
            rows: Argument tuples, one per row

        Yields:
            One result per row, in row order

        Example:
            >>> registry = create_default_registry()
            >>> list(registry.evaluate_rows("FORMAT", ((n, n) for n in range(3))))
            ['0', '1.0', '2.00']
        """
        for row in rows:
            yield self.call(sql_name, row)

    def freeze(self) -> None:
        """Make the registry read-only. register() raises TypeError afterwards."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether the registry rejects further registrations."""
        return self._frozen

    def has_function(self, sql_name: str) -> bool:
        """Check if function is registered."""
        return sql_name.upper() in self._functions

    def list_functions(self) -> list[str]:
        """List all registered function names (SQL names, upper case)."""
        return list(self._functions.keys())

    def get_function_info(self, sql_name: str) -> FunctionSignature | None:
        """Get function metadata by SQL name, or None if not found."""
        return self._functions.get(sql_name.upper())

    def get_callable(self, sql_name: str) -> Callable[..., SqlValue] | None:
        """Get the underlying callable for a registered function."""
        sig = self._functions.get(sql_name.upper())
        return sig.callable if sig else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, sql_name: object) -> bool:
        return isinstance(sql_name, str) and sql_name.upper() in self._functions

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(FunctionRegistry())
            'FunctionRegistry(functions=0)'
        """
        return f"FunctionRegistry(functions={len(self._functions)})"

    def copy(self) -> "FunctionRegistry":
        """Create an unfrozen shallow copy of this registry.

        FunctionSignature objects are shared, but registering functions on
        the copy does not affect the original.
        """
        new_registry = FunctionRegistry()
        new_registry._functions = self._functions.copy()
        return new_registry

    @staticmethod
    def _infer_arity(func: Callable[..., SqlValue]) -> tuple[int, int | None]:
        """Count required and total positional parameters of ``func``.

        Returns:
            (min_args, max_args); max_args is None for ``*args`` functions
        """
        required = 0
        total = 0
        for param in signature(func).parameters.values():
            if param.kind is Parameter.VAR_POSITIONAL:
                return required, None
            if param.kind not in _POSITIONAL_KINDS:
                continue
            total += 1
            if param.default is Parameter.empty:
                required += 1
        return required, total
