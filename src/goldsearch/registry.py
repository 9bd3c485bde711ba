"""
##############################################
Function registry (:mod:`goldsearch.registry`)
##############################################

.. currentmodule:: goldsearch.registry

.. autosummary::
    :toctree: generated/

    FunctionRegistry
    default_registry

"""

from collections.abc import Iterator

from goldsearch.errors import IndexOutOfRange
from goldsearch.function import Function, Sin, Square


class FunctionRegistry:
    """Ordered, fixed collection of functions addressed by a 0-based index.

    Parameters
    ----------
    *functions : Function
        Registered functions. At least one is required.

    Examples
    --------
    >>> funcs = FunctionRegistry(Square(), Sin())
    >>> funcs.size()
    2
    >>> funcs.get(1).name
    'y = sin(x)'
    """

    __slots__ = ("_functions",)
    _functions: tuple[Function, ...]

    def __init__(self, *functions: Function):
        if not functions:
            raise ValueError("at least one function is required")

        if not all(isinstance(x, Function) for x in functions):
            raise TypeError

        self._functions = functions

    def get(self, index: int) -> Function:
        """Return the function at `index`.

        Raises
        ------
        IndexOutOfRange
            If `index` is not in ``[0, size())``. Negative indices are rejected.
        """
        if not 0 <= index < len(self._functions):
            raise IndexOutOfRange(f"invalid function index: {index}")

        return self._functions[index]

    def size(self) -> int:
        """Return the number of registered functions."""
        return len(self._functions)

    def names(self) -> list[str]:
        return [x.name for x in self._functions]

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[Function]:
        return iter(self._functions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._functions))})"


def default_registry() -> FunctionRegistry:
    """Return the registry of built-in functions, ``x^2`` and ``sin(x)``."""
    return FunctionRegistry(Square(), Sin())
