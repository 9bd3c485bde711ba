"""
################################################
Objective functions (:mod:`goldsearch.function`)
################################################

.. currentmodule:: goldsearch.function

This module provides real functions of one variable together with a numerical
estimate of their derivative.

.. autosummary::
    :toctree: generated/

    Function
    Lambda
    pow10
    Sin
    Square

"""

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import numpy as np


def pow10(n: int) -> float:
    """Return ``10**n`` as a float, saturating to ``inf`` or ``0.0`` instead of
    raising :class:`OverflowError`.

    Examples
    --------
    >>> pow10(-2)
    0.01
    >>> pow10(400), pow10(-400)
    (inf, 0.0)
    """
    with np.errstate(over="ignore", under="ignore"):
        return float(np.power(10.0, float(n)))


class Function(ABC):
    """Abstract base class of named real functions.

    Subclasses implement :meth:`_f`; the value, the derivative and the display name
    are provided by this class.

    Parameters
    ----------
    text : str
        Formula shown after ``"y = "``.

    Attributes
    ----------
    name : str
    """

    __slots__ = ("_name",)
    _name: str

    def __init__(self, text: str):
        self._name = f"y = {text}"

    @abstractmethod
    def _f(self, x: Any) -> Any:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self._name

    def value(self, x: float) -> float:
        """Return the value of the function at `x`."""
        return self._f(x)

    def derivative(self, x: float, precision: int) -> float:
        """Estimate the derivative at `x` by a forward difference.

        Parameters
        ----------
        x : float
            Point at which the derivative is estimated.
        precision : int
            Number of decimal digits. The step is ``10**(-precision) / 10``.

        Returns
        -------
        float

        Warnings
        --------
        The result is an approximation whose error is proportional to the step. A
        large `precision` makes the step small enough for cancellation to dominate.

        Examples
        --------
        >>> df = Square().derivative(1.0, 5)
        >>> print(format(df, ".4f"))
        2.0000
        """
        # 0 / 0 once the step underflows
        if (dx := pow10(-precision) / 10.0) == 0.0:
            return math.nan

        return (self._f(x + dx) - self._f(x)) / dx

    def __call__(self, x: float) -> float:
        return self._f(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class Square(Function):
    """:math:`x \\mapsto x^2`."""

    __slots__ = ()

    def __init__(self):
        super().__init__("x^2")

    def _f(self, x):
        return x * x


class Sin(Function):
    """:math:`x \\mapsto \\sin x`.

    The function is evaluated with :func:`numpy.sin`, so an array of points is
    accepted as well.
    """

    __slots__ = ()

    def __init__(self):
        super().__init__("sin(x)")

    def _f(self, x):
        return np.sin(x)


class Lambda(Function):
    """Function defined by an arbitrary callable.

    Parameters
    ----------
    text : str
        Formula shown after ``"y = "``.
    fun : Callable[[float], float]
        Pure function to be wrapped.

    Examples
    --------
    >>> f = Lambda("(x - 2)^2", lambda x: (x - 2) ** 2)
    >>> f.name
    'y = (x - 2)^2'
    >>> f.value(3.0)
    1.0
    """

    __slots__ = ("_fun",)
    _fun: Callable[[Any], Any]

    def __init__(self, text: str, fun: Callable[[Any], Any]):
        if not callable(fun):
            raise TypeError

        super().__init__(text)
        self._fun = fun

    def _f(self, x):
        return self._fun(x)
