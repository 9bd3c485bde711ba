"""
##########################################
Minimum search (:mod:`goldsearch.problem`)
##########################################

.. currentmodule:: goldsearch.problem

This module provides golden-section search gated by the sign of the derivative at
the ends of the interval.

.. autosummary::
    :toctree: generated/

    SearchProblem
    SearchResult
    SearchCallbackArg

"""

import dataclasses
import logging
import math
from collections.abc import Callable
from typing import Literal

from goldsearch.errors import IterationLimitExceeded, NoMinimumInRange, SearchError
from goldsearch.function import Function, pow10

logger = logging.getLogger(__name__)

ITERATION_LIMIT = 10000
INVERSE_PHI = 2 / (1 + math.sqrt(5))
DEFAULT_LEFT = -1.0
DEFAULT_RIGHT = 1.0
DEFAULT_PRECISION = 5

type SearchStatus = Literal["SUCCESS", "NO_MINIMUM", "MAX_ITER"]


@dataclasses.dataclass(frozen=True, slots=True)
class SearchResult:
    """Output of :meth:`SearchProblem.find_minimum`.

    Attributes
    ----------
    status : Literal["SUCCESS", "NO_MINIMUM", "MAX_ITER"]
    x : float | None
        Estimated minimum. ``None`` unless `status` is ``"SUCCESS"``.
    iterations : int
        Number of iterations performed.
    message : str
        Report from the search. Typically a reason for a failure.
    error : SearchError | None
        Error kind of a failed search.
    """

    status: SearchStatus
    x: float | None
    iterations: int
    message: str
    error: SearchError | None = None

    @property
    def success(self) -> bool:
        return self.status == "SUCCESS"

    def unwrap(self) -> tuple[float, int]:
        """Return ``(x, iterations)``, or raise :attr:`error` if the search failed."""
        if self.error is not None:
            raise self.error

        return self.x, self.iterations  # type: ignore


@dataclasses.dataclass(frozen=True, slots=True)
class SearchCallbackArg:
    """Argument of callback functions passed to :meth:`SearchProblem.find_minimum`.

    Attributes
    ----------
    iteration : int
        1-based number of the iteration just performed.
    a : float
        Left end of the current bracket.
    b : float
        Right end of the current bracket.
    """

    iteration: int
    a: float
    b: float


class SearchProblem:
    """Interval, precision, and result of a minimum search.

    Parameters
    ----------
    left : float, default=-1.0
    right : float, default=1.0
        Ends of the interval. They are reordered so that ``left <= right``.
    precision : int, default=5
        Number of decimal digits. See :meth:`set_precision`.
    max_iter : int, default=10000
        Maximum number of iterations.

    Attributes
    ----------
    left : float
    right : float
    precision : int
    epsilon : float
        ``10**(-precision)``, recomputed on every :meth:`set_precision`.
    iterations : int
        Number of iterations performed by the last search.
    x : float | None
        Minimum found by the last search. Valid only if :attr:`has_result` is
        ``True``.
    has_result : bool
        Whether the last search succeeded.
    max_iter : int

    Warnings
    --------
    An instance is not synchronized. Callers sharing one between threads must
    serialize access.

    Examples
    --------
    >>> from goldsearch.function import Square
    >>> prob = SearchProblem()
    >>> r = prob.find_minimum(Square())
    >>> r.status, r.iterations
    ('SUCCESS', 26)
    >>> abs(r.x) < prob.epsilon
    True
    """

    __slots__ = (
        "_left",
        "_right",
        "_precision",
        "_epsilon",
        "iterations",
        "x",
        "has_result",
        "max_iter",
    )

    iterations: int
    x: float | None
    has_result: bool
    max_iter: int

    def __init__(
        self,
        left: float = DEFAULT_LEFT,
        right: float = DEFAULT_RIGHT,
        precision: int = DEFAULT_PRECISION,
        max_iter: int = ITERATION_LIMIT,
    ):
        if max_iter <= 0:
            raise ValueError

        self.set_bounds(left, right)
        self.set_precision(precision)
        self.iterations = 0
        self.x = None
        self.has_result = False
        self.max_iter = max_iter

    @property
    def left(self) -> float:
        return self._left

    @property
    def right(self) -> float:
        return self._right

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def set_bounds(self, a: float, b: float) -> None:
        """Set the interval to ``[min(a, b), max(a, b)]``."""
        self._left = a if a < b else b
        self._right = b if a < b else a

    def set_precision(self, precision: int) -> None:
        """Set the number of decimal digits and recompute :attr:`epsilon`.

        A negative `precision` is accepted and yields an epsilon greater than one;
        validating it is up to the caller. Beyond the float range epsilon saturates to
        ``inf`` or ``0.0``.
        """
        self._precision = precision
        self._epsilon = pow10(-precision)

    def has_minimum_candidate(self, fun: Function) -> bool:
        """Return whether the derivative of `fun` is negative at :attr:`left` and
        positive at :attr:`right`.

        Notes
        -----
        This is a necessary condition for a unimodal function only. A function with
        several extrema on the interval may be rejected although it has an interior
        minimum, or accepted although it does not.
        """
        return (
            fun.derivative(self._left, self._precision) < 0
            and fun.derivative(self._right, self._precision) > 0
        )

    def find_minimum(
        self,
        fun: Function,
        callback: Callable[[SearchCallbackArg], None] | None = None,
    ) -> SearchResult:
        """Find the minimum of `fun` on ``[left, right]`` by golden-section search.

        Parameters
        ----------
        fun : Function
            Function to be minimized.
        callback : Callable[[SearchCallbackArg], None], optional
            Called after every iteration with the current bracket.

        Returns
        -------
        SearchResult
            On success, :attr:`x` and :attr:`iterations` are updated as well.
            Otherwise the status is ``"NO_MINIMUM"`` if the derivative does not
            change sign from negative to positive, or ``"MAX_ITER"`` if the bracket
            did not shrink below :attr:`epsilon` within :attr:`max_iter` iterations.

        Notes
        -----
        Every iteration evaluates `fun` once; the value at the other probe point is
        carried over from the previous iteration.
        """
        self.has_result = False
        self.iterations = 0
        self.x = None

        if not self.has_minimum_candidate(fun):
            err = NoMinimumInRange()
            logger.warning(
                "%s: %s [%r; %r]", fun.name, err.message, self._left, self._right
            )
            return SearchResult("NO_MINIMUM", None, 0, err.message, err)

        logger.debug(
            "searching minimum of %s on [%r; %r] with epsilon=%r",
            fun.name,
            self._left,
            self._right,
            self._epsilon,
        )

        a = self._left
        b = self._right
        x1 = b - (b - a) * INVERSE_PHI
        x2 = a + (b - a) * INVERSE_PHI
        y1 = fun.value(x1)
        y2 = fun.value(x2)

        while self.iterations < self.max_iter:
            self.iterations += 1

            if y1 >= y2:
                a = x1
                x1 = x2
                y1 = y2
                x2 = a + (b - a) * INVERSE_PHI
                y2 = fun.value(x2)
            else:
                b = x2
                x2 = x1
                y2 = y1
                x1 = b - (b - a) * INVERSE_PHI
                y1 = fun.value(x1)

            if callback is not None:
                callback(SearchCallbackArg(self.iterations, a, b))

            if abs(b - a) < self._epsilon:
                self.x = (a + b) / 2
                self.has_result = True
                logger.debug(
                    "converged to %r in %d iterations", self.x, self.iterations
                )
                return SearchResult("SUCCESS", self.x, self.iterations, "success")

        err = IterationLimitExceeded(f"iteration limit reached ({self.max_iter})")
        logger.warning("%s: %s", fun.name, err.message)
        return SearchResult("MAX_ITER", None, self.iterations, err.message, err)
