"""
###############################################
Presentation helpers (:mod:`goldsearch.format`)
###############################################

.. currentmodule:: goldsearch.format

.. autosummary::
    :toctree: generated/

    bounds_string
    precision_string
    solution_string

"""

from goldsearch.problem import SearchProblem


def _spec(problem: SearchProblem) -> str:
    # a negative precision is shown with no decimals
    return f".{max(problem.precision, 0)}f"


def bounds_string(problem: SearchProblem) -> str:
    """Return the interval as ``"[left;right]"``.

    Examples
    --------
    >>> bounds_string(SearchProblem(-1, 2, precision=2))
    '[-1.00;2.00]'
    """
    spec = _spec(problem)
    return f"[{format(problem.left, spec)};{format(problem.right, spec)}]"


def precision_string(problem: SearchProblem) -> str:
    """Return the precision as ``"<digits> digits (<epsilon>)"``.

    Examples
    --------
    >>> precision_string(SearchProblem(precision=3))
    '3 digits (0.001)'
    """
    return f"{problem.precision} digits ({format(problem.epsilon, _spec(problem))})"


def solution_string(problem: SearchProblem) -> str:
    """Return the last result as ``"<x> (found in <n> iterations)"``.

    Raises
    ------
    ValueError
        If the last search of `problem` did not succeed.
    """
    if not problem.has_result:
        raise ValueError("no minimum has been found")

    x = format(problem.x, _spec(problem))
    return f"{x} (found in {problem.iterations} iterations)"
