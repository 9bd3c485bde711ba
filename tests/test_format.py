import pytest

from goldsearch.format import bounds_string, precision_string, solution_string
from goldsearch.function import Square
from goldsearch.problem import SearchProblem


def test_bounds_string():
    assert bounds_string(SearchProblem()) == "[-1.00000;1.00000]"
    assert bounds_string(SearchProblem(2.5, 0, precision=1)) == "[0.0;2.5]"
    assert bounds_string(SearchProblem(-1, 1, precision=-1)) == "[-1;1]"


def test_precision_string():
    assert precision_string(SearchProblem()) == "5 digits (0.00001)"
    assert precision_string(SearchProblem(precision=2)) == "2 digits (0.01)"
    assert precision_string(SearchProblem(precision=0)) == "0 digits (1)"


def test_solution_string():
    prob = SearchProblem(-1, 2, precision=3)

    with pytest.raises(ValueError):
        solution_string(prob)

    prob.find_minimum(Square())
    text = solution_string(prob)
    assert text.endswith(f" (found in {prob.iterations} iterations)")
    assert text.split()[0] in ("0.000", "-0.000")


def test_precision_string_overflow():
    prob = SearchProblem()
    prob.set_precision(-400)
    assert precision_string(prob) == "-400 digits (inf)"
    assert bounds_string(prob) == "[-1;1]"
