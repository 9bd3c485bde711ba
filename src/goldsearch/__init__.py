from .errors import (
    IndexOutOfRange,
    InputParseError,
    IterationLimitExceeded,
    NoMinimumInRange,
    SearchError,
)
from .function import Function, Lambda, Sin, Square
from .problem import SearchProblem, SearchResult
from .registry import FunctionRegistry, default_registry

__version__ = "0.1.0"

__all__ = [
    "IndexOutOfRange",
    "InputParseError",
    "IterationLimitExceeded",
    "NoMinimumInRange",
    "SearchError",
    "Function",
    "Lambda",
    "Sin",
    "Square",
    "SearchProblem",
    "SearchResult",
    "FunctionRegistry",
    "default_registry",
]
