"""
#################################
Errors (:mod:`goldsearch.errors`)
#################################

.. currentmodule:: goldsearch.errors

.. autosummary::
    :toctree: generated/

    SearchError
    IndexOutOfRange
    InputParseError
    NoMinimumInRange
    IterationLimitExceeded

"""


class SearchError(Exception):
    """Base class of the errors reported by :mod:`goldsearch`.

    Parameters
    ----------
    message : str, optional
    """

    default_message = "search failed"
    message: str

    def __init__(self, message=None, *args, **kwargs):
        if message is None:
            message = self.default_message

        super().__init__(message, *args, **kwargs)
        self.message = message


class IndexOutOfRange(SearchError, IndexError):
    """Raised when a function index is outside the registry."""

    default_message = "invalid function index"


class InputParseError(SearchError, ValueError):
    """Raised when user input cannot be parsed as a number."""

    default_message = "invalid input"


class NoMinimumInRange(SearchError):
    """The derivative does not change sign from negative to positive on the
    interval."""

    default_message = "apparently there is no minimum on the given interval"


class IterationLimitExceeded(SearchError):
    """The bracket did not shrink below epsilon within the iteration limit."""

    default_message = "iteration limit reached"
