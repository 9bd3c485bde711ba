"""Defaults read from the environment and logging setup."""

import logging
import os

from goldsearch.problem import (
    DEFAULT_LEFT,
    DEFAULT_PRECISION,
    DEFAULT_RIGHT,
    SearchProblem,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger. `level` defaults to ``$LOG_LEVEL`` or WARNING."""
    level = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
    )


def _env[T](name: str, default: T, convert: type[T]) -> T:
    if (value := os.environ.get(name)) is None or not value.strip():
        return default

    try:
        return convert(value)
    except ValueError:
        raise ValueError(f"{name} must be {convert.__name__}, got {value!r}") from None


def default_problem() -> SearchProblem:
    """Build a :class:`SearchProblem` from ``GOLDSEARCH_LEFT``, ``GOLDSEARCH_RIGHT``
    and ``GOLDSEARCH_PRECISION``."""
    left = _env("GOLDSEARCH_LEFT", DEFAULT_LEFT, float)
    right = _env("GOLDSEARCH_RIGHT", DEFAULT_RIGHT, float)
    precision = _env("GOLDSEARCH_PRECISION", DEFAULT_PRECISION, int)
    logger.debug("default problem: [%r; %r], %d digits", left, right, precision)
    return SearchProblem(left, right, precision)
