"""Numeric helpers over plain numpy vectors."""

from .vector import (
    argmax,
    argmin,
    argsort,
    as_vector,
    choose_one,
    divide,
    log,
    normalize,
    normalize_log,
    sqrt,
    subtract,
)

__all__ = [
    "argmax",
    "argmin",
    "argsort",
    "as_vector",
    "choose_one",
    "divide",
    "log",
    "normalize",
    "normalize_log",
    "sqrt",
    "subtract",
]
