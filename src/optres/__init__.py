"""Option and Result types for explicit absence and failure."""

from optres.errors import AbsentValueError, ExpectError, OptresError, UnwrapError
from optres.option import Nothing, Option, Some, from_optional, none, some
from optres.result import Err, Ok, Result, catching, err, ok

__all__ = [
    "AbsentValueError",
    "Err",
    "ExpectError",
    "Nothing",
    "Ok",
    "Option",
    "OptresError",
    "Result",
    "Some",
    "UnwrapError",
    "catching",
    "err",
    "from_optional",
    "none",
    "ok",
    "some",
]
