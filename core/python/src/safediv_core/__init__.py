"""
safediv_core 패키지.

0으로 나누기를 실패가 아닌 값의 부재(Nothing)로 표현하는 안전한 나눗셈과,
이를 위한 Option/Result 타입을 제공합니다.

The `safediv_core` package.

Provides safe division, which reports a zero divisor as an absent value
(Nothing) rather than an error, along with the Option and Result types
shared with the backend.
"""

from .division import safe_divide, safe_floor_divide
from .numeric import FloorNumeric, Numeric
from .option import Nothing, Option, Some, is_nothing, is_some, to_optional, unwrap_or
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "safe_divide",
    "safe_floor_divide",
    "Numeric",
    "FloorNumeric",
    "Some",
    "Nothing",
    "Option",
    "is_some",
    "is_nothing",
    "unwrap_or",
    "to_optional",
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
