"""
Domain models and value objects.

Contains BigInteger (sign + decimal magnitude) and the bitwise request/result models.
"""

from src.core.domain.big_integer import INT64_MAX, INT64_MIN, BigInteger, Sign
from src.core.domain.bitwise_request import (
    BitwiseOperator,
    BitwiseRequest,
    BitwiseResult,
    EvaluationPath,
)

__all__ = [
    # BigInteger
    "INT64_MAX",
    "INT64_MIN",
    "BigInteger",
    "Sign",
    # Bitwise request / result
    "BitwiseOperator",
    "BitwiseRequest",
    "BitwiseResult",
    "EvaluationPath",
]
