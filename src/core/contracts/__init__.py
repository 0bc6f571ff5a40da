"""
Contract Validation Module

Модуль для валидации JSON контрактов BigInteger и побитовых операций.
"""

from .validators import (
    BigIntegerValidator,
    BitwiseRequestValidator,
    BitwiseResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_integer,
    validate_bitwise_request,
    validate_bitwise_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "BitwiseRequestValidator",
    "BitwiseResultValidator",
    # Functions
    "validate_big_integer",
    "validate_bitwise_request",
    "validate_bitwise_result",
]
