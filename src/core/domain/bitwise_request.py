"""
Bitwise Request / Result — модели запроса и результата побитовой операции

Контракты: contracts/schema/bitwise_request.json, contracts/schema/bitwise_result.json

Immutable Pydantic модели. Операнды принимают BigInteger, int или
десятичную строку; при сериализации записываются как десятичные строки.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from src.core.domain.big_integer import BigInteger


# =============================================================================
# ENUMS
# =============================================================================


class BitwiseOperator(str, Enum):
    """Побитовый оператор"""

    OR = "or"
    AND = "and"
    XOR = "xor"
    NOT = "not"
    SHIFT_LEFT = "lshift"
    SHIFT_RIGHT = "rshift"

    @property
    def is_unary(self) -> bool:
        return self is BitwiseOperator.NOT


class EvaluationPath(str, Enum):
    """Каким путём был вычислен результат"""

    NATIVE = "native"
    ARBITRARY_PRECISION = "arbitrary_precision"


def _to_big_integer(value: Any) -> Any:
    if value is None or isinstance(value, BigInteger):
        return value
    if isinstance(value, (int, str)):
        return BigInteger(value)
    return value


# =============================================================================
# REQUEST MODEL
# =============================================================================


class BitwiseRequest(BaseModel):
    """
    Запрос на вычисление побитовой операции.

    Для NOT задаётся только lhs; для остальных операторов обязателен rhs
    (для сдвигов rhs — величина сдвига).
    """

    operator: BitwiseOperator = Field(..., description="Оператор")
    lhs: BigInteger = Field(..., description="Левый (или единственный) операнд")
    rhs: Optional[BigInteger] = Field(default=None, description="Правый операнд")

    model_config = {"frozen": True}

    @field_validator("lhs", "rhs", mode="before")
    @classmethod
    def coerce_operand(cls, v: Any) -> Any:
        """int и десятичные строки приводятся к BigInteger."""
        return _to_big_integer(v)

    @model_validator(mode="after")
    def validate_arity(self) -> "BitwiseRequest":
        if self.operator.is_unary and self.rhs is not None:
            raise ValueError(f"operator '{self.operator.value}' takes a single operand")
        if not self.operator.is_unary and self.rhs is None:
            raise ValueError(f"operator '{self.operator.value}' requires rhs")
        return self

    @field_serializer("lhs", "rhs")
    def serialize_operand(self, v: Optional[BigInteger]) -> Optional[str]:
        return None if v is None else str(v)

    def to_payload(self) -> dict[str, Any]:
        """JSON-совместимый dict (без rhs для унарных операторов)."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# RESULT MODEL
# =============================================================================


class BitwiseResult(BaseModel):
    """Результат побитовой операции с диагностикой пути вычисления."""

    operator: BitwiseOperator
    lhs: BigInteger
    rhs: Optional[BigInteger] = None
    result: BigInteger
    path: EvaluationPath

    model_config = {"frozen": True}

    @field_serializer("lhs", "rhs", "result")
    def serialize_value(self, v: Optional[BigInteger]) -> Optional[str]:
        return None if v is None else str(v)

    def to_payload(self) -> dict[str, Any]:
        """JSON-совместимый dict (без rhs для унарных операторов)."""
        return self.model_dump(mode="json", exclude_none=True)
