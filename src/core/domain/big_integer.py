"""
BigInteger — знаковое целое произвольной точности

Immutable Pydantic модель: знак + десятичный magnitude (строка цифр).
Нативного битового хранилища нет — побитовые операторы синтезируют
семантику дополнительного кода бесконечной ширины
(см. src.core.operators.bitwise).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude без ведущих нулей (кроме литерала "0")
2. Ноль всегда имеет знак "+"
3. Экземпляры неизменяемы (frozen=True), операции возвращают новые значения
4. Деление и остаток — floor-семантика (как у int)
"""

from enum import Enum
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.bit_sequence import decimal_to_binary
from src.core.math.decimal_digits import (
    MAGNITUDE_PATTERN,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    multiply_magnitudes,
    normalize_magnitude,
    power_magnitude,
    subtract_magnitudes,
)

# =============================================================================
# NATIVE BOUNDS
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# str()/int() по умолчанию отказываются работать с числами длиннее 4300 цифр
_CHUNK_DIGITS: Final[int] = 1000
_CHUNK_BASE: Final[int] = 10**_CHUNK_DIGITS


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак целого"""

    POSITIVE = "+"
    NEGATIVE = "-"


# =============================================================================
# NATIVE CONVERSION HELPERS
# =============================================================================


def _int_to_magnitude(value: int) -> str:
    if value < _CHUNK_BASE:
        return str(value)

    chunks: list[int] = []
    while value:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(low)

    head = str(chunks[-1])
    tail = "".join(str(chunk).zfill(_CHUNK_DIGITS) for chunk in reversed(chunks[:-1]))
    return head + tail


def _magnitude_to_int(magnitude: str) -> int:
    if len(magnitude) <= _CHUNK_DIGITS:
        return int(magnitude)

    # Первый кусок короче, остальные ровно по _CHUNK_DIGITS
    head_len = len(magnitude) % _CHUNK_DIGITS or _CHUNK_DIGITS
    value = int(magnitude[:head_len])
    for start in range(head_len, len(magnitude), _CHUNK_DIGITS):
        value = value * _CHUNK_BASE + int(magnitude[start : start + _CHUNK_DIGITS])
    return value


def _parse_value(value: Any) -> dict[str, Any]:
    """
    Разбор позиционного аргумента конструктора в поля модели.

    Поддерживает BigInteger, int и десятичную строку с необязательным
    знаком ("+"/"-") и пробелами по краям.

    Raises:
        ValueError: Если строка не является десятичным целым
        TypeError: Если тип значения не поддерживается
    """
    if isinstance(value, BigInteger):
        return {"sign": value.sign, "magnitude": value.magnitude}

    if isinstance(value, int):
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return {"sign": sign, "magnitude": _int_to_magnitude(abs(value))}

    if isinstance(value, str):
        text = value.strip()
        negative = text.startswith("-")
        if text[:1] in ("+", "-"):
            text = text[1:]
        try:
            magnitude = normalize_magnitude(text)
        except ValueError:
            raise ValueError(f"invalid decimal integer literal: {value!r}") from None
        negative = negative and magnitude != ZERO_MAGNITUDE
        return {
            "sign": Sign.NEGATIVE if negative else Sign.POSITIVE,
            "magnitude": magnitude,
        }

    raise TypeError(f"cannot build BigInteger from {type(value).__name__}")


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): все операторы создают новый экземпляр.

    Конструирование:
        BigInteger()                                   # 0
        BigInteger(42), BigInteger("-1234567890123")   # из int / строки
        BigInteger(sign=Sign.NEGATIVE, magnitude="5")  # по полям (строгая валидация)

    Операторы:
        ==, <, <=, >, >=          — сравнение с BigInteger и int
        +, -, *, //, %, **, abs   — десятичная арифметика
        |, &, ^, ~, <<, >>        — побитовые (дополнительный код бесконечной ширины)
    """

    sign: Sign = Field(default=Sign.POSITIVE, description="Знак ('+' или '-')")
    magnitude: str = Field(
        default=ZERO_MAGNITUDE,
        pattern=MAGNITUDE_PATTERN,
        description="Абсолютное значение: десятичные цифры без ведущих нулей",
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: Union[int, str, "BigInteger", None] = None, /, **data: Any) -> None:
        if value is not None:
            if data:
                raise TypeError("positional value cannot be combined with sign/magnitude fields")
            data = _parse_value(value)
        super().__init__(**data)

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigInteger":
        """Ноль не может быть отрицательным."""
        if self.magnitude == ZERO_MAGNITUDE and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must carry a positive sign")
        return self

    @classmethod
    def from_parts(cls, negative: bool, magnitude: str) -> "BigInteger":
        """
        Сборка из флага знака и magnitude.

        Знак нуля нормализуется к "+", поэтому вызывающему коду
        не нужно отдельно обрабатывать "-0".
        """
        negative = negative and magnitude != ZERO_MAGNITUDE
        return cls(sign=Sign.NEGATIVE if negative else Sign.POSITIVE, magnitude=magnitude)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self.magnitude == ZERO_MAGNITUDE

    def bit_length(self) -> int:
        """Число бит, необходимых для abs(self) (0 для нуля), как у int.bit_length."""
        return len(decimal_to_binary(self.magnitude))

    def to_int64(self) -> int:
        """
        Конверсия в нативное знаковое 64-битное целое.

        Raises:
            OverflowError: Если значение вне [INT64_MIN, INT64_MAX]
        """
        if self < INT64_MIN or self > INT64_MAX:
            raise OverflowError(f"{self} does not fit in a signed 64-bit integer")
        return int(self)

    # -------------------------------------------------------------------------
    # Conversion / formatting
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        value = _magnitude_to_int(self.magnitude)
        return -value if self.is_negative else value

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        return f"-{self.magnitude}" if self.is_negative else self.magnitude

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger") -> int:
        """
        Трёхзначное сравнение.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.sign is not other.sign:
            return -1 if self.is_negative else 1
        result = compare_magnitudes(self.magnitude, other.magnitude)
        return -result if self.is_negative else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sign is rhs.sign and self.magnitude == rhs.magnitude

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Согласовано с int: BigInteger(5) == 5 → одинаковый hash
        return hash(int(self))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInteger":
        return BigInteger.from_parts(not self.is_negative, self.magnitude)

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return BigInteger.from_parts(False, self.magnitude)

    def __add__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, rhs)

    def __radd__(self, other: object) -> "BigInteger":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, -rhs)

    def __rsub__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, -self)

    def __mul__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInteger.from_parts(
            self.is_negative != rhs.is_negative,
            multiply_magnitudes(self.magnitude, rhs.magnitude),
        )

    def __rmul__(self, other: object) -> "BigInteger":
        return self.__mul__(other)

    def __divmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _floor_divmod(self, rhs)

    def __rdivmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _floor_divmod(lhs, self)

    def __floordiv__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _floor_divmod(self, rhs)[0]

    def __rfloordiv__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _floor_divmod(lhs, self)[0]

    def __mod__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _floor_divmod(self, rhs)[1]

    def __rmod__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _floor_divmod(lhs, self)[1]

    def __pow__(self, exponent: object, modulo: Optional[object] = None) -> "BigInteger":
        """
        Возведение в неотрицательную нативную степень.

        Raises:
            ValueError: Если показатель отрицательный
        """
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, BigInteger):
            exponent = int(exponent)
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"BigInteger exponent must be non-negative, got {exponent}")
        return BigInteger.from_parts(
            self.is_negative and exponent % 2 == 1,
            power_magnitude(self.magnitude, exponent),
        )

    # -------------------------------------------------------------------------
    # Bitwise (src.core.operators.bitwise)
    # -------------------------------------------------------------------------

    def __or__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _bitwise().bitwise_or(self, rhs)

    def __ror__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _bitwise().bitwise_or(lhs, self)

    def __and__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _bitwise().bitwise_and(self, rhs)

    def __rand__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _bitwise().bitwise_and(lhs, self)

    def __xor__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _bitwise().bitwise_xor(self, rhs)

    def __rxor__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _bitwise().bitwise_xor(lhs, self)

    def __invert__(self) -> "BigInteger":
        return _bitwise().bitwise_not(self)

    def __lshift__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _bitwise().shift_left(self, rhs)

    def __rlshift__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _bitwise().shift_left(lhs, self)

    def __rshift__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _bitwise().shift_right(self, rhs)

    def __rrshift__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _bitwise().shift_right(lhs, self)


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[BigInteger]:
    """BigInteger или int → BigInteger; иначе None (→ NotImplemented)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def _bitwise():
    # Операторы зависят от этого модуля, поэтому импорт отложен
    from src.core.operators import bitwise

    return bitwise


def _add(lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    if lhs.sign is rhs.sign:
        return BigInteger.from_parts(
            lhs.is_negative, add_magnitudes(lhs.magnitude, rhs.magnitude)
        )

    order = compare_magnitudes(lhs.magnitude, rhs.magnitude)
    if order == 0:
        return BigInteger()
    if order > 0:
        return BigInteger.from_parts(
            lhs.is_negative, subtract_magnitudes(lhs.magnitude, rhs.magnitude)
        )
    return BigInteger.from_parts(
        rhs.is_negative, subtract_magnitudes(rhs.magnitude, lhs.magnitude)
    )


def _floor_divmod(lhs: BigInteger, rhs: BigInteger) -> tuple[BigInteger, BigInteger]:
    """
    Деление с округлением к минус бесконечности (как divmod для int).

    Raises:
        ZeroDivisionError: Если rhs == 0
    """
    q_mag, r_mag = divmod_magnitudes(lhs.magnitude, rhs.magnitude)
    quotient = BigInteger.from_parts(lhs.is_negative != rhs.is_negative, q_mag)

    if lhs.is_negative != rhs.is_negative and r_mag != ZERO_MAGNITUDE:
        quotient = quotient - 1

    remainder = lhs - rhs * quotient
    return quotient, remainder
