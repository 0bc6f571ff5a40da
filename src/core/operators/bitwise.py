"""
Bitwise Operators — OR / AND / XOR / NOT / << / >> для BigInteger

Семантика — дополнительный код бесконечной ширины (как у int в Python
и у аппаратных целых в пределах их ширины).

Стратегия для каждого оператора:
1. FastPathDispatcher: все операнды в нативном диапазоне → нативный int
2. Иначе OR/AND/XOR через битовые последовательности:
   decimal_to_binary → align_lengths → twos_complement для отрицательных
   → поэлементная комбинация → twos_complement для отрицательного результата
   → binary_to_decimal → знак по SignPolicy
3. NOT: ~x == -x - 1 напрямую в десятичной арифметике
4. Сдвиги: умножение / floor-деление на 2^n

РАБОЧАЯ ШИРИНА:
Длина самого длинного операнда плюс SIGN_GUARD_BITS. Старший (guard) бит
каждой закодированной последовательности равен знаку операнда, поэтому
знак результата всегда представим и отрицательный результат -2^W
(например, -3 & -2 == -4) декодируется без потери.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. OR отрицателен ⇔ хотя бы один операнд отрицателен
2. AND отрицателен ⇔ оба операнда отрицательны
3. XOR отрицателен ⇔ ровно один операнд отрицателен
4. Операнды не изменяются; каждый вызов создаёт свои последовательности
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Final, Optional

from src.core.domain.big_integer import INT64_MAX, BigInteger
from src.core.domain.bitwise_request import BitwiseOperator, EvaluationPath
from src.core.math.bit_sequence import (
    AlignedBitPair,
    BitSequence,
    align_lengths,
    binary_to_decimal,
    decimal_to_binary,
    twos_complement,
)
from src.core.operators.dispatch import DEFAULT_DISPATCHER, FastPathDispatcher

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Дополнительный старший бит рабочей ширины под знак
SIGN_GUARD_BITS: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedShiftCount(ValueError):
    """
    Величина сдвига вне поддерживаемого диапазона.

    Отрицательный сдвиг и сдвиг, не помещающийся в знаковое 64-битное
    целое, не определены.
    """

    pass


# =============================================================================
# SIGN POLICY
# =============================================================================


@dataclass(frozen=True)
class SignPolicy:
    """Правило оператора: поэлементная функция и знак результата."""

    operator: BitwiseOperator
    combine: Callable[[bool, bool], bool]
    negative_when: Callable[[bool, bool], bool]

    def result_is_negative(self, lhs_negative: bool, rhs_negative: bool) -> bool:
        return self.negative_when(lhs_negative, rhs_negative)


SIGN_POLICIES: Final[dict[BitwiseOperator, SignPolicy]] = {
    BitwiseOperator.OR: SignPolicy(
        operator=BitwiseOperator.OR,
        combine=operator.or_,
        negative_when=lambda lhs, rhs: lhs or rhs,
    ),
    BitwiseOperator.AND: SignPolicy(
        operator=BitwiseOperator.AND,
        combine=operator.and_,
        negative_when=lambda lhs, rhs: lhs and rhs,
    ),
    BitwiseOperator.XOR: SignPolicy(
        operator=BitwiseOperator.XOR,
        combine=operator.xor,
        negative_when=lambda lhs, rhs: lhs != rhs,
    ),
}


def get_sign_policy(op: BitwiseOperator) -> SignPolicy:
    """
    Правило знака для OR/AND/XOR.

    Raises:
        ValueError: Если оператор не поэлементный
    """
    policy = SIGN_POLICIES.get(op)
    if policy is None:
        raise ValueError(f"operator '{op.value}' has no elementwise sign policy")
    return policy


# =============================================================================
# BITWISE COMBINER
# =============================================================================


def combine_bits(pair: AlignedBitPair, policy: SignPolicy) -> BitSequence:
    """
    Поэлементная комбинация выровненной пары.

    Доступ по индексу: рассинхронизация длин падает с IndexError,
    а не обрезается молча.
    """
    return BitSequence(
        tuple(policy.combine(pair.lhs[i], pair.rhs[i]) for i in range(pair.width))
    )


def encode_operands(lhs: BigInteger, rhs: BigInteger) -> AlignedBitPair:
    """
    Кодирование двух операндов в дополнительном коде общей рабочей ширины.

    Returns:
        AlignedBitPair шириной max(bit_length) + SIGN_GUARD_BITS
    """
    lhs_bits = decimal_to_binary(lhs.magnitude)
    rhs_bits = decimal_to_binary(rhs.magnitude)

    width = max(len(lhs_bits), len(rhs_bits)) + SIGN_GUARD_BITS
    pair = align_lengths(lhs_bits, rhs_bits, min_width=width)

    return pair.map(
        twos_complement if lhs.is_negative else None,
        twos_complement if rhs.is_negative else None,
    )


def _combine_via_bits(op: BitwiseOperator, lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    policy = get_sign_policy(op)
    pair = encode_operands(lhs, rhs)

    logger.debug("bit-sequence path: op=%s width=%d", op.value, pair.width)

    result = combine_bits(pair, policy)
    negative = policy.result_is_negative(lhs.is_negative, rhs.is_negative)
    if negative:
        result = twos_complement(result)

    return BigInteger.from_parts(negative, binary_to_decimal(result))


# =============================================================================
# NOT
# =============================================================================


def _invert(value: BigInteger) -> BigInteger:
    # ~x == -x - 1
    if value.is_negative:
        return abs(value) - 1
    return -value - 1


# =============================================================================
# SHIFTS
# =============================================================================


def narrow_shift_count(count: BigInteger) -> int:
    """
    Сужение величины сдвига до нативного int.

    Raises:
        UnsupportedShiftCount: Если count < 0 или count > INT64_MAX
    """
    if count.is_negative:
        raise UnsupportedShiftCount(f"negative shift count: {count}")
    if count > INT64_MAX:
        raise UnsupportedShiftCount(f"shift count {count} exceeds signed 64-bit range")
    return count.to_int64()


def _shift_left(value: BigInteger, count: int) -> BigInteger:
    if value.is_zero or count == 0:
        return value
    return value * BigInteger(2) ** count


def _shift_right(value: BigInteger, count: int) -> BigInteger:
    if count == 0:
        return value
    # Все значащие биты вытеснены: остаётся знак
    if count >= value.bit_length():
        return BigInteger(-1) if value.is_negative else BigInteger()
    return value // BigInteger(2) ** count


# =============================================================================
# STRATEGY SELECTION
# =============================================================================


def evaluate(
    op: BitwiseOperator,
    lhs: BigInteger,
    rhs: Optional[BigInteger] = None,
    dispatcher: Optional[FastPathDispatcher] = None,
) -> tuple[BigInteger, EvaluationPath]:
    """
    Вычисление оператора с выбором пути.

    Args:
        op: Оператор
        lhs: Левый (или единственный) операнд
        rhs: Правый операнд (None для NOT)
        dispatcher: Диспетчер быстрого пути (default: DEFAULT_DISPATCHER)

    Returns:
        (result, path): результат и путь, которым он получен

    Raises:
        ValueError: Если арность не соответствует оператору
        UnsupportedShiftCount: Если величина сдвига вне диапазона
    """
    dispatcher = dispatcher or DEFAULT_DISPATCHER

    if op is BitwiseOperator.NOT:
        if rhs is not None:
            raise ValueError("operator 'not' takes a single operand")
        native = dispatcher.dispatch_unary(op, lhs)
        if native is not None:
            return native, EvaluationPath.NATIVE
        return _invert(lhs), EvaluationPath.ARBITRARY_PRECISION

    if rhs is None:
        raise ValueError(f"operator '{op.value}' requires rhs")

    shift_count: Optional[int] = None
    if op in (BitwiseOperator.SHIFT_LEFT, BitwiseOperator.SHIFT_RIGHT):
        shift_count = narrow_shift_count(rhs)

    native = dispatcher.dispatch_binary(op, lhs, rhs)
    if native is not None:
        return native, EvaluationPath.NATIVE

    if shift_count is None:
        return _combine_via_bits(op, lhs, rhs), EvaluationPath.ARBITRARY_PRECISION

    if op is BitwiseOperator.SHIFT_LEFT:
        return _shift_left(lhs, shift_count), EvaluationPath.ARBITRARY_PRECISION
    return _shift_right(lhs, shift_count), EvaluationPath.ARBITRARY_PRECISION


# =============================================================================
# PUBLIC OPERATORS
# =============================================================================


def bitwise_or(
    lhs: BigInteger, rhs: BigInteger, dispatcher: Optional[FastPathDispatcher] = None
) -> BigInteger:
    """lhs | rhs"""
    return evaluate(BitwiseOperator.OR, lhs, rhs, dispatcher)[0]


def bitwise_and(
    lhs: BigInteger, rhs: BigInteger, dispatcher: Optional[FastPathDispatcher] = None
) -> BigInteger:
    """lhs & rhs"""
    return evaluate(BitwiseOperator.AND, lhs, rhs, dispatcher)[0]


def bitwise_xor(
    lhs: BigInteger, rhs: BigInteger, dispatcher: Optional[FastPathDispatcher] = None
) -> BigInteger:
    """lhs ^ rhs"""
    return evaluate(BitwiseOperator.XOR, lhs, rhs, dispatcher)[0]


def bitwise_not(value: BigInteger, dispatcher: Optional[FastPathDispatcher] = None) -> BigInteger:
    """
    ~value == -value - 1

    Examples:
        >>> bitwise_not(BigInteger(0))
        BigInteger('-1')
        >>> bitwise_not(BigInteger(-1))
        BigInteger('0')
    """
    return evaluate(BitwiseOperator.NOT, value, None, dispatcher)[0]


def shift_left(
    value: BigInteger, count: BigInteger, dispatcher: Optional[FastPathDispatcher] = None
) -> BigInteger:
    """
    value << count == value * 2^count (заполнение нулями, ширина не ограничена).

    Raises:
        UnsupportedShiftCount: Если count < 0 или не помещается в int64
    """
    return evaluate(BitwiseOperator.SHIFT_LEFT, value, count, dispatcher)[0]


def shift_right(
    value: BigInteger, count: BigInteger, dispatcher: Optional[FastPathDispatcher] = None
) -> BigInteger:
    """
    value >> count == floor(value / 2^count) (арифметический сдвиг).

    Raises:
        UnsupportedShiftCount: Если count < 0 или не помещается в int64
    """
    return evaluate(BitwiseOperator.SHIFT_RIGHT, value, count, dispatcher)[0]
