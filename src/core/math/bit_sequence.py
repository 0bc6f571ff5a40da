"""
Bit Sequences — явное битовое представление десятичного magnitude

Модуль содержит:
- BitSequence: неизменяемая последовательность бит (индекс 0 = младший бит)
- DecimalBinaryConverter: decimal_to_binary / binary_to_decimal
- TwosComplementTransform: twos_complement (invert + increment, фиксированная ширина)
- Выравнивание длин: align_lengths → AlignedBitPair

BitSequence всегда описывает НЕОТРИЦАТЕЛЬНЫЙ magnitude. Знак хранится
вызывающим кодом и появляется в последовательности только временно,
через twos_complement.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. binary_to_decimal(decimal_to_binary(m)) == m для любого m >= 0
2. twos_complement(twos_complement(s)) == s для любой длины
3. Поэлементные операции получают только AlignedBitPair (равные длины)
4. Нарушение равенства длин → BitSequenceLengthMismatch (дефект, не truncation)
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from src.core.math.decimal_digits import (
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    double_magnitude,
    halve_magnitude,
    validate_magnitude,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class BitSequenceLengthMismatch(Exception):
    """
    Последовательности разной длины попали в поэлементную операцию.

    Это дефект вызывающего кода: выравнивание через align_lengths
    обязательно перед любой поэлементной комбинацией.
    """

    pass


# =============================================================================
# BIT SEQUENCE
# =============================================================================


@dataclass(frozen=True)
class BitSequence:
    """Little-endian последовательность бит (bits[0] — младший бит)."""

    bits: tuple[bool, ...] = ()

    def __len__(self) -> int:
        return len(self.bits)

    def __getitem__(self, index: int) -> bool:
        # tuple бросает IndexError за пределами длины
        return self.bits[index]

    def __iter__(self) -> Iterator[bool]:
        return iter(self.bits)

    @classmethod
    def from_string(cls, text: str) -> "BitSequence":
        """
        Разбор записи в привычном порядке (старший бит слева).

        Examples:
            >>> BitSequence.from_string("110").bits
            (False, True, True)
        """
        if any(ch not in "01" for ch in text):
            raise ValueError(f"bit string must contain only '0' and '1', got {text!r}")
        return cls(tuple(ch == "1" for ch in reversed(text)))

    def to_string(self) -> str:
        """Запись со старшим битом слева ("" для пустой последовательности)."""
        return "".join("1" if bit else "0" for bit in reversed(self.bits))

    def padded(self, width: int) -> "BitSequence":
        """
        Дополнение старшими нулевыми битами до ширины width.

        Raises:
            ValueError: Если width меньше текущей длины (усечение запрещено)
        """
        if width < len(self.bits):
            raise ValueError(
                f"cannot pad bit sequence of length {len(self.bits)} down to width {width}"
            )
        return BitSequence(self.bits + (False,) * (width - len(self.bits)))

    def inverted(self) -> "BitSequence":
        """Инверсия всех бит без изменения длины."""
        return BitSequence(tuple(not bit for bit in self.bits))

    def is_zero(self) -> bool:
        """True если все биты нулевые (в том числе для пустой последовательности)."""
        return not any(self.bits)


# =============================================================================
# DECIMAL ↔ BINARY
# =============================================================================


def decimal_to_binary(magnitude: str) -> BitSequence:
    """
    Конверсия magnitude в последовательность бит.

    Многократное деление на 2: остаток каждого шага — очередной бит,
    начиная с младшего. Останавливается, когда частное равно нулю.

    Args:
        magnitude: Каноническая строка десятичных цифр

    Returns:
        BitSequence минимальной длины (пустая для нуля)

    Raises:
        ValueError: Если magnitude не в канонической форме

    Examples:
        >>> decimal_to_binary("6").to_string()
        '110'
        >>> len(decimal_to_binary("0"))
        0
    """
    validate_magnitude(magnitude)

    bits: list[bool] = []
    quotient = magnitude
    while quotient != ZERO_MAGNITUDE:
        quotient, remainder = halve_magnitude(quotient)
        bits.append(remainder == 1)
    return BitSequence(tuple(bits))


def binary_to_decimal(sequence: BitSequence) -> str:
    """
    Конверсия последовательности бит обратно в magnitude.

    Сумма bit[i] * 2^i, вычисленная по схеме Горнера от старшего бита:
    на каждом шаге накопитель удваивается и к нему прибавляется бит.
    Старшие нулевые биты (padding) не меняют результат.

    Examples:
        >>> binary_to_decimal(BitSequence.from_string("0110"))
        '6'
        >>> binary_to_decimal(BitSequence())
        '0'
    """
    magnitude = ZERO_MAGNITUDE
    for bit in reversed(sequence.bits):
        magnitude = double_magnitude(magnitude)
        if bit:
            magnitude = add_magnitudes(magnitude, ONE_MAGNITUDE)
    return magnitude


# =============================================================================
# TWO'S COMPLEMENT
# =============================================================================


def twos_complement(sequence: BitSequence) -> BitSequence:
    """
    Дополнительный код в пределах текущей ширины.

    Инвертирует все биты и прибавляет 1 сквозным переносом от младшего бита:
    единицы превращаются в нули, пока первый ноль не станет единицей.
    Перенос за старший бит отбрасывается — длина не растёт.

    Двойное применение — тождественное преобразование; нулевая
    последовательность переходит сама в себя.

    Examples:
        >>> twos_complement(BitSequence.from_string("0101")).to_string()
        '1011'
        >>> twos_complement(BitSequence.from_string("0000")).to_string()
        '0000'
    """
    bits = list(sequence.inverted().bits)
    for i in range(len(bits)):
        if bits[i]:
            bits[i] = False
        else:
            bits[i] = True
            break
    return BitSequence(tuple(bits))


# =============================================================================
# ВЫРАВНИВАНИЕ ДЛИН
# =============================================================================


@dataclass(frozen=True)
class AlignedBitPair:
    """Пара последовательностей одинаковой длины (рабочая ширина операции)."""

    lhs: BitSequence
    rhs: BitSequence

    def __post_init__(self) -> None:
        if len(self.lhs) != len(self.rhs):
            raise BitSequenceLengthMismatch(
                f"bit sequences must share a width, got {len(self.lhs)} and {len(self.rhs)}"
            )

    @property
    def width(self) -> int:
        return len(self.lhs)

    def map(self, lhs_transform, rhs_transform) -> "AlignedBitPair":
        """
        Применение преобразований к каждой стороне с повторной проверкой длин.

        Args:
            lhs_transform: Функция BitSequence → BitSequence (или None)
            rhs_transform: Функция BitSequence → BitSequence (или None)
        """
        lhs = lhs_transform(self.lhs) if lhs_transform is not None else self.lhs
        rhs = rhs_transform(self.rhs) if rhs_transform is not None else self.rhs
        return AlignedBitPair(lhs, rhs)


def align_lengths(
    lhs: BitSequence,
    rhs: BitSequence,
    min_width: Optional[int] = None,
) -> AlignedBitPair:
    """
    Выравнивание двух последовательностей до общей ширины.

    Более короткая дополняется старшими нулями до длины более длинной
    (или до min_width, если он больше).

    Args:
        lhs: Левый операнд
        rhs: Правый операнд
        min_width: Минимальная рабочая ширина (optional)

    Returns:
        AlignedBitPair с равными длинами

    Examples:
        >>> pair = align_lengths(BitSequence.from_string("1"), BitSequence.from_string("100"))
        >>> pair.lhs.to_string()
        '001'
    """
    width = max(len(lhs), len(rhs))
    if min_width is not None:
        width = max(width, min_width)
    return AlignedBitPair(lhs.padded(width), rhs.padded(width))
