"""
Decimal Magnitudes — арифметика над десятичными строками цифр

Модуль реализует беззнаковую арифметику над magnitude, хранимым как
каноническая строка десятичных цифр (без ведущих нулей, ноль = "0").
Нативные целые нигде не используются как промежуточное хранилище:
все операции выполняются поразрядно.

Используется:
- BigInteger (src.core.domain.big_integer) для сложения, вычитания,
  умножения, деления и возведения в степень
- DecimalBinaryConverter (src.core.math.bit_sequence) через
  halve_magnitude / double_magnitude

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все входы и выходы в канонической форме (validate_magnitude)
2. subtract_magnitudes требует a >= b (magnitude не бывает отрицательным)
3. Деление на ноль → ZeroDivisionError
4. Все операции детерминированы
"""

import re
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO_MAGNITUDE: Final[str] = "0"
ONE_MAGNITUDE: Final[str] = "1"
TWO_MAGNITUDE: Final[str] = "2"

# Каноническая форма: "0" или цифры без ведущего нуля
MAGNITUDE_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

_MAGNITUDE_RE: Final[re.Pattern[str]] = re.compile(MAGNITUDE_PATTERN)
_DIGITS: Final[str] = "0123456789"


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_valid_magnitude(value: str) -> bool:
    """
    Проверка канонической формы magnitude.

    Args:
        value: Строка для проверки

    Returns:
        True если value — "0" или цифры без ведущих нулей

    Examples:
        >>> is_valid_magnitude("120")
        True
        >>> is_valid_magnitude("007")
        False
        >>> is_valid_magnitude("")
        False
    """
    return isinstance(value, str) and _MAGNITUDE_RE.fullmatch(value) is not None


def validate_magnitude(value: str, name: str = "magnitude") -> None:
    """
    Валидация канонической формы magnitude.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не является канонической строкой цифр
    """
    if not is_valid_magnitude(value):
        raise ValueError(f"{name} must be a canonical decimal digit string, got {value!r}")


def normalize_magnitude(digits: str) -> str:
    """
    Приведение строки цифр к канонической форме (удаление ведущих нулей).

    Args:
        digits: Непустая строка ASCII-цифр (ведущие нули допустимы)

    Returns:
        Каноническая строка ("0" для пустого результата)

    Raises:
        ValueError: Если строка пуста или содержит не-цифры
    """
    if not digits or any(ch not in _DIGITS for ch in digits):
        raise ValueError(f"digits must be a non-empty ASCII digit string, got {digits!r}")

    stripped = digits.lstrip("0")
    return stripped if stripped else ZERO_MAGNITUDE


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух канонических magnitude.

    Каноническая форма позволяет сравнивать сначала по длине,
    затем лексикографически.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare_magnitudes("99", "100")
        -1
        >>> compare_magnitudes("42", "42")
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Сложение столбиком от младшего разряда с переносом.

    Examples:
        >>> add_magnitudes("999", "1")
        '1000'
    """
    result: list[str] = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += ord(a[i]) - 48
            i -= 1
        if j >= 0:
            total += ord(b[j]) - 48
            j -= 1
        result.append(_DIGITS[total % 10])
        carry = total // 10

    return normalize_magnitude("".join(reversed(result)))


def subtract_magnitudes(a: str, b: str) -> str:
    """
    Вычитание столбиком с заёмом.

    Args:
        a: Уменьшаемое (должно быть >= b)
        b: Вычитаемое

    Returns:
        a - b в канонической форме

    Raises:
        ValueError: Если a < b (результат был бы отрицательным)

    Examples:
        >>> subtract_magnitudes("1000", "1")
        '999'
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError(f"cannot subtract larger magnitude {b} from {a}")

    result: list[str] = []
    borrow = 0
    j = len(b) - 1

    for i in range(len(a) - 1, -1, -1):
        digit = ord(a[i]) - 48 - borrow
        if j >= 0:
            digit -= ord(b[j]) - 48
            j -= 1
        if digit < 0:
            digit += 10
            borrow = 1
        else:
            borrow = 0
        result.append(_DIGITS[digit])

    return normalize_magnitude("".join(reversed(result)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: str, b: str) -> str:
    """
    Умножение столбиком (schoolbook, O(len(a) * len(b))).

    Examples:
        >>> multiply_magnitudes("12", "34")
        '408'
    """
    if a == ZERO_MAGNITUDE or b == ZERO_MAGNITUDE:
        return ZERO_MAGNITUDE

    # Разряды результата, младший разряд первым
    acc = [0] * (len(a) + len(b))
    a_digits = [ord(ch) - 48 for ch in reversed(a)]
    b_digits = [ord(ch) - 48 for ch in reversed(b)]

    for i, da in enumerate(a_digits):
        if da == 0:
            continue
        carry = 0
        for j, db in enumerate(b_digits):
            cur = acc[i + j] + da * db + carry
            acc[i + j] = cur % 10
            carry = cur // 10
        k = i + len(b_digits)
        while carry:
            cur = acc[k] + carry
            acc[k] = cur % 10
            carry = cur // 10
            k += 1

    return normalize_magnitude("".join(_DIGITS[d] for d in reversed(acc)))


def double_magnitude(a: str) -> str:
    """Удвоение magnitude (a * 2)."""
    return add_magnitudes(a, a)


def power_magnitude(base: str, exponent: int) -> str:
    """
    Возведение в неотрицательную степень (square-and-multiply).

    Args:
        base: Основание (magnitude)
        exponent: Показатель степени (нативный int >= 0)

    Returns:
        base ** exponent в канонической форме (0 ** 0 == 1)

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = ONE_MAGNITUDE
    square = base
    while exponent:
        if exponent & 1:
            result = multiply_magnitudes(result, square)
        exponent >>= 1
        if exponent:
            square = multiply_magnitudes(square, square)
    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def halve_magnitude(a: str) -> tuple[str, int]:
    """
    Деление на 2 с остатком за один проход от старшего разряда.

    Используется DecimalBinaryConverter для выделения младшего бита.

    Returns:
        (quotient, remainder_bit): частное и остаток (0 или 1)

    Examples:
        >>> halve_magnitude("13")
        ('6', 1)
        >>> halve_magnitude("0")
        ('0', 0)
    """
    quotient: list[str] = []
    remainder = 0
    for ch in a:
        cur = remainder * 10 + (ord(ch) - 48)
        quotient.append(_DIGITS[cur // 2])
        remainder = cur % 2
    return normalize_magnitude("".join(quotient)), remainder


def divmod_magnitudes(a: str, b: str) -> tuple[str, str]:
    """
    Деление столбиком: (a // b, a % b) для неотрицательных magnitude.

    Для каждого разряда делимого частичный остаток сравнивается с делителем
    не более 9 раз (одна цифра частного).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        (quotient, remainder) в канонической форме

    Raises:
        ZeroDivisionError: Если b == "0"

    Examples:
        >>> divmod_magnitudes("1000", "7")
        ('142', '6')
    """
    if b == ZERO_MAGNITUDE:
        raise ZeroDivisionError("magnitude division by zero")

    if compare_magnitudes(a, b) < 0:
        return ZERO_MAGNITUDE, a

    if b == ONE_MAGNITUDE:
        return a, ZERO_MAGNITUDE

    quotient: list[str] = []
    remainder = ZERO_MAGNITUDE

    for ch in a:
        remainder = normalize_magnitude(remainder + ch)
        q_digit = 0
        while compare_magnitudes(remainder, b) >= 0:
            remainder = subtract_magnitudes(remainder, b)
            q_digit += 1
        quotient.append(_DIGITS[q_digit])

    return normalize_magnitude("".join(quotient)), remainder
