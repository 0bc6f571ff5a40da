"""
Тесты для модели BigInteger

Проверяет:
1. Создание из int / строки / полей и валидацию Pydantic
2. Инварианты: канонический magnitude, ноль всегда положительный
3. Immutability (frozen=True)
4. Сравнение и hash, согласованные с int
5. Десятичную арифметику (floor-семантика деления)
6. Нативную конверсию (int, to_int64)
7. JSON сериализацию/десериализацию
"""

import pytest
from pydantic import ValidationError

from src.core.domain import INT64_MAX, INT64_MIN, BigInteger, Sign

SAMPLE_VALUES = [
    0,
    1,
    -1,
    7,
    -7,
    10,
    -10,
    12345,
    -99999,
    INT64_MAX,
    INT64_MIN,
    2**100,
    -(2**100),
    3**80 + 11,
]


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Тесты создания BigInteger"""

    def test_default_is_zero(self) -> None:
        value = BigInteger()
        assert value.sign is Sign.POSITIVE
        assert value.magnitude == "0"
        assert value.is_zero

    def test_from_int(self) -> None:
        assert BigInteger(42).magnitude == "42"
        assert BigInteger(42).sign is Sign.POSITIVE
        assert BigInteger(-42).magnitude == "42"
        assert BigInteger(-42).sign is Sign.NEGATIVE

    def test_from_huge_int(self) -> None:
        """Числа длиннее лимита str() конвертируются по частям"""
        value = 10**5000 + 123
        big = BigInteger(value)
        assert len(big.magnitude) == 5001
        assert big.magnitude.endswith("123")
        assert int(big) == value

    def test_from_string(self) -> None:
        assert str(BigInteger("123")) == "123"
        assert str(BigInteger("-123")) == "-123"
        assert str(BigInteger("+123")) == "123"
        assert str(BigInteger("  77  ")) == "77"

    def test_string_leading_zeros_normalized(self) -> None:
        assert BigInteger("000123").magnitude == "123"
        assert BigInteger("-000").magnitude == "0"

    def test_negative_zero_string_is_positive(self) -> None:
        """Инвариант: ноль всегда положительный"""
        assert BigInteger("-0").sign is Sign.POSITIVE
        assert BigInteger("-0") == BigInteger(0)

    def test_invalid_string_raises(self) -> None:
        for text in ["", "-", "+", "12a", "1.5", "--1", "0x10"]:
            with pytest.raises(ValueError, match="invalid decimal integer literal"):
                BigInteger(text)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="cannot build BigInteger"):
            BigInteger(1.5)  # type: ignore[arg-type]

    def test_copy_from_big_integer(self) -> None:
        original = BigInteger(-5)
        assert BigInteger(original) == original

    def test_positional_and_fields_conflict(self) -> None:
        with pytest.raises(TypeError, match="cannot be combined"):
            BigInteger(5, sign=Sign.NEGATIVE)  # type: ignore[call-arg]

    def test_keyword_fields(self) -> None:
        value = BigInteger(sign=Sign.NEGATIVE, magnitude="5")
        assert value == -5

    def test_keyword_fields_strict_magnitude(self) -> None:
        """Поля проверяются pattern-ом без нормализации"""
        with pytest.raises(ValidationError):
            BigInteger(sign=Sign.POSITIVE, magnitude="007")

        with pytest.raises(ValidationError):
            BigInteger(sign=Sign.POSITIVE, magnitude="-7")

    def test_negative_zero_fields_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zero must carry a positive sign"):
            BigInteger(sign=Sign.NEGATIVE, magnitude="0")

    def test_from_parts_normalizes_zero_sign(self) -> None:
        assert BigInteger.from_parts(True, "0").sign is Sign.POSITIVE
        assert BigInteger.from_parts(True, "5") == -5
        assert BigInteger.from_parts(False, "5") == 5

    def test_immutable(self) -> None:
        """frozen=True"""
        value = BigInteger(5)
        with pytest.raises(ValidationError):
            value.magnitude = "6"  # type: ignore[misc]


# =============================================================================
# COMPARISON
# =============================================================================


class TestComparison:
    """Тесты сравнения и hash"""

    def test_equality_with_int(self) -> None:
        assert BigInteger(5) == 5
        assert 5 == BigInteger(5)
        assert BigInteger(5) != 6
        assert BigInteger(-5) != 5

    def test_equality_with_unrelated_type(self) -> None:
        assert BigInteger(5) != "5"
        assert BigInteger(5) != None  # noqa: E711

    def test_ordering_matches_native(self) -> None:
        for a in SAMPLE_VALUES:
            for b in SAMPLE_VALUES:
                big_a, big_b = BigInteger(a), BigInteger(b)
                assert (big_a < big_b) == (a < b)
                assert (big_a <= big_b) == (a <= b)
                assert (big_a > big_b) == (a > b)
                assert (big_a >= big_b) == (a >= b)
                assert (big_a == big_b) == (a == b)
                assert big_a.compare(big_b) == (a > b) - (a < b)

    def test_ordering_with_int(self) -> None:
        assert BigInteger(-3) < 2
        assert BigInteger(2**70) > INT64_MAX
        assert 3 > BigInteger(-3)

    def test_hash_consistent_with_int(self) -> None:
        assert hash(BigInteger(12345)) == hash(12345)
        assert hash(BigInteger(-(2**100))) == hash(-(2**100))
        assert len({BigInteger(1), BigInteger(1), BigInteger("1")}) == 1

    def test_bool(self) -> None:
        assert not BigInteger(0)
        assert BigInteger(-1)


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Тесты десятичной арифметики против int"""

    def test_negation_and_abs(self) -> None:
        assert -BigInteger(5) == -5
        assert -BigInteger(-5) == 5
        assert -BigInteger(0) == 0
        assert (-BigInteger(0)).sign is Sign.POSITIVE
        assert abs(BigInteger(-5)) == 5

    def test_add_sub_mul_match_native(self) -> None:
        for a in SAMPLE_VALUES:
            for b in SAMPLE_VALUES:
                big_a, big_b = BigInteger(a), BigInteger(b)
                assert big_a + big_b == a + b
                assert big_a - big_b == a - b
                assert big_a * big_b == a * b

    def test_mixed_int_operands(self) -> None:
        assert BigInteger(5) + 3 == 8
        assert 3 + BigInteger(5) == 8
        assert 3 - BigInteger(5) == -2
        assert 3 * BigInteger(-5) == -15

    def test_floor_division_matches_native(self) -> None:
        """// и % с floor-семантикой, как у int"""
        divisors = [b for b in SAMPLE_VALUES if b != 0]
        for a in SAMPLE_VALUES:
            for b in divisors:
                big_a, big_b = BigInteger(a), BigInteger(b)
                assert big_a // big_b == a // b, (a, b)
                assert big_a % big_b == a % b, (a, b)
                assert divmod(big_a, big_b) == (a // b, a % b)

    def test_floor_division_small_cases(self) -> None:
        assert BigInteger(-7) // 2 == -4
        assert BigInteger(-7) % 2 == 1
        assert BigInteger(7) // -2 == -4
        assert BigInteger(7) % -2 == -1
        assert BigInteger(-7) // -2 == 3
        assert BigInteger(-7) % -2 == -1
        assert 7 // BigInteger(2) == 3

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            BigInteger(5) // 0

        with pytest.raises(ZeroDivisionError):
            BigInteger(5) % BigInteger(0)

    def test_power(self) -> None:
        assert BigInteger(2) ** 100 == 2**100
        assert BigInteger(-3) ** 3 == -27
        assert BigInteger(-3) ** 4 == 81
        assert BigInteger(0) ** 0 == 1
        assert BigInteger(2) ** BigInteger(10) == 1024

    def test_negative_power_raises(self) -> None:
        with pytest.raises(ValueError, match="exponent must be non-negative"):
            BigInteger(2) ** -1

    def test_operands_not_mutated(self) -> None:
        a = BigInteger(-12)
        b = BigInteger(5)
        _ = a + b
        _ = a * b
        _ = a // b
        assert a == -12
        assert b == 5


# =============================================================================
# NATIVE CONVERSION
# =============================================================================


class TestNativeConversion:
    """Тесты int() / to_int64() / bit_length()"""

    def test_int_roundtrip(self) -> None:
        for value in SAMPLE_VALUES:
            assert int(BigInteger(value)) == value

    def test_to_int64_in_range(self) -> None:
        assert BigInteger(INT64_MAX).to_int64() == INT64_MAX
        assert BigInteger(INT64_MIN).to_int64() == INT64_MIN
        assert BigInteger(-1).to_int64() == -1

    def test_to_int64_out_of_range(self) -> None:
        with pytest.raises(OverflowError, match="signed 64-bit"):
            BigInteger(INT64_MAX + 1).to_int64()

        with pytest.raises(OverflowError, match="signed 64-bit"):
            BigInteger(INT64_MIN - 1).to_int64()

    def test_bit_length_matches_native(self) -> None:
        for value in SAMPLE_VALUES:
            assert BigInteger(value).bit_length() == value.bit_length()


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Тесты JSON сериализации"""

    def test_str_and_repr(self) -> None:
        assert str(BigInteger(-42)) == "-42"
        assert repr(BigInteger(-42)) == "BigInteger('-42')"

    def test_model_dump(self) -> None:
        assert BigInteger(-42).model_dump(mode="json") == {"sign": "-", "magnitude": "42"}

    def test_json_roundtrip(self) -> None:
        original = BigInteger(-(2**100))
        restored = BigInteger.model_validate_json(original.model_dump_json())
        assert restored == original
