"""
Тесты для модуля Bit Sequences

Проверяет:
1. BitSequence: порядок бит, padding, инверсию
2. decimal_to_binary / binary_to_decimal и их обратимость
3. twos_complement: фиксированная ширина, двойное применение
4. align_lengths / AlignedBitPair: инвариант равных длин
"""

import pytest

from src.core.math.bit_sequence import (
    AlignedBitPair,
    BitSequence,
    BitSequenceLengthMismatch,
    align_lengths,
    binary_to_decimal,
    decimal_to_binary,
    twos_complement,
)


# =============================================================================
# BIT SEQUENCE
# =============================================================================


class TestBitSequence:
    """Тесты для BitSequence"""

    def test_little_endian_order(self) -> None:
        """Индекс 0 — младший бит"""
        seq = BitSequence.from_string("110")
        assert seq.bits == (False, True, True)
        assert seq[0] is False
        assert seq[2] is True
        assert seq.to_string() == "110"

    def test_out_of_range_access_fails(self) -> None:
        """Доступ за пределами длины падает, а не возвращает 0"""
        seq = BitSequence.from_string("1")
        with pytest.raises(IndexError):
            seq[1]

    def test_from_string_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="only '0' and '1'"):
            BitSequence.from_string("102")

    def test_padded(self) -> None:
        """Padding добавляет старшие нули"""
        seq = BitSequence.from_string("101").padded(6)
        assert seq.to_string() == "000101"
        assert len(seq) == 6

    def test_padded_never_truncates(self) -> None:
        with pytest.raises(ValueError, match="cannot pad"):
            BitSequence.from_string("101").padded(2)

    def test_inverted(self) -> None:
        assert BitSequence.from_string("1010").inverted().to_string() == "0101"

    def test_is_zero(self) -> None:
        assert BitSequence().is_zero()
        assert BitSequence.from_string("000").is_zero()
        assert not BitSequence.from_string("010").is_zero()

    def test_immutable(self) -> None:
        """frozen dataclass"""
        seq = BitSequence.from_string("1")
        with pytest.raises(Exception):
            seq.bits = (False,)  # type: ignore[misc]


# =============================================================================
# DECIMAL ↔ BINARY
# =============================================================================


class TestDecimalBinaryConverter:
    """Тесты для decimal_to_binary / binary_to_decimal"""

    def test_zero_is_empty(self) -> None:
        """Ноль → пустая последовательность, и обратно"""
        assert len(decimal_to_binary("0")) == 0
        assert binary_to_decimal(BitSequence()) == "0"

    def test_small_values(self) -> None:
        assert decimal_to_binary("1").to_string() == "1"
        assert decimal_to_binary("6").to_string() == "110"
        assert decimal_to_binary("255").to_string() == "11111111"
        assert decimal_to_binary("256").to_string() == "100000000"

    def test_minimal_length(self) -> None:
        """Длина совпадает с int.bit_length"""
        for value in [1, 2, 3, 7, 8, 1023, 1024, 2**64 - 1, 2**64, 2**100]:
            assert len(decimal_to_binary(str(value))) == value.bit_length()

    def test_matches_native_binary(self) -> None:
        for value in [5, 12, 10, 2**63 - 1, 2**100 + 12345]:
            assert decimal_to_binary(str(value)).to_string() == format(value, "b")

    def test_roundtrip(self) -> None:
        """Инвариант: binary_to_decimal(decimal_to_binary(m)) == m"""
        for value in [0, 1, 2, 3, 10, 255, 256, 65535, 2**63, 2**100, 3**70, 10**40]:
            magnitude = str(value)
            assert binary_to_decimal(decimal_to_binary(magnitude)) == magnitude

    def test_padding_does_not_change_value(self) -> None:
        """Старшие нулевые биты не влияют на результат"""
        seq = decimal_to_binary("37").padded(20)
        assert binary_to_decimal(seq) == "37"

    def test_invalid_magnitude_rejected(self) -> None:
        with pytest.raises(ValueError):
            decimal_to_binary("-5")

        with pytest.raises(ValueError):
            decimal_to_binary("05")


# =============================================================================
# TWO'S COMPLEMENT
# =============================================================================


class TestTwosComplement:
    """Тесты для twos_complement"""

    def test_basic_negation(self) -> None:
        """5 в 4 битах → -5 = 1011"""
        assert twos_complement(BitSequence.from_string("0101")).to_string() == "1011"
        assert twos_complement(BitSequence.from_string("0001")).to_string() == "1111"

    def test_fixed_width_overflow_dropped(self) -> None:
        """Перенос за старший бит отбрасывается"""
        assert twos_complement(BitSequence.from_string("0000")).to_string() == "0000"
        assert twos_complement(BitSequence.from_string("1000")).to_string() == "1000"

    def test_length_preserved(self) -> None:
        for text in ["1", "10", "0110", "11111111", "100000000"]:
            seq = BitSequence.from_string(text)
            assert len(twos_complement(seq)) == len(seq)

    def test_empty_sequence(self) -> None:
        assert twos_complement(BitSequence()) == BitSequence()

    def test_double_application_identity(self) -> None:
        """Инвариант: двойное применение — тождество"""
        for value in range(0, 64):
            seq = decimal_to_binary(str(value)).padded(7)
            assert twos_complement(twos_complement(seq)) == seq

    def test_matches_native_encoding(self) -> None:
        """Результат равен 2^width - m по модулю 2^width"""
        width = 12
        for value in [1, 2, 3, 100, 2047]:
            seq = decimal_to_binary(str(value)).padded(width)
            expected = (-value) % (1 << width)
            assert binary_to_decimal(twos_complement(seq)) == str(expected)

    def test_input_not_mutated(self) -> None:
        seq = BitSequence.from_string("0110")
        twos_complement(seq)
        assert seq.to_string() == "0110"


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


class TestAlignLengths:
    """Тесты для align_lengths / AlignedBitPair"""

    def test_shorter_padded(self) -> None:
        pair = align_lengths(BitSequence.from_string("1"), BitSequence.from_string("100"))
        assert pair.lhs.to_string() == "001"
        assert pair.rhs.to_string() == "100"
        assert pair.width == 3

    def test_min_width(self) -> None:
        pair = align_lengths(
            BitSequence.from_string("1"), BitSequence.from_string("100"), min_width=5
        )
        assert pair.width == 5
        assert pair.lhs.to_string() == "00001"
        assert pair.rhs.to_string() == "00100"

    def test_min_width_smaller_than_longest_ignored(self) -> None:
        pair = align_lengths(
            BitSequence.from_string("1"), BitSequence.from_string("100"), min_width=1
        )
        assert pair.width == 3

    def test_both_empty(self) -> None:
        pair = align_lengths(BitSequence(), BitSequence())
        assert pair.width == 0

    def test_mismatch_is_defect(self) -> None:
        """Прямое создание пары разной длины — BitSequenceLengthMismatch"""
        with pytest.raises(BitSequenceLengthMismatch, match="must share a width"):
            AlignedBitPair(BitSequence.from_string("1"), BitSequence.from_string("10"))

    def test_map_revalidates(self) -> None:
        """map сохраняет ширину и проверяет её заново"""
        pair = align_lengths(BitSequence.from_string("01"), BitSequence.from_string("11"))
        mapped = pair.map(twos_complement, None)
        assert mapped.lhs.to_string() == "11"
        assert mapped.rhs.to_string() == "11"

        with pytest.raises(BitSequenceLengthMismatch):
            pair.map(lambda seq: seq.padded(5), None)
