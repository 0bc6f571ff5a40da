"""
Core math modules

Беззнаковая десятичная арифметика и битовые последовательности.
Модули этого пакета не зависят от доменных моделей.
"""

# Decimal magnitudes
from src.core.math.decimal_digits import (
    MAGNITUDE_PATTERN,
    ONE_MAGNITUDE,
    TWO_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    double_magnitude,
    halve_magnitude,
    is_valid_magnitude,
    multiply_magnitudes,
    normalize_magnitude,
    power_magnitude,
    subtract_magnitudes,
    validate_magnitude,
)

# Bit sequences
from src.core.math.bit_sequence import (
    AlignedBitPair,
    BitSequence,
    BitSequenceLengthMismatch,
    align_lengths,
    binary_to_decimal,
    decimal_to_binary,
    twos_complement,
)

__all__ = [
    # Decimal magnitudes — Constants
    "MAGNITUDE_PATTERN",
    "ONE_MAGNITUDE",
    "TWO_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Decimal magnitudes — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "double_magnitude",
    "halve_magnitude",
    "is_valid_magnitude",
    "multiply_magnitudes",
    "normalize_magnitude",
    "power_magnitude",
    "subtract_magnitudes",
    "validate_magnitude",
    # Bit sequences — Types
    "AlignedBitPair",
    "BitSequence",
    # Bit sequences — Exceptions
    "BitSequenceLengthMismatch",
    # Bit sequences — Functions
    "align_lengths",
    "binary_to_decimal",
    "decimal_to_binary",
    "twos_complement",
]
