"""
Bitwise operators для BigInteger.

Быстрый путь через нативный int и путь произвольной точности через
битовые последовательности с эмуляцией дополнительного кода.
"""

from src.core.operators.dispatch import (
    DEFAULT_DISPATCHER,
    NATIVE_BITS_DEFAULT,
    FastPathConfig,
    FastPathDispatcher,
)
from src.core.operators.bitwise import (
    SIGN_GUARD_BITS,
    SIGN_POLICIES,
    SignPolicy,
    UnsupportedShiftCount,
    bitwise_and,
    bitwise_not,
    bitwise_or,
    bitwise_xor,
    combine_bits,
    encode_operands,
    evaluate,
    get_sign_policy,
    narrow_shift_count,
    shift_left,
    shift_right,
)

__all__ = [
    # Dispatch
    "DEFAULT_DISPATCHER",
    "NATIVE_BITS_DEFAULT",
    "FastPathConfig",
    "FastPathDispatcher",
    # Bitwise — Constants
    "SIGN_GUARD_BITS",
    "SIGN_POLICIES",
    # Bitwise — Types
    "SignPolicy",
    # Bitwise — Exceptions
    "UnsupportedShiftCount",
    # Bitwise — Functions
    "bitwise_and",
    "bitwise_not",
    "bitwise_or",
    "bitwise_xor",
    "combine_bits",
    "encode_operands",
    "evaluate",
    "get_sign_policy",
    "narrow_shift_count",
    "shift_left",
    "shift_right",
]
