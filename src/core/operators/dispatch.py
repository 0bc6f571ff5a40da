"""
Fast Path Dispatcher — нативные побитовые операции для малых операндов

Если все операнды помещаются в знаковое целое шириной native_bits
(по умолчанию 64 бита), операция делегируется нативным операторам int,
минуя конвейер битовых последовательностей.

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Результат быстрого пути побитово совпадает с результатом пути через
BitSequence для любых операндов в нативном диапазоне
(проверяется в tests/unit/test_fast_path_dispatch.py).
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Final, Optional

from src.core.domain.big_integer import BigInteger
from src.core.domain.bitwise_request import BitwiseOperator

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NATIVE_BITS_DEFAULT: Final[int] = 64
NATIVE_BITS_MIN: Final[int] = 2
NATIVE_BITS_MAX: Final[int] = 64

_BINARY_NATIVE_OPS: Final[dict[BitwiseOperator, Callable[[int, int], int]]] = {
    BitwiseOperator.OR: operator.or_,
    BitwiseOperator.AND: operator.and_,
    BitwiseOperator.XOR: operator.xor,
    BitwiseOperator.SHIFT_LEFT: operator.lshift,
    BitwiseOperator.SHIFT_RIGHT: operator.rshift,
}

_UNARY_NATIVE_OPS: Final[dict[BitwiseOperator, Callable[[int], int]]] = {
    BitwiseOperator.NOT: operator.invert,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FastPathConfig:
    """Конфигурация быстрого пути.

    enabled=False принудительно направляет все операции через BitSequence
    (используется для проверки эквивалентности путей).
    """

    enabled: bool = True
    native_bits: int = NATIVE_BITS_DEFAULT

    def __post_init__(self) -> None:
        if not NATIVE_BITS_MIN <= self.native_bits <= NATIVE_BITS_MAX:
            raise ValueError(
                f"native_bits must be in [{NATIVE_BITS_MIN}, {NATIVE_BITS_MAX}], "
                f"got {self.native_bits}"
            )

    @property
    def native_min(self) -> int:
        return -(1 << (self.native_bits - 1))

    @property
    def native_max(self) -> int:
        return (1 << (self.native_bits - 1)) - 1


# =============================================================================
# DISPATCHER
# =============================================================================


class FastPathDispatcher:
    """Выбор стратегии вычисления: нативный int или битовые последовательности.

    Stateless (кроме неизменяемой конфигурации): безопасно разделять один
    экземпляр между вызовами.
    """

    def __init__(self, config: Optional[FastPathConfig] = None):
        """
        Args:
            config: конфигурация быстрого пути (default: FastPathConfig())
        """
        self.config = config or FastPathConfig()
        self._native_min = BigInteger(self.config.native_min)
        self._native_max = BigInteger(self.config.native_max)

    def fits_native(self, value: BigInteger) -> bool:
        """Проверка, лежит ли значение в [native_min, native_max]."""
        return self._native_min <= value <= self._native_max

    def dispatch_binary(
        self,
        op: BitwiseOperator,
        lhs: BigInteger,
        rhs: BigInteger,
    ) -> Optional[BigInteger]:
        """
        Попытка вычислить бинарную операцию нативно.

        Args:
            op: Бинарный оператор (OR/AND/XOR/SHIFT_LEFT/SHIFT_RIGHT)
            lhs: Левый операнд
            rhs: Правый операнд

        Returns:
            Результат как BigInteger или None (промах: нужен путь через BitSequence)

        Raises:
            ValueError: Если op не является бинарным оператором
        """
        native_op = _BINARY_NATIVE_OPS.get(op)
        if native_op is None:
            raise ValueError(f"operator '{op.value}' is not a binary operator")

        if not self.config.enabled:
            return None

        if not (self.fits_native(lhs) and self.fits_native(rhs)):
            logger.debug(
                "fast path miss: op=%s lhs_digits=%d rhs_digits=%d",
                op.value,
                len(lhs.magnitude),
                len(rhs.magnitude),
            )
            return None

        return BigInteger(native_op(lhs.to_int64(), rhs.to_int64()))

    def dispatch_unary(self, op: BitwiseOperator, value: BigInteger) -> Optional[BigInteger]:
        """
        Попытка вычислить унарную операцию нативно.

        Returns:
            Результат как BigInteger или None (промах)

        Raises:
            ValueError: Если op не является унарным оператором
        """
        native_op = _UNARY_NATIVE_OPS.get(op)
        if native_op is None:
            raise ValueError(f"operator '{op.value}' is not a unary operator")

        if not self.config.enabled:
            return None

        if not self.fits_native(value):
            logger.debug("fast path miss: op=%s digits=%d", op.value, len(value.magnitude))
            return None

        return BigInteger(native_op(value.to_int64()))


# Глобальный экземпляр с конфигурацией по умолчанию
DEFAULT_DISPATCHER: Final[FastPathDispatcher] = FastPathDispatcher()
