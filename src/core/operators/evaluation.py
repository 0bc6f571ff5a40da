"""
Request Evaluation — вычисление побитовых операций по JSON-контракту

Вход:  contracts/schema/bitwise_request.json
Выход: contracts/schema/bitwise_result.json

evaluate_payload валидирует вход и выход против JSON Schema, поэтому
результат можно без дополнительных проверок отдавать внешнему потребителю.
"""

from typing import Any, Dict, Optional

from src.core.contracts.validators import BitwiseRequestValidator, BitwiseResultValidator
from src.core.domain.bitwise_request import BitwiseRequest, BitwiseResult
from src.core.operators.bitwise import evaluate
from src.core.operators.dispatch import FastPathDispatcher


def evaluate_request(
    request: BitwiseRequest,
    dispatcher: Optional[FastPathDispatcher] = None,
) -> BitwiseResult:
    """
    Вычисление запроса.

    Args:
        request: Провалидированный запрос
        dispatcher: Диспетчер быстрого пути (default: DEFAULT_DISPATCHER)

    Returns:
        BitwiseResult с результатом и путём вычисления

    Raises:
        UnsupportedShiftCount: Если величина сдвига вне диапазона
    """
    result, path = evaluate(request.operator, request.lhs, request.rhs, dispatcher)
    return BitwiseResult(
        operator=request.operator,
        lhs=request.lhs,
        rhs=request.rhs,
        result=result,
        path=path,
    )


def evaluate_payload(
    payload: Dict[str, Any],
    dispatcher: Optional[FastPathDispatcher] = None,
) -> Dict[str, Any]:
    """
    Вычисление JSON-запроса.

    Args:
        payload: Данные по схеме bitwise_request
        dispatcher: Диспетчер быстрого пути (optional)

    Returns:
        Данные по схеме bitwise_result

    Raises:
        jsonschema.ValidationError: Если payload не соответствует схеме

    Examples:
        >>> evaluate_payload({"operator": "or", "lhs": "5", "rhs": "3"})["result"]
        '7'
    """
    BitwiseRequestValidator().validate(payload)

    request = BitwiseRequest.model_validate(payload)
    output = evaluate_request(request, dispatcher).to_payload()

    BitwiseResultValidator().validate(output)
    return output
