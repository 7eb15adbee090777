"""
Domain errors для fixed-point и liquidation математики

Единственный тип ошибки: DomainError. Он параметризован:
- field: имя нарушенного параметра (всегда присутствует в сообщении)
- violation: какое именно предусловие нарушено (DomainViolation)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все проверки выполняются ДО любой арифметики
2. Никакого clamping или подстановки default значений
3. Ошибки не перехватываются внутри модулей и доходят до вызывающего кода
"""

from enum import Enum


class DomainViolation(str, Enum):
    """Вид нарушенного предусловия."""

    NOT_AN_INTEGER = "not_an_integer"
    OUT_OF_RANGE_PERCENTAGE = "out_of_range_percentage"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    NEGATIVE_AMOUNT = "negative_amount"
    INVALID_DIVISOR = "invalid_divisor"
    EMPTY_SEQUENCE = "empty_sequence"
    INVALID_SCALE = "invalid_scale"
    DEGENERATE_DENOMINATOR = "degenerate_denominator"


class DomainError(ValueError):
    """
    Нарушение domain входных параметров.

    Наследуется от ValueError, чтобы вызывающий код, уже обрабатывающий
    ValueError (как модули core.math), продолжал работать без изменений.

    Attributes:
        field: Имя параметра, нарушившего предусловие
        violation: Вид нарушения
    """

    def __init__(self, field: str, violation: DomainViolation, message: str):
        self.field = field
        self.violation = violation
        super().__init__(f"{field}: {message} ({violation.value})")
