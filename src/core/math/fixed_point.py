"""
Fixed-Point Arithmetic: Scaled Integer Primitives

Все денежные величины переносятся как целые числители над неявным
фиксированным знаменателем SCALE. Python int имеет произвольную точность,
поэтому произведения порядка 10^40+ не переполняются.

Модуль обеспечивает:
- Масштабированное умножение (signed) и деление (unsigned)
- Конверсию процентов в масштабированные доли
- Минимум последовательности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленное деление всегда округляет к нулю (truncation toward zero),
   поэтому scaled_mul(a, -b) == -scaled_mul(a, b)
2. Оба операнда сложения/вычитания должны иметь один и тот же scale
3. Умножение двух scaled значений делит на scale ровно один раз
4. float никогда не используется
"""

from typing import Final

from src.core.math.errors import DomainError, DomainViolation

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Масштаб fixed-point представления (scaled 1.0)
SCALE: Final[int] = 10**27

# База процентов: pct / 100
PERCENT_BASE: Final[int] = 100


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_int(value: object, name: str) -> int:
    """
    Проверка, что значение является int (bool не допускается).

    Raises:
        DomainError: NOT_AN_INTEGER
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise DomainError(
            name,
            DomainViolation.NOT_AN_INTEGER,
            f"must be an int, got {type(value).__name__}",
        )
    return value


def validate_scale(scale: int) -> int:
    """
    Проверка scale: int, степень десяти, не меньше PERCENT_BASE.

    Степень десяти >= 100 гарантирует, что percentage_to_fraction точен
    для любого целого процента.

    Raises:
        DomainError: INVALID_SCALE
    """
    require_int(scale, "scale")
    if scale < PERCENT_BASE:
        raise DomainError(
            "scale",
            DomainViolation.INVALID_SCALE,
            f"must be >= {PERCENT_BASE}, got {scale}",
        )

    remainder = scale
    while remainder % 10 == 0:
        remainder //= 10
    if remainder != 1:
        raise DomainError(
            "scale",
            DomainViolation.INVALID_SCALE,
            f"must be a power of ten, got {scale}",
        )
    return scale


def validate_non_negative_amount(value: int, name: str) -> int:
    """
    Raises:
        DomainError: NOT_AN_INTEGER, NEGATIVE_AMOUNT
    """
    require_int(value, name)
    if value < 0:
        raise DomainError(
            name, DomainViolation.NEGATIVE_AMOUNT, f"must be >= 0, got {value}"
        )
    return value


def validate_positive_amount(value: int, name: str) -> int:
    """
    Raises:
        DomainError: NOT_AN_INTEGER, NON_POSITIVE_AMOUNT
    """
    require_int(value, name)
    if value <= 0:
        raise DomainError(
            name, DomainViolation.NON_POSITIVE_AMOUNT, f"must be > 0, got {value}"
        )
    return value


def validate_percentage(value: int, name: str, inclusive_upper: bool = False) -> int:
    """
    Проверка процента: 0 <= value < 100 (или <= 100 при inclusive_upper).

    Raises:
        DomainError: NOT_AN_INTEGER, OUT_OF_RANGE_PERCENTAGE
    """
    require_int(value, name)
    upper_ok = value <= PERCENT_BASE if inclusive_upper else value < PERCENT_BASE
    if value < 0 or not upper_ok:
        bracket = "]" if inclusive_upper else ")"
        raise DomainError(
            name,
            DomainViolation.OUT_OF_RANGE_PERCENTAGE,
            f"must be in [0, {PERCENT_BASE}{bracket}, got {value}",
        )
    return value


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с округлением к нулю.

    Python `//` округляет к -inf; для отрицательных частных результат
    отличается на 1. Здесь знак применяется к частному модулей.

    Examples:
        >>> div_toward_zero(7, 2)
        3
        >>> div_toward_zero(-7, 2)
        -3
        >>> div_toward_zero(-7, -2)
        3
    """
    if denominator == 0:
        raise DomainError(
            "denominator", DomainViolation.INVALID_DIVISOR, "division by zero"
        )

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def scaled_mul(a: int, b_scaled: int, *, scale: int = SCALE) -> int:
    """
    Масштабированное умножение: (a * b_scaled) / scale.

    b_scaled трактуется как множитель, уже выраженный scaled долей.
    Знаковое: формулы ликвидации вызывают его с отрицательным множителем.

    Args:
        a: Произвольное целое (USD или scaled)
        b_scaled: Множитель в единицах scale
        scale: Масштаб (default: SCALE)

    Returns:
        Произведение в единицах a, округлённое к нулю

    Examples:
        >>> scaled_mul(540_000_000, percentage_to_fraction(80))
        432000000
        >>> scaled_mul(510_000_000, -percentage_to_fraction(99))
        -504900000
    """
    require_int(a, "a")
    require_int(b_scaled, "b_scaled")
    validate_scale(scale)

    return div_toward_zero(a * b_scaled, scale)


def scaled_div(a: int, b_scaled: int, *, scale: int = SCALE) -> int:
    """
    Масштабированное деление: (a * scale) / b_scaled.

    Args:
        a: Делимое (>= 0)
        b_scaled: Делитель в единицах scale (> 0)
        scale: Масштаб (default: SCALE)

    Returns:
        Частное в единицах a, округлённое к нулю

    Raises:
        DomainError: NEGATIVE_AMOUNT если a < 0, INVALID_DIVISOR если b_scaled <= 0

    Examples:
        >>> scaled_div(300_000_000, SCALE + percentage_to_fraction(6))
        283018867
    """
    validate_non_negative_amount(a, "a")
    require_int(b_scaled, "b_scaled")
    if b_scaled <= 0:
        raise DomainError(
            "b_scaled",
            DomainViolation.INVALID_DIVISOR,
            f"must be > 0, got {b_scaled}",
        )
    validate_scale(scale)

    return (a * scale) // b_scaled


def percentage_to_fraction(pct: int, *, scale: int = SCALE) -> int:
    """
    Конверсия процента в scaled долю: pct * scale / 100.

    Допускает pct == 100; формулы ликвидации ограничивают процент < 100
    на своей стороне.

    Raises:
        DomainError: OUT_OF_RANGE_PERCENTAGE если pct вне [0, 100]

    Examples:
        >>> percentage_to_fraction(99, scale=10**4)
        9900
    """
    validate_percentage(pct, "pct", inclusive_upper=True)
    validate_scale(scale)

    return (pct * scale) // PERCENT_BASE


def min_of(*values: int) -> int:
    """
    Минимум непустой последовательности целых.

    При равенстве возвращается первый минимальный элемент.

    Raises:
        DomainError: EMPTY_SEQUENCE если values пуст
    """
    if not values:
        raise DomainError(
            "values", DomainViolation.EMPTY_SEQUENCE, "at least one value is required"
        )

    result = values[0]
    for index, value in enumerate(values):
        require_int(value, f"values[{index}]")
        if value < result:
            result = value
    return result
