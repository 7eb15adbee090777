"""
Core math modules

Fixed-point примитивы над целыми произвольной точности.
"""

from src.core.math.errors import DomainError, DomainViolation
from src.core.math.fixed_point import (
    PERCENT_BASE,
    SCALE,
    div_toward_zero,
    min_of,
    percentage_to_fraction,
    require_int,
    scaled_div,
    scaled_mul,
    validate_non_negative_amount,
    validate_percentage,
    validate_positive_amount,
    validate_scale,
)

__all__ = [
    # Errors
    "DomainError",
    "DomainViolation",
    # Constants
    "PERCENT_BASE",
    "SCALE",
    # Arithmetic
    "div_toward_zero",
    "min_of",
    "percentage_to_fraction",
    "scaled_div",
    "scaled_mul",
    # Validation
    "require_int",
    "validate_non_negative_amount",
    "validate_percentage",
    "validate_positive_amount",
    "validate_scale",
]
