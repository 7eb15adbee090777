"""
Contract Validation Module

Модуль для валидации JSON контрактов входов и результатов ликвидации.
"""

from .validators import (
    ContractValidator,
    LiquidationRequestValidator,
    MaxLiquidableResultValidator,
    SchemaLoader,
    validate_liquidation_request,
    validate_max_liquidable_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LiquidationRequestValidator",
    "MaxLiquidableResultValidator",
    # Functions
    "validate_liquidation_request",
    "validate_max_liquidable_result",
]
