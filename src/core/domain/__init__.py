"""
Domain models and value objects.

Contains reserve snapshots, formula params and liquidation results.
"""

from src.core.domain.reserves import (
    CalcMaxLiquidableValueParams,
    CalcRepaidValueParams,
    CollateralPosition,
    LiquidatedCollateral,
    LiquidatedPosition,
    LiquidatedReserve,
    LiquidationPlan,
    LiquidationRequest,
    MaxLiquidableReason,
    MaxLiquidableResult,
    RepaidReserve,
)

__all__ = [
    # Reserve snapshots
    "CollateralPosition",
    "LiquidatedCollateral",
    "LiquidatedPosition",
    "LiquidatedReserve",
    "RepaidReserve",
    # Formula params
    "CalcMaxLiquidableValueParams",
    "CalcRepaidValueParams",
    "LiquidationRequest",
    # Results
    "LiquidationPlan",
    "MaxLiquidableReason",
    "MaxLiquidableResult",
]
