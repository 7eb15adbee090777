"""
Liquidation formulas and engine.

calc_repaid_value → calc_max_liquidable_value → LiquidationPlan
"""

from src.liquidation.engine import (
    DEFAULT_TARGET_HF_PCT,
    LiquidationConfig,
    LiquidationEngine,
)
from src.liquidation.formulas import (
    calc_max_capturable_collateral,
    calc_max_liquidable_value,
    calc_repaid_value,
    calc_seized_collateral_value,
    sum_collaterals_weighted_by_collateral_factor,
)

__all__ = [
    # Formulas
    "calc_max_capturable_collateral",
    "calc_max_liquidable_value",
    "calc_repaid_value",
    "calc_seized_collateral_value",
    "sum_collaterals_weighted_by_collateral_factor",
    # Engine
    "DEFAULT_TARGET_HF_PCT",
    "LiquidationConfig",
    "LiquidationEngine",
]
