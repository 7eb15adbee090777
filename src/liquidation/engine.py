"""Liquidation Engine: план ликвидации для одной пары резервов

Объединяет формулы в один вызов:
1. Σ(CF_i * CV_i) по collateral резервам заёмщика
2. RV_repaid_asset для целевого HF из конфигурации
3. max_liquidable по выбранной паре (repaid debt / liquidated collateral)
4. Стоимость collateral, передаваемого ликвидатору

Выбор пары резервов не входит в задачи engine: вызывающий код передаёт
уже выбранную пару.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.contracts.validators import validate_liquidation_request
from src.core.domain.reserves import (
    CalcMaxLiquidableValueParams,
    CalcRepaidValueParams,
    LiquidationPlan,
    LiquidationRequest,
    RepaidReserve,
)
from src.core.math.fixed_point import SCALE, validate_percentage, validate_scale
from src.liquidation.formulas import (
    calc_max_liquidable_value,
    calc_repaid_value,
    calc_seized_collateral_value,
    sum_collaterals_weighted_by_collateral_factor,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Восстановление HF до 99%: позиция остаётся чуть ниже порога ликвидации
DEFAULT_TARGET_HF_PCT: Final[int] = 99


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LiquidationConfig:
    """Конфигурация LiquidationEngine.

    Неизменяема после создания; проверяется в __post_init__.
    """

    scale: int = SCALE
    target_hf_pct: int = DEFAULT_TARGET_HF_PCT

    def __post_init__(self) -> None:
        validate_scale(self.scale)
        validate_percentage(self.target_hf_pct, "target_hf_pct")


# =============================================================================
# ENGINE
# =============================================================================


class LiquidationEngine:
    """Расчёт плана ликвидации по LiquidationRequest."""

    def __init__(self, config: LiquidationConfig | None = None):
        """Инициализация engine.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or LiquidationConfig()

    def plan(self, request: LiquidationRequest) -> LiquidationPlan:
        """Построение плана ликвидации.

        Args:
            request: заёмщик и выбранная пара резервов

        Returns:
            LiquidationPlan с RV, max_liquidable и seized collateral

        Raises:
            DomainError: если любой вход вне domain
        """
        scale = self.config.scale
        liquidated = request.liquidated

        weighted_collaterals = sum_collaterals_weighted_by_collateral_factor(
            request.collaterals, scale=scale
        )

        repaid_value = calc_repaid_value(
            CalcRepaidValueParams(
                target_hf_pct=self.config.target_hf_pct,
                sum_of_debts=request.debts_total,
                sum_of_collaterals_weighted_by_collateral_factor=weighted_collaterals,
                liquidated_reserve=liquidated.as_liquidated_reserve(),
            ),
            scale=scale,
        )

        max_liquidable = calc_max_liquidable_value(
            CalcMaxLiquidableValueParams(
                repaid_reserve=RepaidReserve(
                    repaid_value=repaid_value,
                    debt_value=request.repaid_debt_value,
                ),
                liquidated_reserve=liquidated.as_liquidated_collateral(),
            ),
            scale=scale,
        )

        seized_collateral_value = calc_seized_collateral_value(
            max_liquidable.value,
            liquidated.liquidation_bonus_factor_pct,
            scale=scale,
        )

        logger.debug(
            "Liquidation plan: repaid_value=%s max_liquidable=%s (%s) seized=%s",
            repaid_value,
            max_liquidable.value,
            max_liquidable.reason.value,
            seized_collateral_value,
        )

        return LiquidationPlan(
            repaid_value=repaid_value,
            max_liquidable=max_liquidable,
            seized_collateral_value=seized_collateral_value,
        )

    def plan_from_payload(self, payload: dict) -> LiquidationPlan:
        """Построение плана из JSON-совместимого dict.

        Payload проверяется контрактом liquidation_request до разбора
        в LiquidationRequest.

        Raises:
            jsonschema.ValidationError: если payload нарушает контракт
            DomainError: если любой вход вне domain
        """
        validate_liquidation_request(payload)
        return self.plan(LiquidationRequest.model_validate(payload))
