"""
Liquidation Formulas: Repaid Value & Max Liquidable Value

Чистые функции поверх fixed-point арифметики. Все USD входы и выходы
в native-USD scale; проценты целые.

ФОРМУЛЫ:
    RV_repaid_asset =
        (-HF_target * ΣDV + Σ(CF_i * CV_i)) / (CF_liquidated * (1 + LF_liquidated) - HF_target)

    max_liquidable =
        min(RV_repaid_asset, DV_repaid_asset, CV_liquidated / (1 + LF_liquidated))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все входы валидируются до любой арифметики (DomainError с именем поля)
2. Порядок операций фиксирован: debt * (-HF) через знаковое scaled_mul,
   затем + Σ(CF * CV)
3. Частное округляется к нулю
4. max_liquidable <= каждой из трёх границ; при равенстве приоритет
   RepaidValue → DebtValue → CollateralValue
"""

import logging
from collections.abc import Iterable

from src.core.domain.reserves import (
    CalcMaxLiquidableValueParams,
    CalcRepaidValueParams,
    CollateralPosition,
    MaxLiquidableReason,
    MaxLiquidableResult,
)
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

logger = logging.getLogger(__name__)


# =============================================================================
# REPAID VALUE
# =============================================================================


def calc_repaid_value(params: CalcRepaidValueParams, *, scale: int = SCALE) -> int:
    """
    Стоимость долга, погашение которой возвращает HF к target_hf_pct.

    Результат нужно затем передать в calc_max_liquidable_value: погасить
    весь RV может быть невозможно из-за ограничений долга или collateral.

    Args:
        params: Входы формулы
        scale: Масштаб fixed-point (default: SCALE)

    Returns:
        RV в native-USD scale (не умноженный на scale)

    Raises:
        DomainError: при нарушении domain любого входа, а также при
            вырожденном знаменателе (== 0) или отрицательном RV
            (числитель и знаменатель разных знаков)
    """
    reserve = params.liquidated_reserve

    if params.allow_out_of_boundary_hf_for_test:
        require_int(params.target_hf_pct, "target_hf_pct")
    else:
        validate_percentage(params.target_hf_pct, "target_hf_pct")
    validate_percentage(
        reserve.collateral_factor_pct, "liquidated_reserve.collateral_factor_pct"
    )
    validate_percentage(
        reserve.liquidation_bonus_factor_pct,
        "liquidated_reserve.liquidation_bonus_factor_pct",
    )
    validate_positive_amount(params.sum_of_debts, "sum_of_debts")
    validate_positive_amount(
        params.sum_of_collaterals_weighted_by_collateral_factor,
        "sum_of_collaterals_weighted_by_collateral_factor",
    )
    validate_scale(scale)

    if params.allow_out_of_boundary_hf_for_test:
        scaled_target_hf = div_toward_zero(params.target_hf_pct * scale, PERCENT_BASE)
    else:
        scaled_target_hf = percentage_to_fraction(params.target_hf_pct, scale=scale)
    scaled_collateral_factor = percentage_to_fraction(
        reserve.collateral_factor_pct, scale=scale
    )
    scaled_bonus_factor = percentage_to_fraction(
        reserve.liquidation_bonus_factor_pct, scale=scale
    )

    # unit: USD
    numerator = (
        scaled_mul(params.sum_of_debts, -scaled_target_hf, scale=scale)
        + params.sum_of_collaterals_weighted_by_collateral_factor
    )

    # unit: scale
    denominator = (
        scaled_mul(scaled_collateral_factor, scale + scaled_bonus_factor, scale=scale)
        - scaled_target_hf
    )

    logger.debug(
        "calc_repaid_value: numerator=%s denominator=%s scale=%s",
        numerator,
        denominator,
        scale,
    )

    if denominator == 0:
        raise DomainError(
            "denominator",
            DomainViolation.DEGENERATE_DENOMINATOR,
            "bonus-adjusted collateral factor equals target health factor",
        )

    if numerator != 0 and (numerator < 0) != (denominator < 0):
        raise DomainError(
            "denominator",
            DomainViolation.DEGENERATE_DENOMINATOR,
            f"repaid value would be negative (numerator={numerator}, "
            f"denominator={denominator})",
        )

    # Знаки совпадают: частное модулей == частное с округлением к нулю
    return scaled_div(abs(numerator), abs(denominator), scale=scale)


# =============================================================================
# MAX LIQUIDABLE VALUE
# =============================================================================


def calc_max_capturable_collateral(
    collateral_value: int, liquidation_bonus_factor_pct: int, *, scale: int = SCALE
) -> int:
    """
    CV / (1 + LF): максимальный долг, который покрывает collateral с бонусом.
    """
    validate_non_negative_amount(collateral_value, "collateral_value")
    validate_percentage(liquidation_bonus_factor_pct, "liquidation_bonus_factor_pct")

    return scaled_div(
        collateral_value,
        scale + percentage_to_fraction(liquidation_bonus_factor_pct, scale=scale),
        scale=scale,
    )


def calc_max_liquidable_value(
    params: CalcMaxLiquidableValueParams, *, scale: int = SCALE
) -> MaxLiquidableResult:
    """
    min(RV_repaid_asset, DV_repaid_asset, CV_liquidated / (1 + LF_liquidated))

    Иногда погасить весь RV невозможно: долг в погашаемом активе меньше RV
    или collateral не хватает на выплату бонуса. Возвращает стоимость и
    границу, которая оказалась минимальной.

    Raises:
        DomainError: если стоимость отрицательна или бонус вне [0, 100)
    """
    repaid = params.repaid_reserve
    liquidated = params.liquidated_reserve

    validate_non_negative_amount(repaid.repaid_value, "repaid_reserve.repaid_value")
    validate_non_negative_amount(repaid.debt_value, "repaid_reserve.debt_value")
    validate_non_negative_amount(
        liquidated.collateral_value, "liquidated_reserve.collateral_value"
    )
    validate_percentage(
        liquidated.liquidation_bonus_factor_pct,
        "liquidated_reserve.liquidation_bonus_factor_pct",
    )
    validate_scale(scale)

    max_capturable_collateral = calc_max_capturable_collateral(
        liquidated.collateral_value,
        liquidated.liquidation_bonus_factor_pct,
        scale=scale,
    )

    value = min_of(repaid.repaid_value, repaid.debt_value, max_capturable_collateral)

    if value == repaid.repaid_value:
        reason = MaxLiquidableReason.REPAID_VALUE
    elif value == repaid.debt_value:
        reason = MaxLiquidableReason.DEBT_VALUE
    else:
        reason = MaxLiquidableReason.COLLATERAL_VALUE

    logger.debug(
        "calc_max_liquidable_value: repaid=%s debt=%s capturable=%s -> %s (%s)",
        repaid.repaid_value,
        repaid.debt_value,
        max_capturable_collateral,
        value,
        reason.value,
    )

    return MaxLiquidableResult(value=value, reason=reason)


# =============================================================================
# HELPERS
# =============================================================================


def sum_collaterals_weighted_by_collateral_factor(
    collaterals: Iterable[CollateralPosition], *, scale: int = SCALE
) -> int:
    """
    Σ(CV_i * CF_i) по всем collateral резервам заёмщика.

    Каждое слагаемое округляется отдельно, как это делает протокол
    при агрегации по резервам.

    Raises:
        DomainError: EMPTY_SEQUENCE если резервов нет; NEGATIVE_AMOUNT /
            OUT_OF_RANGE_PERCENTAGE для отдельной позиции
    """
    positions = list(collaterals)
    if not positions:
        raise DomainError(
            "collaterals",
            DomainViolation.EMPTY_SEQUENCE,
            "at least one collateral position is required",
        )

    for index, position in enumerate(positions):
        validate_non_negative_amount(
            position.collateral_value, f"collaterals[{index}].collateral_value"
        )
        validate_percentage(
            position.collateral_factor_pct,
            f"collaterals[{index}].collateral_factor_pct",
        )

    return sum(
        scaled_mul(
            position.collateral_value,
            percentage_to_fraction(position.collateral_factor_pct, scale=scale),
            scale=scale,
        )
        for position in positions
    )


def calc_seized_collateral_value(
    liquidable_value: int, liquidation_bonus_factor_pct: int, *, scale: int = SCALE
) -> int:
    """
    Стоимость collateral, передаваемая ликвидатору: value * (1 + LF).

    Для value из calc_max_liquidable_value результат не превышает
    стоимость ликвидируемого collateral.
    """
    validate_non_negative_amount(liquidable_value, "liquidable_value")
    validate_percentage(liquidation_bonus_factor_pct, "liquidation_bonus_factor_pct")

    return scaled_mul(
        liquidable_value,
        scale + percentage_to_fraction(liquidation_bonus_factor_pct, scale=scale),
        scale=scale,
    )
