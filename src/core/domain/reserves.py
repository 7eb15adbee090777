"""
Reserves: Модели резервов и результатов ликвидации

Immutable Pydantic модели (value types). Все денежные поля в native-USD
scale (целые), все проценты целые.

Pydantic проверяет только структуру и типы (StrictInt: без коэрции
float/str, bool отвергается). Диапазоны проверяются формулами ликвидации
и приводят к DomainError.
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictBool, StrictInt


# =============================================================================
# ENUMS
# =============================================================================


class MaxLiquidableReason(str, Enum):
    """
    Какая из трёх границ ограничила ликвидируемую стоимость.

    Порядок объявления совпадает с приоритетом tie-break.
    """

    REPAID_VALUE = "RepaidValue"
    DEBT_VALUE = "DebtValue"
    COLLATERAL_VALUE = "CollateralValue"


# =============================================================================
# RESERVE SNAPSHOTS
# =============================================================================


class LiquidatedReserve(BaseModel):
    """Параметры ликвидируемого collateral резерва для calc_repaid_value."""

    collateral_factor_pct: StrictInt = Field(
        ..., description="Collateral factor, 0 <= pct < 100"
    )
    liquidation_bonus_factor_pct: StrictInt = Field(
        ..., description="Liquidation bonus, 0 <= pct < 100"
    )

    model_config = {"frozen": True}


class LiquidatedCollateral(BaseModel):
    """Ликвидируемый collateral резерв для calc_max_liquidable_value."""

    collateral_value: StrictInt = Field(
        ..., description="Стоимость collateral (native-USD scale)"
    )
    liquidation_bonus_factor_pct: StrictInt = Field(
        ..., description="Liquidation bonus, 0 <= pct < 100"
    )

    model_config = {"frozen": True}


class RepaidReserve(BaseModel):
    """Погашаемый debt резерв."""

    repaid_value: StrictInt = Field(
        ..., description="Результат calc_repaid_value (native-USD scale)"
    )
    debt_value: StrictInt = Field(
        ..., description="Непогашенный долг заёмщика в этом активе (native-USD scale)"
    )

    model_config = {"frozen": True}


class CollateralPosition(BaseModel):
    """Один collateral резерв заёмщика."""

    collateral_value: StrictInt = Field(
        ..., description="Стоимость депозита (native-USD scale)"
    )
    collateral_factor_pct: StrictInt = Field(
        ..., description="Collateral factor, 0 <= pct < 100"
    )

    model_config = {"frozen": True}


class LiquidatedPosition(BaseModel):
    """Выбранный для ликвидации collateral резерв со всеми параметрами."""

    collateral_value: StrictInt = Field(
        ..., description="Стоимость депозита (native-USD scale)"
    )
    collateral_factor_pct: StrictInt = Field(
        ..., description="Collateral factor, 0 <= pct < 100"
    )
    liquidation_bonus_factor_pct: StrictInt = Field(
        ..., description="Liquidation bonus, 0 <= pct < 100"
    )

    model_config = {"frozen": True}

    def as_liquidated_reserve(self) -> LiquidatedReserve:
        return LiquidatedReserve(
            collateral_factor_pct=self.collateral_factor_pct,
            liquidation_bonus_factor_pct=self.liquidation_bonus_factor_pct,
        )

    def as_liquidated_collateral(self) -> LiquidatedCollateral:
        return LiquidatedCollateral(
            collateral_value=self.collateral_value,
            liquidation_bonus_factor_pct=self.liquidation_bonus_factor_pct,
        )


# =============================================================================
# FORMULA PARAMS
# =============================================================================


class CalcRepaidValueParams(BaseModel):
    """
    Входы calc_repaid_value.

    allow_out_of_boundary_hf_for_test отключает проверку диапазона
    target_hf_pct. Используется ТОЛЬКО тестами для исследования
    численного поведения вне domain; production код его не выставляет.
    """

    target_hf_pct: StrictInt = Field(..., description="Целевой HF, 0 <= pct < 100")
    sum_of_debts: StrictInt = Field(
        ..., description="Сумма долгов без borrow factors (native-USD scale), > 0"
    )
    sum_of_collaterals_weighted_by_collateral_factor: StrictInt = Field(
        ...,
        description="Σ collateral_value_i * CF_i (native-USD scale), > 0",
    )
    liquidated_reserve: LiquidatedReserve
    allow_out_of_boundary_hf_for_test: StrictBool = False

    model_config = {"frozen": True}


class CalcMaxLiquidableValueParams(BaseModel):
    """Входы calc_max_liquidable_value."""

    repaid_reserve: RepaidReserve
    liquidated_reserve: LiquidatedCollateral

    model_config = {"frozen": True}


# =============================================================================
# RESULTS
# =============================================================================


class MaxLiquidableResult(BaseModel):
    """Максимальная ликвидируемая стоимость и ограничившая её граница."""

    value: StrictInt = Field(..., description="native-USD scale")
    reason: MaxLiquidableReason

    model_config = {"frozen": True}


class LiquidationRequest(BaseModel):
    """
    Полный вход LiquidationEngine для одной пары резервов.

    Соответствует контракту contracts/schema/liquidation_request.json.
    """

    debts_total: StrictInt = Field(
        ..., description="Сумма всех долгов заёмщика (native-USD scale)"
    )
    collaterals: tuple[CollateralPosition, ...] = Field(
        ..., min_length=1, description="Все collateral резервы заёмщика"
    )
    liquidated: LiquidatedPosition
    repaid_debt_value: StrictInt = Field(
        ..., description="Долг заёмщика в погашаемом активе (native-USD scale)"
    )

    model_config = {"frozen": True}


class LiquidationPlan(BaseModel):
    """Результат LiquidationEngine.plan."""

    repaid_value: StrictInt = Field(
        ..., description="Стоимость, восстанавливающая целевой HF"
    )
    max_liquidable: MaxLiquidableResult
    seized_collateral_value: StrictInt = Field(
        ..., description="Collateral, передаваемый ликвидатору (с бонусом)"
    )

    model_config = {"frozen": True}
