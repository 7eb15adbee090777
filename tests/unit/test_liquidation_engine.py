"""
Тесты для LiquidationEngine

Проверяет:
1. Конфигурация: defaults, валидация, immutability
2. plan(): RV → max liquidable → seized collateral
3. plan_from_payload(): контракт liquidation_request до разбора
"""

import dataclasses

import pytest
from jsonschema import ValidationError

from src.core.domain import (
    CollateralPosition,
    LiquidatedPosition,
    LiquidationPlan,
    LiquidationRequest,
    MaxLiquidableReason,
)
from src.core.math import SCALE, DomainError
from src.liquidation import DEFAULT_TARGET_HF_PCT, LiquidationConfig, LiquidationEngine


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def collateral_bound_payload():
    """TON 3 USD / USDT 2.5 USD депозиты, долги 0.1 / 5 USD; ликвидируется TON."""
    return {
        "debts_total": 510_000_000,
        "collaterals": [
            {"collateral_value": 300_000_000, "collateral_factor_pct": 80},
            {"collateral_value": 250_000_000, "collateral_factor_pct": 85},
        ],
        "liquidated": {
            "collateral_value": 300_000_000,
            "collateral_factor_pct": 80,
            "liquidation_bonus_factor_pct": 6,
        },
        "repaid_debt_value": 500_000_000,
    }


@pytest.fixture
def debt_bound_request():
    """TON 5.4 USD / USDT 0.1 USD депозиты, долги 2.5 / 2.6 USD; гасится USDT."""
    return LiquidationRequest(
        debts_total=510_000_000,
        collaterals=(
            CollateralPosition(collateral_value=540_000_000, collateral_factor_pct=80),
            CollateralPosition(collateral_value=10_000_000, collateral_factor_pct=85),
        ),
        liquidated=LiquidatedPosition(
            collateral_value=540_000_000,
            collateral_factor_pct=80,
            liquidation_bonus_factor_pct=6,
        ),
        repaid_debt_value=260_000_000,
    )


# =============================================================================
# ТЕСТЫ: Config
# =============================================================================


class TestLiquidationConfig:
    def test_defaults(self):
        config = LiquidationConfig()
        assert config.scale == SCALE
        assert config.target_hf_pct == DEFAULT_TARGET_HF_PCT == 99

    def test_frozen(self):
        config = LiquidationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.target_hf_pct = 50  # type: ignore[misc]

    def test_target_hf_out_of_range_rejected(self):
        with pytest.raises(DomainError, match="target_hf_pct"):
            LiquidationConfig(target_hf_pct=100)

    def test_invalid_scale_rejected(self):
        with pytest.raises(DomainError, match="scale"):
            LiquidationConfig(scale=999)


# =============================================================================
# ТЕСТЫ: plan
# =============================================================================


class TestLiquidationEnginePlan:
    def test_debt_bound(self, debt_bound_request):
        plan = LiquidationEngine().plan(debt_bound_request)

        assert isinstance(plan, LiquidationPlan)
        assert plan.repaid_value == 453_521_126
        assert plan.max_liquidable.value == 260_000_000
        assert plan.max_liquidable.reason is MaxLiquidableReason.DEBT_VALUE
        # 2.6 * 1.06 = 2.756 USD
        assert plan.seized_collateral_value == 275_600_000

    def test_collateral_bound(self, collateral_bound_payload):
        request = LiquidationRequest.model_validate(collateral_bound_payload)
        plan = LiquidationEngine().plan(request)

        assert plan.repaid_value == 369_014_084
        assert plan.max_liquidable.value == 283_018_867
        assert plan.max_liquidable.reason is MaxLiquidableReason.COLLATERAL_VALUE
        assert plan.seized_collateral_value <= request.liquidated.collateral_value

    def test_custom_scale(self, debt_bound_request):
        engine = LiquidationEngine(LiquidationConfig(scale=10**18))
        plan = engine.plan(debt_bound_request)
        assert plan.repaid_value == 453_521_126
        assert plan.max_liquidable.value == 260_000_000

    def test_domain_error_propagates(self, debt_bound_request):
        request = debt_bound_request.model_copy(update={"debts_total": 0})
        with pytest.raises(DomainError, match="sum_of_debts"):
            LiquidationEngine().plan(request)


class TestLiquidationEnginePayload:
    def test_plan_from_payload(self, collateral_bound_payload):
        plan = LiquidationEngine().plan_from_payload(collateral_bound_payload)
        assert plan.max_liquidable.reason is MaxLiquidableReason.COLLATERAL_VALUE
        assert plan.seized_collateral_value == 299_999_999

    def test_payload_contract_violation(self, collateral_bound_payload):
        collateral_bound_payload["liquidated"]["liquidation_bonus_factor_pct"] = 100
        with pytest.raises(ValidationError):
            LiquidationEngine().plan_from_payload(collateral_bound_payload)

    def test_payload_missing_field(self, collateral_bound_payload):
        del collateral_bound_payload["repaid_debt_value"]
        with pytest.raises(ValidationError, match="repaid_debt_value"):
            LiquidationEngine().plan_from_payload(collateral_bound_payload)
