from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .budget import (
    base_monthly_income,
    extra_cash_flow_total,
    monthly_housing_cost,
    net_monthly_cash_flow,
    non_mortgage_housing_cost,
    surplus_contributions,
)
from .inputs import ProjectionConfig
from .investments import open_accounts
from .mortgage import MortgageAmortizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlySnapshot:
    month: int
    cumulative_w2_income: float
    cumulative_housing_cost: float
    net_monthly_cash_flow: float
    cumulative_cash: float
    account_a_balance: float
    account_b_balance: float
    total_brokerage: float
    total_net_worth: float
    remaining_mortgage_balance: float
    cumulative_mortgage_interest: float
    cumulative_mortgage_principal: float


def baseline_snapshot(config: ProjectionConfig) -> MonthlySnapshot:
    """Month 0: nothing has accrued, balances sit at their starting values."""
    account_a = float(config.investments.account_a.starting_balance)
    account_b = float(config.investments.account_b.starting_balance)
    total_brokerage = account_a + account_b
    return MonthlySnapshot(
        month=0,
        cumulative_w2_income=0.0,
        cumulative_housing_cost=0.0,
        net_monthly_cash_flow=0.0,
        cumulative_cash=0.0,
        account_a_balance=account_a,
        account_b_balance=account_b,
        total_brokerage=total_brokerage,
        total_net_worth=total_brokerage,
        remaining_mortgage_balance=float(config.mortgage.principal),
        cumulative_mortgage_interest=0.0,
        cumulative_mortgage_principal=0.0,
    )


def run_projection(config: ProjectionConfig) -> List[MonthlySnapshot]:
    """Single linear pass from the baseline through ``config.horizon_months``.

    Expects a validated config; use ``simulator.simulate`` as the entry point.
    """
    amortizer = MortgageAmortizer(config.mortgage)
    account_a, account_b = open_accounts(config.investments)

    base_income = base_monthly_income(config.income)
    extra_total = extra_cash_flow_total(config.extra_entries)
    non_mortgage_cost = non_mortgage_housing_cost(config.housing)

    cumulative_w2_income = 0.0
    cumulative_housing_cost = 0.0
    cumulative_cash = 0.0

    snapshots = [baseline_snapshot(config)]

    for month in range(1, config.horizon_months + 1):
        was_active = not amortizer.paid_off
        mortgage_step = amortizer.step()
        if was_active and amortizer.paid_off:
            logger.info("Mortgage paid off in month %d", month)

        housing_cost = monthly_housing_cost(non_mortgage_cost, mortgage_step.payment)
        net_cash_flow = net_monthly_cash_flow(base_income, extra_total, housing_cost)

        cumulative_w2_income += base_income
        cumulative_housing_cost += housing_cost
        cumulative_cash += net_cash_flow

        contribution_a, contribution_b = surplus_contributions(net_cash_flow)
        balance_a = account_a.step(contribution_a)
        balance_b = account_b.step(contribution_b)
        total_brokerage = balance_a + balance_b

        snapshots.append(
            MonthlySnapshot(
                month=month,
                cumulative_w2_income=cumulative_w2_income,
                cumulative_housing_cost=cumulative_housing_cost,
                net_monthly_cash_flow=net_cash_flow,
                cumulative_cash=cumulative_cash,
                account_a_balance=balance_a,
                account_b_balance=balance_b,
                total_brokerage=total_brokerage,
                total_net_worth=total_brokerage + cumulative_cash,
                remaining_mortgage_balance=max(mortgage_step.remaining_balance, 0.0),
                cumulative_mortgage_interest=amortizer.cumulative_interest,
                cumulative_mortgage_principal=amortizer.cumulative_principal,
            )
        )

    return snapshots
