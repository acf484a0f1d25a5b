from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Any, Dict, Sequence, Tuple

import pandas as pd

from household_projection.validation.checks import validate_config

from .budget import non_mortgage_housing_cost
from .engine import MonthlySnapshot, run_projection
from .inputs import ProjectionConfig
from .mortgage import monthly_payment

logger = logging.getLogger(__name__)


@dataclass
class ProjectionResult:
    snapshots: Tuple[MonthlySnapshot, ...]
    path: pd.DataFrame
    summary: Dict[str, Any]


def simulate(config: ProjectionConfig) -> Tuple[MonthlySnapshot, ...]:
    """Validate ``config`` and project it month by month.

    Returns ``horizon_months + 1`` snapshots; month 0 is the starting position.
    Raises ``InvalidConfiguration`` before any month is computed.
    """
    validate_config(config)
    logger.debug("Projecting %d months for principal %.2f", config.horizon_months, config.mortgage.principal)
    snapshots = tuple(run_projection(config))
    logger.debug("Projection finished, final net worth %.2f", snapshots[-1].total_net_worth)
    return snapshots


@lru_cache(maxsize=32)
def simulate_cached(config: ProjectionConfig) -> Tuple[MonthlySnapshot, ...]:
    """``simulate`` memoized on the (hashable, frozen) config."""
    return simulate(config)


def snapshots_frame(snapshots: Sequence[MonthlySnapshot]) -> pd.DataFrame:
    return pd.DataFrame([asdict(snap) for snap in snapshots]).set_index("month")


def ownership_costs(config: ProjectionConfig) -> Dict[str, float]:
    """Monthly cost of owning the home while the loan is active."""
    mortgage = config.mortgage
    base_payment = monthly_payment(mortgage.principal, mortgage.annual_rate_pct, mortgage.term_years)
    extra_payment = base_payment * mortgage.extra_payment_pct / 100.0
    effective_payment = base_payment + extra_payment
    non_mortgage_cost = non_mortgage_housing_cost(config.housing)
    return {
        "base_payment": base_payment,
        "extra_payment": extra_payment,
        "effective_payment": effective_payment,
        "non_mortgage_cost": non_mortgage_cost,
        "total_owning_cost": effective_payment + non_mortgage_cost,
    }


def project(config: ProjectionConfig) -> ProjectionResult:
    snapshots = simulate_cached(config)
    path_df = snapshots_frame(snapshots)

    retired = path_df.loc[1:, "remaining_mortgage_balance"] <= 0
    paid_months = retired[retired].index
    final = snapshots[-1]

    summary: Dict[str, Any] = dict(ownership_costs(config))
    summary.update(
        {
            "payoff_month": int(paid_months[0]) if len(paid_months) else None,
            "total_interest_paid": final.cumulative_mortgage_interest,
            "final_cumulative_cash": final.cumulative_cash,
            "final_total_brokerage": final.total_brokerage,
            "final_net_worth": final.total_net_worth,
        }
    )

    return ProjectionResult(snapshots=snapshots, path=path_df, summary=summary)
