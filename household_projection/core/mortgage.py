from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from household_projection.validation.checks import InvalidConfiguration, validate_mortgage

from .inputs import MortgageInputs

logger = logging.getLogger(__name__)

# Principal shortfalls below this are float residue from the annuity formula.
PAYOFF_TOLERANCE = 1e-6


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Fixed payment that retires ``principal`` over ``term_years`` at ``annual_rate_pct``."""
    monthly_rate = annual_rate_pct / 100.0 / 12.0
    term_months = term_years * 12
    if term_months <= 0:
        raise InvalidConfiguration("Term must be positive.")
    if monthly_rate == 0:
        logger.debug("Zero interest rate, using straight-line payment over %d months", term_months)
        return principal / term_months
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** -term_months)


@dataclass(frozen=True)
class MortgageStep:
    payment: float
    interest: float
    principal: float
    remaining_balance: float


class MortgageAmortizer:
    """Steps a fixed-rate loan forward one month at a time."""

    def __init__(self, mortgage: MortgageInputs):
        self.monthly_rate = mortgage.monthly_rate
        self.fixed_payment = monthly_payment(mortgage.principal, mortgage.annual_rate_pct, mortgage.term_years)
        self.extra_payment = self.fixed_payment * mortgage.extra_payment_pct / 100.0
        self.remaining_balance = float(mortgage.principal)
        self.cumulative_interest = 0.0
        self.cumulative_principal = 0.0

    @property
    def scheduled_payment(self) -> float:
        return self.fixed_payment + self.extra_payment

    @property
    def paid_off(self) -> bool:
        return self.remaining_balance <= 0

    def step(self) -> MortgageStep:
        if self.paid_off:
            return MortgageStep(payment=0.0, interest=0.0, principal=0.0, remaining_balance=0.0)

        payment = self.scheduled_payment
        interest = self.remaining_balance * self.monthly_rate
        principal_paid = payment - interest
        if principal_paid > self.remaining_balance - PAYOFF_TOLERANCE:
            # final partial payment
            principal_paid = self.remaining_balance
            payment = interest + principal_paid

        self.remaining_balance -= principal_paid
        self.cumulative_interest += interest
        self.cumulative_principal += principal_paid

        return MortgageStep(
            payment=payment,
            interest=interest,
            principal=principal_paid,
            remaining_balance=self.remaining_balance,
        )


def amortization_schedule(mortgage: MortgageInputs) -> pd.DataFrame:
    """Schedule from the first payment through payoff or the end of the term, indexed by month."""
    validate_mortgage(mortgage)
    amortizer = MortgageAmortizer(mortgage)
    records = []
    for month in range(1, mortgage.term_months + 1):
        if amortizer.paid_off:
            break
        step = amortizer.step()
        records.append(
            {
                "month": month,
                "payment": step.payment,
                "interest": step.interest,
                "principal": step.principal,
                "ending_balance": step.remaining_balance,
                "cumulative_interest": amortizer.cumulative_interest,
                "cumulative_principal": amortizer.cumulative_principal,
            }
        )

    return pd.DataFrame.from_records(records).set_index("month")


def payoff_month(mortgage: MortgageInputs) -> Optional[int]:
    """Month in which the balance first reaches zero, None if the term ends first."""
    schedule = amortization_schedule(mortgage)
    if schedule["ending_balance"].iloc[-1] > 0:
        return None
    return int(schedule.index[-1])
