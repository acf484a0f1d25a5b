from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Tuple


def new_entry_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class MortgageInputs:
    principal: float
    annual_rate_pct: float  # whole-number percent, 6.825 means 6.825%
    term_years: int
    extra_payment_pct: float = 0.0  # share of the fixed payment paid on top of it

    @property
    def term_months(self) -> int:
        return self.term_years * 12

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_pct / 100.0 / 12.0


@dataclass(frozen=True)
class HousingCosts:
    property_tax_monthly: float = 0.0
    insurance_monthly: float = 0.0
    utilities_monthly: float = 0.0


@dataclass(frozen=True)
class HouseholdIncome:
    husband_income_annual: float = 0.0  # post-tax
    wife_income_annual: float = 0.0  # post-tax


@dataclass(frozen=True)
class AccountInputs:
    starting_balance: float = 0.0
    annual_return_pct: float = 0.0


@dataclass(frozen=True)
class InvestmentInputs:
    account_a: AccountInputs = field(default_factory=AccountInputs)
    account_b: AccountInputs = field(default_factory=AccountInputs)
    taxable: bool = False
    capital_gains_tax_rate_pct: float = 0.0  # percent, only used when taxable


@dataclass(frozen=True)
class CashFlowEntry:
    """Flat monthly credit (positive) or debit (negative) with a stable id."""

    description: str
    amount_monthly: float
    entry_id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class ProjectionConfig:
    mortgage: MortgageInputs
    housing: HousingCosts = field(default_factory=HousingCosts)
    income: HouseholdIncome = field(default_factory=HouseholdIncome)
    investments: InvestmentInputs = field(default_factory=InvestmentInputs)
    extra_entries: Tuple[CashFlowEntry, ...] = ()
    horizon_months: int = 360

    def __post_init__(self) -> None:
        # stored as a tuple so the config stays hashable
        object.__setattr__(self, "extra_entries", tuple(self.extra_entries))
