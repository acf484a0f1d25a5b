from __future__ import annotations

from typing import Iterable

from .inputs import CashFlowEntry, HouseholdIncome, HousingCosts


def base_monthly_income(income: HouseholdIncome) -> float:
    """Combined post-tax salaries spread evenly over the year."""
    return (income.husband_income_annual + income.wife_income_annual) / 12.0


def extra_cash_flow_total(entries: Iterable[CashFlowEntry]) -> float:
    """Net of the recurring monthly credits and debits."""
    return sum((entry.amount_monthly for entry in entries), 0.0)


def non_mortgage_housing_cost(housing: HousingCosts) -> float:
    """Property tax, insurance, utilities combined."""
    return housing.property_tax_monthly + housing.insurance_monthly + housing.utilities_monthly


def monthly_housing_cost(non_mortgage_cost: float, mortgage_payment: float) -> float:
    # mortgage_payment is 0.0 once the loan is retired
    return non_mortgage_cost + mortgage_payment


def net_monthly_cash_flow(base_income: float, extra_total: float, housing_cost: float) -> float:
    return base_income + extra_total - housing_cost


def surplus_contributions(net_cash_flow: float) -> tuple[float, float]:
    """Split a surplus evenly across both accounts. Deficits contribute nothing."""
    if net_cash_flow > 0:
        half = net_cash_flow / 2
        return half, half
    return 0.0, 0.0
