from __future__ import annotations

from .inputs import (
    AccountInputs,
    CashFlowEntry,
    HouseholdIncome,
    HousingCosts,
    InvestmentInputs,
    MortgageInputs,
    ProjectionConfig,
)


def default_extra_entries() -> tuple[CashFlowEntry, ...]:
    return (
        CashFlowEntry("Groceries", -600.0),
        CashFlowEntry("Random Bills", -500.0),
        CashFlowEntry("Shopping", -400.0),
        CashFlowEntry("Childcare", -900.0),
        CashFlowEntry("1099 consulting", 200.0),
    )


def default_investments() -> InvestmentInputs:
    return InvestmentInputs(
        account_a=AccountInputs(starting_balance=100_000, annual_return_pct=1.0),
        account_b=AccountInputs(starting_balance=287_280, annual_return_pct=3.0),
        taxable=True,
        capital_gains_tax_rate_pct=23.8,
    )


def base_config() -> ProjectionConfig:
    """Provide a reasonable starting point for a host UI."""
    mortgage_inputs = MortgageInputs(
        principal=555_000,
        annual_rate_pct=6.825,
        term_years=30,
        extra_payment_pct=0.0,
    )

    housing_costs = HousingCosts(
        property_tax_monthly=708,
        insurance_monthly=188,
        utilities_monthly=300,
    )

    household_income = HouseholdIncome(
        husband_income_annual=100_000,
        wife_income_annual=50_000,
    )

    return ProjectionConfig(
        mortgage=mortgage_inputs,
        housing=housing_costs,
        income=household_income,
        investments=default_investments(),
        extra_entries=default_extra_entries(),
        horizon_months=30 * 12,
    )
