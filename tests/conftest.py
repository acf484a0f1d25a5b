import pytest

from household_projection.core.inputs import (
    AccountInputs,
    HouseholdIncome,
    HousingCosts,
    InvestmentInputs,
    MortgageInputs,
    ProjectionConfig,
)


@pytest.fixture
def example_config() -> ProjectionConfig:
    return ProjectionConfig(
        mortgage=MortgageInputs(principal=555_000, annual_rate_pct=6.825, term_years=30),
        housing=HousingCosts(property_tax_monthly=708, insurance_monthly=188, utilities_monthly=300),
        income=HouseholdIncome(husband_income_annual=150_000, wife_income_annual=100_000),
        investments=InvestmentInputs(
            account_a=AccountInputs(starting_balance=100_000, annual_return_pct=9.0),
            account_b=AccountInputs(starting_balance=287_280, annual_return_pct=12.0),
            taxable=False,
        ),
        horizon_months=360,
    )


@pytest.fixture
def deficit_config() -> ProjectionConfig:
    return ProjectionConfig(
        mortgage=MortgageInputs(principal=300_000, annual_rate_pct=5.0, term_years=30),
        housing=HousingCosts(property_tax_monthly=500),
        income=HouseholdIncome(husband_income_annual=12_000),
        investments=InvestmentInputs(
            account_a=AccountInputs(starting_balance=50_000, annual_return_pct=6.0),
            account_b=AccountInputs(starting_balance=25_000, annual_return_pct=4.0),
        ),
        horizon_months=120,
    )
