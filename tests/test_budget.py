from household_projection.core.budget import (
    base_monthly_income,
    extra_cash_flow_total,
    monthly_housing_cost,
    net_monthly_cash_flow,
    non_mortgage_housing_cost,
    surplus_contributions,
)
from household_projection.core.inputs import CashFlowEntry, HouseholdIncome, HousingCosts


def test_base_income_is_combined_annual_income_over_twelve():
    income = HouseholdIncome(husband_income_annual=150_000, wife_income_annual=90_000)
    assert base_monthly_income(income) == 20_000.0


def test_extra_entries_sum_regardless_of_order():
    entries = [CashFlowEntry("Groceries", -600.0), CashFlowEntry("Consulting", 200.0), CashFlowEntry("Gym", -50.0)]
    assert extra_cash_flow_total(entries) == -450.0
    assert extra_cash_flow_total(reversed(entries)) == -450.0
    assert extra_cash_flow_total([]) == 0.0


def test_housing_cost_adds_mortgage_payment_to_fixed_costs():
    housing = HousingCosts(property_tax_monthly=708, insurance_monthly=188, utilities_monthly=300)
    non_mortgage = non_mortgage_housing_cost(housing)

    assert non_mortgage == 1196
    assert monthly_housing_cost(non_mortgage, 3500.0) == 4696.0
    assert monthly_housing_cost(non_mortgage, 0.0) == 1196


def test_net_cash_flow():
    assert net_monthly_cash_flow(10_000.0, -500.0, 4_000.0) == 5_500.0
    assert net_monthly_cash_flow(1_000.0, 0.0, 2_000.0) == -1_000.0


def test_surplus_is_split_evenly_and_deficits_contribute_nothing():
    assert surplus_contributions(1_000.0) == (500.0, 500.0)
    assert surplus_contributions(0.0) == (0.0, 0.0)
    assert surplus_contributions(-250.0) == (0.0, 0.0)
