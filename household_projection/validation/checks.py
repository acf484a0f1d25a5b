from __future__ import annotations

import numbers
from typing import Iterable

import numpy as np

from household_projection.core.inputs import (
    AccountInputs,
    CashFlowEntry,
    HouseholdIncome,
    HousingCosts,
    InvestmentInputs,
    MortgageInputs,
    ProjectionConfig,
)


class InvalidConfiguration(ValueError):
    """Config cannot produce a meaningful projection."""


class MalformedExtraEntry(InvalidConfiguration):
    """Recurring entry whose amount is not a finite number."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidConfiguration(message)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return bool(np.isfinite(value))


def _is_whole_number(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _require_amount(value: object, label: str) -> None:
    _require(_is_finite_number(value), f"{label} must be a finite number.")
    _require(value >= 0, f"{label} cannot be negative.")


def validate_mortgage(inputs: MortgageInputs) -> None:
    _require(_is_finite_number(inputs.principal), "Mortgage principal must be a finite number.")
    _require(inputs.principal > 0, "Mortgage principal must be positive.")
    _require_amount(inputs.annual_rate_pct, "Interest rate")
    _require(_is_whole_number(inputs.term_years), "Term must be a whole number of years.")
    _require(inputs.term_years > 0, "Term must be positive.")
    _require_amount(inputs.extra_payment_pct, "Extra payment percentage")


def validate_housing(inputs: HousingCosts) -> None:
    _require_amount(inputs.property_tax_monthly, "Property tax")
    _require_amount(inputs.insurance_monthly, "Insurance")
    _require_amount(inputs.utilities_monthly, "Utilities")


def validate_income(inputs: HouseholdIncome) -> None:
    _require_amount(inputs.husband_income_annual, "Husband income")
    _require_amount(inputs.wife_income_annual, "Wife income")


def validate_account(inputs: AccountInputs, label: str) -> None:
    _require_amount(inputs.starting_balance, f"{label} starting balance")
    _require(_is_finite_number(inputs.annual_return_pct), f"{label} return must be a finite number.")
    _require(inputs.annual_return_pct > -100, f"{label} return must be greater than -100%.")


def validate_investments(inputs: InvestmentInputs) -> None:
    validate_account(inputs.account_a, "Account A")
    validate_account(inputs.account_b, "Account B")
    _require(isinstance(inputs.taxable, bool), "Taxable flag must be a boolean.")
    _require(_is_finite_number(inputs.capital_gains_tax_rate_pct), "Capital gains rate must be a finite number.")
    _require(
        0 <= inputs.capital_gains_tax_rate_pct <= 100, "Capital gains rate must be between 0 and 100 percent."
    )


def validate_entries(entries: Iterable[CashFlowEntry]) -> None:
    for entry in entries:
        if not isinstance(entry.description, str):
            raise MalformedExtraEntry(f"Recurring entry description must be text, got {entry.description!r}.")
        if not _is_finite_number(entry.amount_monthly):
            raise MalformedExtraEntry(
                f"Recurring entry {entry.description!r} has a non-numeric amount: {entry.amount_monthly!r}."
            )


def validate_horizon(horizon_months: object) -> None:
    _require(_is_whole_number(horizon_months), "Simulation horizon must be a whole number of months.")
    _require(horizon_months > 0, "Simulation horizon must be positive.")


def validate_config(config: ProjectionConfig) -> None:
    validate_mortgage(config.mortgage)
    validate_housing(config.housing)
    validate_income(config.income)
    validate_investments(config.investments)
    validate_entries(config.extra_entries)
    validate_horizon(config.horizon_months)
