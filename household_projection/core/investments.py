from __future__ import annotations

from .inputs import AccountInputs, InvestmentInputs
from .taxes import after_tax_growth_rate


def monthly_return_rate(annual_return_pct: float) -> float:
    """Monthly rate that compounds to the annual percentage over twelve months."""
    return (1 + annual_return_pct / 100.0) ** (1 / 12) - 1


class InvestmentAccount:
    def __init__(self, account: AccountInputs, taxable: bool = False, capital_gains_tax_rate_pct: float = 0.0):
        self.balance = float(account.starting_balance)
        self.pre_tax_rate = monthly_return_rate(account.annual_return_pct)
        self.monthly_rate = after_tax_growth_rate(self.pre_tax_rate, taxable, capital_gains_tax_rate_pct)

    def step(self, contribution: float = 0.0) -> float:
        """Grow one month, then add the contribution. Returns the new balance."""
        self.balance = self.balance * (1 + self.monthly_rate) + contribution
        return self.balance


def open_accounts(investments: InvestmentInputs) -> tuple[InvestmentAccount, InvestmentAccount]:
    return (
        InvestmentAccount(investments.account_a, investments.taxable, investments.capital_gains_tax_rate_pct),
        InvestmentAccount(investments.account_b, investments.taxable, investments.capital_gains_tax_rate_pct),
    )
