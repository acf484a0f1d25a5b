from __future__ import annotations


def after_tax_growth_rate(monthly_rate: float, taxable: bool, capital_gains_tax_rate_pct: float) -> float:
    """Shrink a month's growth by the capital-gains rate when the account is taxable.

    The drag hits every month's growth as if gains were realized as earned. This
    approximates recurring taxation; it is not a lot-level tax model.
    """
    if not taxable:
        return monthly_rate
    tax_rate = max(0.0, min(capital_gains_tax_rate_pct / 100.0, 1.0))
    return monthly_rate * (1 - tax_rate)
