"""Monthly compounding of a balance with a fixed contribution."""

from nestegg.constants import MONTHS_PER_YEAR


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage (7 -> 7%) into a monthly decimal rate."""
    if annual_rate_percent <= 0:
        return 0.0
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def compound_month(balance: float, rate: float, contribution: float) -> float:
    """Apply one month: interest accrues first, then the contribution is credited."""
    return balance * (1 + rate) + contribution


def future_value(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    total_months: int,
) -> float:
    """
    Balance after `total_months` of monthly compounding.

    A non-positive annual rate grows the balance linearly. The month-by-month
    loop is the reference definition; the trajectory generator reuses
    compound_month so both agree bit for bit.
    """
    months = max(0, int(total_months))
    if annual_rate_percent <= 0:
        return initial_balance + monthly_contribution * months

    rate = monthly_rate(annual_rate_percent)
    balance = float(initial_balance)
    for _ in range(months):
        balance = compound_month(balance, rate, monthly_contribution)
    return balance


def future_value_closed_form(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    total_months: int,
) -> float:
    """Annuity formula equivalent of future_value, O(1) in the month count."""
    months = max(0, int(total_months))
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return initial_balance + monthly_contribution * months

    growth = (1 + rate) ** months
    return initial_balance * growth + monthly_contribution * (growth - 1) / rate
