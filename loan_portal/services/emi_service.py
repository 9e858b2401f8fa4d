import math


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual nominal rate in percent (12 means 12%) to a monthly fraction."""
    return annual_rate_percent / (12 * 100)


def calculate_emi(amount: float, tenure_months: float, annual_rate_percent: float) -> str:
    """Equated monthly installment for a loan, rounded to two decimals.

    EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)

    The formula is evaluated as written: a zero rate or a zero tenure makes
    the denominator zero and raises ``ZeroDivisionError``, and magnitudes
    outside float range raise ``OverflowError``. A negative growth base with
    a fractional tenure, or any other non-finite result, raises ``ValueError``.
    Callers decide how to report each.
    """
    r = monthly_rate(annual_rate_percent)
    growth = math.pow(1 + r, tenure_months)
    emi = amount * r * growth / (growth - 1)
    if not math.isfinite(emi):
        raise ValueError(f"EMI is not a finite number: {emi}")
    return f"{emi:.2f}"
