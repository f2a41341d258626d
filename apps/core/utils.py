"""
Loan calculation helpers for the Luxury Estate backend.

All financial calculations use Python's Decimal for precision and
round final amounts to whole rupees.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, getcontext

from apps.core.currency import round_rupees

# Set high precision for intermediate financial calculations
getcontext().prec = 28

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class EMIResult:
    """Outcome of a single EMI calculation, in whole rupees."""

    emi: int
    total_interest: int
    principal: int = 0
    tenure_months: int = 0

    @property
    def total_payment(self) -> int:
        return self.principal + self.total_interest


def _as_decimal(name: str, value) -> Decimal:
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValueError(f"{name} must be a number.")
    if not number.is_finite():
        raise ValueError(f"{name} must be a finite number.")
    return number


def validate_loan_parameters(
    property_price,
    down_payment,
    tenure_years,
    annual_rate,
) -> tuple:
    """
    Coerce loan inputs to Decimal and reject values the formula can't use.

    Prices may be any finite amount (a down payment above the price is a
    valid zero-loan case). Tenure must be positive and the rate must
    not be negative.

    Returns:
        Tuple of (property_price, down_payment, tenure_years, annual_rate)
        as Decimals.

    Raises:
        ValueError: If an input is non-numeric, non-finite or out of range.
    """
    property_price = _as_decimal('Property price', property_price)
    down_payment = _as_decimal('Down payment', down_payment)
    tenure_years = _as_decimal('Tenure', tenure_years)
    annual_rate = _as_decimal('Interest rate', annual_rate)

    if tenure_years <= 0:
        raise ValueError("Tenure must be greater than 0 years.")
    if annual_rate < 0:
        raise ValueError("Interest rate cannot be negative.")

    return property_price, down_payment, tenure_years, annual_rate


def calculate_emi(
    property_price,
    down_payment,
    tenure_years,
    annual_rate,
) -> EMIResult:
    """
    Calculate the monthly EMI for a home loan.

    EMI = P × r × (1+r)^n / ((1+r)^n - 1)

    Where:
        P = property_price - down_payment
        r = monthly interest rate (annual_rate / 100 / 12)
        n = tenure in months (tenure_years × 12)

    Args:
        property_price: Price of the property in rupees.
        down_payment: Amount paid upfront in rupees.
        tenure_years: Repayment period in years (must be > 0).
        annual_rate: Annual interest rate as percentage (e.g., 8.5 for 8.5%).

    Returns:
        EMIResult with emi and total_interest rounded to whole rupees.
        Both are 0 when the down payment covers the price.

    Raises:
        ValueError: If inputs are invalid.
    """
    property_price, down_payment, tenure_years, annual_rate = (
        validate_loan_parameters(
            property_price, down_payment, tenure_years, annual_rate,
        )
    )

    principal = property_price - down_payment
    months = tenure_years * MONTHS_PER_YEAR

    # No loan needed
    if principal <= 0:
        return EMIResult(emi=0, total_interest=0, principal=0,
                         tenure_months=round_rupees(months))

    monthly_rate = annual_rate / Decimal('100') / Decimal(MONTHS_PER_YEAR)

    # Interest-free loan
    if monthly_rate == 0:
        emi = principal / months
        return EMIResult(
            emi=round_rupees(emi),
            total_interest=0,
            principal=round_rupees(principal),
            tenure_months=round_rupees(months),
        )

    one_plus_r = Decimal('1') + monthly_rate
    # Fractional tenures are allowed, so the exponent may be non-integral
    power_term = one_plus_r ** months
    emi = principal * monthly_rate * power_term / (power_term - Decimal('1'))
    total_interest = emi * months - principal

    return EMIResult(
        emi=round_rupees(emi),
        total_interest=round_rupees(total_interest),
        principal=round_rupees(principal),
        tenure_months=round_rupees(months),
    )


def emi_changed(previous, current: EMIResult) -> bool:
    """
    Whether the EMI moved since the previous calculation.

    ``previous`` is the earlier EMIResult or just its EMI amount; None
    means there was no earlier calculation.
    """
    if previous is None:
        return True
    previous_emi = previous.emi if isinstance(previous, EMIResult) else previous
    return previous_emi != current.emi
