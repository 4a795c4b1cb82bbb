"""Tax benefit and impact estimates displayed to donors"""

from noel_solidarite.domain.models import TaxBenefit
from noel_solidarite.utils.rounding import round_half_up

TAX_REDUCTION_RATE = 0.66
GIFTS_PER_EURO = 3


def calculate_tax_benefit(amount: float, rate: float = TAX_REDUCTION_RATE) -> TaxBenefit:
    """
    Estimate the income-tax reduction for a donation.

    French individual donors deduct 66% of the amount, within 20% of taxable
    income. Both figures are rounded independently from the unrounded
    reduction, so reduction + net may differ from the gross amount by one.

    Example:
        100 € → reduction 66 €, net cost 34 €
        50 €  → reduction 33 €, net cost 17 €
    """
    reduction = amount * rate
    return TaxBenefit(
        gross=amount,
        reduction=round_half_up(reduction),
        net=round_half_up(amount - reduction),
    )


def calculate_impact(amount: float, gifts_per_euro: int = GIFTS_PER_EURO) -> int:
    """Number of gifts a donation funds (1 € donné = 3 cadeaux distribués)"""
    return round_half_up(amount * gifts_per_euro)
