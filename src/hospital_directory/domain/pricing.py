from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from hospital_directory.domain.offering import HospitalTestOffering

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def round_money(amount: Decimal) -> Decimal:
    """
    Round to 2 decimal places, halves away from zero.

    Every derived money field goes through here so discounted_price and
    total_cost can never disagree on rounding.
    """
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def discount_active(offering: HospitalTestOffering) -> bool:
    return bool(offering.discount_available and offering.discount_percentage)


def _apply_discount(amount: Decimal, offering: HospitalTestOffering) -> Decimal:
    if not discount_active(offering):
        return amount
    percentage = offering.discount_percentage or Decimal("0")
    return amount * (Decimal("1") - percentage / HUNDRED)


def discounted_price(offering: HospitalTestOffering) -> Decimal:
    """Price after the active discount; the plain price when none applies."""
    return round_money(_apply_discount(offering.price, offering))


def total_cost(offering: HospitalTestOffering, include_home_collection: bool = False) -> Decimal:
    """
    Total payable for one booking.

    The home collection fee is added BEFORE the discount, so the discount
    also applies to the fee: (price + fee) * (1 - pct / 100).
    """
    total = offering.price
    if (
        include_home_collection
        and offering.home_collection_available
        and offering.home_collection_fee
    ):
        total += offering.home_collection_fee
    return round_money(_apply_discount(total, offering))
