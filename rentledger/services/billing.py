"""
Bill charge computation.

One function serves both the live preview shown while a bill form is being
filled in and the values persisted on create/update, so the two can never
disagree.
"""
from decimal import Decimal

from rentledger.schemas.bill import BillChargeInput, BillChargesOut

NEGATIVE_CONSUMPTION = "negative_consumption"


def _dec(v) -> Decimal:
    return v if isinstance(v, Decimal) else Decimal(str(v))


def compute_charges(charges: BillChargeInput) -> BillChargesOut:
    """
    elec_amount  = (elec_curr_reading - elec_prev_reading) * elec_rate
    total_amount = rent_amount + elec_amount + water_amount

    No rounding; display rounding belongs to the client. A current reading
    below the previous one is allowed through (meter corrections) and is
    only flagged in warnings.
    """
    consumption = _dec(charges.elec_curr_reading) - _dec(charges.elec_prev_reading)
    elec_amount = consumption * _dec(charges.elec_rate)
    total_amount = _dec(charges.rent_amount) + elec_amount + _dec(charges.water_amount)

    warnings = []
    if consumption < 0:
        warnings.append(NEGATIVE_CONSUMPTION)

    return BillChargesOut(
        consumption=consumption,
        elec_amount=elec_amount,
        total_amount=total_amount,
        warnings=warnings,
    )
