from typing import Tuple

from solders.compute_budget import set_compute_unit_limit, set_compute_unit_price
from solders.instruction import Instruction


def request_compute_units(units_requested: int, additional_fee_per_unit: int) -> Tuple[Instruction, Instruction]:
    """Return the compute-unit limit and price instructions, in that order.

    Prepend both ahead of the wrapper instruction. ``additional_fee_per_unit``
    is in micro-lamports.
    """
    limit_ix = set_compute_unit_limit(units=units_requested)
    price_ix = set_compute_unit_price(micro_lamports=additional_fee_per_unit)
    return limit_ix, price_ix
