# rounding helpers shared by the mood rating and the insight aggregator
# one-decimal values round half up, so 3.25 reads as 3.3

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 1) -> float:
    """round to a fixed number of decimals, ties away from zero"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
