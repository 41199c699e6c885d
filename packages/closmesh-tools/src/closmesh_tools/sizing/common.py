"""Shared arithmetic for the fabric sizers."""

import math

PLUGS_PER_CABLE = 2
HOPS_DECIMALS = 2


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division for non-negative numerators."""
    return -(-numerator // denominator)


def fabric_power(
    switches: int,
    cables: int,
    power_per_switch: float,
    power_per_plug: float,
) -> float:
    """Switch chassis power plus two powered plugs per fabric cable."""
    return switches * power_per_switch + cables * power_per_plug * PLUGS_PER_CABLE


def round_hops(hops: float) -> float:
    """Round an average hop count so results compare exactly."""
    return round(hops, HOPS_DECIMALS)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return math.floor(value + 0.5)


def is_integral(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()
