"""
Canonical text encoding for floating-point numbers.

A number is written as ``<sign><exponent>:<mantissa bits>`` where the
magnitude is scaled into (0.5, 1] by repeated halving or doubling. The
encoding depends only on the value of the IEEE-754 double, never on how a
platform prints or lays out floats.
"""

import math

from ..errors import NumericEncodingError

DEFAULT_MAX_MANTISSA_BITS = 1000


def normalize_float(value: float, max_mantissa_bits: int = DEFAULT_MAX_MANTISSA_BITS) -> str:
    """
    Encode a float canonically.

    Examples:
        1.0  -> '+0:1'
        2.0  -> '+1:1'
        0.5  -> '+-1:1'
        -3.0 -> '-2:011'

    Both zeros encode as '+0:'.

    Raises NumericEncodingError for infinities, NaN, and values whose
    mantissa does not terminate within max_mantissa_bits bits.
    """
    if value == 0:
        return '+0:'

    original = value

    if math.isinf(value):
        raise NumericEncodingError(original, "infinite values cannot be encoded")

    # Sign
    if value < 0:
        sign = '-'
        value = -value
    else:
        sign = '+'

    # Exponent, scaling the magnitude into (0.5, 1]
    exponent = 0
    while value > 1:
        value = value / 2
        exponent += 1
    while value <= 0.5:
        value = value * 2
        exponent -= 1

    # Mantissa
    bits = []
    while value != 0:
        if value >= 1:
            bits.append('1')
            value -= 1
        else:
            bits.append('0')

        if len(bits) >= max_mantissa_bits or value >= 1:
            raise NumericEncodingError(
                original,
                f"mantissa does not terminate within {max_mantissa_bits} bits",
            )

        value *= 2

    return f"{sign}{exponent}:{''.join(bits)}"
