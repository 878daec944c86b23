"""IEEE 754 binary64 bit strings built from arithmetic, not memory reinterpretation."""

from __future__ import annotations

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Layer 1: Constants and input classes
# ---------------------------------------------------------------------------

EXPONENT_BITS: int = 11
MANTISSA_BITS: int = 52
BIAS: int = 1023

# Normal range of the unbiased exponent
MIN_EXPONENT: int = -1022
MAX_EXPONENT: int = 1023

ZERO_DIGIT: str = "0"
ONE_DIGIT: str = "1"

CLASS_NORMAL: str = "normal"
CLASS_ZERO: str = "zero"
CLASS_SUBNORMAL: str = "subnormal"
CLASS_INFINITE: str = "infinite"
CLASS_NAN: str = "nan"

SUPPORTED_CLASSES: tuple[str, ...] = (CLASS_NORMAL, CLASS_ZERO)

SMALLEST_NORMAL: float = 2.0**MIN_EXPONENT


class BitsError(Exception):
    """Base error for bit-string conversion."""

    def __init__(self, msg: str, value: float):
        super().__init__(f"{msg}: {value!r}")
        self.msg = msg
        self.value = value


class UnsupportedInputError(BitsError):
    """Input is NaN, infinite or subnormal."""

    def __init__(self, value: float, input_class: str):
        super().__init__(f"unsupported {input_class} input", value)
        self.input_class = input_class


class NonConvergentInputError(BitsError):
    """Exponent search walked out of the normal exponent range."""


@dataclass(frozen=True)
class Fields:
    """Sign, exponent and mantissa digit strings of one binary64 value."""

    sign: str
    exponent: str
    mantissa: str

    def joined(self) -> str:
        return self.sign + self.exponent + self.mantissa


def classify(value: float) -> str:
    """Return the input class of a value, one of the CLASS_* constants."""
    if math.isnan(value):
        return CLASS_NAN
    if math.isinf(value):
        return CLASS_INFINITE
    if value == 0:
        return CLASS_ZERO
    if abs(value) < SMALLEST_NORMAL:
        return CLASS_SUBNORMAL
    return CLASS_NORMAL


def is_supported(input_class: str) -> bool:
    return input_class in SUPPORTED_CLASSES


# ---------------------------------------------------------------------------
# Layer 2: Conversion phases
# ---------------------------------------------------------------------------


def sign_digit(value: float) -> str:
    """Sign follows `<` comparison, so negative zero yields '0'."""
    if value < 0:
        return ONE_DIGIT
    return ZERO_DIGIT


def find_exponent(value: float) -> int:
    """Biased exponent of a positive normal magnitude.

    Walks the power of two from 0 toward the magnitude until
    value / 2**power - 1 lands in [0, 1).
    """
    power = 0
    fraction = value / 2.0**power - 1
    while fraction < 0 or fraction >= 1:
        if fraction >= 1:
            power += 1
        else:
            power -= 1
        if power < MIN_EXPONENT or power > MAX_EXPONENT:
            raise NonConvergentInputError("exponent search did not converge", value)
        fraction = value / 2.0**power - 1
    return power + BIAS


def fraction_of(value: float, biased: int) -> float:
    """Fraction after the implicit leading 1, recomputed from the biased exponent."""
    unbiased = biased - BIAS
    return value / 2.0**unbiased - 1


def exponent_bits(biased: int) -> str:
    bits = [ZERO_DIGIT] * EXPONENT_BITS
    for i in range(EXPONENT_BITS):
        if (biased & 1) == 1:
            bits[EXPONENT_BITS - 1 - i] = ONE_DIGIT
        biased >>= 1
    return "".join(bits)


def mantissa_bits(fraction: float) -> str:
    """Binary digits of a fraction in [0, 1) by repeated doubling."""
    bits: list[str] = []
    for _ in range(MANTISSA_BITS):
        fraction *= 2
        if fraction < 1:
            bits.append(ZERO_DIGIT)
        else:
            bits.append(ONE_DIGIT)
            fraction -= 1
    return "".join(bits)


# ---------------------------------------------------------------------------
# Layer 3: Public conversion
# ---------------------------------------------------------------------------


def to_fields(value: float) -> Fields:
    """Convert a finite normal or zero double into its three IEEE 754 fields.

    Zero encodes as an all-zero exponent and mantissa. NaN, infinities and
    subnormals raise UnsupportedInputError; non-numeric values raise TypeError.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected int or float, got {value!r}")
    value = float(value)
    input_class = classify(value)
    if not is_supported(input_class):
        raise UnsupportedInputError(value, input_class)
    sign = sign_digit(value)
    if input_class == CLASS_ZERO:
        return Fields(sign, ZERO_DIGIT * EXPONENT_BITS, ZERO_DIGIT * MANTISSA_BITS)
    if sign == ONE_DIGIT:
        value = -value
    biased = find_exponent(value)
    fraction = fraction_of(value, biased)
    return Fields(sign, exponent_bits(biased), mantissa_bits(fraction))


def to_binary_string(value: float) -> str:
    """64-character IEEE 754 binary64 representation of value."""
    return to_fields(value).joined()


def to_binary_strings(values: list[float]) -> list[str]:
    return [to_binary_string(v) for v in values]
