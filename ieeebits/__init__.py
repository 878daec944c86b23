"""ieeebits — IEEE 754 binary64 bit strings and GCD utilities — public API."""

from __future__ import annotations

from .bits import (
    CLASS_INFINITE as CLASS_INFINITE,
    CLASS_NAN as CLASS_NAN,
    CLASS_NORMAL as CLASS_NORMAL,
    CLASS_SUBNORMAL as CLASS_SUBNORMAL,
    CLASS_ZERO as CLASS_ZERO,
    BitsError as BitsError,
    Fields as Fields,
    NonConvergentInputError as NonConvergentInputError,
    UnsupportedInputError as UnsupportedInputError,
    classify as classify,
    is_supported as is_supported,
    to_binary_string as to_binary_string,
    to_binary_strings as to_binary_strings,
    to_fields as to_fields,
)
from .gcd import (
    GcdArgumentError as GcdArgumentError,
    euclid as euclid,
    euclid_all as euclid_all,
    stein as stein,
    stein_all as stein_all,
)
