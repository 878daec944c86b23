"""Tests for the Euclid and Stein GCD routines."""

import math
import random
from functools import reduce

import pytest

from ieeebits.gcd import (
    ALGORITHMS,
    GcdArgumentError,
    euclid,
    euclid_all,
    stein,
    stein_all,
)

SEED = 0x6CD

PAIRS = [
    (12, 18, 6),
    (18, 12, 6),
    (7, 13, 1),
    (48, 48, 48),
    (1, 1000, 1),
    (1024, 96, 32),
    (270, 192, 6),
]


@pytest.mark.parametrize("pair", [euclid, stein], ids=["euclid", "stein"])
@pytest.mark.parametrize("x,y,expected", PAIRS)
def test_pair(pair, x: int, y: int, expected: int):
    assert pair(x, y) == expected


@pytest.mark.parametrize("pair", [euclid, stein], ids=["euclid", "stein"])
def test_commutative_and_idempotent(pair):
    rng = random.Random(SEED)
    for _ in range(500):
        a = rng.randint(1, 5_000)
        b = rng.randint(1, 5_000)
        assert pair(a, b) == pair(b, a)
        assert pair(a, a) == a


def test_euclid_and_stein_agree():
    rng = random.Random(SEED + 1)
    for _ in range(500):
        a = rng.randint(1, 5_000)
        b = rng.randint(1, 5_000)
        assert euclid(a, b) == stein(a, b) == math.gcd(a, b)


def test_stein_large_operands():
    a = 2**62 * 3
    b = 2**40 * 9
    assert stein(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("fold,pair", [(euclid_all, euclid), (stein_all, stein)])
def test_fold_matches_nested_pairs(fold, pair):
    assert fold([12, 18, 27]) == pair(pair(12, 18), 27) == 3
    assert fold([8, 12]) == 4
    rng = random.Random(SEED + 2)
    for _ in range(200):
        values = [rng.randint(1, 2_000) for _ in range(rng.randint(2, 6))]
        assert fold(values) == reduce(math.gcd, values)


def test_fold_accepts_tuples():
    assert euclid_all((30, 45, 75)) == 15
    assert stein_all((30, 45, 75)) == 15


@pytest.mark.parametrize("pair", [euclid, stein], ids=["euclid", "stein"])
@pytest.mark.parametrize("x,y", [(0, 5), (5, 0), (0, 0), (-4, 6), (4, -6), (1.5, 3), (True, 2)])
def test_pair_rejects_bad_operands(pair, x, y):
    with pytest.raises(GcdArgumentError):
        pair(x, y)


@pytest.mark.parametrize("fold", [euclid_all, stein_all], ids=["euclid", "stein"])
@pytest.mark.parametrize("values", [None, [], [12]])
def test_fold_rejects_short_input(fold, values):
    with pytest.raises(GcdArgumentError):
        fold(values)


@pytest.mark.parametrize("fold", [euclid_all, stein_all], ids=["euclid", "stein"])
def test_fold_rejects_zero_element(fold):
    with pytest.raises(GcdArgumentError):
        fold([12, 18, 0])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        euclid(0, 1)


def test_algorithm_table():
    assert set(ALGORITHMS) == {"euclid", "stein"}
    assert ALGORITHMS["stein"]([9, 6]) == 3


def test_stein_operands_beyond_machine_words():
    assert stein(3 * 2**1200, 9 * 2**1100) == 3 * 2**1100
    assert stein(2**4000 + 1, 3) == math.gcd(2**4000 + 1, 3)
    assert stein_all([10**400, 10**380, 10**390]) == 10**380


def test_euclid_skewed_operands():
    # one subtraction per multiple of the smaller operand
    assert euclid(1, 100_000) == 1
    assert euclid(3, 3 * 50_000 + 2) == 1
