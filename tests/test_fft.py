import random

import pytest

from cpkit.fft import (
    fft_complex_double_inverse,
    fft_complex_double_multiply,
    fft_complex_inverse,
    fft_complex_mod_inverse,
    fft_complex_mod_multiply,
    fft_numeric_inverse,
    fft_numeric_multiply,
    naive_inverse,
    naive_multiply,
    primitive_root,
)

MOD = 998244353
BIG_MOD = 1_000_000_007


def _rand_list(rng, n, lo, hi):
    return [rng.randint(lo, hi) for _ in range(n)]


@pytest.mark.parametrize("n,m", [(1, 1), (3, 5), (17, 9), (40, 40)])
def test_complex_multiply_matches_naive(n, m):
    from cpkit.fft import fft_complex_multiply

    rng = random.Random(n * 100 + m)
    a = _rand_list(rng, n, -1000, 1000)
    b = _rand_list(rng, m, -1000, 1000)
    assert fft_complex_multiply(a, b) == naive_multiply(a, b)


def test_naive_multiply_length_and_empty():
    assert len(naive_multiply([1, 2, 3], [4, 5])) == 4
    assert naive_multiply([], [1, 2]) == []


def test_double_multiply_close_to_naive():
    rng = random.Random(7)
    a = [rng.uniform(-5, 5) for _ in range(13)]
    b = [rng.uniform(-5, 5) for _ in range(8)]
    assert fft_complex_double_multiply(a, b) == pytest.approx(naive_multiply(a, b), abs=1e-9)


@pytest.mark.parametrize("mod", [MOD, BIG_MOD])
def test_mod_multiply_matches_naive(mod):
    rng = random.Random(mod)
    a = _rand_list(rng, 30, 0, mod - 1)
    b = _rand_list(rng, 21, 0, mod - 1)
    expected = [x % mod for x in naive_multiply(a, b)]
    assert fft_complex_mod_multiply(a, b, mod) == expected


@pytest.mark.parametrize("n,m", [(1, 1), (2, 3), (25, 31)])
def test_numeric_multiply_matches_naive(n, m):
    rng = random.Random(n + m)
    a = _rand_list(rng, n, 0, MOD - 1)
    b = _rand_list(rng, m, 0, MOD - 1)
    expected = [x % MOD for x in naive_multiply(a, b)]
    assert fft_numeric_multiply(a, b, MOD) == expected


def test_numeric_square_matches_naive():
    rng = random.Random(3)
    a = _rand_list(rng, 19, 0, MOD - 1)
    assert fft_numeric_multiply(a, a, MOD) == [x % MOD for x in naive_multiply(a, a)]


def test_numeric_multiply_rejects_unsuitable_modulus():
    with pytest.raises(ValueError):
        fft_numeric_multiply([1, 2, 3], [4, 5, 6], 7)


def test_primitive_root_special_cases():
    assert primitive_root(MOD) == 3
    assert primitive_root(18446744069414584321) == 7


def test_primitive_root_general_has_full_order():
    p = 10007
    g = primitive_root(p)
    powers = {pow(g, k, p) for k in range(p - 1)}
    assert len(powers) == p - 1


def _truncated_product_mod(a, b, mod):
    return [x % mod for x in naive_multiply(a, b)[: len(a)]]


@pytest.mark.parametrize(
    "inverse", [naive_inverse, fft_complex_mod_inverse, fft_numeric_inverse]
)
def test_mod_inverse_is_inverse(inverse):
    rng = random.Random(11)
    a = [rng.randint(1, MOD - 1)] + _rand_list(rng, 14, 0, MOD - 1)
    b = inverse(a, MOD)
    assert len(b) == len(a)
    assert _truncated_product_mod(a, b, MOD) == [1] + [0] * (len(a) - 1)


def test_mod_inverses_agree():
    rng = random.Random(5)
    a = [rng.randint(1, MOD - 1)] + _rand_list(rng, 9, 0, MOD - 1)
    assert naive_inverse(a, MOD) == fft_numeric_inverse(a, MOD) == fft_complex_mod_inverse(a, MOD)


def test_mod_inverse_rejects_zero_constant():
    with pytest.raises(ValueError):
        naive_inverse([0, 1, 2], MOD)
    with pytest.raises(ValueError):
        fft_numeric_inverse([MOD, 1], MOD)


def test_integer_inverse_is_inverse():
    a = [1, -3, 2, 5, 0, 7, -1]
    b = fft_complex_inverse(a)
    assert naive_multiply(a, b)[: len(a)] == [1] + [0] * (len(a) - 1)


def test_integer_inverse_of_one_minus_x_is_all_ones():
    assert fft_complex_inverse([1, -1, 0, 0, 0]) == [1, 1, 1, 1, 1]


def test_integer_inverse_rejects_other_constant():
    with pytest.raises(ValueError):
        fft_complex_inverse([2, 1])


def test_double_inverse_is_inverse():
    a = [2.0, 0.5, -1.25, 3.0, 0.75, -0.5]
    b = fft_complex_double_inverse(a)
    expected = [1.0] + [0.0] * (len(a) - 1)
    assert naive_multiply(a, b)[: len(a)] == pytest.approx(expected, abs=1e-9)


def test_double_inverse_rejects_zero_constant():
    with pytest.raises(ValueError):
        fft_complex_double_inverse([0.0, 1.0])


def test_inverse_of_empty_is_empty():
    assert naive_inverse([], MOD) == []
    assert fft_complex_inverse([]) == []