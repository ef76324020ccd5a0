"""Polynomial multiplication and power-series inversion.

Products are available by direct convolution, by floating-point FFT (rounded
to integers, left as floats, or split into 15-bit halves for exact products
modulo a number), and by the number-theoretic transform modulo a prime.
Inverses are computed by Newton iteration on top of each multiplier.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Sequence, TypeVar

import numpy as np

_SPLIT = 32000

_SPECIAL_ROOTS = {
    998244353: 3,
    18446744069414584321: 7,
}

T = TypeVar("T")


def _ceil_log_2(n: int) -> int:
    return (n - 1).bit_length() if n > 4 else 2


def _check_mod(mod: int) -> None:
    if mod < 2:
        raise ValueError(f"modulus must be at least 2, got {mod}")


def _float_convolve(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Convolve two real arrays with a real FFT of power-of-two size."""
    s = len(a) + len(b) - 1
    size = 1 << _ceil_log_2(s)
    fa = np.fft.rfft(a, size)
    fb = np.fft.rfft(b, size)
    return np.fft.irfft(fa * fb, size)[:s]


def naive_multiply(a: Sequence, b: Sequence) -> list:
    """Multiply two polynomials by direct convolution."""
    if not a or not b:
        return []
    res = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            res[i + j] += x * y
    return res


def fft_complex_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply integer polynomials with a floating-point FFT, rounding the result."""
    if not a or not b:
        return []
    raw = _float_convolve(np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    rounded = np.trunc(raw + np.where(raw > 0, 0.5, -0.5))
    return [int(v) for v in rounded]


def fft_complex_double_multiply(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Multiply real polynomials with a floating-point FFT."""
    if not a or not b:
        return []
    raw = _float_convolve(np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    return [float(v) for v in raw]


def fft_complex_mod_multiply(a: Sequence[int], b: Sequence[int], mod: int) -> list[int]:
    """Multiply polynomials modulo ``mod`` exactly using split floating-point FFTs."""
    _check_mod(mod)
    if not a or not b:
        return []
    va = [x % mod for x in a]
    vb = [x % mod for x in b]
    a_lo = np.array([x % _SPLIT for x in va], dtype=float)
    a_hi = np.array([x // _SPLIT for x in va], dtype=float)
    b_lo = np.array([x % _SPLIT for x in vb], dtype=float)
    b_hi = np.array([x // _SPLIT for x in vb], dtype=float)

    def exact(arr: np.ndarray) -> list[int]:
        return [int(v) for v in np.rint(arr)]

    low = exact(_float_convolve(a_lo, b_lo))
    mid = exact(_float_convolve(a_lo, b_hi) + _float_convolve(a_hi, b_lo))
    high = exact(_float_convolve(a_hi, b_hi))
    square = _SPLIT * _SPLIT
    return [(lo + md * _SPLIT + hi * square) % mod for lo, md, hi in zip(low, mid, high)]


def _prime_factors(m: int) -> list[int]:
    factors = []
    x = 2
    while x * x <= m:
        if m % x == 0:
            factors.append(x)
            while m % x == 0:
                m //= x
        x += 1
    if m != 1:
        factors.append(m)
    return factors


@lru_cache(maxsize=None)
def primitive_root(mod: int) -> int:
    """Return the smallest primitive root of the prime ``mod``."""
    _check_mod(mod)
    if mod in _SPECIAL_ROOTS:
        return _SPECIAL_ROOTS[mod]
    exponents = [(mod - 1) // p for p in _prime_factors(mod - 1)]
    for g in range(2, mod):
        if all(pow(g, e, mod) != 1 for e in exponents):
            return g
    raise ValueError(f"no primitive root found modulo {mod}")


def _ntt(values: list[int], mod: int, root: int, invert: bool) -> list[int]:
    a = list(values)
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        w = pow(root, (mod - 1) // length, mod)
        if invert:
            w = pow(w, -1, mod)
        half = length >> 1
        twiddles = [1] * half
        for k in range(1, half):
            twiddles[k] = twiddles[k - 1] * w % mod
        for start in range(0, n, length):
            for k, t in enumerate(twiddles):
                u = a[start + k]
                v = a[start + k + half] * t % mod
                a[start + k] = (u + v) % mod
                a[start + k + half] = (u - v) % mod
        length <<= 1
    if invert:
        inv_n = pow(n, -1, mod)
        a = [x * inv_n % mod for x in a]
    return a


def fft_numeric_multiply(a: Sequence[int], b: Sequence[int], mod: int) -> list[int]:
    """Multiply polynomials modulo the prime ``mod`` with the number-theoretic transform."""
    _check_mod(mod)
    if not a or not b:
        return []
    s = len(a) + len(b) - 1
    size = 1 << _ceil_log_2(s)
    if (mod - 1) % size:
        raise ValueError(f"modulus {mod} does not support a transform of size {size}")
    root = primitive_root(mod)
    va = [x % mod for x in a]
    vb = [x % mod for x in b]
    fa = _ntt(va + [0] * (size - len(va)), mod, root, False)
    if va == vb:
        prod = [x * x % mod for x in fa]
    else:
        fb = _ntt(vb + [0] * (size - len(vb)), mod, root, False)
        prod = [x * y % mod for x, y in zip(fa, fb)]
    return _ntt(prod, mod, root, True)[:s]


def _newton_inverse(
    a: list[T],
    first: T,
    multiply: Callable[[list[T], list[T]], list[T]],
    negate: Callable[[T], T],
) -> list[T]:
    """Newton iteration b <- b - a*b^2 on the new coefficients, doubling precision."""
    n = len(a)
    b = [first]
    while len(b) < n:
        m = len(b)
        nn = min(m << 1, n)
        square = multiply(b, b)[:nn]
        tail = multiply(square, a[:nn])[m:nn]
        b.extend(negate(v) for v in tail)
    return b


def _mod_first(a: Sequence[int], mod: int) -> tuple[list[int], int]:
    _check_mod(mod)
    va = [x % mod for x in a]
    try:
        first = pow(va[0], -1, mod)
    except ValueError:
        raise ValueError(f"constant term {a[0]} is not invertible modulo {mod}") from None
    return va, first


def naive_inverse(a: Sequence[int], mod: int) -> list[int]:
    """Inverse power series of ``a`` modulo ``x**len(a)`` and ``mod``, by direct products."""
    if not a:
        return []
    va, first = _mod_first(a, mod)
    return _newton_inverse(
        va,
        first,
        lambda x, y: [v % mod for v in naive_multiply(x, y)],
        lambda v: -v % mod,
    )


def fft_complex_inverse(a: Sequence[int]) -> list[int]:
    """Integer inverse power series of ``a``; its constant term must be 1 or -1."""
    if not a:
        return []
    if a[0] not in (1, -1):
        raise ValueError("constant term must be 1 or -1 for an integer inverse")
    return _newton_inverse(list(a), int(a[0]), fft_complex_multiply, lambda v: -v)


def fft_complex_double_inverse(a: Sequence[float]) -> list[float]:
    """Real inverse power series of ``a`` modulo ``x**len(a)``."""
    if not a:
        return []
    if a[0] == 0:
        raise ValueError("constant term must be non-zero")
    return _newton_inverse(
        [float(v) for v in a], 1.0 / a[0], fft_complex_double_multiply, lambda v: -v
    )


def fft_complex_mod_inverse(a: Sequence[int], mod: int) -> list[int]:
    """Inverse power series modulo ``mod`` using split floating-point FFTs."""
    if not a:
        return []
    va, first = _mod_first(a, mod)
    return _newton_inverse(
        va,
        first,
        lambda x, y: fft_complex_mod_multiply(x, y, mod),
        lambda v: -v % mod,
    )


def fft_numeric_inverse(a: Sequence[int], mod: int) -> list[int]:
    """Inverse power series modulo the prime ``mod`` using the number-theoretic transform."""
    if not a:
        return []
    va, first = _mod_first(a, mod)
    return _newton_inverse(
        va,
        first,
        lambda x, y: fft_numeric_multiply(x, y, mod),
        lambda v: -v % mod,
    )