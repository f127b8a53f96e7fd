"""
Discrete Fourier transforms over arrays of Fr elements.

Also known as number theoretic transforms. Functions here work only for
lengths that are a power of two.
"""

import numpy as np

from .field import FF, fr_from_uint64, fr_inv
from .fft_settings import FFTSettings, new_fft_settings
from .utils import BadArgumentsError, is_power_of_two

# --- Transform Kernels ---


def fft_fr_fast(
    out: FF,
    vals: FF,
    stride: int,
    roots: FF,
    roots_stride: int,
    n: int,
) -> None:
    """
    Fast Fourier Transform.

    Recursively divide and conquer, decimating in time. Each recursive call
    writes a disjoint half of out.

    Args:
        out: The results (array of length n)
        vals: The input data (array of length n * stride)
        stride: The input data stride
        roots: Roots of unity (array of length n * roots_stride)
        roots_stride: The stride interval among the roots of unity
        n: Length of the FFT, must be a power of two
    """
    half = n // 2
    if half > 0:
        fft_fr_fast(out[:half], vals, stride * 2, roots, roots_stride * 2, half)
        fft_fr_fast(out[half:n], vals[stride:], stride * 2, roots, roots_stride * 2, half)

        # Butterflies for the whole level at once. y_times_root and the old
        # lower half are both read before either half is written.
        y_times_root = out[half:n] * roots[: half * roots_stride : roots_stride]
        out[half:n] = out[:half] - y_times_root
        out[:half] = out[:half] + y_times_root
    else:
        out[0] = vals[0]


def fft_fr_slow(
    out: FF,
    vals: FF,
    stride: int,
    roots: FF,
    roots_stride: int,
    n: int,
) -> None:
    """
    Slow Fourier Transform.

    Direct O(n^2) evaluation of out[i] = sum_j vals[j] * roots[i*j mod n].
    Only useful for checking the fast transform at small sizes.

    Arguments are as for fft_fr_fast.
    """
    j = np.arange(n)
    col = vals[: n * stride : stride]
    for i in range(n):
        root_powers = roots[((i * j) % n) * roots_stride]
        out[i] = np.sum(col * root_powers)


# --- Driver ---


def fft_fr(vals, inverse: bool, fs: FFTSettings, out: FF | None = None) -> FF:
    """
    The main entry point for forward and reverse FFTs over Fr.

    Args:
        vals: The input data (length n, a power of two no larger than fs.max_width)
        inverse: False for forward transform, True for inverse transform
        fs: Previously built FFTSettings with max_width at least n
        out: Optional 1-D FF array of length n to write the results into.
            It must not share memory with vals.

    Returns:
        out, or a newly allocated array when out is None

    Raises:
        BadArgumentsError: If n is not a power of two, exceeds fs.max_width,
            or out is not a 1-D FF array of length n disjoint from vals.
            out is not touched.
    """
    if not isinstance(vals, FF):
        vals = FF(vals)

    n = len(vals)
    if n > fs.max_width:
        raise BadArgumentsError(f"n must be at most max_width={fs.max_width}, got {n}")
    if not is_power_of_two(n):
        raise BadArgumentsError(f"n must be a power of two, got {n}")
    if out is None:
        out = FF.Zeros(n)
    elif not isinstance(out, FF) or out.ndim != 1:
        raise BadArgumentsError(f"out must be a 1-D FF array, got {type(out).__name__}")
    elif len(out) != n:
        raise BadArgumentsError(f"out must have length {n}, got {len(out)}")
    elif np.shares_memory(out, vals):
        raise BadArgumentsError("out must not overlap vals")

    stride = fs.max_width // n
    if inverse:
        inv_len = fr_inv(fr_from_uint64(n))
        fft_fr_fast(out, vals, 1, fs.inverse_roots, stride, n)
        out[:] = out * inv_len
    else:
        fft_fr_fast(out, vals, 1, fs.forward_roots, stride, n)
    return out


# --- Batched Engine ---


class FFT:
    """FFT engine bound to one FFTSettings, transforming one or more columns."""

    def __init__(self, fs: FFTSettings) -> None:
        self.fs = fs

    @classmethod
    def from_scale(cls, max_scale: int) -> "FFT":
        """Build the engine together with its settings for width 2^max_scale."""
        return cls(new_fft_settings(max_scale))

    @property
    def max_width(self) -> int:
        return self.fs.max_width

    def fft(self, coeffs, n_cols: int = 1) -> FF:
        """Forward FFT: coefficients -> evaluations."""
        return self._transform(coeffs, n_cols, inverse=False)

    def ifft(self, evals, n_cols: int = 1) -> FF:
        """Inverse FFT: evaluations -> coefficients."""
        return self._transform(evals, n_cols, inverse=True)

    def _transform(self, vals, n_cols: int, inverse: bool) -> FF:
        if not isinstance(vals, FF):
            vals = FF(vals)
        if vals.size == 0:
            return vals

        input_is_1d = vals.ndim == 1
        vals_2d = _reshape_input(vals, n_cols)
        N = vals_2d.shape[0]

        result = FF.Zeros((N, n_cols))
        for col in range(n_cols):
            fft_fr(vals_2d[:, col], inverse, self.fs, out=result[:, col])

        return result.flatten() if input_is_1d else result


# --- Helpers ---


def _reshape_input(arr: FF, n_cols: int) -> FF:
    """Reshape flat or 2D input to (N, n_cols) form."""
    if arr.ndim == 1:
        if len(arr) % n_cols != 0:
            raise ValueError(f"Length {len(arr)} is not a multiple of n_cols={n_cols}")
        N = len(arr) // n_cols
        return arr.reshape(N, n_cols)
    elif arr.ndim == 2:
        if arr.shape[1] != n_cols:
            raise ValueError(f"Column count mismatch: {arr.shape[1]} != {n_cols}")
        return arr
    else:
        raise ValueError(f"Expected 1D or 2D array, got {arr.ndim}D")
