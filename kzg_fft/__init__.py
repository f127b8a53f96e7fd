"""
KZG FFT

Power-of-two discrete Fourier transforms (number theoretic transforms) over
the BLS12-381 scalar field, for moving polynomials between coefficient and
evaluation form in KZG commitment schemes.

This package provides:
- BLS12-381 Fr field arithmetic (via galois)
- Root-of-unity tables for every power-of-two width up to 2^31
- The recursive transform kernel and its forward/inverse driver

Usage:
    from kzg_fft import FF, new_fft_settings, fft_fr

    fs = new_fft_settings(4)
    evals = fft_fr(FF(list(range(16))), False, fs)
    coeffs = fft_fr(evals, True, fs)
"""

# Field arithmetic (via galois)
from .field import (
    FF,
    BLS12_381_R,
    PRIMITIVE_ROOT,
    SCALE2_ROOT_OF_UNITY,
    get_root_of_unity,
    fr_from_uint64,
    fr_from_uint64s,
    fr_to_uint64s,
    fr_equal,
    fr_inv,
)

# Errors and power-of-two helpers
from .utils import (
    BadArgumentsError,
    is_power_of_two,
)

# Root-of-unity tables
from .fft_settings import (
    FFTSettings,
    expand_root_of_unity,
    new_fft_settings,
)

# Transforms
from .fft import (
    FFT,
    fft_fr,
    fft_fr_fast,
    fft_fr_slow,
)

__version__ = "0.1.0"
__all__ = [
    # Field
    "FF",
    "BLS12_381_R",
    "PRIMITIVE_ROOT",
    "SCALE2_ROOT_OF_UNITY",
    "get_root_of_unity",
    "fr_from_uint64",
    "fr_from_uint64s",
    "fr_to_uint64s",
    "fr_equal",
    "fr_inv",
    # Utils
    "BadArgumentsError",
    "is_power_of_two",
    # Settings
    "FFTSettings",
    "expand_root_of_unity",
    "new_fft_settings",
    # FFT
    "FFT",
    "fft_fr",
    "fft_fr_fast",
    "fft_fr_slow",
]
