"""
Precomputed roots of unity for power-of-two transforms.

One FFTSettings instance built for max_width = 2^max_scale serves every
transform of length n <= max_width: the driver walks the tables with stride
max_width / n.
"""

from dataclasses import dataclass

from .field import FF, get_root_of_unity
from .utils import BadArgumentsError


@dataclass(frozen=True)
class FFTSettings:
    """
    Root-of-unity tables for transforms up to max_width.

    forward_roots[i] = w^i and inverse_roots[i] = w^-i, where w is the
    primitive max_width-th root of unity. Both tables hold max_width entries.
    """
    max_width: int
    root_of_unity: FF
    forward_roots: FF
    inverse_roots: FF


def expand_root_of_unity(root: FF, width: int) -> FF:
    """
    Generate successive powers of a root of unity.

    Args:
        root: A primitive width-th root of unity
        width: Order of root (power of two)

    Returns:
        Array [1, w, w^2, ..., w^width] of width + 1 entries

    Raises:
        BadArgumentsError: If width < 1 or root is not of order exactly width
    """
    if width < 1:
        raise BadArgumentsError(f"width must be at least 1, got {width}")
    one = FF(1)
    roots = FF.Zeros(width + 1)
    roots[0] = one
    roots[1] = root
    i = 2
    while roots[i - 1] != one:
        if i > width:
            raise BadArgumentsError(f"Root of unity has order greater than {width}")
        roots[i] = roots[i - 1] * root
        i += 1
    if roots[width] != one:
        raise BadArgumentsError(f"Root of unity has order smaller than {width}")
    return roots


def new_fft_settings(max_scale: int) -> FFTSettings:
    """
    Build settings for transforms up to length 2^max_scale.

    Args:
        max_scale: log2 of the maximum transform width

    Raises:
        BadArgumentsError: If max_scale has no precomputed root of unity
    """
    try:
        root = get_root_of_unity(max_scale)
    except ValueError as e:
        raise BadArgumentsError(str(e)) from e
    max_width = 1 << max_scale

    expanded = expand_root_of_unity(root, max_width)

    # w^(max_width - i) = w^-i
    inverse_roots = expanded[max_width:0:-1].copy()

    forward_roots = expanded[:max_width].copy()

    # Tables are shared by every transform; nothing may write to them
    forward_roots.setflags(write=False)
    inverse_roots.setflags(write=False)

    return FFTSettings(
        max_width=max_width,
        root_of_unity=root,
        forward_roots=forward_roots,
        inverse_roots=inverse_roots,
    )
