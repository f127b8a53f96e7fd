"""Tests for the Fr field wrapper and integer conversions."""

import pytest

from kzg_fft.field import (
    BLS12_381_R,
    FF,
    SCALE2_ROOT_OF_UNITY,
    TWO_ADICITY,
    fr_equal,
    fr_from_uint64,
    fr_from_uint64s,
    fr_inv,
    fr_to_uint64s,
    get_root_of_unity,
)
from kzg_fft.utils import is_power_of_two


class TestRootsOfUnity:
    """The precomputed 2^i-th roots of unity."""

    def test_table_covers_two_adicity(self) -> None:
        assert len(SCALE2_ROOT_OF_UNITY) == TWO_ADICITY
        assert (BLS12_381_R - 1) % (1 << TWO_ADICITY) == 0
        assert ((BLS12_381_R - 1) >> TWO_ADICITY) % 2 == 1

    @pytest.mark.parametrize("scale", [0, 1, 2, 4, 9, 16, 31])
    def test_root_has_exact_order(self, scale: int) -> None:
        """w^(2^scale) == 1 and w^(2^(scale-1)) == -1."""
        w = get_root_of_unity(scale)
        assert w ** (1 << scale) == FF(1)
        if scale > 0:
            assert w ** (1 << (scale - 1)) == FF(BLS12_381_R - 1)

    def test_table_matches_primitive_root(self) -> None:
        for scale in (3, 12, 20):
            expected = pow(7, (BLS12_381_R - 1) >> scale, BLS12_381_R)
            assert SCALE2_ROOT_OF_UNITY[scale] == expected

    @pytest.mark.parametrize("scale", [-1, 32, 40])
    def test_scale_out_of_range(self, scale: int) -> None:
        with pytest.raises(ValueError):
            get_root_of_unity(scale)


class TestConversions:
    """Integer embedding and limb conversion."""

    def test_from_uint64(self) -> None:
        assert int(fr_from_uint64(0)) == 0
        assert int(fr_from_uint64(12345)) == 12345
        assert int(fr_from_uint64(2**64 - 1)) == 2**64 - 1

    @pytest.mark.parametrize("value", [-1, 2**64])
    def test_from_uint64_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            fr_from_uint64(value)

    def test_limbs_are_little_endian(self) -> None:
        elem = fr_from_uint64s([1, 2, 3, 4])
        assert int(elem) == 1 + (2 << 64) + (3 << 128) + (4 << 192)
        assert fr_to_uint64s(elem) == [1, 2, 3, 4]

    def test_modulus_minus_one_limbs(self) -> None:
        limbs = [0xFFFFFFFF00000000, 0x53BDA402FFFE5BFE, 0x3339D80809A1D805, 0x73EDA753299D7D48]
        elem = fr_from_uint64s(limbs)
        assert int(elem) == BLS12_381_R - 1
        assert fr_to_uint64s(elem) == limbs

    def test_limbs_at_or_above_modulus_rejected(self) -> None:
        limbs = [0xFFFFFFFF00000001, 0x53BDA402FFFE5BFE, 0x3339D80809A1D805, 0x73EDA753299D7D48]
        with pytest.raises(ValueError):
            fr_from_uint64s(limbs)

    def test_wrong_limb_count(self) -> None:
        with pytest.raises(ValueError):
            fr_from_uint64s([1, 2, 3])

    def test_equal(self) -> None:
        assert fr_equal(FF(5), fr_from_uint64(5))
        assert not fr_equal(FF(5), FF(6))


class TestInverse:
    """Multiplicative inverse."""

    @pytest.mark.parametrize("value", [1, 2, 16, 2**32, BLS12_381_R - 1])
    def test_inverse(self, value: int) -> None:
        a = FF(value)
        assert a * fr_inv(a) == FF(1)

    def test_inverse_of_two(self) -> None:
        assert int(fr_inv(FF(2))) == (BLS12_381_R + 1) // 2

    def test_zero_has_no_inverse(self) -> None:
        with pytest.raises(ZeroDivisionError):
            fr_inv(FF(0))


class TestPowerOfTwo:
    """Power-of-two helpers."""

    @pytest.mark.parametrize("n", [1, 2, 4, 1024, 1 << 40])
    def test_powers(self, n: int) -> None:
        assert is_power_of_two(n)

    @pytest.mark.parametrize("n", [0, 3, 6, 12, 1023, -2])
    def test_non_powers(self, n: int) -> None:
        assert not is_power_of_two(n)
