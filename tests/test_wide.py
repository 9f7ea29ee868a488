from __future__ import annotations

import pytest

from fixed_point_math.errors import HostPanic
from fixed_point_math.types import I64, I128, U128
from fixed_point_math.wide import I256, U256


I256_MAX = 2**255 - 1
U256_MAX = 2**256 - 1


# ---------------------------------------------------------------------------
# Construction / narrowing
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_bounds(self):
        assert I256.min_value() == -(2**255)
        assert I256.max_value() == I256_MAX
        assert U256.min_value() == 0
        assert U256.max_value() == U256_MAX

    def test_out_of_range_panics(self):
        with pytest.raises(HostPanic, match="out of range for i256"):
            I256(2**255)
        with pytest.raises(HostPanic, match="out of range for u256"):
            U256(-1)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            I256(1.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            U256(False)

    def test_from_i128_and_u128(self):
        assert I256.from_i128(I128.min_value).to_int() == I128.min_value
        assert U256.from_u128(U128.max_value).to_int() == U128.max_value
        with pytest.raises(ValueError):
            I256.from_i128(2**127)
        with pytest.raises(ValueError):
            U256.from_u128(-1)

    def test_unsigned_from_negative_i128_panics(self):
        with pytest.raises(HostPanic):
            U256.from_i128(-1)

    def test_narrowing(self):
        assert I256(I128.max_value).to_i128() == I128.max_value
        assert I256(I128.max_value + 1).to_i128() is None
        assert U256(U128.max_value + 1).to_u128() is None
        assert I256(-1).to_u128() is None
        assert I256(-1).to_native(I64) == -1
        assert U256(2**64).to_native(I64) is None


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

class TestArithmetic:
    def test_add_sub_mul(self):
        assert I256(2).add(I256(3)) == I256(5)
        assert I256(2).sub(I256(3)) == I256(-1)
        assert U256(6).mul(U256(7)) == U256(42)

    def test_overflow_messages(self):
        with pytest.raises(HostPanic, match="attempt to add with overflow"):
            I256(I256_MAX).add(I256(1))
        with pytest.raises(HostPanic, match="attempt to subtract with overflow"):
            U256(0).sub(U256(1))
        with pytest.raises(HostPanic, match="attempt to multiply with overflow"):
            U256(2**128).mul(U256(2**128))

    def test_div_truncates_toward_zero(self):
        assert I256(7).div(I256(2)) == I256(3)
        assert I256(-7).div(I256(2)) == I256(-3)
        assert I256(7).div(I256(-2)) == I256(-3)
        assert I256(-7).div(I256(-2)) == I256(3)

    def test_rem_and_rem_euclid(self):
        assert I256(-7).rem(I256(2)) == I256(-1)
        assert I256(-7).rem_euclid(I256(2)) == I256(1)
        assert I256(-7).rem_euclid(I256(-2)) == I256(1)
        assert U256(7).rem_euclid(U256(7)) == U256(0)

    def test_divide_by_zero_panics(self):
        with pytest.raises(HostPanic, match="attempt to divide by zero"):
            U256(1).div(U256(0))
        with pytest.raises(HostPanic, match="divisor of zero"):
            I256(1).rem_euclid(I256(0))

    def test_min_over_minus_one_panics(self):
        with pytest.raises(HostPanic, match="attempt to divide with overflow"):
            I256(-(2**255)).div(I256(-1))
        with pytest.raises(HostPanic, match="remainder with overflow"):
            I256(-(2**255)).rem_euclid(I256(-1))

    def test_mixing_signedness_is_a_type_error(self):
        with pytest.raises(TypeError):
            I256(1).mul(U256(1))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

def test_equality_ordering_and_hash() -> None:
    assert I256(5) == I256(5)
    assert I256(5) != U256(5)
    assert I256(-1) < I256(0) <= I256(0)
    assert U256(3) > U256(2)
    assert len({I256(1), I256(1), U256(1)}) == 2
    assert repr(U256(9)) == "U256(9)"
    assert I256(0).is_zero() and I256(-3).is_negative()
