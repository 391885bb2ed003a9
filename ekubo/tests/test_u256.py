"""
u256 정수 연산 테스트
"""

import pytest

from ..constants import Q128, UINT128_MAX, UINT256_MAX
from ..math.u256 import check_u128, check_u256, mul_shift, div_rounding_up, mul_div


class TestRangeChecks:

    def test_check_u128(self):
        assert check_u128(0) == 0
        assert check_u128(UINT128_MAX) == UINT128_MAX
        with pytest.raises(OverflowError):
            check_u128(UINT128_MAX + 1)
        with pytest.raises(ValueError):
            check_u128(-1)

    def test_check_u256(self):
        assert check_u256(UINT256_MAX) == UINT256_MAX
        with pytest.raises(OverflowError):
            check_u256(UINT256_MAX + 1)
        with pytest.raises(ValueError, match="amount"):
            check_u256(-1, "amount")


class TestMulShift:

    def test_identity(self):
        """Q128 곱은 항등"""
        assert mul_shift(12345, Q128) == 12345

    def test_truncates(self):
        assert mul_shift(3, Q128 // 2) == 1

    def test_overflow(self):
        """랩어라운드하지 않음"""
        with pytest.raises(OverflowError):
            mul_shift(UINT256_MAX, UINT256_MAX, 128)


class TestMulDiv:

    def test_div_rounding_up(self):
        assert div_rounding_up(10, 5) == 2
        assert div_rounding_up(11, 5) == 3
        assert div_rounding_up(0, 5) == 0

    def test_round_down_and_up(self):
        assert mul_div(7, 3, 2) == 10
        assert mul_div(7, 3, 2, round_up=True) == 11
        assert mul_div(8, 3, 2, round_up=True) == 12

    def test_full_width_intermediate(self):
        """중간 곱이 256비트를 넘어도 결과가 범위 내면 정확"""
        assert mul_div(UINT256_MAX, UINT256_MAX, UINT256_MAX) == UINT256_MAX

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            mul_div(1, 1, 0)

    def test_overflow(self):
        with pytest.raises(OverflowError):
            mul_div(UINT256_MAX, 2, 1)
