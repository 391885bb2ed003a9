"""
Fee Math 테스트

프로토콜 수수료는 항상 올림인지 확인합니다.
"""

from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from ..constants import Q128, UINT128_MAX
from ..data.types import I129
from ..math.fee_math import (
    compute_protocol_fee,
    amount_after_fee,
    accumulate_protocol_fees,
    fee_fraction_from_bips,
    fee_fraction_from_decimal,
    fee_fraction_to_decimal,
)

FEE_30_BIPS = fee_fraction_from_bips(30)


class TestComputeProtocolFee:
    """compute_protocol_fee 테스트"""

    def test_30_bips(self):
        """1,000,000의 0.3% = 3000"""
        assert compute_protocol_fee(1_000_000, FEE_30_BIPS) == 3000

    def test_zero_fee(self):
        """수수료 0"""
        assert compute_protocol_fee(1_000_000, 0) == 0

    def test_zero_amount(self):
        """수량 0"""
        assert compute_protocol_fee(0, FEE_30_BIPS) == 0

    def test_rounds_up(self):
        """1 단위에도 수수료는 최소 1"""
        assert compute_protocol_fee(1, FEE_30_BIPS) == 1
        assert compute_protocol_fee(1, 1) == 1

    def test_exact_division(self):
        """나누어 떨어지면 올림하지 않음"""
        half = Q128 // 2
        assert compute_protocol_fee(1000, half) == 500
        assert compute_protocol_fee(1001, half) == 501

    def test_i129_amount(self):
        """I129 수량 (양수)"""
        assert compute_protocol_fee(I129(mag=1_000_000), FEE_30_BIPS) == 3000

    def test_negative_amount(self):
        """음수 수량은 허용하지 않음"""
        with pytest.raises(ValueError):
            compute_protocol_fee(-1, FEE_30_BIPS)
        with pytest.raises(ValueError):
            compute_protocol_fee(I129(mag=1, sign=True), FEE_30_BIPS)

    def test_amount_above_u128(self):
        """수량은 u128"""
        with pytest.raises(OverflowError):
            compute_protocol_fee(UINT128_MAX + 1, FEE_30_BIPS)

    def test_invalid_fee_fraction(self):
        """수수료 비율은 [0, 2^128)"""
        with pytest.raises(ValueError):
            compute_protocol_fee(1000, Q128)
        with pytest.raises(ValueError):
            compute_protocol_fee(1000, -1)

    @given(
        amount=st.integers(min_value=0, max_value=UINT128_MAX),
        fee=st.integers(min_value=0, max_value=Q128 - 1),
    )
    def test_never_below_exact_fee(self, amount, fee):
        """fee_amount * 2^128 >= amount * fee, 그리고 차이는 2^128 미만"""
        fee_amount = compute_protocol_fee(amount, fee)
        assert fee_amount * Q128 >= amount * fee
        assert fee_amount * Q128 - amount * fee < Q128
        assert fee_amount <= amount


class TestAmountAfterFee:
    """amount_after_fee, accumulate_protocol_fees 테스트"""

    def test_amount_after_fee(self):
        assert amount_after_fee(1_000_000, FEE_30_BIPS) == 997_000

    def test_accumulate_rounds_each(self):
        """각 수량마다 올림"""
        assert accumulate_protocol_fees([1, 1, 1], FEE_30_BIPS) == 3
        assert compute_protocol_fee(3, FEE_30_BIPS) == 1

    def test_accumulate_empty(self):
        assert accumulate_protocol_fees([], FEE_30_BIPS) == 0


class TestFeeFractionConversion:
    """bips / 10진 비율 ↔ Q128 변환 테스트"""

    def test_from_bips(self):
        assert fee_fraction_from_bips(0) == 0
        assert fee_fraction_from_bips(30) == Q128 * 30 // 10000
        assert fee_fraction_from_bips(5000) == Q128 // 2

    def test_from_bips_out_of_range(self):
        with pytest.raises(ValueError):
            fee_fraction_from_bips(-1)
        with pytest.raises(ValueError):
            fee_fraction_from_bips(10000)

    def test_from_decimal(self):
        """0.003 == 30 bips"""
        assert fee_fraction_from_decimal(0.003) == FEE_30_BIPS
        assert fee_fraction_from_decimal("0.003") == FEE_30_BIPS
        assert fee_fraction_from_decimal(Decimal("0.5")) == Q128 // 2

    def test_from_decimal_out_of_range(self):
        with pytest.raises(ValueError):
            fee_fraction_from_decimal(1)
        with pytest.raises(ValueError):
            fee_fraction_from_decimal(-0.1)

    def test_to_decimal(self):
        assert fee_fraction_to_decimal(Q128 // 2) == Decimal("0.5")
        assert abs(fee_fraction_to_decimal(FEE_30_BIPS) - Decimal("0.003")) < Decimal("1e-20")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
