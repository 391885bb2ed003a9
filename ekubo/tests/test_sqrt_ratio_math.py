"""
Sqrt Ratio Math 테스트

sqrt ratio ↔ 가격 변환 (표시용)을 테스트합니다.
"""

from decimal import Decimal, localcontext

import pytest

from ..constants import Q128, MIN_SQRT_RATIO, MAX_SQRT_RATIO
from ..math.sqrt_ratio_math import sqrt_ratio_to_price, price_to_sqrt_ratio, format_price
from ..math.tick_math import tick_to_sqrt_ratio


class TestSqrtRatioToPrice:
    """sqrt_ratio_to_price 테스트"""

    def test_price_1(self):
        """sqrt ratio 2^128 → 가격 1"""
        assert sqrt_ratio_to_price(Q128) == 1

    def test_powers_of_two(self):
        assert sqrt_ratio_to_price(2 * Q128) == 4
        assert sqrt_ratio_to_price(Q128 // 2) == Decimal("0.25")

    def test_tick_price(self):
        """sqrt_ratio(tick)^2 ≈ 1.000001^tick"""
        price = sqrt_ratio_to_price(tick_to_sqrt_ratio(1000))
        with localcontext() as ctx:
            ctx.prec = 60
            expected = Decimal("1.000001") ** 1000
        assert abs(price - expected) / expected < Decimal("1e-30")

    def test_bounds(self):
        """가격 범위 약 2^-128 ~ 2^128"""
        assert sqrt_ratio_to_price(MIN_SQRT_RATIO) < Decimal(2) ** -127
        assert sqrt_ratio_to_price(MAX_SQRT_RATIO) > Decimal(2) ** 127

    def test_negative(self):
        with pytest.raises(ValueError):
            sqrt_ratio_to_price(-1)


class TestFormatPrice:
    """format_price 테스트"""

    def test_price_1(self):
        assert format_price(Q128) == "1"

    def test_fraction(self):
        assert format_price(Q128 // 2) == "0.25"

    def test_significant_digits(self):
        """1.000001^1000 = 1.0010005..."""
        assert format_price(tick_to_sqrt_ratio(1000)) == "1.001"
        assert format_price(tick_to_sqrt_ratio(1000), significant_digits=8) == "1.0010005"

    def test_large_price_no_exponent(self):
        assert format_price(2 ** 5 * Q128) == "1024"

    def test_zero(self):
        assert format_price(0) == "0"


class TestPriceToSqrtRatio:
    """price_to_sqrt_ratio 테스트"""

    def test_price_1(self):
        assert price_to_sqrt_ratio(1) == Q128

    def test_exact_squares(self):
        assert price_to_sqrt_ratio(4) == 2 * Q128
        assert price_to_sqrt_ratio(0.25) == Q128 // 2
        assert price_to_sqrt_ratio("0.25") == Q128 // 2

    def test_rounds_down(self):
        """sqrt_ratio^2 <= price * 2^256"""
        sqrt_ratio = price_to_sqrt_ratio(2)
        assert sqrt_ratio ** 2 <= 2 * Q128 ** 2 < (sqrt_ratio + 1) ** 2

    def test_invalid_price(self):
        with pytest.raises(ValueError):
            price_to_sqrt_ratio(0)
        with pytest.raises(ValueError):
            price_to_sqrt_ratio(-1)

    def test_out_of_range(self):
        with pytest.raises(OverflowError):
            price_to_sqrt_ratio(Decimal(2) ** 300)
        with pytest.raises(OverflowError):
            price_to_sqrt_ratio(Decimal("1e-80"))
