"""
Sqrt Ratio Math - sqrt ratio ↔ 가격 변환

Ekubo의 가격은 Q128.128 sqrt ratio 형식으로 저장됩니다.
sqrt_ratio = sqrt(price) * 2^128

로그/표시용 변환이며, 컨트랙트 계산 경로에는 사용하지 않습니다.
"""

from decimal import Decimal, localcontext, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

from ..constants import Q128, UINT256_MAX


def sqrt_ratio_to_price(sqrt_ratio: int, precision: int = 78) -> Decimal:
    """sqrt ratio를 가격으로 변환

    price = (sqrt_ratio / 2^128)^2

    Args:
        sqrt_ratio: sqrt ratio (Q128.128)
        precision: Decimal 유효 자릿수

    Returns:
        가격 (token1/token0)
    """
    if sqrt_ratio < 0:
        raise ValueError(f"sqrt ratio는 음수일 수 없습니다: {sqrt_ratio}")

    with localcontext() as ctx:
        ctx.prec = precision
        return (Decimal(sqrt_ratio) / Decimal(Q128)) ** 2


def format_price(sqrt_ratio: int, significant_digits: int = 6) -> str:
    """sqrt ratio를 유효 숫자 n자리 가격 문자열로 변환

    Example:
        >>> format_price(2 ** 128)
        '1'
    """
    price = sqrt_ratio_to_price(sqrt_ratio)
    if price == 0:
        return "0"

    with localcontext() as ctx:
        ctx.prec = significant_digits
        ctx.rounding = ROUND_HALF_UP
        rounded = +price

    # 지수 표기 없이, 뒤쪽 0 제거
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def price_to_sqrt_ratio(price: Union[float, Decimal, str]) -> int:
    """가격을 sqrt ratio로 변환 (내림)

    sqrt_ratio = floor(sqrt(price) * 2^128)

    Args:
        price: 가격 (token1/token0)

    Returns:
        sqrt ratio (Q128.128)
    """
    price = Decimal(price)
    if price <= 0:
        raise ValueError("가격은 양수여야 합니다")

    with localcontext() as ctx:
        ctx.prec = 100
        sqrt_ratio = int((price.sqrt() * Decimal(Q128)).to_integral_value(rounding=ROUND_FLOOR))

    if sqrt_ratio == 0 or sqrt_ratio > UINT256_MAX:
        raise OverflowError(f"가격이 sqrt ratio 범위를 벗어났습니다: {price}")
    return sqrt_ratio
