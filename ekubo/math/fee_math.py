"""
Fee Math - 프로토콜 수수료 계산

수수료 비율은 Q128 고정소수점 (fee / 2^128, 0 <= fee < 2^128).
수수료는 항상 올림 (프로토콜에 유리하게).

핵심 공식:
    p = amount × fee
    fee_amount = ceil(p / 2^128)
"""

from decimal import Decimal
from typing import Iterable, Union

from ..constants import BIPS_DENOMINATOR, Q128
from ..data.types import I129, from_signed_magnitude
from .u256 import check_u128


def _check_fee_fraction(fee_fraction: int) -> None:
    if fee_fraction < 0 or fee_fraction >= Q128:
        raise ValueError(f"수수료 비율은 [0, 2^128) 범위여야 합니다: {fee_fraction}")


def _amount_value(amount: Union[int, I129]) -> int:
    if isinstance(amount, I129):
        amount = from_signed_magnitude(amount)
    return check_u128(amount, "amount")


def compute_protocol_fee(amount: Union[int, I129], fee_fraction: int) -> int:
    """프로토콜 수수료 계산 (올림)

    Args:
        amount: 토큰 수량 (0 이상, u128)
        fee_fraction: 수수료 비율 (Q128)

    Returns:
        수수료 (최소 단위). 정확한 비율 몫보다 작아지지 않음.

    Raises:
        ValueError: amount가 음수이거나 fee_fraction이 범위를 벗어난 경우
    """
    amount = _amount_value(amount)
    _check_fee_fraction(fee_fraction)

    p = amount * fee_fraction
    return p // Q128 + (1 if p % Q128 != 0 else 0)


def amount_after_fee(amount: Union[int, I129], fee_fraction: int) -> int:
    """수수료를 뗀 나머지 수량"""
    amount = _amount_value(amount)
    return amount - compute_protocol_fee(amount, fee_fraction)


def accumulate_protocol_fees(amounts: Iterable[Union[int, I129]], fee_fraction: int) -> int:
    """여러 수량에 대한 누적 수수료

    각 수량마다 올림하므로 합계 후 한 번 계산한 값보다 클 수 있습니다.
    """
    return sum(compute_protocol_fee(amount, fee_fraction) for amount in amounts)


def fee_fraction_from_bips(bips: int) -> int:
    """bips → Q128 수수료 비율 (내림)

    Example:
        >>> fee_fraction_from_bips(30) == (2 ** 128 * 30) // 10000
        True
    """
    if bips < 0 or bips >= BIPS_DENOMINATOR:
        raise ValueError(f"bips는 [0, {BIPS_DENOMINATOR}) 범위여야 합니다: {bips}")
    return Q128 * bips // BIPS_DENOMINATOR


def fee_fraction_from_decimal(fraction: Union[float, Decimal, str]) -> int:
    """10진 비율 (예: 0.003) → Q128 수수료 비율 (내림)

    float은 10진 표기 그대로 해석합니다 (0.003 → 3/1000).
    """
    if isinstance(fraction, float):
        fraction = str(fraction)
    numerator, denominator = Decimal(fraction).as_integer_ratio()

    result = numerator * Q128 // denominator
    _check_fee_fraction(result)
    return result


def fee_fraction_to_decimal(fee_fraction: int) -> Decimal:
    """Q128 수수료 비율 → 10진 비율 (표시용)"""
    _check_fee_fraction(fee_fraction)
    return Decimal(fee_fraction) / Decimal(Q128)
