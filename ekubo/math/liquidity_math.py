"""
Liquidity Math - 유동성 계산

Ekubo의 집중화된 유동성(Concentrated Liquidity) 계산.
특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.

핵심 공식 (sqrt ratio는 Q128.128):
    Δx = L * (√P_upper - √P_lower) / (√P_upper * √P_lower)   # token0
    Δy = L * (√P_upper - √P_lower)                            # token1

민트 시 컨트랙트가 계산하는 값과 정확히 같아야 합니다.
예치 금액은 항상 올림 (유동성 공급자가 덜 내는 일이 없도록).
"""

import logging
from typing import NamedTuple, Tuple, Union

from ..constants import MIN_TICK, MAX_TICK, Q128
from ..data.types import I129, Bounds, from_signed_magnitude
from ..errors import InvalidBoundsError, TickOutOfRangeError
from .tick_math import tick_to_sqrt_ratio
from .u256 import check_u128, div_rounding_up, mul_div

logger = logging.getLogger(__name__)


class AmountsResult(NamedTuple):
    """유동성 → 토큰 수량 결과"""
    amount0: int  # token0 수량 (최소 단위)
    amount1: int  # token1 수량 (최소 단위)


def _check_sqrt_ratios(sqrt_lower: int, sqrt_upper: int) -> None:
    if sqrt_lower > sqrt_upper:
        raise InvalidBoundsError(sqrt_lower, sqrt_upper)
    if sqrt_lower == 0:
        raise ValueError("sqrt ratio는 0일 수 없습니다")


def amount0_for_liquidity(
    liquidity: int,
    sqrt_lower: int,
    sqrt_upper: int,
    round_up: bool = True
) -> int:
    """유동성에서 token0 수량 계산

    numerator = (L << 128) * (√P_upper - √P_lower)
    amount0 = ceil(ceil(numerator / √P_upper) / √P_lower)

    Args:
        liquidity: 유동성 (u128)
        sqrt_lower: 하한 sqrt ratio
        sqrt_upper: 상한 sqrt ratio
        round_up: True면 두 나눗셈 모두 올림, False면 내림

    Returns:
        amount0 (u128)

    Raises:
        InvalidBoundsError: sqrt_lower > sqrt_upper 인 경우
        OverflowError: 결과가 u128을 초과하는 경우
    """
    check_u128(liquidity, "liquidity")
    _check_sqrt_ratios(sqrt_lower, sqrt_upper)

    if liquidity == 0 or sqrt_lower == sqrt_upper:
        return 0

    numerator = (liquidity << 128) * (sqrt_upper - sqrt_lower)

    if round_up:
        result = div_rounding_up(div_rounding_up(numerator, sqrt_upper), sqrt_lower)
    else:
        result = (numerator // sqrt_upper) // sqrt_lower

    return check_u128(result, "amount0")


def amount1_for_liquidity(
    liquidity: int,
    sqrt_lower: int,
    sqrt_upper: int,
    round_up: bool = True
) -> int:
    """유동성에서 token1 수량 계산

    amount1 = ceil(L * (√P_upper - √P_lower) / 2^128)

    Args:
        liquidity: 유동성 (u128)
        sqrt_lower: 하한 sqrt ratio
        sqrt_upper: 상한 sqrt ratio
        round_up: True면 올림, False면 내림

    Returns:
        amount1 (u128)

    Raises:
        InvalidBoundsError: sqrt_lower > sqrt_upper 인 경우
        OverflowError: 결과가 u128을 초과하는 경우
    """
    check_u128(liquidity, "liquidity")
    _check_sqrt_ratios(sqrt_lower, sqrt_upper)

    numerator = liquidity * (sqrt_upper - sqrt_lower)

    if round_up:
        result = div_rounding_up(numerator, Q128)
    else:
        result = numerator // Q128

    return check_u128(result, "amount1")


def get_amounts_for_liquidity(
    current_tick: Union[int, I129],
    bounds: Union[Bounds, Tuple[int, int]],
    liquidity: int
) -> AmountsResult:
    """유동성에서 토큰 수량 계산

    현재 틱과 범위, 유동성이 주어졌을 때 민트에 필요한 토큰 수량을 계산합니다.
    sqrt ratio 변환을 줄이기 위해 구간 판정은 틱 값으로 합니다.

    Args:
        current_tick: 현재 틱 (int 또는 I129)
        bounds: 포지션 범위 (Bounds 또는 (lower, upper))
        liquidity: 유동성

    Returns:
        AmountsResult(amount0, amount1)

    Raises:
        TickOutOfRangeError: 현재 틱이 유효 범위를 벗어난 경우
        InvalidBoundsError: lower >= upper 인 경우
    """
    if isinstance(current_tick, I129):
        current_tick = from_signed_magnitude(current_tick)

    # 범위 밖 구간에서는 tick_to_sqrt_ratio를 거치지 않으므로 여기서 검사
    if current_tick < MIN_TICK or current_tick > MAX_TICK:
        raise TickOutOfRangeError(current_tick, MIN_TICK, MAX_TICK)

    if isinstance(bounds, Bounds):
        lower, upper = bounds.lower, bounds.upper
    else:
        lower, upper = bounds
        if lower >= upper:
            raise InvalidBoundsError(lower, upper)

    if current_tick < lower:
        # 가격이 범위 아래: token0만 필요
        amount0 = amount0_for_liquidity(
            liquidity, tick_to_sqrt_ratio(lower), tick_to_sqrt_ratio(upper)
        )
        amount1 = 0

    elif current_tick < upper:
        # 가격이 범위 내: 양쪽 토큰 필요
        sqrt_current = tick_to_sqrt_ratio(current_tick)
        amount0 = amount0_for_liquidity(liquidity, sqrt_current, tick_to_sqrt_ratio(upper))
        amount1 = amount1_for_liquidity(liquidity, tick_to_sqrt_ratio(lower), sqrt_current)

    else:
        # 가격이 범위 위: token1만 필요
        amount0 = 0
        amount1 = amount1_for_liquidity(
            liquidity, tick_to_sqrt_ratio(lower), tick_to_sqrt_ratio(upper)
        )

    logger.debug(
        f"get_amounts_for_liquidity(tick={current_tick}, bounds=[{lower}, {upper}), "
        f"L={liquidity}) = ({amount0}, {amount1})"
    )
    return AmountsResult(amount0, amount1)


def max_liquidity_for_token0(sqrt_lower: int, sqrt_upper: int, amount0: int) -> int:
    """amount0에서 유동성 계산 (내림)

    L = Δx * (√P_lower * √P_upper / 2^128) / (√P_upper - √P_lower)

    Args:
        sqrt_lower: 하한 sqrt ratio
        sqrt_upper: 상한 sqrt ratio
        amount0: token0 수량

    Returns:
        유동성
    """
    _check_sqrt_ratios(sqrt_lower, sqrt_upper)
    if amount0 == 0 or sqrt_lower == sqrt_upper:
        return 0

    intermediate = mul_div(sqrt_lower, sqrt_upper, Q128)
    return mul_div(amount0, intermediate, sqrt_upper - sqrt_lower)


def max_liquidity_for_token1(sqrt_lower: int, sqrt_upper: int, amount1: int) -> int:
    """amount1에서 유동성 계산 (내림)

    L = Δy * 2^128 / (√P_upper - √P_lower)
    """
    _check_sqrt_ratios(sqrt_lower, sqrt_upper)
    if amount1 == 0 or sqrt_lower == sqrt_upper:
        return 0

    return mul_div(amount1, Q128, sqrt_upper - sqrt_lower)


def max_liquidity(
    sqrt_ratio: int,
    sqrt_lower: int,
    sqrt_upper: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 민트 가능한 최대 유동성 계산

    Args:
        sqrt_ratio: 현재 sqrt ratio
        sqrt_lower: 하한 sqrt ratio
        sqrt_upper: 상한 sqrt ratio
        amount0: token0 수량
        amount1: token1 수량

    Returns:
        유동성 (두 제약 조건 중 작은 값)

    Raises:
        OverflowError: 유동성이 u128을 초과하는 경우
    """
    _check_sqrt_ratios(sqrt_lower, sqrt_upper)

    if sqrt_ratio <= sqrt_lower:
        # 가격이 범위 아래: token0만 사용
        liquidity = max_liquidity_for_token0(sqrt_lower, sqrt_upper, amount0)

    elif sqrt_ratio < sqrt_upper:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity = min(
            max_liquidity_for_token0(sqrt_ratio, sqrt_upper, amount0),
            max_liquidity_for_token1(sqrt_lower, sqrt_ratio, amount1),
        )

    else:
        # 가격이 범위 위: token1만 사용
        liquidity = max_liquidity_for_token1(sqrt_lower, sqrt_upper, amount1)

    return check_u128(liquidity, "liquidity")
