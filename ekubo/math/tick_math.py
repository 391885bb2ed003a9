"""
Tick Math - Tick ↔ Sqrt Ratio 변환

Ekubo의 틱 수학 함수들. 온체인 컨트랙트와 동일한 정밀도로 구현.

핵심 공식:
    price = 1.000001^tick
    sqrt_ratio = sqrt(price) * 2^128   (Q128.128)

구현:
    |tick|의 각 비트 i에 대해 사전 계산된 상수 c_i = 2^128 / sqrt(1.000001)^(2^i)를
    곱해 sqrt(1.000001)^(-|tick|)를 구한 뒤, 양수 틱이면 역수를 취합니다.
    상수 테이블은 codegen/tick_table.py로 생성되어 tick_constants.py에 체크인됩니다.
"""

import logging
import math
from decimal import Decimal, localcontext
from typing import Union

from ..constants import MIN_TICK, MAX_TICK, MIN_SQRT_RATIO, MAX_SQRT_RATIO, Q128, TICK_SIZE, UINT256_MAX
from ..data.types import I129, from_signed_magnitude
from ..errors import TickOutOfRangeError
from .tick_constants import OUTPUT_RADIX, TICK_MULTIPLIERS
from .u256 import mul_shift

logger = logging.getLogger(__name__)


def tick_to_sqrt_ratio(tick: Union[int, I129]) -> int:
    """틱에서 sqrt ratio 계산

    정수 연산만 사용. 곱셈은 전체 폭으로 계산한 뒤 128비트 시프트합니다.

    Args:
        tick: 틱 인덱스 (MIN_TICK ~ MAX_TICK), int 또는 I129

    Returns:
        sqrt ratio (Q128.128 형식)

    Raises:
        TickOutOfRangeError: 틱이 유효 범위를 벗어난 경우
    """
    if isinstance(tick, I129):
        tick = from_signed_magnitude(tick)

    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfRangeError(tick, MIN_TICK, MAX_TICK)

    mag = abs(tick)

    # 1.0 (Q128.128)
    ratio = Q128
    first = True

    for i, multiplier in enumerate(TICK_MULTIPLIERS):
        if mag & (1 << i) == 0:
            continue
        if first:
            # 첫 비트는 항등원과의 곱셈 생략
            ratio = multiplier
            first = False
        else:
            ratio = mul_shift(ratio, multiplier, OUTPUT_RADIX)

    # 음수 방향으로 계산했으므로, 양수 틱이면 역수
    if tick > 0:
        ratio = UINT256_MAX // ratio

    return ratio


def sqrt_ratio_to_tick(sqrt_ratio: int) -> int:
    """sqrt ratio에서 틱 계산

    tick_to_sqrt_ratio(t) <= sqrt_ratio 를 만족하는 가장 큰 t를 이진 탐색으로 찾습니다.
    tick_to_sqrt_ratio가 단조 증가하므로 왕복 변환은 정확히 원래 틱을 돌려줍니다.

    Args:
        sqrt_ratio: sqrt ratio (Q128.128 형식)

    Returns:
        틱 인덱스

    Raises:
        ValueError: sqrt ratio가 유효 범위를 벗어난 경우
    """
    if sqrt_ratio < MIN_SQRT_RATIO or sqrt_ratio > MAX_SQRT_RATIO:
        raise ValueError(
            f"sqrt ratio가 유효 범위를 벗어났습니다: {sqrt_ratio} "
            f"(범위: {MIN_SQRT_RATIO} ~ {MAX_SQRT_RATIO})"
        )

    low, high = MIN_TICK, MAX_TICK
    while low < high:
        mid = (low + high + 1) // 2
        if tick_to_sqrt_ratio(mid) <= sqrt_ratio:
            low = mid
        else:
            high = mid - 1

    logger.debug(f"sqrt_ratio_to_tick({sqrt_ratio}) = {low}")
    return low


def tick_to_price(tick: int) -> Decimal:
    """틱을 가격으로 변환

    price = 1.000001^tick (token1/token0)

    Args:
        tick: 틱 인덱스

    Returns:
        가격 (Decimal, 40자리 정밀도)
    """
    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfRangeError(tick, MIN_TICK, MAX_TICK)

    with localcontext() as ctx:
        ctx.prec = 40
        return Decimal(TICK_SIZE) ** tick


def price_to_tick(price: Union[float, Decimal]) -> int:
    """가격을 틱으로 변환 (내림)

    tick = floor(log_1.000001(price))

    Args:
        price: 가격 (token1/token0)

    Returns:
        틱 인덱스 (MIN_TICK ~ MAX_TICK로 제한)
    """
    if price <= 0:
        raise ValueError("가격은 양수여야 합니다")

    with localcontext() as ctx:
        ctx.prec = 60
        tick = math.floor(Decimal(price).ln() / Decimal(TICK_SIZE).ln())

    return max(MIN_TICK, min(MAX_TICK, tick))


def round_tick_to_spacing(tick: int, tick_spacing: int) -> int:
    """틱을 유효한 틱 간격으로 반올림

    가장 가까운 유효 틱으로 반올림합니다. 정확히 중간이면 올림.

    Args:
        tick: 반올림할 틱
        tick_spacing: 틱 간격

    Returns:
        반올림된 틱
    """
    if tick_spacing <= 0:
        raise ValueError(f"틱 간격은 양수여야 합니다: {tick_spacing}")

    # Python의 floor division을 사용하여 lower bound 계산
    lower = (tick // tick_spacing) * tick_spacing
    upper = lower + tick_spacing

    if tick - lower < upper - tick:
        return lower
    return upper


def align_tick_to_spacing(tick: int, tick_spacing: int, round_down: bool = True) -> int:
    """틱을 tick_spacing 배수로 정렬

    Args:
        tick: 원래 틱
        tick_spacing: 틱 간격
        round_down: True = 내림 (-∞ 방향), False = 올림 (+∞ 방향)

    Returns:
        정렬된 틱
    """
    if tick_spacing <= 0:
        raise ValueError(f"틱 간격은 양수여야 합니다: {tick_spacing}")

    if tick % tick_spacing == 0:
        return tick

    if round_down:
        return (tick // tick_spacing) * tick_spacing
    return ((tick // tick_spacing) + 1) * tick_spacing
