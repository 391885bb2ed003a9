"""
u256 Math - 폭 검사가 있는 정수 연산

Python int는 크기 제한이 없으므로 곱셈은 항상 전체 폭(512비트)으로 계산됩니다.
대신 결과가 목표 폭(u128/u256)을 넘으면 랩어라운드하지 않고 OverflowError를 발생시킵니다.

References:
- Ekubo Core: tick_to_sqrt_ratio 의 unsafe_mul_shift, muldiv
"""

from ..constants import UINT128_MAX, UINT256_MAX


def check_u128(value: int, name: str = "value") -> int:
    """u128 범위 검사 (음수는 ValueError, 초과는 OverflowError)"""
    if value < 0:
        raise ValueError(f"{name}은(는) 음수일 수 없습니다: {value}")
    if value > UINT128_MAX:
        raise OverflowError(f"{name}이(가) u128 범위를 초과했습니다: {value}")
    return value


def check_u256(value: int, name: str = "value") -> int:
    """u256 범위 검사 (음수는 ValueError, 초과는 OverflowError)"""
    if value < 0:
        raise ValueError(f"{name}은(는) 음수일 수 없습니다: {value}")
    if value > UINT256_MAX:
        raise OverflowError(f"{name}이(가) u256 범위를 초과했습니다: {value}")
    return value


def mul_shift(a: int, b: int, shift: int = 128) -> int:
    """(a * b) >> shift

    곱은 전체 폭으로 계산한 뒤 시프트합니다.
    시프트 후에도 256비트를 넘는 상위 비트가 남으면 OverflowError.
    """
    result = (a * b) >> shift
    if result > UINT256_MAX:
        raise OverflowError(f"mul_shift 결과가 u256 범위를 초과했습니다: {result}")
    return result


def div_rounding_up(numerator: int, denominator: int) -> int:
    """numerator / denominator 올림"""
    result = numerator // denominator
    if numerator % denominator > 0:
        result += 1
    return result


def mul_div(a: int, b: int, denominator: int, round_up: bool = False) -> int:
    """(a * b) / denominator

    Args:
        a, b: 피승수 (u256)
        denominator: 0이 아닌 분모
        round_up: True면 올림, False면 내림

    Returns:
        몫 (u256)

    Raises:
        ZeroDivisionError: 분모가 0인 경우
        OverflowError: 결과가 u256을 초과하는 경우
    """
    if denominator == 0:
        raise ZeroDivisionError("mul_div: 분모가 0입니다")

    product = a * b
    if round_up:
        result = div_rounding_up(product, denominator)
    else:
        result = product // denominator

    if result > UINT256_MAX:
        raise OverflowError(f"mul_div 결과가 u256 범위를 초과했습니다: {result}")
    return result
