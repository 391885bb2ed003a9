"""
Math layer for Ekubo

온체인 수준 정밀도의 수학 함수들:
- tick_math: Tick ↔ Sqrt Ratio 변환
- sqrt_ratio_math: sqrt ratio ↔ 가격 (표시용)
- liquidity_math: 유동성 ↔ 토큰 수량
- fee_math: 프로토콜 수수료 (올림)
- u256: 폭 검사가 있는 정수 연산
"""

from .tick_math import (
    tick_to_sqrt_ratio,
    sqrt_ratio_to_tick,
    tick_to_price,
    price_to_tick,
    round_tick_to_spacing,
    align_tick_to_spacing,
)
from .sqrt_ratio_math import (
    sqrt_ratio_to_price,
    price_to_sqrt_ratio,
    format_price,
)
from .liquidity_math import (
    AmountsResult,
    amount0_for_liquidity,
    amount1_for_liquidity,
    get_amounts_for_liquidity,
    max_liquidity_for_token0,
    max_liquidity_for_token1,
    max_liquidity,
)
from .fee_math import (
    compute_protocol_fee,
    amount_after_fee,
    accumulate_protocol_fees,
    fee_fraction_from_bips,
    fee_fraction_from_decimal,
    fee_fraction_to_decimal,
)
