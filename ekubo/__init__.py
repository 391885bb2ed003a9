"""
Ekubo Concentrated Liquidity Math

온체인 컨트랙트와 동일한 정밀도로 tick ↔ sqrt ratio 변환, 유동성 ↔ 토큰 수량,
프로토콜 수수료를 계산하는 라이브러리.
모든 값은 Q128.128 고정소수점 정수로 다룹니다.
"""

__version__ = "0.1.0"
__author__ = "Zekiya"

from .constants import Q128, MIN_TICK, MAX_TICK, MIN_SQRT_RATIO, MAX_SQRT_RATIO
