"""
Data layer for Ekubo math

컨트랙트 경계의 직렬화 타입:
- I129: 부호-크기 정수 코덱
- Bounds: 포지션 틱 범위
- U256: {low, high} 분할 정수
"""

from .types import (
    I129,
    Bounds,
    U256,
    to_signed_magnitude,
    from_signed_magnitude,
)
