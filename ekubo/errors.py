"""
Ekubo 수학 라이브러리 예외

정수 폭 초과는 내장 OverflowError를 그대로 사용합니다.
"""


class EkuboMathError(Exception):
    """Ekubo 수학 오류"""
    pass


class TickOutOfRangeError(EkuboMathError, ValueError):
    """틱이 MIN_TICK ~ MAX_TICK 범위를 벗어남"""

    def __init__(self, tick: int, min_tick: int, max_tick: int):
        self.tick = tick
        super().__init__(f"틱이 유효 범위를 벗어났습니다: {tick} (범위: {min_tick} ~ {max_tick})")


class InvalidBoundsError(EkuboMathError, ValueError):
    """포지션 범위의 lower < upper 조건 위반"""

    def __init__(self, lower: int, upper: int):
        self.lower = lower
        self.upper = upper
        super().__init__(f"잘못된 범위: lower={lower}, upper={upper} (lower < upper 이어야 합니다)")
