"""
Ekubo 데이터 타입 정의

컨트랙트 경계에서 사용하는 데이터 구조를 Python dataclass로 정의.
내부 계산은 모두 Python int로 하고, 이 타입들은 직렬화 경계에서만 사용합니다.

- I129: 부호-크기(sign-magnitude) 정수 {mag: u128, sign: bool}
- Bounds: 포지션 범위 {lower, upper} (lower < upper)
- U256: 256비트 정수의 {low, high} 분할 표현
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from ..constants import MIN_TICK, MAX_TICK, UINT128_MAX, UINT256_MAX
from ..errors import InvalidBoundsError, TickOutOfRangeError


def _parse_int(value: Union[int, str]) -> int:
    # "0x.." 16진수 문자열, 10진수 문자열, int 모두 허용
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    return int(value, 0)


def _parse_bool(value: Union[bool, int, str]) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    return int(value, 0) != 0


@dataclass(frozen=True, eq=False)
class I129:
    """부호-크기 정수

    mag는 u128, sign이 True면 음수.
    0은 sign과 무관하게 같은 값으로 취급합니다 (I129(0, True) == I129(0, False)).
    """
    mag: int
    sign: bool = False

    def __post_init__(self):
        if self.mag < 0:
            raise ValueError(f"mag는 음수일 수 없습니다: {self.mag}")
        if self.mag > UINT128_MAX:
            raise OverflowError(f"mag가 u128 범위를 초과했습니다: {self.mag}")

    def __int__(self) -> int:
        return -self.mag if self.sign else self.mag

    def __eq__(self, other) -> bool:
        if isinstance(other, I129):
            return int(self) == int(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self))

    @classmethod
    def from_int(cls, value: int) -> "I129":
        return to_signed_magnitude(value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "I129":
        return cls(
            mag=_parse_int(data["mag"]),
            sign=_parse_bool(data.get("sign", False))
        )

    def to_dict(self) -> Dict[str, str]:
        """컨트랙트 호출 형식 {"mag": "0x..", "sign": "0x1" | "0x0"}"""
        return {
            "mag": hex(self.mag),
            "sign": "0x1" if self.sign else "0x0",
        }


def to_signed_magnitude(value: int) -> I129:
    """int → I129

    mag = |value|, sign = value < 0

    Raises:
        OverflowError: |value|가 u128 범위를 초과하는 경우
    """
    return I129(mag=abs(value), sign=value < 0)


def from_signed_magnitude(value: Union[I129, Dict[str, Any]]) -> int:
    """I129 (또는 {"mag", "sign"} dict) → int"""
    if isinstance(value, dict):
        value = I129.from_dict(value)
    return -value.mag if value.sign else value.mag


@dataclass(frozen=True)
class Bounds:
    """포지션 가격 범위 [lower, upper)

    lower < upper 이어야 하며, 두 틱 모두 MIN_TICK ~ MAX_TICK 범위 내.
    """
    lower: int
    upper: int

    def __post_init__(self):
        for tick in (self.lower, self.upper):
            if tick < MIN_TICK or tick > MAX_TICK:
                raise TickOutOfRangeError(tick, MIN_TICK, MAX_TICK)
        if self.lower >= self.upper:
            raise InvalidBoundsError(self.lower, self.upper)

    @property
    def width(self) -> int:
        return self.upper - self.lower

    def contains(self, tick: int) -> bool:
        """lower <= tick < upper"""
        return self.lower <= tick < self.upper

    def as_tuple(self) -> Tuple[int, int]:
        return self.lower, self.upper

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bounds":
        return cls(
            lower=_tick_from_wire(data["lower"]),
            upper=_tick_from_wire(data["upper"])
        )

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "lower": to_signed_magnitude(self.lower).to_dict(),
            "upper": to_signed_magnitude(self.upper).to_dict(),
        }


def _tick_from_wire(value: Union[int, I129, Dict[str, Any]]) -> int:
    if isinstance(value, (I129, dict)):
        return from_signed_magnitude(value)
    return int(value)


@dataclass(frozen=True)
class U256:
    """256비트 정수의 {low, high} 분할 (각각 u128)"""
    low: int
    high: int

    def __post_init__(self):
        for name, part in (("low", self.low), ("high", self.high)):
            if part < 0 or part > UINT128_MAX:
                raise OverflowError(f"{name}이(가) u128 범위를 벗어났습니다: {part}")

    @classmethod
    def from_int(cls, value: int) -> "U256":
        if value < 0 or value > UINT256_MAX:
            raise OverflowError(f"u256 범위를 벗어났습니다: {value}")
        return cls(low=value & UINT128_MAX, high=value >> 128)

    def to_int(self) -> int:
        return (self.high << 128) | self.low

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "U256":
        return cls(
            low=_parse_int(data["low"]),
            high=_parse_int(data["high"])
        )

    def to_dict(self) -> Dict[str, str]:
        return {"low": hex(self.low), "high": hex(self.high)}
