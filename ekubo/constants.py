"""
Ekubo 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q128: sqrt ratio / 수수료 비율 인코딩에 사용 (2^128)
- TICK_SIZE: 틱 1 단위당 가격 배율 (1.000001, 1/100 bip)
- MIN_TICK / MAX_TICK: 가격 2^-128 ~ 2^128 에 해당하는 틱 범위
- MIN_SQRT_RATIO / MAX_SQRT_RATIO: 경계 틱의 sqrt ratio
"""

# Fixed-point 인코딩 상수
Q128: int = 2 ** 128

# 틱 1 단위당 가격 배율 (price = 1.000001^tick)
TICK_SIZE: str = "1.000001"

# 틱 범위 상수
# floor(ln(2^128) / ln(1.000001)) = 88722883
MAX_TICK: int = 88722883
MIN_TICK: int = -MAX_TICK

# tick_to_sqrt_ratio(MIN_TICK), tick_to_sqrt_ratio(MAX_TICK)
MIN_SQRT_RATIO: int = 18446748437148339061
MAX_SQRT_RATIO: int = 6277100250585753475930931601400621808602321654880405518632

# 수수료 비율 (Q128) 변환용 분모
BIPS_DENOMINATOR: int = 10000

# uint 최대값
UINT256_MAX: int = 2 ** 256 - 1
UINT128_MAX: int = 2 ** 128 - 1
