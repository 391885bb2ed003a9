"""
Tick Multiplier Table Generator (build time)

tick_to_sqrt_ratio가 사용하는 비트별 상수 테이블을 생성합니다.
고정밀 Decimal 연산으로 한 번만 계산해서 tick_constants.py로 체크인합니다.

핵심 공식:
    S = sqrt(B)                       # 틱당 sqrt 가격 배율
    N = ceil(log2(ln(max_ratio) / ln(B)))
    c_i = round(2^R / S^(2^i)),  i = 0 .. N-1

동일한 (B, max_ratio, R)로 재생성하면 항상 같은 상수가 나와야 합니다.
"""

import logging
from decimal import Decimal, localcontext, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP
from typing import List, NamedTuple, Sequence, Tuple

from ..config import settings
from ..constants import TICK_SIZE

logger = logging.getLogger(__name__)


class TableParameters(NamedTuple):
    """테이블 생성 파라미터 (빌드 계약)"""
    base: Decimal  # 틱당 가격 배율 B
    max_ratio: Decimal  # 표현할 최대 가격 비율
    output_radix: int  # 출력 고정소수점 비트 수 R
    sqrt_base: bool = True  # True: 비트당 sqrt(B), False: 비트당 B
    precision: int = settings.CODEGEN_PRECISION  # Decimal 유효 자릿수


# 1/100 bip 틱, Q128.128 출력, 가격 2^-128 ~ 2^128
CANONICAL_PARAMETERS = TableParameters(
    base=Decimal(TICK_SIZE),
    max_ratio=Decimal(2 ** 128),
    output_radix=128,
)


def _check_parameters(params: TableParameters) -> None:
    if params.base <= 1:
        raise ValueError(f"base는 1보다 커야 합니다: {params.base}")
    if params.max_ratio <= 1:
        raise ValueError(f"max_ratio는 1보다 커야 합니다: {params.max_ratio}")
    if params.output_radix <= 0:
        raise ValueError(f"output_radix는 양수여야 합니다: {params.output_radix}")
    if params.precision < settings.MIN_CODEGEN_PRECISION:
        raise ValueError(
            f"precision은 최소 {settings.MIN_CODEGEN_PRECISION}자리여야 합니다: {params.precision}"
        )


def _tick_of_max_ratio(params: TableParameters) -> Decimal:
    return params.max_ratio.ln() / params.base.ln()


def iteration_count(params: TableParameters) -> int:
    """테이블 크기 N = ceil(log2(tick_of_max_ratio))"""
    _check_parameters(params)
    with localcontext() as ctx:
        ctx.prec = params.precision
        bits = _tick_of_max_ratio(params).ln() / Decimal(2).ln()
        return int(bits.to_integral_value(rounding=ROUND_CEILING))


def max_exponent(params: TableParameters) -> int:
    """지원하는 최대 틱 크기 floor(ln(max_ratio) / ln(B))"""
    _check_parameters(params)
    with localcontext() as ctx:
        ctx.prec = params.precision
        return int(_tick_of_max_ratio(params).to_integral_value(rounding=ROUND_FLOOR))


def generate_multiplier_table(params: TableParameters = CANONICAL_PARAMETERS) -> List[Tuple[int, int]]:
    """비트 위치별 상수 (i, c_i) 생성

    c_i는 비트당 배율의 2^i 거듭제곱의 역수를 2^R 스케일로 반올림한 값.
    상수가 0으로 반올림되면 거기서 멈춥니다.

    Args:
        params: 테이블 생성 파라미터

    Returns:
        [(i, c_i), ...] (i 오름차순)
    """
    num_iterations = iteration_count(params)
    logger.info(
        f"테이블 생성: base={params.base}, radix={params.output_radix}, "
        f"iterations={num_iterations}, precision={params.precision}"
    )

    table = []
    with localcontext() as ctx:
        ctx.prec = params.precision
        q = Decimal(2) ** params.output_radix
        multiplier = params.base.sqrt() if params.sqrt_base else params.base

        for i in range(num_iterations):
            if i > 0:
                # S^(2^i) = (S^(2^(i-1)))^2
                multiplier = multiplier * multiplier
            inverse = (q / multiplier).quantize(Decimal(1), rounding=ROUND_HALF_UP)
            constant = int(inverse)
            if constant == 0:
                logger.debug(f"비트 {i}에서 상수가 0으로 반올림되어 중단")
                break
            table.append((i, constant))

    return table


def render_table_module(
    table: Sequence[Tuple[int, int]],
    params: TableParameters = CANONICAL_PARAMETERS
) -> str:
    """tick_constants.py 소스 생성"""
    per_bit = "sqrt(base)" if params.sqrt_base else "base"
    exponent = _log2_int(params.max_ratio)
    max_ratio = f"2^{exponent}" if exponent is not None else str(params.max_ratio)
    lines = [
        '"""',
        "Tick multiplier table (generated)",
        "",
        "ekubo-gen-tick-math 로 생성된 파일입니다. 직접 수정하지 마세요.",
        "",
        f"base = {params.base}",
        f"max ratio = {max_ratio}",
        f"per-bit multiplier = {per_bit}",
        f"number of iterations = {len(table)}",
        f"denominator = 1<<{params.output_radix}",
        '"""',
        "",
        f"OUTPUT_RADIX: int = {params.output_radix}",
        f"NUM_ITERATIONS: int = {len(table)}",
        "",
        "# c_i = round(2^R / multiplier^(2^i))",
        "TICK_MULTIPLIERS = (",
    ]
    for i, constant in table:
        lines.append(f"    {hex(constant)},  # bit {i}")
    lines.append(")")
    lines.append("")
    return "\n".join(lines)


def verify_table(
    table: Sequence[Tuple[int, int]],
    expected: Sequence[int]
) -> bool:
    """생성된 테이블과 체크인된 상수 비교"""
    generated = [constant for _, constant in table]
    if len(generated) != len(expected):
        logger.warning(f"테이블 크기 불일치: generated={len(generated)}, expected={len(expected)}")
        return False

    for i, (a, b) in enumerate(zip(generated, expected)):
        if a != b:
            logger.warning(f"비트 {i} 상수 불일치: generated={hex(a)}, expected={hex(b)}")
            return False
    return True


def _log2_int(value: Decimal):
    # 2의 거듭제곱이면 지수, 아니면 None
    if value != value.to_integral_value():
        return None
    n = int(value)
    if n <= 0 or n & (n - 1):
        return None
    return n.bit_length() - 1
