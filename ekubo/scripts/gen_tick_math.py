#!/usr/bin/env python3
"""
Gen Tick Math - tick_to_sqrt_ratio 상수 테이블 생성

Usage:
    # 표준 파라미터로 생성해서 stdout 출력
    ekubo-gen-tick-math

    # 체크인된 tick_constants.py 덮어쓰기
    ekubo-gen-tick-math --output ekubo/math/tick_constants.py

    # 체크인된 테이블과 비교만 (불일치 시 exit 1)
    ekubo-gen-tick-math --check

    # 다른 파라미터 (비트당 배율 = base)
    ekubo-gen-tick-math --base 1.0001 --max-ratio-bits 64 --per-bit-base base
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ekubo.codegen.tick_table import (
    CANONICAL_PARAMETERS,
    TableParameters,
    generate_multiplier_table,
    max_exponent,
    render_table_module,
    verify_table,
)
from ekubo.config import settings, setup_logging
from ekubo.math.tick_constants import TICK_MULTIPLIERS

logger = logging.getLogger("ekubo.scripts.gen_tick_math")


def parse_parameters(args: argparse.Namespace) -> TableParameters:
    """CLI 인자 → TableParameters"""
    try:
        base = Decimal(args.base)
    except InvalidOperation:
        raise ValueError(f"base가 숫자가 아닙니다: {args.base}")

    return TableParameters(
        base=base,
        max_ratio=Decimal(2 ** args.max_ratio_bits),
        output_radix=args.radix,
        sqrt_base=args.per_bit_base == "sqrt",
        precision=args.precision,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="tick_to_sqrt_ratio 상수 테이블 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--base", type=str, default=str(CANONICAL_PARAMETERS.base),
                        help="틱당 가격 배율 (기본: 1.000001)")
    parser.add_argument("--max-ratio-bits", type=int, default=128,
                        help="최대 가격 비율 2^n 의 n (기본: 128)")
    parser.add_argument("--radix", type=int, default=CANONICAL_PARAMETERS.output_radix,
                        help="출력 고정소수점 비트 수 (기본: 128)")
    parser.add_argument("--precision", type=int, default=settings.CODEGEN_PRECISION,
                        help=f"Decimal 유효 자릿수 (최소 {settings.MIN_CODEGEN_PRECISION})")
    parser.add_argument("--per-bit-base", choices=["sqrt", "base"], default="sqrt",
                        help="비트당 배율: sqrt(base) 또는 base (기본: sqrt)")
    parser.add_argument("--output", type=str, default=None,
                        help="출력 파일 경로 (기본: stdout)")
    parser.add_argument("--check", action="store_true",
                        help="체크인된 테이블과 비교만 하고 파일은 쓰지 않음")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    try:
        params = parse_parameters(args)
        table = generate_multiplier_table(params)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"상수 {len(table)}개 생성, 최대 틱 = {max_exponent(params)}")

    source = render_table_module(table, params)

    if args.check:
        checked_in = Path(settings.TICK_TABLE_PATH).read_text(encoding="utf-8")
        if verify_table(table, TICK_MULTIPLIERS) and checked_in == source:
            logger.info(f"체크인된 테이블과 일치: {settings.TICK_TABLE_PATH}")
            return 0
        logger.error(f"체크인된 테이블과 불일치: {settings.TICK_TABLE_PATH}")
        return 1

    if args.output:
        path = Path(args.output)
        path.write_text(source, encoding="utf-8")
        logger.info(f"저장: {path}")
    else:
        sys.stdout.write(source)

    return 0


if __name__ == "__main__":
    sys.exit(main())
