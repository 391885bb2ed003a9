"""
Build-time code generation

- tick_table: tick_to_sqrt_ratio 상수 테이블 생성기
"""

from .tick_table import (
    TableParameters,
    CANONICAL_PARAMETERS,
    iteration_count,
    max_exponent,
    generate_multiplier_table,
    render_table_module,
    verify_table,
)
