"""
Criticality rules for GoToU.

The fixed set of (category, code) combinations that cancel classes:
tropical cyclone signal No. 8 or above and the Black Rainstorm warning.
"""

from typing import Tuple
from .models import CriticalityRule, WarningCategory

# 8호 이상 열대저기압 신호 (방향별 8호 포함)
TROPICAL_CYCLONE_CRITICAL_CODES = frozenset({
    "TC8NE", "TC8SE", "TC8SW", "TC8NW", "TC8", "TC9", "TC10",
})

# 흑색 호우 경보
RAINSTORM_CRITICAL_CODES = frozenset({"WRAINB"})

DEFAULT_RULES: Tuple[CriticalityRule, ...] = (
    CriticalityRule(category=WarningCategory.TROPICAL_CYCLONE, codes=TROPICAL_CYCLONE_CRITICAL_CODES),
    CriticalityRule(category=WarningCategory.RAINSTORM, codes=RAINSTORM_CRITICAL_CODES),
)
