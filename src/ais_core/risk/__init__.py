"""
Risk Assessment Module

- CPA/TCPA calculation
- CPA cache with anti-flicker hysteresis
- Risk level grading
"""

from .cpa_tcpa import (
    MIN_SPEED,
    PARALLEL_EPSILON,
    CPAResult,
    calculate_cpa_tcpa,
    compute_cpa,
)

from .hysteresis import (
    CPACache,
    is_significant_change,
)

from .risk_matrix import (
    RiskLevel,
    RiskAssessment,
)

__all__ = [
    # CPA/TCPA
    'MIN_SPEED',
    'PARALLEL_EPSILON',
    'CPAResult',
    'calculate_cpa_tcpa',
    'compute_cpa',

    # Cache
    'CPACache',
    'is_significant_change',

    # Risk grading
    'RiskLevel',
    'RiskAssessment',
]
