"""
Collision risk grading from a CPA/TCPA pair
"""
import math
from enum import Enum
from typing import Optional

from .cpa_tcpa import CPAResult


class RiskLevel(Enum):
    """
    Collision risk grade
    """
    SAFE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def is_dangerous(self) -> bool:
        return self.value >= RiskLevel.HIGH.value


class RiskAssessment:
    """
    Grades a contact by CPA and TCPA

    The CPA and TCPA each contribute a score; the sum maps onto a RiskLevel.
    Contacts that are not converging are graded on current distance only.
    """

    # CPA thresholds (meters)
    CPA_CRITICAL = 185.2     # 0.1 NM
    CPA_HIGH = 926.0         # 0.5 NM
    CPA_MEDIUM = 1852.0      # 1 NM
    CPA_LOW = 3704.0         # 2 NM

    # TCPA thresholds (seconds)
    TCPA_CRITICAL = 300.0    # 5 minutes
    TCPA_HIGH = 600.0        # 10 minutes
    TCPA_MEDIUM = 1200.0     # 20 minutes
    TCPA_LOW = 1800.0        # 30 minutes

    def __init__(
        self,
        cpa_critical: float = CPA_CRITICAL,
        cpa_high: float = CPA_HIGH,
        cpa_medium: float = CPA_MEDIUM,
        cpa_low: float = CPA_LOW,
        tcpa_critical: float = TCPA_CRITICAL,
        tcpa_high: float = TCPA_HIGH,
        tcpa_medium: float = TCPA_MEDIUM,
        tcpa_low: float = TCPA_LOW
    ):
        self.cpa_critical = cpa_critical
        self.cpa_high = cpa_high
        self.cpa_medium = cpa_medium
        self.cpa_low = cpa_low

        self.tcpa_critical = tcpa_critical
        self.tcpa_high = tcpa_high
        self.tcpa_medium = tcpa_medium
        self.tcpa_low = tcpa_low

    def assess(
        self,
        result: Optional[CPAResult],
        distance: float
    ) -> Optional[RiskLevel]:
        """
        Risk level for one contact

        Args:
            result: CPA/TCPA pair, None if undetermined
            distance: Current range (meters)

        Returns:
            RiskLevel, or None when the CPA is undetermined
        """
        if result is None:
            return None

        # Already diverging: only proximity matters
        if result.tcpa <= 0:
            return self._grade_distance(distance)

        # Never converging (parallel or both stopped)
        if math.isinf(result.tcpa):
            if distance < self.cpa_high:
                return RiskLevel.LOW
            return RiskLevel.SAFE

        score = self._calculate_risk_score(result.cpa, result.tcpa)

        if score >= 4.0:
            return RiskLevel.CRITICAL
        elif score >= 3.0:
            return RiskLevel.HIGH
        elif score >= 2.0:
            return RiskLevel.MEDIUM
        elif score >= 1.0:
            return RiskLevel.LOW
        else:
            return RiskLevel.SAFE

    def _grade_distance(self, distance: float) -> RiskLevel:
        if distance < self.cpa_critical:
            return RiskLevel.CRITICAL
        elif distance < self.cpa_high:
            return RiskLevel.HIGH
        elif distance < self.cpa_medium:
            return RiskLevel.MEDIUM
        elif distance < self.cpa_low:
            return RiskLevel.LOW
        else:
            return RiskLevel.SAFE

    def _calculate_risk_score(self, cpa: float, tcpa: float) -> float:
        """
        Risk score (0.0 - 5.0): CPA score (0-3) + TCPA score (0-2)
        """
        if cpa < self.cpa_critical:
            cpa_score = 3.0
        elif cpa < self.cpa_high:
            cpa_score = 2.5
        elif cpa < self.cpa_medium:
            cpa_score = 2.0
        elif cpa < self.cpa_low:
            cpa_score = 1.0
        else:
            cpa_score = 0.0

        if tcpa < self.tcpa_critical:
            tcpa_score = 2.0
        elif tcpa < self.tcpa_high:
            tcpa_score = 1.5
        elif tcpa < self.tcpa_medium:
            tcpa_score = 1.0
        elif tcpa < self.tcpa_low:
            tcpa_score = 0.5
        else:
            tcpa_score = 0.0

        return min(cpa_score + tcpa_score, 5.0)
