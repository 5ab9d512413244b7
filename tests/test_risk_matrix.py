"""Tests for risk grading of CPA/TCPA pairs."""
from __future__ import annotations

import math

import pytest

from ais_core.risk import CPAResult, RiskAssessment, RiskLevel


@pytest.fixture()
def assessor() -> RiskAssessment:
    return RiskAssessment()


class TestConverging:
    def test_near_miss_soon_is_critical(self, assessor):
        assert assessor.assess(CPAResult(50.0, 120.0), 1500.0) is RiskLevel.CRITICAL

    def test_inside_half_mile_within_twenty_minutes_is_high(self, assessor):
        assert assessor.assess(CPAResult(600.0, 1000.0), 3000.0) is RiskLevel.HIGH

    def test_wide_pass_far_off_is_safe(self, assessor):
        assert assessor.assess(CPAResult(5000.0, 3600.0), 9000.0) is RiskLevel.SAFE

    def test_close_pass_far_in_future_is_medium(self, assessor):
        # cpa score 2.5, tcpa score 0
        assert assessor.assess(CPAResult(600.0, 4000.0), 9000.0) is RiskLevel.MEDIUM


class TestNotConverging:
    def test_diverging_graded_by_distance(self, assessor):
        assert assessor.assess(CPAResult(100.0, 0.0), 100.0) is RiskLevel.CRITICAL
        assert assessor.assess(CPAResult(5000.0, 0.0), 5000.0) is RiskLevel.SAFE

    def test_parallel_close_is_low(self, assessor):
        assert assessor.assess(CPAResult(400.0, math.inf), 400.0) is RiskLevel.LOW

    def test_parallel_far_is_safe(self, assessor):
        assert assessor.assess(CPAResult(4000.0, math.inf), 4000.0) is RiskLevel.SAFE


def test_undetermined_has_no_level(assessor):
    assert assessor.assess(None, 100.0) is None


def test_dangerous_levels():
    assert RiskLevel.HIGH.is_dangerous
    assert RiskLevel.CRITICAL.is_dangerous
    assert not RiskLevel.MEDIUM.is_dangerous
