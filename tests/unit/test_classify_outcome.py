"""
Unit tests for outcome classification.
"""
import pytest

from internal.domain.request_log import Severity
from internal.usecase.classify_outcome import OutcomeClassifier, classify_status
from pkg.resilience.sampler import IntervalSampler


class TestClassifyStatus:
    """Tests for classify_status."""
    
    @pytest.mark.parametrize("status", [200, 201, 301, 404, 499])
    def test_routine_statuses_are_debug(self, status):
        assert classify_status(status) is Severity.DEBUG
    
    @pytest.mark.parametrize("status", [500, 502, 503, 599])
    def test_server_errors_are_error(self, status):
        assert classify_status(status) is Severity.ERROR
    
    def test_custom_threshold(self):
        """Test classifying with a lowered threshold."""
        assert classify_status(429, error_threshold=429) is Severity.ERROR
        assert classify_status(428, error_threshold=429) is Severity.DEBUG


class TestOutcomeClassifier:
    """Tests for OutcomeClassifier."""
    
    def test_first_error_passes(self, sampler):
        """Test that the first error is logged."""
        classifier = OutcomeClassifier(sampler)
        
        assert classifier.decide(503) is Severity.ERROR
    
    def test_errors_in_same_interval_are_suppressed(self, sampler):
        """Test that later errors in the window are dropped."""
        classifier = OutcomeClassifier(sampler)
        classifier.decide(500, now=10.0)
        
        assert classifier.decide(502, now=10.4) is None
        assert classifier.decide(503, now=11.0) is Severity.ERROR
    
    def test_routine_outcomes_bypass_sampler(self):
        """Test that debug decisions never consume the window."""
        sampler = IntervalSampler(interval=1.0)
        classifier = OutcomeClassifier(sampler)
        
        for _ in range(100):
            assert classifier.decide(404, now=10.0) is Severity.DEBUG
        
        assert sampler.last_pass is None
        assert classifier.decide(500, now=10.0) is Severity.ERROR
    
    def test_routine_outcomes_logged_while_errors_suppressed(self, sampler):
        """Test that suppression only applies to errors."""
        classifier = OutcomeClassifier(sampler)
        classifier.decide(500, now=10.0)
        
        assert classifier.decide(500, now=10.1) is None
        assert classifier.decide(200, now=10.1) is Severity.DEBUG
