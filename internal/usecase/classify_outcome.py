"""
Outcome classification.

Maps a finished request's status to a log severity and applies
error-log sampling.
"""
from typing import Optional

from internal.domain.request_log import Severity
from pkg.resilience.sampler import IntervalSampler


DEFAULT_ERROR_THRESHOLD = 500


def classify_status(status: int, error_threshold: int = DEFAULT_ERROR_THRESHOLD) -> Severity:
    """
    Classify a status code.
    
    Args:
        status: Outcome status code.
        error_threshold: Lowest status treated as an error.
        
    Returns:
        ERROR for statuses at or above the threshold, DEBUG otherwise.
    """
    if status >= error_threshold:
        return Severity.ERROR
    return Severity.DEBUG


class OutcomeClassifier:
    """
    Decides whether and at which severity a request outcome is logged.
    
    Error outcomes go through the shared sampler; routine outcomes are
    always logged and never consult it.
    """
    
    def __init__(
        self,
        sampler: IntervalSampler,
        error_threshold: int = DEFAULT_ERROR_THRESHOLD,
    ) -> None:
        """
        Initialize the classifier.
        
        Args:
            sampler: Sampler shared by every request for error outcomes.
            error_threshold: Lowest status treated as an error.
        """
        self._sampler = sampler
        self._error_threshold = error_threshold
    
    @property
    def sampler(self) -> IntervalSampler:
        """Get the error-log sampler."""
        return self._sampler
    
    def decide(self, status: int, now: Optional[float] = None) -> Optional[Severity]:
        """
        Decide the emission for an outcome.
        
        Args:
            status: Outcome status code.
            now: Event timestamp for the sampler; defaults to its clock.
            
        Returns:
            Severity to log at, or None when the error log is suppressed.
        """
        severity = classify_status(status, self._error_threshold)
        if severity is Severity.ERROR and not self._sampler.try_pass(now):
            return None
        return severity
