"""
Domain-specific exceptions.

Raised by the request observability pipeline for misuse of its own
types. Downstream handler failures are never wrapped in these.
"""


class ObservabilityError(Exception):
    """Base exception for observability errors."""
    
    def __init__(self, message: str) -> None:
        """
        Initialize observability error.
        
        Args:
            message: Error message describing the issue.
        """
        self.message = message
        super().__init__(self.message)


class InvalidRecordError(ObservabilityError):
    """Exception raised when a request log record gets an invalid value."""
    pass


class RecordAlreadyFinalizedError(ObservabilityError):
    """Exception raised when a request log record is finalized twice."""
    
    def __init__(self, method: str, path: str) -> None:
        """
        Initialize record already finalized error.
        
        Args:
            method: Request method of the record.
            path: Request path of the record.
        """
        super().__init__(f"Request log for {method} {path} is already finalized")
        self.method = method
        self.path = path


class ConfigurationError(ObservabilityError):
    """Exception raised when settings hold an unusable value."""
    pass
