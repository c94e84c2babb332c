"""
Domain model for a single HTTP request log.

One record is built per request before the handler runs and finalized
with the outcome once the handler returns.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidRecordError, RecordAlreadyFinalizedError


# Status value of a record whose outcome is not known yet.
STATUS_UNSET = 0

MIN_STATUS = 100
MAX_STATUS = 599


class Severity(str, Enum):
    """Log severity of a request outcome."""
    
    ERROR = "error"  # Sampled
    DEBUG = "debug"  # Always emitted
    
    @property
    def level(self) -> int:
        """Get the stdlib logging level."""
        return logging.ERROR if self is Severity.ERROR else logging.DEBUG


def format_peer_address(host: str, port: Optional[int]) -> str:
    """
    Render a transport peer as a socket address.
    
    Args:
        host: Peer host or IP.
        port: Peer port, if known.
        
    Returns:
        ``host:port``, with IPv6 hosts bracketed.
    """
    if port is None:
        return host
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@dataclass
class HttpRequestLog:
    """
    Structured log record of one HTTP request and its outcome.
    
    Attributes:
        method: Request method as received.
        path: Request path without the query string.
        remote_addr: Transport peer address, if the transport exposes one.
        referer: Referer header text.
        user_agent: User-Agent header text.
        forwarded: Forwarded header text.
        status: Outcome status code, STATUS_UNSET until finalized.
        elapsed: Handler processing time in seconds, 0.0 until finalized.
    """
    method: str
    path: str
    remote_addr: Optional[str] = None
    referer: Optional[str] = None
    user_agent: Optional[str] = None
    forwarded: Optional[str] = None
    status: int = STATUS_UNSET
    elapsed: float = 0.0
    
    @property
    def is_finalized(self) -> bool:
        """Check whether the outcome has been recorded."""
        return self.status != STATUS_UNSET
    
    def finalize(self, status: int, elapsed: float) -> None:
        """
        Record the request outcome.
        
        Status and elapsed are written together, exactly once.
        
        Args:
            status: Outcome status code.
            elapsed: Handler processing time in seconds.
            
        Raises:
            RecordAlreadyFinalizedError: If the outcome is already recorded.
            InvalidRecordError: If status is outside 100-599 or elapsed is negative.
        """
        if self.is_finalized:
            raise RecordAlreadyFinalizedError(self.method, self.path)
        if not MIN_STATUS <= status <= MAX_STATUS:
            raise InvalidRecordError(
                f"status must be between {MIN_STATUS} and {MAX_STATUS}, got {status}"
            )
        if elapsed < 0:
            raise InvalidRecordError(f"elapsed cannot be negative, got {elapsed}")
        
        self.status = status
        self.elapsed = elapsed
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the structured log schema.
        
        Optional fields without a value are left out.
        
        Returns:
            Field name to value mapping.
        """
        fields: Dict[str, Any] = {
            "remote_addr": self.remote_addr,
            "method": self.method,
            "path": self.path,
            "status": self.status,
            "referer": self.referer,
            "user_agent": self.user_agent,
            "elapsed": self.elapsed,
            "forwarded": self.forwarded,
        }
        return {key: value for key, value in fields.items() if value is not None}
