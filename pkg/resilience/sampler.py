"""
Interval sampler.

Lets at most one event through per fixed time window, shared by every
caller holding the same sampler.
"""
import threading
import time
from typing import Callable, Dict, Optional

from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class IntervalSampler:
    """
    Fixed-interval sampler.
    
    The first event always passes. After a pass, every event arriving
    less than ``interval`` seconds later is dropped; the first event at
    or after the boundary passes and opens the next window.
    
    Attributes:
        interval: Window length in seconds.
    """
    
    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the sampler.
        
        Args:
            interval: Window length in seconds.
            clock: Monotonic time source used when no timestamp is given.
            
        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"Sample interval must be positive, got {interval}")
        
        self._interval = float(interval)
        self._clock = clock
        self._last_pass: Optional[float] = None
        # Held only for the compare-and-set below, never across an await.
        self._lock = threading.Lock()
    
    @property
    def interval(self) -> float:
        """Get window length in seconds."""
        return self._interval
    
    @property
    def last_pass(self) -> Optional[float]:
        """Get timestamp of the last event that passed."""
        return self._last_pass
    
    def try_pass(self, now: Optional[float] = None) -> bool:
        """
        Decide whether an event at ``now`` passes.
        
        Args:
            now: Event timestamp; defaults to the sampler clock.
            
        Returns:
            True if the event passes, False if it is suppressed.
        """
        if now is None:
            now = self._clock()
        
        with self._lock:
            last = self._last_pass
            if last is not None and now - last < self._interval:
                return False
            self._last_pass = now
            return True
    
    def reset(self) -> None:
        """Forget the last pass so the next event passes."""
        with self._lock:
            self._last_pass = None


_samplers: Dict[str, IntervalSampler] = {}
_registry_lock = threading.Lock()


def get_sampler(name: str, interval: float = 1.0) -> IntervalSampler:
    """
    Get the process-wide sampler registered under ``name``.
    
    The sampler is created on first use and lives for the rest of the
    process. Later calls return the same instance; a differing interval
    is ignored with a warning.
    
    Args:
        name: Registry key, one per sampled call site.
        interval: Window length used when the sampler is created.
        
    Returns:
        Shared IntervalSampler.
    """
    with _registry_lock:
        sampler = _samplers.get(name)
        if sampler is None:
            sampler = IntervalSampler(interval=interval)
            _samplers[name] = sampler
            logger.debug("Sampler created", sampler=name, interval=interval)
        elif sampler.interval != interval:
            logger.warning(
                "Sampler already registered with another interval",
                sampler=name,
                interval=sampler.interval,
                requested=interval,
            )
        return sampler


def reset_samplers() -> None:
    """Drop every registered sampler."""
    with _registry_lock:
        _samplers.clear()
