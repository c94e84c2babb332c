"""
Unit tests for the interval sampler.
"""
import threading

import pytest

from pkg.resilience.sampler import IntervalSampler, get_sampler, reset_samplers


class TestIntervalSampler:
    """Tests for IntervalSampler."""
    
    def test_first_event_passes(self):
        """Test that the first event always passes."""
        sampler = IntervalSampler(interval=1.0)
        
        assert sampler.try_pass(now=50.0) is True
        assert sampler.last_pass == 50.0
    
    def test_events_within_interval_are_suppressed(self):
        """Test that later events in the same window are dropped."""
        sampler = IntervalSampler(interval=1.0)
        sampler.try_pass(now=50.0)
        
        assert sampler.try_pass(now=50.1) is False
        assert sampler.try_pass(now=50.999) is False
        assert sampler.last_pass == 50.0
    
    def test_event_at_interval_boundary_passes(self):
        """Test that the first event after a full interval passes."""
        sampler = IntervalSampler(interval=1.0)
        sampler.try_pass(now=50.0)
        
        assert sampler.try_pass(now=51.0) is True
        assert sampler.try_pass(now=51.5) is False
        assert sampler.try_pass(now=52.2) is True
    
    def test_first_event_after_quiet_period_passes(self):
        """Test that a new burst always gets one sample."""
        sampler = IntervalSampler(interval=1.0)
        sampler.try_pass(now=50.0)
        
        assert sampler.try_pass(now=3600.0) is True
    
    def test_uses_clock_when_no_timestamp_given(self, clock):
        """Test that the sampler reads its own clock."""
        sampler = IntervalSampler(interval=2.0, clock=clock)
        
        assert sampler.try_pass() is True
        clock.advance(1.5)
        assert sampler.try_pass() is False
        clock.advance(0.5)
        assert sampler.try_pass() is True
    
    def test_reset_lets_next_event_pass(self):
        """Test resetting the sampler."""
        sampler = IntervalSampler(interval=1.0)
        sampler.try_pass(now=50.0)
        
        sampler.reset()
        
        assert sampler.last_pass is None
        assert sampler.try_pass(now=50.1) is True
    
    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_raises_error(self, interval):
        """Test that the window must have a positive length."""
        with pytest.raises(ValueError):
            IntervalSampler(interval=interval)
    
    def test_concurrent_events_in_one_window_pass_once(self):
        """Test that racing threads agree on a single winner."""
        sampler = IntervalSampler(interval=1.0)
        barrier = threading.Barrier(16)
        results = []
        results_lock = threading.Lock()
        
        def worker():
            barrier.wait()
            passed = sampler.try_pass(now=100.0)
            with results_lock:
                results.append(passed)
        
        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert results.count(True) == 1
        assert results.count(False) == 15


class TestSamplerRegistry:
    """Tests for process-wide sampler registry."""
    
    def test_get_sampler_returns_shared_instance(self):
        """Test that one name maps to one sampler."""
        first = get_sampler("errors", 1.0)
        second = get_sampler("errors", 1.0)
        
        assert first is second
    
    def test_get_sampler_keeps_original_interval(self):
        """Test that a later differing interval is ignored."""
        first = get_sampler("errors", 1.0)
        second = get_sampler("errors", 5.0)
        
        assert second is first
        assert second.interval == 1.0
    
    def test_different_names_get_different_samplers(self):
        """Test registry isolation by name."""
        assert get_sampler("a") is not get_sampler("b")
    
    def test_reset_samplers_drops_registry(self):
        """Test clearing the registry."""
        first = get_sampler("errors")
        
        reset_samplers()
        
        assert get_sampler("errors") is not first
