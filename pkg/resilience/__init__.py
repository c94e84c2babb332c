"""
Resilience package.
"""
from .sampler import IntervalSampler, get_sampler, reset_samplers

__all__ = [
    "IntervalSampler",
    "get_sampler",
    "reset_samplers",
]
