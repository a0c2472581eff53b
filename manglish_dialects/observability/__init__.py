"""Tracing setup for model calls."""

from ._initialization import initialize_observability

__all__ = ["initialize_observability"]
