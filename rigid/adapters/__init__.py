"""Adapters — tool bindings for external processes.

Public re-exports for convenient access.
"""

from rigid.adapters.base import Adapter, ExecutionContext
from rigid.adapters.mock import MockAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
]
