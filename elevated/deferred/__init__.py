"""
Deferred containers.

Two variations of the elevated container built on asynchronous primitives:
- lazy  - kungfu LazyCoroResult (runs on await, re-runs on every await)
- task  - asyncio.Task (runs eagerly on the running loop)
"""

from .lazy import flatten_lazy, pure_lazy, run_inside_lazy
from .task import flatten_task, pure_task, run_inside_task

__all__ = (
    # Lazy
    "pure_lazy",
    "run_inside_lazy",
    "flatten_lazy",
    # Task
    "pure_task",
    "run_inside_task",
    "flatten_task",
)
