"""Core framework components."""

from .value_objects import Suite, ExecutionBundle

__all__ = ["Suite", "ExecutionBundle"]
