"""Core Module.

Errors and observability shared by tools, services and agents.
"""
from core.errors import InvalidInputError
from core.observability import Tracer, trace_agent, configure_logging

__all__ = ["InvalidInputError", "Tracer", "trace_agent", "configure_logging"]
