"""Observability Module - Logging and Tracing

This module provides:
1. Structured logging with a shared format
2. Execution tracing for agents and scoring runs
"""
import logging
import functools
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime

from config.settings import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

logger = logging.getLogger("bowel_health")


def configure_logging(level: Optional[str] = None):
    """Configure root logging with the project format.

    Args:
        level: Level name; falls back to LOG_LEVEL from settings.
    """
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


@dataclass
class Trace:
    """Represents a single traced execution."""
    name: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    duration_ms: Optional[float] = None
    input_summary: str = ""
    success: bool = True
    error: Optional[str] = None

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.end_time = datetime.now()
        self.duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        self.success = success
        self.error = error


class Tracer:
    """Context manager for tracing an execution."""

    def __init__(self, name: str, input_data: Any = None):
        self.trace = Trace(name=name)
        if input_data:
            self.trace.input_summary = str(input_data)[:200]

    def __enter__(self):
        logger.info(f"▶ {self.trace.name} started")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.error(f"✖ {self.trace.name} failed: {exc_val}")
        else:
            self.trace.complete(success=True)
            logger.info(f"✔ {self.trace.name} completed in {self.trace.duration_ms:.0f}ms")
        return False  # Don't suppress exceptions


def trace_agent(func: Callable) -> Callable:
    """Decorator to automatically trace agent methods."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        agent_name = self.__class__.__name__
        context = args[0] if args else kwargs.get("context")
        summary = list(context.keys()) if isinstance(context, dict) else context
        with Tracer(agent_name, summary):
            return func(self, *args, **kwargs)
    return wrapper


def log_context(context: Dict[str, Any], stage: str):
    """Log context at a specific pipeline stage."""
    logger.debug(f"[{stage}] Context keys: {list(context.keys())}")

    if "metrics" in context:
        m = context["metrics"]
        logger.debug(f"[{stage}] BMI: {m.get('bmi')}, Bowel score: {m.get('bowel_score')}")
