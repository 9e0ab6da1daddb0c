"""Agent Module.

Agents:
    MetricsAgent: Bowel score and body metrics snapshot from a context dict.
"""
from agents.metrics_agent import MetricsAgent

__all__ = ["MetricsAgent"]
