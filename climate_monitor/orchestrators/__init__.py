"""
Orchestrators for Climate Monitor.

This module contains the orchestrators that coordinate
the flow between ports and the core pipeline.
"""
from .readings import ReadingOrchestrator

__all__ = ["ReadingOrchestrator"]
