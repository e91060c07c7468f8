"""Run logging for the jaspace CLI."""

from .logger import RunLogger

__all__ = ["RunLogger"]
