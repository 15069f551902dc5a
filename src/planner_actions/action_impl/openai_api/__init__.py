"""Expose the OpenAI integration of the action runner."""

from .adapter import OpenAIActionAdapter
from .registry import OpenAIToolRegistry

__all__ = ["OpenAIActionAdapter", "OpenAIToolRegistry"]
