"""Provider-specific integrations."""

from .openai_api import OpenAIActionAdapter, OpenAIToolRegistry

__all__ = ["OpenAIActionAdapter", "OpenAIToolRegistry"]
