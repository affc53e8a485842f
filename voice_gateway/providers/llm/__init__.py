"""Chat completion adapters."""

from .openrouter import OpenRouterLLM

__all__ = ["OpenRouterLLM"]
