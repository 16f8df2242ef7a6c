"""Remote API providers used by scribe."""

from .openai_provider import OpenAIProvider

__all__ = ["OpenAIProvider"]
