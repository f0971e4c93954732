"""Gemini generation adapter."""

from .client import GeminiClient, MockGeminiClient, RealGeminiClient

__all__ = ["GeminiClient", "RealGeminiClient", "MockGeminiClient"]
