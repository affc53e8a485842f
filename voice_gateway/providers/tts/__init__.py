"""Text-to-speech adapters."""

from .deepgram import DeepgramTTS
from .elevenlabs import ElevenLabsTTS
from .hamsa import HamsaTTS
from .openai import OpenAITTS

__all__ = ["DeepgramTTS", "ElevenLabsTTS", "HamsaTTS", "OpenAITTS"]
