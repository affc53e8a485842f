"""Speech-to-text adapters."""

from .deepgram import DeepgramSTT
from .google import GoogleCloudSTT
from .hamsa import HamsaSTT
from .openai import OpenAISTT

__all__ = ["DeepgramSTT", "GoogleCloudSTT", "HamsaSTT", "OpenAISTT"]
