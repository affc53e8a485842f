"""FastAPI routers acting as controllers in the MVC architecture."""

from . import agent, llm, stt, tts

__all__ = ["agent", "llm", "stt", "tts"]
