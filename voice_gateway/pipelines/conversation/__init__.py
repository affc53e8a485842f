"""Voice conversation pipeline package.

Modules follow the order in which `/api/agent/conversation` executes:

1. `ingestion` - validate the upload and decode the caller's history.
2. `prompts` - assemble the system prompt, history and transcript.
3. `flow` - run STT -> LLM -> TTS -> storage with stage attribution.

`types` holds the request/result containers shared by all of them.
"""

from .flow import ConversationPipeline, PipelineStage, StageDescription
from .ingestion import parse_history, read_audio_bytes, resolve_content_type
from .prompts import PLAIN_TEXT_SYSTEM_PROMPT, build_messages
from .types import DEFAULT_LANGUAGE, ConversationRequest, ConversationResult

__all__ = [
    "ConversationPipeline",
    "ConversationRequest",
    "ConversationResult",
    "DEFAULT_LANGUAGE",
    "PLAIN_TEXT_SYSTEM_PROMPT",
    "PipelineStage",
    "StageDescription",
    "build_messages",
    "parse_history",
    "read_audio_bytes",
    "resolve_content_type",
]
