"""Voice agent endpoint.

For a stage-by-stage map see
`voice_gateway.pipelines.conversation.flow.ConversationPipeline`. The POST
`/agent/conversation` route performs:

1. Validation of the uploaded recording and the JSON conversation history.
2. Transcription with the requested STT provider (auto-detect by default).
3. An LLM reply to system prompt + history + transcript.
4. Synthesis of the reply and storage of the audio under `/audio`.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from voice_gateway.config.settings import settings
from voice_gateway.controllers.dependencies import PipelineDep
from voice_gateway.pipelines.conversation import (
    ConversationPipeline,
    ConversationRequest,
    parse_history,
    read_audio_bytes,
    resolve_content_type,
)
from voice_gateway.views import ERROR_RESPONSES, ConversationResponse

router = APIRouter(prefix="/agent", tags=["agent"], responses=ERROR_RESPONSES)

logger = logging.getLogger(__name__)

PIPELINE_STAGES = tuple(ConversationPipeline.describe())
"""Ordered pipeline metadata used for quick reference and debugging."""

_AUDIO_FILE_UPLOAD = File(...)
_STT_PROVIDER_FORM = Form(..., alias="sttProvider")
_LLM_PROVIDER_FORM = Form(..., alias="llmProvider")
_LLM_MODEL_FORM = Form(..., alias="llmModel")
_TTS_PROVIDER_FORM = Form(..., alias="ttsProvider")
_TTS_VOICE_FORM = Form(..., alias="ttsVoice")
_HISTORY_FORM = Form(None, alias="conversationHistory")
_LANGUAGE_FORM = Form(None)


@router.post("/conversation", response_model=ConversationResponse)
async def conversation(
    pipeline: PipelineDep,
    stt_provider: str = _STT_PROVIDER_FORM,
    llm_provider: str = _LLM_PROVIDER_FORM,
    llm_model: str = _LLM_MODEL_FORM,
    tts_provider: str = _TTS_PROVIDER_FORM,
    tts_voice: str = _TTS_VOICE_FORM,
    conversation_history: Optional[str] = _HISTORY_FORM,
    language: Optional[str] = _LANGUAGE_FORM,
    audio: UploadFile = _AUDIO_FILE_UPLOAD,
) -> ConversationResponse:
    """Run one spoken turn through STT, LLM and TTS."""

    resolve_content_type(audio)
    audio_bytes = await read_audio_bytes(audio, settings.storage.max_upload_bytes)
    history = parse_history(conversation_history)

    logger.info(
        "Conversation turn stt=%s llm=%s/%s tts=%s/%s history=%d",
        stt_provider,
        llm_provider,
        llm_model,
        tts_provider,
        tts_voice,
        len(history),
    )

    result = await pipeline.run(
        ConversationRequest(
            audio=audio_bytes,
            stt_provider=stt_provider,
            llm_provider=llm_provider,
            llm_model=llm_model,
            tts_provider=tts_provider,
            tts_voice=tts_voice,
            history=history,
            language=language or None,
        )
    )
    return ConversationResponse.model_validate(result.to_payload())
