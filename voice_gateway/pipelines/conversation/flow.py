"""Orchestration of the voice conversation pipeline.

``POST /api/agent/conversation`` runs four strictly sequential stages, each
consuming the previous stage's output:

1. ``stt`` - resolve the transcriber and transcribe the recording.
2. ``llm`` - resolve the chatter and answer the transcript.
3. ``tts`` - resolve the synthesizer and voice the reply.
4. ``storage`` - persist the audio so it can be fetched under ``/audio``.

The first failing stage aborts the run. Its error propagates unchanged in
type, tagged with the stage name; there are no partial results, no provider
fallback, and no retries at this level.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

from voice_gateway.providers.base import ChatOptions, SynthesizeOptions, TranscribeOptions
from voice_gateway.providers.errors import GatewayError
from voice_gateway.providers.registry import ProviderResolver
from voice_gateway.services.storage import AudioStorage
from voice_gateway.telemetry import observe_stage, track_provider_call

from .prompts import PLAIN_TEXT_SYSTEM_PROMPT, build_messages
from .types import DEFAULT_LANGUAGE, ConversationRequest, ConversationResult

logger = logging.getLogger("voice_gateway.pipeline")
transcript_logger = logging.getLogger("voice_gateway.logs.transcript")


class PipelineStage(str, Enum):
    STT = "stt"
    LLM = "llm"
    TTS = "tts"
    STORAGE = "storage"


@dataclass(frozen=True)
class StageDescription:
    """Human-readable description of one stage."""

    order: int
    stage: PipelineStage
    summary: str


class ConversationPipeline:
    """Run STT -> LLM -> TTS for a single recorded turn."""

    _STAGES: List[StageDescription] = [
        StageDescription(
            1,
            PipelineStage.STT,
            "Resolve the STT provider and transcribe the recording (default: auto-detect).",
        ),
        StageDescription(
            2,
            PipelineStage.LLM,
            "Resolve the LLM provider and answer system prompt + history + transcript.",
        ),
        StageDescription(
            3,
            PipelineStage.TTS,
            "Resolve the TTS provider and synthesize the reply with the chosen voice.",
        ),
        StageDescription(
            4,
            PipelineStage.STORAGE,
            "Write the audio under a random name so it is served from /audio.",
        ),
    ]

    def __init__(
        self,
        resolver: ProviderResolver,
        storage: AudioStorage,
        *,
        system_prompt: str = PLAIN_TEXT_SYSTEM_PROMPT,
    ) -> None:
        self._resolver = resolver
        self._storage = storage
        self._system_prompt = system_prompt

    @classmethod
    def describe(cls) -> Iterable[StageDescription]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)

    @contextmanager
    def _stage(self, stage: PipelineStage) -> Iterator[None]:
        start_time = time.perf_counter()
        logger.info("Stage %s started", stage.value)
        try:
            yield
        except GatewayError as exc:
            exc.stage = stage.value
            logger.error("Stage %s failed: %s", stage.value, exc.message)
            raise
        finally:
            observe_stage(stage.value, time.perf_counter() - start_time)
        logger.info(
            "Stage %s finished in %.2fs", stage.value, time.perf_counter() - start_time
        )

    async def run(self, request: ConversationRequest) -> ConversationResult:
        language = request.language or DEFAULT_LANGUAGE

        with self._stage(PipelineStage.STT):
            transcriber = self._resolver.transcriber(request.stt_provider)
            with track_provider_call(PipelineStage.STT.value, transcriber):
                transcription = await transcriber.transcribe(
                    request.audio, TranscribeOptions(language=language)
                )
        transcript_logger.info(
            "user | stt=%s | language=%s | text=%s",
            request.stt_provider,
            transcription.language,
            transcription.text,
        )

        with self._stage(PipelineStage.LLM):
            chatter = self._resolver.chatter(request.llm_provider)
            messages = build_messages(transcription.text, request.history, self._system_prompt)
            with track_provider_call(PipelineStage.LLM.value, chatter):
                reply = await chatter.chat(messages, ChatOptions(model=request.llm_model))
        transcript_logger.info(
            "assistant | llm=%s | model=%s | text=%s",
            request.llm_provider,
            reply.model,
            reply.message,
        )

        with self._stage(PipelineStage.TTS):
            synthesizer = self._resolver.synthesizer(request.tts_provider)
            with track_provider_call(PipelineStage.TTS.value, synthesizer):
                audio = await synthesizer.synthesize(
                    reply.message, SynthesizeOptions(voice=request.tts_voice)
                )

        with self._stage(PipelineStage.STORAGE):
            stored = await self._storage.save(audio.audio, audio.format)

        return ConversationResult(
            transcription=transcription.text,
            detected_language=transcription.language,
            llm_response=reply.message,
            audio_url=stored.url,
            format=audio.format,
        )


__all__ = ["ConversationPipeline", "PipelineStage", "StageDescription"]
