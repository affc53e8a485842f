"""Provider abstraction layer.

Only the capability contracts and the error taxonomy are re-exported here;
adapters and the registry live in their own modules
(``voice_gateway.providers.registry``) so importing the contracts never pulls
in configuration or vendor clients.
"""

from .base import (
    AUTO_DETECT_SENTINELS,
    AudioResult,
    ChatMessage,
    ChatOptions,
    ChatResult,
    ChatRole,
    Chatter,
    SynthesizeOptions,
    Synthesizer,
    TranscribeOptions,
    Transcriber,
    TranscriptionResult,
    Voice,
)
from .errors import (
    ConfigurationError,
    GatewayError,
    ProviderError,
    ProviderNotFoundOrDisabled,
    UnknownProviderError,
    UpstreamJobFailed,
    UpstreamJobTimeout,
)

__all__ = [
    "AUTO_DETECT_SENTINELS",
    "AudioResult",
    "ChatMessage",
    "ChatOptions",
    "ChatResult",
    "ChatRole",
    "Chatter",
    "ConfigurationError",
    "GatewayError",
    "ProviderError",
    "ProviderNotFoundOrDisabled",
    "SynthesizeOptions",
    "Synthesizer",
    "TranscribeOptions",
    "Transcriber",
    "TranscriptionResult",
    "UnknownProviderError",
    "UpstreamJobFailed",
    "UpstreamJobTimeout",
    "Voice",
]
