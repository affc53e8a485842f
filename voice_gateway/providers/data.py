"""Declarative per-vendor data: static voice lists, formats and languages."""

from __future__ import annotations

from .base import Voice

OPENAI_VOICES: tuple[Voice, ...] = (
    Voice("alloy", "Alloy", "en", "neutral"),
    Voice("echo", "Echo", "en", "male"),
    Voice("fable", "Fable", "en", "neutral"),
    Voice("onyx", "Onyx", "en", "male"),
    Voice("nova", "Nova", "en", "female"),
    Voice("shimmer", "Shimmer", "en", "female"),
)

DEEPGRAM_VOICES: tuple[Voice, ...] = (
    Voice("aura-2-thalia", "Aura 2 Thalia", "en", "female"),
    Voice("aura-asteria-en", "Aura Asteria English", "en", "female"),
    Voice("aura-2-luna", "Aura 2 Luna", "en", "female"),
    Voice("aura-2-stella", "Aura 2 Stella", "en", "female"),
    Voice("aura-2-saoirse", "Aura 2 Saoirse", "en", "female"),
    Voice("aura-2-orion", "Aura 2 Orion", "en", "male"),
    Voice("aura-zeus-en", "Aura Zeus English", "en", "male"),
    Voice("aura-arcas-en", "Aura Arcas English", "en", "male"),
    Voice("aura-2-harmony", "Aura 2 Harmony", "en", "female"),
    Voice("aura-2-linnea", "Aura 2 Linnea", "sv", "female"),
    Voice("aura-2-mads", "Aura 2 Mads", "da", "male"),
    Voice("aura-2-nanami", "Aura 2 Nanami", "ja", "female"),
)

# Served when /v1/voices is refused (e.g. keys without voices_read permission).
ELEVENLABS_FALLBACK_VOICES: tuple[Voice, ...] = (
    Voice("21m00Tcm4TlvDq8ikWAM", "Rachel", "Multilingual", "Female"),
    Voice("AZnzlk1XvdvUeBnXmlld", "Domi", "Multilingual", "Female"),
    Voice("EXAVITQu4vr4xnSDxMaL", "Bella", "Multilingual", "Female"),
    Voice("ErXwobaYiD0MjBEv2gSq", "Antoni", "Multilingual", "Male"),
    Voice("MF3mGyEYCl7XYWbV9V6O", "Elli", "Multilingual", "Female"),
    Voice("TxGEqnHWrfWFTfGW9XjX", "Josh", "Multilingual", "Male"),
    Voice("VR6AewLTigWG4xSOukaG", "Arnold", "Multilingual", "Male"),
    Voice("ODq5zmih8GrVes37Dizj", "Patrick", "Multilingual", "Male"),
    Voice("bIHGb242EICVFPQLKN2k", "Fin", "Multilingual", "Male"),
    Voice("nPczCjzI2devNBz1zQrh", "Seraphina", "Multilingual", "Female"),
)

OPENAI_STT_FORMATS = frozenset({"mp3", "mp4", "mpeg", "mpga", "m4a", "wav", "webm"})
OPENAI_STT_LANGUAGES = frozenset(
    {
        "en", "es", "fr", "de", "it", "pt", "nl", "pl", "ru", "zh",
        "ja", "ko", "ar", "tr", "sv", "hi", "id", "vi", "th", "ms",
    }
)

DEEPGRAM_STT_FORMATS = frozenset(
    {
        "audio/webm",
        "audio/wav",
        "audio/mp3",
        "audio/mpeg",
        "audio/ogg",
        "audio/flac",
        "audio/linear16",
        "audio/mulaw",
        "audio/amr-wb",
    }
)
DEEPGRAM_STT_LANGUAGES = frozenset(
    {
        "en", "es", "fr", "de", "it", "pt", "nl", "hi", "ja", "ko",
        "sv", "ru", "tr", "vi", "th", "zh", "uk", "cs", "pl", "fi",
        "ar", "ar-SA", "ar-AE", "ar-EG", "ar-QA", "ar-KW", "ar-SY",
        "ar-LB", "ar-PS", "ar-JO", "ar-SD", "ar-TD", "ar-MA", "ar-DZ",
        "ar-TN", "ar-IQ", "ar-IR",
    }
)

GOOGLE_STT_FORMATS = DEEPGRAM_STT_FORMATS
GOOGLE_STT_LANGUAGES = frozenset(
    {
        "ar-SA", "ar-AE", "ar-BH", "ar-DZ", "ar-EG", "ar-IQ", "ar-IL",
        "ar-JO", "ar-KW", "ar-LB", "ar-MA", "ar-OM", "ar-PS", "ar-QA",
        "ar-SY", "ar-TN", "ar-YE",
    }
)

HAMSA_STT_FORMATS = frozenset({"audio/webm", "audio/wav", "audio/mp3", "audio/mpeg", "audio/ogg"})
HAMSA_STT_LANGUAGES = frozenset({"ar", "en"})

OPENAI_TTS_FORMATS = frozenset({"mp3"})
DEEPGRAM_TTS_FORMATS = frozenset({"mp3", "pcm", "mulaw"})
HAMSA_TTS_FORMATS = frozenset({"wav"})
ELEVENLABS_TTS_FORMATS = frozenset({"mp3"})
