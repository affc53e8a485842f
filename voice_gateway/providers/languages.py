"""Language-code normalization tables for STT vendors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .base import AUTO_DETECT_SENTINELS


@dataclass(frozen=True)
class LanguageMap:
    """Translate generic language hints into a vendor's accepted codes.

    Mapped codes return their table value, auto-detect sentinels return
    ``auto_detect`` (the vendor's multilingual mode, or ``None`` when the
    vendor expects the parameter to be omitted) and anything else passes
    through unchanged.
    """

    table: Mapping[str, str] = field(default_factory=dict)
    auto_detect: str | None = None
    default: str | None = None

    def normalize(self, code: str | None) -> str | None:
        if code is None:
            code = self.default
        if code is None or code in AUTO_DETECT_SENTINELS:
            return self.auto_detect
        return self.table.get(code, code)


_ARABIC_DIALECTS = (
    "ar-SA",
    "ar-AE",
    "ar-EG",
    "ar-QA",
    "ar-KW",
    "ar-SY",
    "ar-LB",
    "ar-PS",
    "ar-JO",
    "ar-SD",
    "ar-TD",
    "ar-MA",
    "ar-DZ",
    "ar-TN",
    "ar-IQ",
    "ar-IR",
)

# Nova-3 accepts BCP 47 tags for the major Arabic dialects.
DEEPGRAM_LANGUAGES = LanguageMap(
    table={
        "en-US": "en",
        "en-GB": "en",
        "en": "en",
        **{dialect: dialect for dialect in _ARABIC_DIALECTS},
        "ar": "ar",
        "es": "es",
        "fr": "fr",
        "de": "de",
        "it": "it",
        "pt": "pt",
        "nl": "nl",
        "hi": "hi",
        "ja": "ja",
        "ko": "ko",
        "sv": "sv",
        "ru": "ru",
        "tr": "tr",
        "vi": "vi",
        "th": "th",
        "zh": "zh",
        "uk": "uk",
        "cs": "cs",
        "pl": "pl",
        "fi": "fi",
    },
    auto_detect="multi",
)

# Whisper auto-detects when no language parameter is sent.
OPENAI_LANGUAGES = LanguageMap(
    table={"en-US": "en", "en-GB": "en"},
    auto_detect=None,
)

# Hamsa only understands Arabic and English and is tuned for Arabic.
HAMSA_LANGUAGES = LanguageMap(
    table={
        "en-US": "en",
        "en-GB": "en",
        **{dialect: "ar" for dialect in _ARABIC_DIALECTS},
    },
    auto_detect="ar",
)

# speech:recognize v1 has no auto-detect; fall back to Saudi Arabic.
GOOGLE_LANGUAGES = LanguageMap(
    table={"ar": "ar-SA", "en": "en-US"},
    auto_detect="ar-SA",
)


__all__ = [
    "DEEPGRAM_LANGUAGES",
    "GOOGLE_LANGUAGES",
    "HAMSA_LANGUAGES",
    "LanguageMap",
    "OPENAI_LANGUAGES",
]
