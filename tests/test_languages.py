"""Language-code normalization and option defaulting."""

from __future__ import annotations

import pytest

from voice_gateway.providers.base import (
    ChatOptions,
    SynthesizeOptions,
    TranscribeOptions,
    is_auto_detect,
)
from voice_gateway.providers.languages import (
    DEEPGRAM_LANGUAGES,
    GOOGLE_LANGUAGES,
    HAMSA_LANGUAGES,
    OPENAI_LANGUAGES,
    LanguageMap,
)


@pytest.mark.parametrize("sentinel", ["auto", "multi", "detect", None])
def test_auto_detect_sentinels_map_to_vendor_mode(sentinel):
    assert DEEPGRAM_LANGUAGES.normalize(sentinel) == "multi"
    assert OPENAI_LANGUAGES.normalize(sentinel) is None
    assert HAMSA_LANGUAGES.normalize(sentinel) == "ar"
    assert GOOGLE_LANGUAGES.normalize(sentinel) == "ar-SA"


def test_regional_english_collapses_to_base_code():
    assert DEEPGRAM_LANGUAGES.normalize("en-US") == "en"
    assert DEEPGRAM_LANGUAGES.normalize("en-GB") == "en"
    assert OPENAI_LANGUAGES.normalize("en-GB") == "en"
    assert HAMSA_LANGUAGES.normalize("en-US") == "en"


def test_arabic_dialects_follow_vendor_tables():
    assert DEEPGRAM_LANGUAGES.normalize("ar-EG") == "ar-EG"
    assert HAMSA_LANGUAGES.normalize("ar-EG") == "ar"
    assert GOOGLE_LANGUAGES.normalize("ar") == "ar-SA"
    assert GOOGLE_LANGUAGES.normalize("en") == "en-US"


def test_unknown_codes_pass_through_unchanged():
    assert DEEPGRAM_LANGUAGES.normalize("xx-YY") == "xx-YY"
    assert OPENAI_LANGUAGES.normalize("fr") == "fr"
    assert HAMSA_LANGUAGES.normalize("de") == "de"


def test_language_map_default_applies_before_auto_detect():
    mapping = LanguageMap(table={"en-US": "en"}, auto_detect="multi", default="en-US")

    assert mapping.normalize(None) == "en"
    assert mapping.normalize("auto") == "multi"


def test_is_auto_detect():
    assert is_auto_detect(None)
    assert is_auto_detect("detect")
    assert not is_auto_detect("en")


def test_with_defaults_only_fills_missing_fields():
    options = ChatOptions(model="x-ai/grok-4.1-fast", temperature=0.0)

    resolved = options.with_defaults(model="openai/gpt-4o-mini", temperature=0.7, max_tokens=1000)

    assert resolved == ChatOptions(model="x-ai/grok-4.1-fast", temperature=0.0, max_tokens=1000)


def test_with_defaults_is_idempotent():
    defaults = {"voice": "alloy", "speed": 1.0, "model": "tts-1"}
    once = SynthesizeOptions().with_defaults(**defaults)

    assert once.with_defaults(**defaults) == once
    assert once == SynthesizeOptions(voice="alloy", speed=1.0, model="tts-1")


def test_with_defaults_ignores_unknown_names():
    options = TranscribeOptions(language="en").with_defaults(model="nova-3", speed=2.0)

    assert options == TranscribeOptions(language="en", model="nova-3")
