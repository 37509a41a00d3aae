from app.services.lang_detect import LanguageTag
from app.services.prompts import (
    FALLBACK_KNOWLEDGE,
    VOICE_SYSTEM_PROMPT,
    WHATSAPP_NUMBER,
    build_chat_system_prompt,
    build_voice_system_prompt,
)


def test_chat_prompt_carries_language_instruction():
    prompt = build_chat_system_prompt("## Pricing\nStarter", LanguageTag.SPANISH)
    assert "IMPORTANT: Respond ONLY in Spanish" in prompt


def test_chat_prompt_default_currency_line():
    prompt = build_chat_system_prompt("kb", LanguageTag.ENGLISH)
    assert (
        "DEFAULT CURRENCY FOR THIS VISITOR: USD ($) - "
        "Starter: $180/month, Professional: $420/month"
    ) in prompt


def test_chat_prompt_embeds_knowledge_and_rules():
    prompt = build_chat_system_prompt("## Custom Section\nDetails here", "hindi")
    assert "KNOWLEDGE BASE:\n## Custom Section\nDetails here" in prompt
    assert "AVAILABLE CURRENCIES" in prompt
    assert WHATSAPP_NUMBER in prompt
    assert "7. Use emojis sparingly to be friendly" in prompt


def test_chat_prompt_with_fallback_knowledge():
    prompt = build_chat_system_prompt(FALLBACK_KNOWLEDGE, LanguageTag.HINGLISH)
    assert "Starter: ₹15,000/month (1,000 calls)" in prompt
    assert "Respond in Hinglish" in prompt


def test_voice_prompt_adds_language_hint():
    prompt = build_voice_system_prompt(LanguageTag.TAMIL)
    assert prompt.startswith(VOICE_SYSTEM_PROMPT)
    assert "latest message is in Tamil" in prompt


def test_voice_prompt_unknown_tag_hints_english():
    assert "latest message is in English" in build_voice_system_prompt("unknown")
