"""
Tests for the heuristic language detector.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from app.services.lang_detect import (
    LanguageDetector,
    LanguageTag,
    SCRIPT_RULES,
    SCORED_KEYWORD_RULES,
    detect,
    detect_language,
    score_latin_languages,
)


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_empty_or_blank_is_english(self, text):
        assert detect_language(text) == LanguageTag.ENGLISH

    def test_no_signal_is_english(self):
        assert detect_language("xyz 12345 !!!") == LanguageTag.ENGLISH

    def test_plain_english_sentence(self):
        assert detect_language("Thank you so much") == LanguageTag.ENGLISH

    @pytest.mark.parametrize("text", [chr(0x1F600) * 2, "12345", "+91 98765 43210"])
    def test_symbols_and_digits_are_english(self, text):
        assert detect_language(text) == LanguageTag.ENGLISH


class TestScriptRules:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("مرحبا", LanguageTag.ARABIC),
            ("你好", LanguageTag.CHINESE),
            ("こんにちは", LanguageTag.JAPANESE),
            ("カタカナ", LanguageTag.JAPANESE),
            ("안녕하세요", LanguageTag.KOREAN),
            ("Привет", LanguageTag.RUSSIAN),
            ("สวัสดี", LanguageTag.THAI),
            ("שלום", LanguageTag.HEBREW),
            ("Γειά σου", LanguageTag.GREEK),
            ("নমস্কার", LanguageTag.BENGALI),
            ("வணக்கம்", LanguageTag.TAMIL),
            ("నమస్కారం", LanguageTag.TELUGU),
            ("નમસ્તે", LanguageTag.GUJARATI),
            ("ನಮಸ್ಕಾರ", LanguageTag.KANNADA),
            ("നമസ്കാരം", LanguageTag.MALAYALAM),
            ("ਸਤ ਸ੍ਰੀ ਅਕਾਲ", LanguageTag.PUNJABI),
            ("ନମସ୍କାର", LanguageTag.ODIA),
            ("नमस्ते", LanguageTag.HINDI),
        ],
    )
    def test_script_detection(self, text, expected):
        assert detect_language(text) == expected

    def test_single_character_is_enough(self):
        assert detect_language("price in " + chr(0x0627)) == LanguageTag.ARABIC

    def test_script_beats_latin_keywords(self):
        assert detect_language("Hello, मेरा नाम राज है") == LanguageTag.HINDI
        assert detect_language("こんにちは, how are you?") == LanguageTag.JAPANESE
        assert detect_language("hola gracias Привет") == LanguageTag.RUSSIAN

    def test_first_script_rule_wins(self):
        # Arabic is checked before Chinese regardless of position in the text
        assert detect_language("你好 مرحبا") == LanguageTag.ARABIC

    def test_kanji_only_text_is_chinese(self):
        assert detect_language("日本語") == LanguageTag.CHINESE

    def test_range_boundaries(self):
        assert detect_language(chr(0x0900)) == LanguageTag.HINDI
        assert detect_language(chr(0x097F)) == LanguageTag.HINDI
        assert detect_language(chr(0xD7AF)) == LanguageTag.KOREAN
        assert detect_language(chr(0x1100)) == LanguageTag.KOREAN

    def test_every_script_rule_has_distinct_tag(self):
        tags = [rule.tag for rule in SCRIPT_RULES]
        assert len(tags) == len(set(tags))


class TestScoredLatinLanguages:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hallo, wie geht es dir?", LanguageTag.GERMAN),
            ("Bonjour, comment allez-vous?", LanguageTag.FRENCH),
            ("Hola, ¿cómo estás? Quiero información sobre los precios", LanguageTag.SPANISH),
            ("Olá, obrigado pela ajuda", LanguageTag.PORTUGUESE),
            ("Ciao, grazie mille per l'aiuto", LanguageTag.ITALIAN),
        ],
    )
    def test_characteristic_words(self, text, expected):
        assert detect_language(text) == expected

    def test_highest_score_wins(self):
        scores = score_latin_languages("hola gracias para")
        assert scores[LanguageTag.SPANISH] == 3
        assert scores[LanguageTag.PORTUGUESE] == 1
        assert detect_language("hola gracias para") == LanguageTag.SPANISH

    def test_tie_keeps_candidate_order(self):
        # "para" is both Spanish and Portuguese; Spanish is listed first
        assert detect_language("para") == LanguageTag.SPANISH
        # "quando" is Portuguese and Italian; Portuguese is listed first
        assert detect_language("quando?") == LanguageTag.PORTUGUESE

    def test_single_letter_words_count(self):
        # "a" (Portuguese) and "i" (Italian) tie, first candidate wins
        assert detect_language("I want a demo") == LanguageTag.PORTUGUESE

    def test_case_insensitive(self):
        assert detect_language("HOLA GRACIAS") == LanguageTag.SPANISH
        assert detect_language("Danke Schön") == LanguageTag.GERMAN

    def test_repeated_words_are_counted(self):
        scores = score_latin_languages("danke danke danke")
        assert scores[LanguageTag.GERMAN] == 3

    def test_whole_words_only(self):
        assert score_latin_languages("hallowed")[LanguageTag.GERMAN] == 0
        assert detect_language("hallowed ground") == LanguageTag.ENGLISH

    def test_scores_follow_candidate_order(self):
        assert list(score_latin_languages("")) == [r.tag for r in SCORED_KEYWORD_RULES]


class TestSecondaryLanguages:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Goedemorgen, hoeveel kost het?", LanguageTag.DUTCH),
            ("Merhaba, nasılsınız?", LanguageTag.TURKISH),
            ("Terima kasih banyak", LanguageTag.INDONESIAN),
            ("Xin chào bạn", LanguageTag.VIETNAMESE),
        ],
    )
    def test_secondary_detection(self, text, expected):
        assert detect_language(text) == expected

    def test_scored_languages_take_precedence(self):
        # "hallo" is both German and Dutch; German is scored first
        assert detect_language("hallo") == LanguageTag.GERMAN


class TestHinglish:
    @pytest.mark.parametrize(
        "text",
        [
            "kya haal hai aap ka",
            "mujhe demo chahiye",
            "namaste, bilkul",
            "aap kaise hain",
        ],
    )
    def test_romanized_hindi(self, text):
        assert detect_language(text) == LanguageTag.HINGLISH

    def test_devanagari_is_hindi_not_hinglish(self):
        assert detect_language("क्या हाल है") == LanguageTag.HINDI


class TestDetectorBehaviour:
    def test_alias(self):
        assert detect is detect_language

    def test_idempotent(self):
        text = "Bonjour, je voudrais une démo"
        assert detect_language(text) == detect_language(text)

    def test_result_is_always_a_tag(self):
        for text in ["", "abc", "hola", "नमस्ते", "??", "kya"]:
            assert isinstance(detect_language(text), LanguageTag)

    def test_tag_values_are_lowercase_names(self):
        assert LanguageTag.HINGLISH.value == "hinglish"
        assert LanguageTag("spanish") is LanguageTag.SPANISH

    def test_custom_default(self):
        detector = LanguageDetector(default=LanguageTag.HINDI)
        assert detector.detect("xyz") == LanguageTag.HINDI
        assert detector.detect("") == LanguageTag.HINDI

    def test_custom_rule_tables(self):
        detector = LanguageDetector(
            script_rules=(),
            scored_rules=(),
            secondary_rules=(),
            hinglish_rules=(),
        )
        assert detector.detect("नमस्ते hola") == LanguageTag.ENGLISH

    def test_concurrent_calls(self):
        texts = ["hola gracias", "नमस्ते", "kya haal hai", "xyz", "merci beaucoup"] * 40
        expected = [detect_language(t) for t in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(detect_language, texts))
        assert results == expected
