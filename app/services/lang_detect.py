"""
Heuristic language detection for chat messages and voice utterances.

Non-Latin scripts are recognised from Unicode ranges; Latin-script languages
are recognised from characteristic words. Rule tables are ordered and built
once at import time, so ``detect_language`` is a pure function of its input.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Pattern, Tuple


class LanguageTag(str, Enum):
    """Closed set of language identifiers understood by the assistant."""

    ENGLISH = "english"
    HINDI = "hindi"
    HINGLISH = "hinglish"
    BENGALI = "bengali"
    TAMIL = "tamil"
    TELUGU = "telugu"
    GUJARATI = "gujarati"
    KANNADA = "kannada"
    MALAYALAM = "malayalam"
    PUNJABI = "punjabi"
    ODIA = "odia"
    ARABIC = "arabic"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"
    RUSSIAN = "russian"
    THAI = "thai"
    HEBREW = "hebrew"
    GREEK = "greek"
    SPANISH = "spanish"
    FRENCH = "french"
    GERMAN = "german"
    PORTUGUESE = "portuguese"
    ITALIAN = "italian"
    DUTCH = "dutch"
    TURKISH = "turkish"
    INDONESIAN = "indonesian"
    VIETNAMESE = "vietnamese"
    # Profiles exist for these but no detection rule does
    MALAY = "malay"
    POLISH = "polish"
    UKRAINIAN = "ukrainian"
    SWEDISH = "swedish"
    DANISH = "danish"
    NORWEGIAN = "norwegian"
    CZECH = "czech"
    HUNGARIAN = "hungarian"
    ROMANIAN = "romanian"
    FILIPINO = "filipino"
    SWAHILI = "swahili"


@dataclass(frozen=True)
class ScriptRule:
    """A Unicode range test; one character in range is enough."""

    tag: LanguageTag
    pattern: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class KeywordRule:
    """Case-insensitive whole-word vocabulary for one language."""

    tag: LanguageTag
    pattern: Pattern[str]

    def score(self, text: str) -> int:
        """Number of non-overlapping keyword hits in ``text``."""
        return sum(1 for _ in self.pattern.finditer(text))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _script(tag: LanguageTag, *ranges: Tuple[int, int]) -> ScriptRule:
    char_class = "".join(f"{chr(low)}-{chr(high)}" for low, high in ranges)
    return ScriptRule(tag, re.compile(f"[{char_class}]"))


def _keywords(tag: LanguageTag, words: str) -> KeywordRule:
    alternation = "|".join(re.escape(w.strip()) for w in words.split(",") if w.strip())
    return KeywordRule(tag, re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE))


# Rarer international scripts come before the Indic block; first hit wins.
SCRIPT_RULES: Tuple[ScriptRule, ...] = (
    _script(LanguageTag.ARABIC, (0x0600, 0x06FF)),
    _script(LanguageTag.CHINESE, (0x4E00, 0x9FFF)),
    _script(LanguageTag.JAPANESE, (0x3040, 0x309F), (0x30A0, 0x30FF)),
    _script(LanguageTag.KOREAN, (0xAC00, 0xD7AF), (0x1100, 0x11FF)),
    _script(LanguageTag.RUSSIAN, (0x0400, 0x04FF)),
    _script(LanguageTag.THAI, (0x0E00, 0x0E7F)),
    _script(LanguageTag.HEBREW, (0x0590, 0x05FF)),
    _script(LanguageTag.GREEK, (0x0370, 0x03FF)),
    _script(LanguageTag.BENGALI, (0x0980, 0x09FF)),
    _script(LanguageTag.TAMIL, (0x0B80, 0x0BFF)),
    _script(LanguageTag.TELUGU, (0x0C00, 0x0C7F)),
    _script(LanguageTag.GUJARATI, (0x0A80, 0x0AFF)),
    _script(LanguageTag.KANNADA, (0x0C80, 0x0CFF)),
    _script(LanguageTag.MALAYALAM, (0x0D00, 0x0D7F)),
    _script(LanguageTag.PUNJABI, (0x0A00, 0x0A7F)),
    _script(LanguageTag.ODIA, (0x0B00, 0x0B7F)),
    _script(LanguageTag.HINDI, (0x0900, 0x097F)),
)

# Candidate order doubles as the tie-break order.
SCORED_KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    _keywords(
        LanguageTag.GERMAN,
        "hallo, danke, bitte, guten, wie, sehr, auch, aber, weil, ich, möchte, wo, "
        "wann, kann, ja, nein, deutsch, morgen, abend, welche, welcher, welches, "
        "preis, preise, modell, dienst, dienste, unternehmen, hilfe, ihr, ihre, "
        "dieser, diese, dieses, der, die, das, ein, eine, mit, ohne, für, von, mehr, "
        "weniger, machen, haben, kostet, wieviel, sie, wir, unser, unsere, ist, sind, "
        "was, warum, brauche, möglich, können, würde, gerne",
    ),
    _keywords(
        LanguageTag.FRENCH,
        "bonjour, merci, comment, êtes, très, aussi, mais, j'ai, où, quand, oui, "
        "français, bonsoir, quel, quelle, quels, quelles, prix, modèle, entreprise, "
        "aide, votre, vos, ce, cette, ces, le, la, les, un, une, des, avec, sans, "
        "pour, par, du, au, plus, moins, faire, avez, coûte, combien, vous, nous, "
        "notre, nos",
    ),
    _keywords(
        LanguageTag.SPANISH,
        "hola, gracias, buenos, buenas, cómo, está, qué, muy, también, pero, porque, "
        "tengo, quiero, necesito, dónde, cuándo, puedo, sí, español, cuál, cuáles, "
        "precio, precios, modelo, servicio, servicios, empresa, ayuda, información, "
        "su, sus, este, esta, estos, estas, el, la, los, las, un, una, unos, unas, "
        "con, sin, para, por, del, al, más, menos, hacer, tiene, tienen, cuesta, "
        "cuánto, cuánta",
    ),
    _keywords(
        LanguageTag.PORTUGUESE,
        "olá, obrigado, como, está, muito, também, mas, porque, tenho, quero, "
        "preciso, onde, quando, posso, sim, não, português, qual, quais, preço, "
        "preços, modelo, serviço, serviços, empresa, ajuda, informação, seu, sua, "
        "seus, suas, este, esta, estes, estas, o, a, os, as, um, uma, uns, umas, "
        "com, sem, para, por, do, ao, mais, menos, fazer, tem, custa, quanto",
    ),
    _keywords(
        LanguageTag.ITALIAN,
        "ciao, grazie, come, stai, molto, anche, ma, perché, ho, voglio, dove, "
        "quando, posso, sì, no, italiano, buongiorno, quale, quali, prezzo, prezzi, "
        "modello, servizio, servizi, azienda, aiuto, informazione, vostro, vostra, "
        "questo, questa, questi, queste, il, la, lo, i, le, gli, un, una, uno, con, "
        "senza, per, da, del, al, più, meno, fare, avete, costa, quanto",
    ),
)

SECONDARY_KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    _keywords(
        LanguageTag.DUTCH,
        "hallo, dank, alstublieft, hoe, gaat, zeer, ook, maar, omdat, ik heb, "
        "ik wil, waar, wanneer, kan ik, ja, nee, nederlands, welke, welk, prijs, "
        "prijzen, model, dienst, diensten, bedrijf, hulp, informatie, uw, dit, deze, "
        "de, het, een, met, zonder, voor, van, meer, minder, doen, heeft, kost, "
        "hoeveel, u, wij, ons, onze",
    ),
    _keywords(
        LanguageTag.TURKISH,
        "merhaba, teşekkür, lütfen, nasıl, çok, da, ama, çünkü, istiyorum, nerede, "
        "ne zaman, yapabilir miyim, evet, hayır, türkçe, hangi, fiyat, fiyatlar, "
        "model, hizmet, hizmetler, şirket, yardım, bilgi, sizin, bu, şu, bir, ile, "
        "için, den, dan, daha, az, yapmak, var, kaç, ne kadar, siz, biz, bizim",
    ),
    _keywords(
        LanguageTag.INDONESIAN,
        "halo, terima kasih, tolong, bagaimana, sangat, juga, tetapi, karena, saya, "
        "ingin, di mana, kapan, bisa, ya, tidak, indonesia, mana, harga, model, "
        "layanan, perusahaan, bantuan, informasi, anda, ini, itu, sebuah, dengan, "
        "tanpa, untuk, dari, lebih, kurang, melakukan, ada, berapa, kami, kita, "
        "kami punya",
    ),
    _keywords(
        LanguageTag.VIETNAMESE,
        "xin chào, cảm ơn, làm ơn, như thế nào, rất, cũng, nhưng, vì, tôi, muốn, "
        "ở đâu, khi nào, có thể, vâng, không, tiếng việt, nào, giá, mô hình, dịch vụ, "
        "công ty, giúp đỡ, thông tin, của bạn, này, đó, một, với, không có, cho, từ, "
        "hơn, ít, làm, có, bao nhiêu, bạn, chúng tôi, của chúng tôi",
    ),
)

HINGLISH_RULES: Tuple[KeywordRule, ...] = (
    _keywords(
        LanguageTag.HINGLISH,
        "hai, hain, ho, tha, thi, the, ka, ki, ke, ko, se, me, ye, wo, kya, kaise, "
        "kab, kahan, kyun, aur, par, bhi, nahi, mat, abhi, bahut, accha, theek, sab, "
        "kuch, aap, tum, hum, main, mera, tera, uska, iska, wala, wali, wale",
    ),
    _keywords(
        LanguageTag.HINGLISH,
        "karo, karna, karenge, karunga, karungi, bolo, bolna, batao, batana, dekho, "
        "dekhna, suno, sunna, jao, jana, aao, aana, khao, khana, piyo, pina, chahiye, "
        "chahte, milega, dedo, lelo",
    ),
    _keywords(
        LanguageTag.HINGLISH,
        "namaste, dhanyavad, shukriya, kripya, jaroor, zaroor, bilkul, lekin, "
        "isliye, kyunki, phir, warna, matlab, samajh, pata",
    ),
)


def score_latin_languages(text: str) -> Dict[LanguageTag, int]:
    """Keyword scores for the scored Latin-script candidates, in candidate order."""
    return {rule.tag: rule.score(text) for rule in SCORED_KEYWORD_RULES}


class LanguageDetector:
    """
    Ordered rule engine: script rules, scored keywords, secondary keywords,
    Hinglish, then the English default.
    """

    def __init__(
        self,
        script_rules: Tuple[ScriptRule, ...] = SCRIPT_RULES,
        scored_rules: Tuple[KeywordRule, ...] = SCORED_KEYWORD_RULES,
        secondary_rules: Tuple[KeywordRule, ...] = SECONDARY_KEYWORD_RULES,
        hinglish_rules: Tuple[KeywordRule, ...] = HINGLISH_RULES,
        default: LanguageTag = LanguageTag.ENGLISH,
    ):
        self.script_rules = script_rules
        self.scored_rules = scored_rules
        self.secondary_rules = secondary_rules
        self.hinglish_rules = hinglish_rules
        self.default = default

    def detect(self, text: Optional[str]) -> LanguageTag:
        """
        Guess the language of a single message.

        Args:
            text: Raw user text; may be empty

        Returns:
            Exactly one LanguageTag, ``default`` when nothing matches
        """
        if not text or not text.strip():
            return self.default

        for rule in self.script_rules:
            if rule.matches(text):
                return rule.tag

        best_tag, best_score = None, 0
        for rule in self.scored_rules:
            score = rule.score(text)
            # Strict comparison keeps the earliest candidate on ties
            if score > best_score:
                best_tag, best_score = rule.tag, score
        if best_tag is not None:
            return best_tag

        for rule in self.secondary_rules:
            if rule.matches(text):
                return rule.tag

        for rule in self.hinglish_rules:
            if rule.matches(text):
                return rule.tag

        return self.default


_default_detector = LanguageDetector()


def detect_language(text: Optional[str]) -> LanguageTag:
    """Detect the language of ``text`` with the default rule tables."""
    return _default_detector.detect(text)


detect = detect_language
