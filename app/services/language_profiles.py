"""
Per-language response instructions and local currency tables.

A LanguageProfile tells the model which language to answer in and which
currency the visitor presumably pays in. Rates convert from INR, the currency
the plans are priced in.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from app.services.lang_detect import LanguageTag


STARTER_PRICE_INR = 15000
PROFESSIONAL_PRICE_INR = 35000


@dataclass(frozen=True)
class LanguageProfile:
    """Response language and presumed local currency for a LanguageTag."""

    tag: LanguageTag
    display_name: str
    instruction: str
    currency: str
    symbol: str
    rate: float


@dataclass(frozen=True)
class RegionalPrice:
    region: str
    symbol: str
    currency: str
    starter: str
    professional: str


def _profile(tag, display_name, instruction, currency, symbol, rate) -> LanguageProfile:
    return LanguageProfile(tag, display_name, instruction, currency, symbol, rate)


_INR = ("INR", "₹", 1)
_EUR = ("EUR", "€", 0.011)
_USD = ("USD", "$", 0.012)

LANGUAGE_PROFILES: Dict[LanguageTag, LanguageProfile] = {
    p.tag: p
    for p in (
        # Indian languages
        _profile(LanguageTag.HINDI, "Hindi",
                 "Respond ONLY in Hindi (Devanagari script - हिंदी में जवाब दें).", *_INR),
        _profile(LanguageTag.HINGLISH, "Hinglish",
                 "Respond in Hinglish (Hindi words in Roman script mixed with English).", *_INR),
        _profile(LanguageTag.BENGALI, "Bengali",
                 "Respond ONLY in Bengali (বাংলায় উত্তর দিন).", *_INR),
        _profile(LanguageTag.TAMIL, "Tamil",
                 "Respond ONLY in Tamil (தமிழில் பதிலளிக்கவும்).", *_INR),
        _profile(LanguageTag.TELUGU, "Telugu",
                 "Respond ONLY in Telugu (తెలుగులో సమాధానం ఇవ్వండి).", *_INR),
        _profile(LanguageTag.GUJARATI, "Gujarati",
                 "Respond ONLY in Gujarati (ગુજરાતીમાં જવાબ આપો).", *_INR),
        _profile(LanguageTag.KANNADA, "Kannada",
                 "Respond ONLY in Kannada (ಕನ್ನಡದಲ್ಲಿ ಉತ್ತರಿಸಿ).", *_INR),
        _profile(LanguageTag.MALAYALAM, "Malayalam",
                 "Respond ONLY in Malayalam (മലയാളത്തിൽ മറുപടി നൽകുക).", *_INR),
        _profile(LanguageTag.PUNJABI, "Punjabi",
                 "Respond ONLY in Punjabi (ਪੰਜਾਬੀ ਵਿੱਚ ਜਵਾਬ ਦਿਓ).", *_INR),
        _profile(LanguageTag.ODIA, "Odia",
                 "Respond ONLY in Odia (ଓଡ଼ିଆରେ ଉତ୍ତର ଦିଅନ୍ତୁ).", *_INR),
        # Europe
        _profile(LanguageTag.SPANISH, "Spanish",
                 "Respond ONLY in Spanish (Por favor, responde en español).", *_EUR),
        _profile(LanguageTag.FRENCH, "French",
                 "Respond ONLY in French (Veuillez répondre en français).", *_EUR),
        _profile(LanguageTag.GERMAN, "German",
                 "Respond ONLY in German (Bitte antworten Sie auf Deutsch).", *_EUR),
        _profile(LanguageTag.ITALIAN, "Italian",
                 "Respond ONLY in Italian (Per favore, rispondi in italiano).", *_EUR),
        _profile(LanguageTag.DUTCH, "Dutch",
                 "Respond ONLY in Dutch (Antwoord alstublieft in het Nederlands).", *_EUR),
        _profile(LanguageTag.GREEK, "Greek",
                 "Respond ONLY in Greek (Παρακαλώ απαντήστε στα ελληνικά).", *_EUR),
        _profile(LanguageTag.PORTUGUESE, "Portuguese",
                 "Respond ONLY in Portuguese (Por favor, responda em português).", *_EUR),
        # USD regions
        _profile(LanguageTag.ENGLISH, "English", "Respond in English.", *_USD),
        _profile(LanguageTag.ARABIC, "Arabic",
                 "Respond ONLY in Arabic (الرجاء الرد بالعربية). For Gulf countries like "
                 "UAE, Saudi, Kuwait, Bahrain, Jordan, Qatar, Oman.", *_USD),
        # Asia Pacific
        _profile(LanguageTag.CHINESE, "Chinese",
                 "Respond ONLY in Chinese (请用中文回复).", "CNY", "¥", 0.086),
        _profile(LanguageTag.JAPANESE, "Japanese",
                 "Respond ONLY in Japanese (日本語でお答えください).", "JPY", "¥", 1.78),
        _profile(LanguageTag.KOREAN, "Korean",
                 "Respond ONLY in Korean (한국어로 답변해 주세요).", "KRW", "₩", 16.2),
        _profile(LanguageTag.THAI, "Thai",
                 "Respond ONLY in Thai (กรุณาตอบเป็นภาษาไทย).", "THB", "฿", 0.41),
        _profile(LanguageTag.INDONESIAN, "Indonesian",
                 "Respond ONLY in Indonesian (Tolong jawab dalam bahasa Indonesia).", "IDR", "Rp", 188),
        _profile(LanguageTag.VIETNAMESE, "Vietnamese",
                 "Respond ONLY in Vietnamese (Vui lòng trả lời bằng tiếng Việt).", "VND", "₫", 295),
        _profile(LanguageTag.MALAY, "Malay",
                 "Respond ONLY in Malay (Sila jawab dalam Bahasa Melayu).", "MYR", "RM", 0.053),
        # Other regions
        _profile(LanguageTag.RUSSIAN, "Russian",
                 "Respond ONLY in Russian (Пожалуйста, ответьте на русском).", "RUB", "₽", 1.08),
        _profile(LanguageTag.HEBREW, "Hebrew",
                 "Respond ONLY in Hebrew (אנא השב בעברית).", "ILS", "₪", 0.043),
        _profile(LanguageTag.TURKISH, "Turkish",
                 "Respond ONLY in Turkish (Lütfen Türkçe cevap verin).", "TRY", "₺", 0.38),
        _profile(LanguageTag.POLISH, "Polish",
                 "Respond ONLY in Polish (Proszę odpowiedzieć po polsku).", "PLN", "zł", 0.047),
        _profile(LanguageTag.UKRAINIAN, "Ukrainian",
                 "Respond ONLY in Ukrainian (Будь ласка, відповідайте українською).", "UAH", "₴", 0.49),
        _profile(LanguageTag.SWEDISH, "Swedish",
                 "Respond ONLY in Swedish (Vänligen svara på svenska).", "SEK", "kr", 0.124),
        _profile(LanguageTag.DANISH, "Danish",
                 "Respond ONLY in Danish (Svar venligst på dansk).", "DKK", "kr", 0.082),
        _profile(LanguageTag.NORWEGIAN, "Norwegian",
                 "Respond ONLY in Norwegian (Vennligst svar på norsk).", "NOK", "kr", 0.127),
        _profile(LanguageTag.CZECH, "Czech",
                 "Respond ONLY in Czech (Prosím odpovězte česky).", "CZK", "Kč", 0.274),
        _profile(LanguageTag.HUNGARIAN, "Hungarian",
                 "Respond ONLY in Hungarian (Kérem, válaszoljon magyarul).", "HUF", "Ft", 4.3),
        _profile(LanguageTag.ROMANIAN, "Romanian",
                 "Respond ONLY in Romanian (Vă rugăm să răspundeți în română).", "RON", "lei", 0.055),
        _profile(LanguageTag.FILIPINO, "Filipino",
                 "Respond ONLY in Filipino (Mangyaring sumagot sa Filipino).", "PHP", "₱", 0.67),
        _profile(LanguageTag.SWAHILI, "Swahili",
                 "Respond ONLY in Swahili (Tafadhali jibu kwa Kiswahili).", "KES", "KSh", 1.54),
    )
}


REGIONAL_PRICES: Tuple[RegionalPrice, ...] = (
    RegionalPrice("India", "₹", "INR", "15,000", "35,000"),
    RegionalPrice("USA", "$", "USD", "180", "420"),
    RegionalPrice("UK", "£", "GBP", "145", "340"),
    RegionalPrice("Europe (Spain, France, Germany, Italy, etc.)", "€", "EUR", "165", "385"),
    RegionalPrice("UAE/Dubai", "د.إ", "AED", "660", "1,540"),
    RegionalPrice("Saudi Arabia", "ر.س", "SAR", "675", "1,575"),
    RegionalPrice("Kuwait", "د.ك", "KWD", "55", "128"),
    RegionalPrice("Bahrain", "د.ب", "BHD", "68", "158"),
    RegionalPrice("Jordan", "د.أ", "JOD", "128", "298"),
    RegionalPrice("Qatar", "ر.ق", "QAR", "655", "1,530"),
    RegionalPrice("Oman", "ر.ع", "OMR", "69", "162"),
    RegionalPrice("China", "¥", "CNY", "1,290", "3,010"),
    RegionalPrice("Japan", "¥", "JPY", "26,700", "62,300"),
    RegionalPrice("South Korea", "₩", "KRW", "243,000", "567,000"),
    RegionalPrice("Russia", "₽", "RUB", "16,200", "37,800"),
    RegionalPrice("Turkey", "₺", "TRY", "5,700", "13,300"),
    RegionalPrice("Thailand", "฿", "THB", "6,150", "14,350"),
    RegionalPrice("Indonesia", "Rp", "IDR", "2,820,000", "6,580,000"),
    RegionalPrice("Vietnam", "₫", "VND", "4,425,000", "10,325,000"),
    RegionalPrice("Malaysia", "RM", "MYR", "795", "1,855"),
    RegionalPrice("Philippines", "₱", "PHP", "10,050", "23,450"),
    RegionalPrice("Israel", "₪", "ILS", "645", "1,505"),
    RegionalPrice("Australia", "$", "AUD", "275", "640"),
    RegionalPrice("Canada", "$", "CAD", "245", "570"),
    RegionalPrice("Brazil", "R$", "BRL", "900", "2,100"),
    RegionalPrice("Mexico", "$", "MXN", "3,150", "7,350"),
)


def get_language_profile(tag: Union[LanguageTag, str]) -> LanguageProfile:
    """Profile for ``tag``; unknown values fall back to English."""
    try:
        return LANGUAGE_PROFILES[LanguageTag(tag)]
    except (ValueError, KeyError):
        return LANGUAGE_PROFILES[LanguageTag.ENGLISH]


def format_price(amount: int, profile: LanguageProfile) -> str:
    return f"{profile.symbol}{amount:,}"


def local_plan_prices(tag: Union[LanguageTag, str]) -> Tuple[LanguageProfile, int, int]:
    """
    Convert the Starter and Professional plan prices into the tag's currency.

    Returns:
        (profile, starter, professional) with amounts rounded to whole units
    """
    profile = get_language_profile(tag)
    starter = int(round(STARTER_PRICE_INR * profile.rate))
    professional = int(round(PROFESSIONAL_PRICE_INR * profile.rate))
    return profile, starter, professional


def render_currency_table(prices: Tuple[RegionalPrice, ...] = REGIONAL_PRICES) -> str:
    lines: List[str] = [
        "AVAILABLE CURRENCIES (use when customer specifies their country/currency):"
    ]
    for price in prices:
        lines.append(
            f"- {price.region}: {price.symbol} ({price.currency}) - "
            f"Starter: {price.symbol}{price.starter}/month, "
            f"Professional: {price.symbol}{price.professional}/month"
        )
    lines.append("- Enterprise Plan: Custom pricing (unlimited calls) - available in all regions")
    return "\n".join(lines)
