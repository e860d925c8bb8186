"""Helpers mapping language names and locales to ISO 639-1 codes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


# fmt: off
LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    "Afrikaans": "af", "Albanian": "sq", "Arabic": "ar", "Armenian": "hy",
    "Azerbaijani": "az", "Basque": "eu", "Belorussian": "be",
    "Bengali/Bangla": "bn", "Bosnian": "bs", "Bulgarian": "bg",
    "Cantonese": "zh_yue", "Catalan": "ca", "Chinese": "zh", "Croatian": "hr",
    "Czech": "cs", "Danish": "da", "Dutch": "nl", "English": "en",
    "Esperanto": "eo", "Estonian": "et", "Finnish": "fi", "French": "fr",
    "German": "de", "Greek": "el", "Hebrew": "he", "Hindi": "hi",
    "Hungarian": "hu", "Icelandic": "is", "Indonesian": "id", "Irish": "ga",
    "Italian": "it", "Japanese": "ja", "Javanese": "jv", "Kazakh": "kk",
    "Khmer (Central)": "km", "Korean": "ko", "Latvian": "lv",
    "Lithuanian": "lt", "Macedonian": "mk", "Malay": "ms", "Malayam": "ml",
    "Nepali": "ne", "Norwegian Bokmål": "nb", "Norwegian Nynorsk": "nn",
    "Persian (Farsi)": "fa", "Polish": "pl", "Portuguese": "pt",
    "Punjabi": "pa", "Romanian": "ro", "Russian": "ru", "Serbian": "sr",
    "Serbo-Croatian": "sh", "Slovakian": "sk", "Slovenian": "sl",
    "Spanish": "es", "Swahili": "sw", "Swedish": "sv", "Thai": "th",
    "Turkish": "tr", "Ukrainian": "uk", "Urdu": "ur", "Uzbek": "uz",
    "Vietnamese": "vi", "Welsh (Cymric)": "cy",
})
# fmt: on

_CODES_BY_LOWER_NAME = {name.lower(): code for name, code in LANGUAGE_CODES.items()}

# ISO 15924 code of the script the Hebrew rules are written for
HEBREW_SCRIPT = "hebr"


def language_code(name: str | None) -> str | None:
    """Return the ISO 639-1 code for an English language name.

    Examples:
        >>> language_code("german")
        'de'
        >>> language_code("[Multiple languages]") is None
        True
    """
    if not name:
        return None
    return _CODES_BY_LOWER_NAME.get(name.strip().lower())


def language_from_locale(locale: str | None) -> str | None:
    """Return the language part of a locale such as ``en_US`` or ``pt-BR``."""
    if not locale:
        return None
    language = locale.strip().replace("-", "_").split("_")[0]
    return language.lower() or None


def supported_language(language: str | None, script: str | None = None) -> str | None:
    """Return ``language`` unless its rules do not fit the given script.

    Hebrew punctuation (geresh, maqaf, gershayim) only makes sense for text
    written in Hebrew script, transliterated Hebrew gets the base rules.

    Args:
        language: ISO 639-1 code of the language.
        script: Optional ISO 15924 code of the script, e.g. ``Hebr`` or ``Latn``.
    """
    if language == "he" and script and script.strip().lower() != HEBREW_SCRIPT:
        return None
    return language
