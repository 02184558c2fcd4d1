"""
Persian text normalization

Translators paste text from many keyboards and sources, so the same word can
arrive spelled with Arabic code points. Stored captions always go through
normalize() first.
"""
import re
from typing import Optional

# Arabic code point -> Persian canonical form
ARABIC_YEH = "\u064a"
PERSIAN_YEH = "\u06cc"
ARABIC_KAF = "\u0643"
PERSIAN_KAF = "\u06a9"
ARABIC_HAMZA = "\u0621"
PERSIAN_HAMZA = "\u0654"  # hamza above

_CHARACTER_MAP = str.maketrans({
    ARABIC_YEH: PERSIAN_YEH,
    ARABIC_KAF: PERSIAN_KAF,
    ARABIC_HAMZA: PERSIAN_HAMZA,
})

# Arabic, Arabic Supplement, Presentation Forms-A, Presentation Forms-B
ARABIC_SCRIPT_PATTERN = re.compile(
    r'[\u0600-\u06FF\u0750-\u077F\uFB50-\uFDFF\uFE70-\uFEFF]'
)

# ZWNJ (U+200C) is not matched by \s and survives normalization
WHITESPACE_PATTERN = re.compile(r'\s+')

RTL_LANGUAGES = ("fa", "ar", "he", "ur")


class PersianTextNormalizer:
    """
    Canonicalizes script variants and whitespace.

    Usage:
        normalizer = PersianTextNormalizer()
        text = normalizer.normalize(raw_text)
        direction = normalizer.detect_direction(text)
    """

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize Persian text.

        Args:
            text: Raw editor input (None is treated as empty)

        Returns:
            Text with Persian yeh/kaf/hamza and single-spaced, trimmed whitespace
        """
        if not text:
            return ""
        if not isinstance(text, str):
            text = str(text)

        text = text.translate(_CHARACTER_MAP)
        return WHITESPACE_PATTERN.sub(" ", text).strip()

    def contains_persian_script(self, text: Optional[str]) -> bool:
        """True if any code point falls in the Arabic-script blocks"""
        if not text:
            return False
        return ARABIC_SCRIPT_PATTERN.search(text) is not None

    def detect_direction(self, text: Optional[str]) -> str:
        """Return 'rtl' for Arabic-script text, 'ltr' otherwise"""
        return "rtl" if self.contains_persian_script(text) else "ltr"


def is_rtl_language(language: Optional[str]) -> bool:
    """
    Check whether a language code is written right-to-left.

    Accepts region subtags, e.g. 'fa-IR' or 'ar_EG'.
    """
    if not language:
        return False
    primary = re.split(r'[-_]', language.strip().lower(), maxsplit=1)[0]
    return primary in RTL_LANGUAGES


_default_normalizer = PersianTextNormalizer()


def normalize(text: Optional[str]) -> str:
    """Convenience function using the shared normalizer"""
    return _default_normalizer.normalize(text)


def contains_persian_script(text: Optional[str]) -> bool:
    return _default_normalizer.contains_persian_script(text)


def detect_direction(text: Optional[str]) -> str:
    return _default_normalizer.detect_direction(text)
