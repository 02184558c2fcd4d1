import pytest

from zirnevis.proofreading import (
    PersianTextNormalizer,
    contains_persian_script,
    detect_direction,
    is_rtl_language,
    normalize,
)

ARABIC_YEH = "\u064a"
ARABIC_KAF = "\u0643"
ARABIC_HAMZA = "\u0621"
ZWNJ = "\u200c"


@pytest.fixture
def normalizer():
    return PersianTextNormalizer()


def test_arabic_yeh_becomes_persian_yeh(normalizer):
    assert normalizer.normalize("عل" + ARABIC_YEH) == "علی"


def test_arabic_kaf_becomes_persian_kaf(normalizer):
    assert normalizer.normalize(ARABIC_KAF + "تاب") == "کتاب"


def test_arabic_hamza_becomes_hamza_above(normalizer):
    assert normalizer.normalize(ARABIC_HAMZA) == "\u0654"


def test_whitespace_is_collapsed_and_trimmed(normalizer):
    assert normalizer.normalize("  سلام \t\n\n دنیا  ") == "سلام دنیا"


def test_zwnj_is_preserved(normalizer):
    text = "می" + ZWNJ + "روم"
    assert normalizer.normalize(text) == text


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t"])
def test_empty_input_gives_empty_string(normalizer, text):
    assert normalizer.normalize(text) == ""


@pytest.mark.parametrize("text", [
    "",
    "عل" + ARABIC_YEH,
    ARABIC_YEH + ARABIC_KAF + ARABIC_HAMZA,
    "  Hello   سلام\n" + ARABIC_KAF,
    "plain text",
])
def test_normalize_is_idempotent(normalizer, text):
    once = normalizer.normalize(text)
    assert normalizer.normalize(once) == once


@pytest.mark.parametrize("text,expected", [
    ("سلام", True),
    ("Hello", False),
    ("", False),
    (None, False),
    ("ݐ", True),      # Arabic Supplement
    ("ﮎ", True),      # Presentation Forms-A
    ("ﻩ", True),      # Presentation Forms-B
    ("Hello سلام", True),
])
def test_contains_persian_script(text, expected):
    assert contains_persian_script(text) is expected


def test_detect_direction():
    assert detect_direction("سلام") == "rtl"
    assert detect_direction("Hello") == "ltr"
    assert detect_direction("") == "ltr"


@pytest.mark.parametrize("language,expected", [
    ("fa", True),
    ("fa-IR", True),
    ("AR", True),
    ("he", True),
    ("ur_PK", True),
    ("en", False),
    ("", False),
    (None, False),
])
def test_is_rtl_language(language, expected):
    assert is_rtl_language(language) is expected


def test_module_level_normalize():
    assert normalize("عل" + ARABIC_YEH + "  ") == "علی"
