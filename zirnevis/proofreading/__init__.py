"""
Proofreading Package

Persian text handling for the subtitle editor:
- Script-variant and whitespace normalization
- Text direction detection
- Lint-style validation with issue codes and a quality score
- Reading time estimation
"""
from .models import (
    IssueCode,
    ValidationReport,
    ValidatorConfig,
)
from .normalizer import (
    PersianTextNormalizer,
    normalize,
    contains_persian_script,
    detect_direction,
    is_rtl_language,
)
from .validators import (
    PersianTextValidator,
    validate_persian_text,
    estimate_reading_time,
)

__all__ = [
    # Models
    "IssueCode",
    "ValidationReport",
    "ValidatorConfig",
    # Normalizer
    "PersianTextNormalizer",
    "normalize",
    "contains_persian_script",
    "detect_direction",
    "is_rtl_language",
    # Validator
    "PersianTextValidator",
    "validate_persian_text",
    "estimate_reading_time",
]
