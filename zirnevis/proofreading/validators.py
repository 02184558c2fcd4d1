"""
Persian text validation

A heuristic lint over already-normalized translations. It does not judge
translation quality; it catches what normalization cannot fix: text with no
Persian in it and Persian mixed with Latin script. Loanwords and proper nouns
will trip the mixed-script rule, which is acceptable.
"""
import math
import re
from typing import List, Optional

from .models import IssueCode, ValidationReport, ValidatorConfig
from .normalizer import PersianTextNormalizer

LATIN_LETTER_PATTERN = re.compile(r'[A-Za-z\u00C0-\u024F]')


class PersianTextValidator:
    """
    Validates normalized Persian text.

    Usage:
        validator = PersianTextValidator()
        report = validator.validate(normalized_text)
        if not report.is_valid:
            for suggestion in report.suggestions:
                print(suggestion)
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        normalizer: Optional[PersianTextNormalizer] = None
    ):
        """
        Initialize validator.

        Args:
            config: Validation configuration (uses settings defaults if not provided)
            normalizer: Script detection provider
        """
        self.config = config or ValidatorConfig()
        self.normalizer = normalizer or PersianTextNormalizer()

    def validate(self, text: Optional[str]) -> ValidationReport:
        """
        Validate a normalized text.

        Rules run in a fixed order, which is also the order of the
        reported issues and suggestions.

        Args:
            text: Normalized text (None is treated as empty)

        Returns:
            ValidationReport with issues, suggestions and score
        """
        text = text or ""
        issues: List[IssueCode] = []

        has_persian = self.normalizer.contains_persian_script(text)

        if not has_persian:
            issues.append(IssueCode.NO_PERSIAN_SCRIPT)
        elif LATIN_LETTER_PATTERN.search(text):
            issues.append(IssueCode.MIXED_SCRIPT)

        suggestions = [self.config.suggestion_for(code) for code in issues]
        score = max(0, 100 - self.config.issue_penalty * len(issues))

        return ValidationReport(
            is_valid=not issues,
            issues=issues,
            suggestions=suggestions,
            score=score,
        )

    def estimate_reading_time(self, text: Optional[str]) -> int:
        """
        Estimate how long a text takes to read.

        Args:
            text: Caption text

        Returns:
            Whole seconds, rounded up (0 for empty text)
        """
        words = (text or "").split()
        if not words:
            return 0
        return math.ceil(len(words) / self.config.words_per_minute * 60)


_default_validator = PersianTextValidator()


def validate_persian_text(text: Optional[str]) -> ValidationReport:
    """
    Convenience function for simple validation
    Usage: report = validate_persian_text(normalize(raw_text))
    """
    return _default_validator.validate(text)


def estimate_reading_time(text: Optional[str]) -> int:
    return _default_validator.estimate_reading_time(text)
