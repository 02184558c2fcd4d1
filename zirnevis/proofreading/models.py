"""
Proofreading data models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional

from ..config import settings


class IssueCode(str, Enum):
    """Text-quality issue categories"""
    NO_PERSIAN_SCRIPT = "no-persian-script"   # nothing in Arabic script at all
    MIXED_SCRIPT = "mixed-script"             # Latin letters next to Persian


@dataclass(frozen=True)
class ValidationReport:
    """Quality report for a single translated text"""
    is_valid: bool
    issues: List[IssueCode] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    score: int = 100  # 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "issues": [i.value for i in self.issues],
            "suggestions": list(self.suggestions),
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationReport":
        return cls(
            is_valid=bool(data.get("isValid", False)),
            issues=[IssueCode(i) for i in data.get("issues", [])],
            suggestions=list(data.get("suggestions", [])),
            score=int(data.get("score", 0)),
        )


@dataclass
class ValidatorConfig:
    """Configuration for Persian text validation"""
    issue_penalty: int = settings.VALIDATION_ISSUE_PENALTY
    words_per_minute: int = settings.READING_WORDS_PER_MINUTE

    # Suggestion texts, one per issue code
    suggestions: Optional[Dict[IssueCode, str]] = None

    def suggestion_for(self, code: IssueCode) -> str:
        if self.suggestions and code in self.suggestions:
            return self.suggestions[code]
        return DEFAULT_SUGGESTIONS[code]


DEFAULT_SUGGESTIONS: Dict[IssueCode, str] = {
    IssueCode.NO_PERSIAN_SCRIPT: "Text should contain Persian characters.",
    IssueCode.MIXED_SCRIPT: (
        "Text mixes Persian and Latin script; review how the Latin words "
        "read inside right-to-left text."
    ),
}
