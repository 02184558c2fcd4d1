"""
Caption data models
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any

from ..proofreading import ValidationReport, detect_direction


class CaptionError(Exception):
    """Base class for caption set errors"""


class InvalidRangeError(CaptionError):
    """Start time is negative or not before end time"""

    def __init__(self, start_time: float, end_time: float):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(
            f"Invalid caption range: start {start_time} must be >= 0 and before end {end_time}"
        )


class CaptionNotFoundError(CaptionError):
    """No caption with the given id"""

    def __init__(self, caption_id: str):
        self.caption_id = caption_id
        super().__init__(f"Caption not found: {caption_id}")


class DuplicateCaptionError(CaptionError):
    """Two records share one id"""

    def __init__(self, caption_id: str):
        self.caption_id = caption_id
        super().__init__(f"Duplicate caption id: {caption_id}")


@dataclass
class CaptionDraft:
    """Caption fields as entered in the editor, before they get an id"""
    start_time: float
    end_time: float
    source_text: Optional[str] = None
    target_text: str = ""
    speaker_label: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class Caption:
    """
    A timed caption: original text and its Persian translation.

    Frozen: edits go through CaptionSet.update, which swaps in a new instance.
    """
    id: str
    start_time: float  # seconds
    end_time: float    # seconds
    source_text: Optional[str] = None
    target_text: str = ""  # always normalized
    speaker_label: Optional[str] = None
    notes: Optional[str] = None
    validation: Optional[ValidationReport] = None
    last_modified: datetime = field(default_factory=datetime.now)

    @property
    def duration(self) -> float:
        """Get duration in seconds"""
        return self.end_time - self.start_time

    @property
    def char_count(self) -> int:
        return len(self.target_text)

    @property
    def direction(self) -> str:
        """Text direction of the translation ('rtl' or 'ltr')"""
        return detect_direction(self.target_text)

    def contains(self, time: float) -> bool:
        """True if time falls inside [start_time, end_time]"""
        return self.start_time <= time <= self.end_time

    def overlaps_with(self, other: "Caption") -> bool:
        """Check if this caption overlaps with another"""
        return self.start_time < other.end_time and self.end_time > other.start_time

    def to_dict(self) -> Dict[str, Any]:
        """Persistence record; validation is derived and left out"""
        return {
            "id": self.id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "sourceText": self.source_text,
            "targetText": self.target_text,
            "speakerLabel": self.speaker_label,
            "notes": self.notes,
            "lastModified": self.last_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Caption":
        last_modified = data.get("lastModified")
        if isinstance(last_modified, str):
            try:
                last_modified = datetime.fromisoformat(last_modified)
            except ValueError:
                last_modified = None

        return cls(
            id=str(data["id"]),
            start_time=float(data.get("startTime", 0)),
            end_time=float(data.get("endTime", 0)),
            source_text=data.get("sourceText"),
            target_text=data.get("targetText") or "",
            speaker_label=data.get("speakerLabel"),
            notes=data.get("notes"),
            last_modified=last_modified or datetime.now(),
        )
