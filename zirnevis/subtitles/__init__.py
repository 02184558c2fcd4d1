"""
Subtitle Processing Module

Provides:
- Time code parsing and formatting (SRT, WebVTT, readable)
- The ordered caption set with validation kept in sync
- Playback synchronization (active caption, seek, skip)
- SRT/VTT import and export, JSON persistence
"""
from .timecode import TimeCode, TimeCodeStyle, parse_timecode, format_timecode
from .models import (
    Caption,
    CaptionDraft,
    CaptionError,
    InvalidRangeError,
    CaptionNotFoundError,
    DuplicateCaptionError,
)
from .caption_set import CaptionSet
from .playback import PlaybackClock, PlaybackState, PlaybackSync
from .session import EditorSession
from .parser import SubtitleParser
from .formatter import SubtitleFormatter
from .store import CaptionStore

__all__ = [
    "TimeCode",
    "TimeCodeStyle",
    "parse_timecode",
    "format_timecode",
    "Caption",
    "CaptionDraft",
    "CaptionError",
    "InvalidRangeError",
    "CaptionNotFoundError",
    "DuplicateCaptionError",
    "CaptionSet",
    "PlaybackClock",
    "PlaybackState",
    "PlaybackSync",
    "EditorSession",
    "SubtitleParser",
    "SubtitleFormatter",
    "CaptionStore",
]
