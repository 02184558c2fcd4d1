"""
Time Code Module

Parses and formats caption times in the three notations the editor deals with:
- subtitle-exchange (SRT):   HH:MM:SS,mmm
- web-video-text (WebVTT):   HH:MM:SS.mmm
- readable (timeline/list):  M:SS or H:MM:SS

Parsing is best-effort: editor fields are often half-typed, so anything that
cannot be read becomes 0.0 instead of raising.
"""
import math
import re
from enum import Enum
from typing import Optional, Union


class TimeCodeStyle(str, Enum):
    """Textual time notations"""
    SUBTITLE_EXCHANGE = "subtitle-exchange"
    WEB_VIDEO_TEXT = "web-video-text"
    READABLE = "readable"


class TimeCode:
    """
    Stateless time code conversion.

    Usage:
        seconds = TimeCode.parse("00:01:02,500")   # 62.5
        TimeCode.format(62.5, TimeCodeStyle.READABLE)  # "1:02"
    """

    # HH:MM:SS[.,]fff, also the readable M:SS / H:MM:SS forms
    CLOCK_PATTERN = re.compile(
        r'(?:(\d+):)?(\d{1,2}):(\d{2})(?:[.,](\d{1,3}))?'
    )

    # Plain seconds from numeric editor fields: 12 or 12.5
    SECONDS_PATTERN = re.compile(r'\d+(?:\.\d+)?')

    @classmethod
    def parse(cls, text: Optional[str]) -> float:
        """
        Parse a time code to seconds.

        Args:
            text: Time code in any supported notation

        Returns:
            Seconds as float (0.0 when the text cannot be parsed)
        """
        if not text or not isinstance(text, str):
            return 0.0

        text = text.strip()

        match = cls.CLOCK_PATTERN.fullmatch(text)
        if match:
            hours = int(match.group(1) or 0)
            minutes = int(match.group(2))
            seconds = int(match.group(3))
            if seconds > 59 or (match.group(1) and minutes > 59):
                return 0.0
            fraction = match.group(4) or ""
            milliseconds = int(fraction.ljust(3, '0')) if fraction else 0
            return (((hours * 60 + minutes) * 60 + seconds) * 1000 + milliseconds) / 1000

        if cls.SECONDS_PATTERN.fullmatch(text):
            return float(text)

        return 0.0

    @classmethod
    def format(
        cls,
        seconds: Union[int, float],
        style: Union[TimeCodeStyle, str] = TimeCodeStyle.SUBTITLE_EXCHANGE
    ) -> str:
        """
        Format seconds as a time code.

        Args:
            seconds: Time in seconds (negative values are clamped to 0)
            style: Target notation

        Returns:
            Formatted time code
        """
        style = TimeCodeStyle(style)
        seconds = max(0.0, float(seconds))

        # Round away float noise before flooring to whole milliseconds
        total_ms = math.floor(round(seconds * 1000, 6))
        total_secs, millis = divmod(total_ms, 1000)
        total_mins, secs = divmod(total_secs, 60)
        hours, minutes = divmod(total_mins, 60)

        if style == TimeCodeStyle.READABLE:
            if hours:
                return f"{hours}:{minutes:02d}:{secs:02d}"
            return f"{minutes}:{secs:02d}"

        separator = "," if style == TimeCodeStyle.SUBTITLE_EXCHANGE else "."
        return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{millis:03d}"


def parse_timecode(text: Optional[str]) -> float:
    """Convenience wrapper for TimeCode.parse"""
    return TimeCode.parse(text)


def format_timecode(
    seconds: Union[int, float],
    style: Union[TimeCodeStyle, str] = TimeCodeStyle.SUBTITLE_EXCHANGE
) -> str:
    """Convenience wrapper for TimeCode.format"""
    return TimeCode.format(seconds, style)
