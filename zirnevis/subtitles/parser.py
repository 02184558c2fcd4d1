"""
Subtitle Parser Module

Reads SRT and WebVTT files into caption drafts for CaptionSet.add.
Time codes go through TimeCode.parse, so both ',' and '.' millisecond
separators are accepted in either format.
"""
import re
from typing import List, Optional
from pathlib import Path
from loguru import logger

from .models import CaptionDraft
from .timecode import TimeCode


class SubtitleParser:
    """
    Parser for SRT and VTT subtitle files.

    Usage:
        parser = SubtitleParser()
        drafts = parser.parse_file("episode.srt")
        for draft in drafts:
            captions.add(draft)
    """

    # Timing line: 00:00:01,000 --> 00:00:04,000 (VTT may omit hours)
    TIMING_PATTERN = re.compile(
        r'((?:\d+:)?\d{1,2}:\d{2}(?:[,.]\d{1,3})?)\s*-->\s*((?:\d+:)?\d{1,2}:\d{2}(?:[,.]\d{1,3})?)'
    )

    # VTT inline styling such as <i>, <c.yellow>, <00:00:01.000>
    TAG_PATTERN = re.compile(r'<[^>]+>')

    def __init__(self, as_source: bool = False):
        """
        Initialize parser.

        Args:
            as_source: Put cue text in source_text (importing the original
                language) instead of target_text (importing a translation)
        """
        self.as_source = as_source

    def parse_file(self, file_path: Path) -> List[CaptionDraft]:
        """
        Parse a subtitle file (format chosen by extension).

        Args:
            file_path: Path to subtitle file

        Returns:
            List of CaptionDraft objects (empty if the file is missing)
        """
        file_path = Path(file_path)

        if not file_path.exists():
            logger.error(f"Subtitle file not found: {file_path}")
            return []

        content = file_path.read_text(encoding='utf-8-sig')

        if file_path.suffix.lower() == '.vtt':
            return self.parse_vtt(content)
        return self.parse_srt(content)

    def parse_srt(self, content: str) -> List[CaptionDraft]:
        """
        Parse SRT format subtitles.

        Args:
            content: SRT file content

        Returns:
            List of CaptionDraft objects
        """
        drafts = []

        for block in self._split_blocks(content):
            lines = block.split('\n')

            # Index line is optional in loosely written files
            if '-->' not in lines[0]:
                lines = lines[1:]

            draft = self._parse_cue(lines)
            if draft is not None:
                drafts.append(draft)

        logger.info(f"Parsed {len(drafts)} captions from SRT")
        return drafts

    def parse_vtt(self, content: str) -> List[CaptionDraft]:
        """
        Parse WebVTT format subtitles.

        Args:
            content: VTT file content

        Returns:
            List of CaptionDraft objects
        """
        drafts = []

        for block in self._split_blocks(content):
            lines = block.split('\n')

            # Header, NOTE and STYLE blocks carry no cues
            if lines[0].startswith(('WEBVTT', 'NOTE', 'STYLE', 'REGION')) and '-->' not in block:
                continue

            # Optional cue identifier before the timing line
            if '-->' not in lines[0]:
                lines = lines[1:]

            draft = self._parse_cue(lines, strip_tags=True)
            if draft is not None:
                drafts.append(draft)

        logger.info(f"Parsed {len(drafts)} captions from VTT")
        return drafts

    def _split_blocks(self, content: str) -> List[str]:
        content = content.replace('\r\n', '\n').replace('\r', '\n').strip()
        return [b.strip() for b in re.split(r'\n\s*\n', content) if b.strip()]

    def _parse_cue(self, lines: List[str], strip_tags: bool = False) -> Optional[CaptionDraft]:
        if not lines:
            return None

        timing_match = self.TIMING_PATTERN.search(lines[0])
        if not timing_match:
            logger.warning(f"Skipping block without timing line: {lines[0][:40]!r}")
            return None

        start = TimeCode.parse(timing_match.group(1))
        end = TimeCode.parse(timing_match.group(2))

        if start >= end:
            logger.warning(f"Skipping cue with invalid range: {lines[0]!r}")
            return None

        text = '\n'.join(lines[1:]).strip()
        if strip_tags:
            text = self.TAG_PATTERN.sub('', text)

        if not text:
            return None

        if self.as_source:
            return CaptionDraft(start_time=start, end_time=end, source_text=text)
        return CaptionDraft(start_time=start, end_time=end, target_text=text)
