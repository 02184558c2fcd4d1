"""
Subtitle Formatter Module

Exports captions as SRT or WebVTT.
Supports dual subtitles (translation + original).
"""
from typing import Iterable, List
from pathlib import Path
from loguru import logger

from .models import Caption
from .timecode import TimeCode, TimeCodeStyle


class SubtitleFormatter:
    """
    Formats captions into SRT or VTT content.

    Captions without a translation are skipped; a cue with no text is
    not valid in either format.
    """

    def format_srt(
        self,
        captions: Iterable[Caption],
        dual_subtitles: bool = False
    ) -> str:
        """
        Format captions as SRT content.

        Args:
            captions: Captions in display order
            dual_subtitles: Include original text below the translation

        Returns:
            SRT formatted string
        """
        lines = []

        for index, caption in enumerate(self._exportable(captions), 1):
            lines.append(str(index))

            start_ts = TimeCode.format(caption.start_time, TimeCodeStyle.SUBTITLE_EXCHANGE)
            end_ts = TimeCode.format(caption.end_time, TimeCodeStyle.SUBTITLE_EXCHANGE)
            lines.append(f"{start_ts} --> {end_ts}")

            lines.extend(self._cue_text(caption, dual_subtitles))
            lines.append("")

        return "\n".join(lines)

    def format_vtt(
        self,
        captions: Iterable[Caption],
        dual_subtitles: bool = False
    ) -> str:
        """
        Format captions as WebVTT content.

        Args:
            captions: Captions in display order
            dual_subtitles: Include original text below the translation

        Returns:
            VTT formatted string
        """
        lines = ["WEBVTT", ""]

        for caption in self._exportable(captions):
            start_ts = TimeCode.format(caption.start_time, TimeCodeStyle.WEB_VIDEO_TEXT)
            end_ts = TimeCode.format(caption.end_time, TimeCodeStyle.WEB_VIDEO_TEXT)
            lines.append(f"{start_ts} --> {end_ts}")

            lines.extend(self._cue_text(caption, dual_subtitles))
            lines.append("")

        return "\n".join(lines)

    def save(
        self,
        captions: Iterable[Caption],
        output_path: Path,
        dual_subtitles: bool = False
    ) -> bool:
        """
        Save captions to a .srt or .vtt file (format chosen by extension).

        Args:
            captions: Captions in display order
            output_path: Output file path
            dual_subtitles: Include original text

        Returns:
            True if successful
        """
        output_path = Path(output_path)
        try:
            if output_path.suffix.lower() == ".vtt":
                content = self.format_vtt(captions, dual_subtitles)
            else:
                content = self.format_srt(captions, dual_subtitles)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding='utf-8')
            logger.info(f"Saved subtitles: {output_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save subtitles {output_path}: {e}")
            return False

    def _exportable(self, captions: Iterable[Caption]) -> List[Caption]:
        captions = list(captions)
        exportable = [c for c in captions if c.target_text]
        if len(exportable) < len(captions):
            logger.warning(f"Skipping {len(captions) - len(exportable)} untranslated captions")
        return exportable

    def _cue_text(self, caption: Caption, dual_subtitles: bool) -> List[str]:
        lines = [caption.target_text]
        if dual_subtitles and caption.source_text:
            lines.append(caption.source_text.strip())
        return lines
