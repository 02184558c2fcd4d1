"""
Editor Session

One subtitle editing session: the caption set, its playback sync, and the
draft being typed in the "add caption" form.
"""
from typing import Any, Optional

from ..config import settings
from .caption_set import CaptionSet
from .models import Caption, CaptionDraft
from .playback import ActiveChangeCallback, PlaybackClock, PlaybackSync


class EditorSession:
    """
    Glue between editor actions, the caption set and playback.

    Usage:
        session = EditorSession(store.load(), clock)
        session.mark_start()
        ...
        session.mark_end()
        session.draft.target_text = "سلام"
        session.commit_draft()
    """

    def __init__(
        self,
        captions: CaptionSet,
        clock: PlaybackClock,
        on_active_change: Optional[ActiveChangeCallback] = None,
        default_duration: float = settings.DEFAULT_CAPTION_DURATION
    ):
        self.captions = captions
        self.playback = PlaybackSync(captions, clock, on_active_change=on_active_change)
        self.default_duration = default_duration
        self.draft = CaptionDraft(start_time=0.0, end_time=0.0)

    def mark_start(self) -> float:
        """Use the clock's current time as the draft's start"""
        self.draft.start_time = self.playback.clock.current_time
        return self.draft.start_time

    def mark_end(self) -> float:
        """Use the clock's current time as the draft's end"""
        self.draft.end_time = self.playback.clock.current_time
        return self.draft.end_time

    def commit_draft(self) -> Caption:
        """
        Add the draft to the caption set and start the next draft.

        The next draft begins where this caption ends and lasts
        default_duration seconds.

        Raises:
            ValueError: the draft has no translation
            InvalidRangeError: the draft's range is invalid
        """
        if not (self.draft.target_text or "").strip():
            raise ValueError("Caption draft has no translation")

        caption = self.captions.add(self.draft)
        self.draft = CaptionDraft(
            start_time=caption.end_time,
            end_time=caption.end_time + self.default_duration,
        )
        self.playback.refresh()
        return caption

    def update(self, caption_id: str, **changes: Any) -> Caption:
        caption = self.captions.update(caption_id, **changes)
        self.playback.refresh()
        return caption

    def remove(self, caption_id: str) -> Optional[Caption]:
        caption = self.captions.remove(caption_id)
        self.playback.refresh()
        return caption

    def select(self, caption_id: str) -> Optional[Caption]:
        """Jump playback to a caption's start (timeline/list click)"""
        caption = self.captions.get(caption_id)
        if caption is None:
            return None
        self.playback.seek(caption.start_time)
        return caption
