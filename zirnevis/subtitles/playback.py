"""
Playback Sync Module

Bridges an external playback clock (a media element, a player process) to the
caption set: tracks which caption is active and reports each change once.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from ..config import settings
from .caption_set import CaptionSet
from .models import Caption

ActiveChangeCallback = Callable[[Optional[Caption]], None]


class PlaybackState(str, Enum):
    """Playback states, driven by the player's play/pause events"""
    PAUSED = "paused"
    PLAYING = "playing"


class PlaybackClock(ABC):
    """Abstract base class for playback time sources"""

    @property
    @abstractmethod
    def current_time(self) -> float:
        """Current playback time in seconds"""
        pass

    @property
    @abstractmethod
    def duration(self) -> Optional[float]:
        """Total media duration in seconds, None until known"""
        pass

    @abstractmethod
    def seek(self, time: float) -> None:
        """Move playback to the given time"""
        pass


class PlaybackSync:
    """
    Keeps the active caption in step with playback time.

    Neither time updates nor seeks depend on the play state: scrubbing
    while paused still moves the active caption.

    Usage:
        sync = PlaybackSync(captions, clock, on_active_change=show_caption)
        clock_events.on("timeupdate", sync.on_time_update)
        sync.skip(-5)
    """

    def __init__(
        self,
        captions: CaptionSet,
        clock: PlaybackClock,
        on_active_change: Optional[ActiveChangeCallback] = None,
        skip_seconds: float = settings.SKIP_SECONDS
    ):
        """
        Initialize playback sync.

        Args:
            captions: Caption set to look up
            clock: External playback clock
            on_active_change: Called with the new active caption (or None) on each change
            skip_seconds: Step for skip_backward/skip_forward
        """
        self.captions = captions
        self.clock = clock
        self.on_active_change = on_active_change
        self.skip_seconds = skip_seconds

        self.state = PlaybackState.PAUSED
        self.current_time = max(0.0, float(clock.current_time))  # time of the last lookup
        self._active: Optional[Caption] = None

    @property
    def active(self) -> Optional[Caption]:
        """The last reported active caption"""
        return self._active

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    # ==================== Clock events ====================

    def on_time_update(self, time: float) -> Optional[Caption]:
        """
        Handle a time update from the clock.

        Args:
            time: Current playback time in seconds

        Returns:
            The active caption at that time
        """
        self.current_time = max(0.0, float(time))
        return self._recompute()

    def on_play(self) -> None:
        self.state = PlaybackState.PLAYING

    def on_pause(self) -> None:
        self.state = PlaybackState.PAUSED

    # ==================== Navigation ====================

    def seek(self, target_time: float) -> Optional[Caption]:
        """
        Seek to a time, clamped to [0, duration].

        The active caption is recomputed right away instead of waiting
        for the clock's next update.

        Args:
            target_time: Requested time in seconds

        Returns:
            The active caption at the clamped time
        """
        time = max(0.0, float(target_time))
        duration = self.clock.duration
        if duration is not None:
            time = min(time, duration)

        self.clock.seek(time)
        self.current_time = time
        return self._recompute()

    def skip(self, delta_seconds: float) -> Optional[Caption]:
        """Seek relative to the clock's current time"""
        return self.seek(self.clock.current_time + delta_seconds)

    def skip_backward(self) -> Optional[Caption]:
        return self.skip(-self.skip_seconds)

    def skip_forward(self) -> Optional[Caption]:
        return self.skip(self.skip_seconds)

    def refresh(self) -> Optional[Caption]:
        """
        Recompute the active caption after the caption set was edited.

        An edited active caption is reported again, since the set now
        holds a new instance with the changed fields.
        """
        return self._recompute(report_replaced=True)

    def _recompute(self, report_replaced: bool = False) -> Optional[Caption]:
        caption = self.captions.active_at(self.current_time)

        previous_id = self._active.id if self._active else None
        current_id = caption.id if caption else None

        replaced = report_replaced and caption is not None and caption is not self._active
        self._active = caption
        if current_id != previous_id or replaced:
            logger.debug(f"Active caption at {self.current_time:.3f}s: {current_id}")
            if self.on_active_change is not None:
                self.on_active_change(caption)

        return caption
