import itertools
from typing import Optional

import pytest

from zirnevis.subtitles import CaptionDraft, CaptionSet, PlaybackClock


class FakeClock(PlaybackClock):
    """In-memory playback clock."""

    def __init__(self, duration: Optional[float] = 60.0, time: float = 0.0):
        self._time = time
        self._duration = duration
        self.seeks = []

    @property
    def current_time(self) -> float:
        return self._time

    @property
    def duration(self) -> Optional[float]:
        return self._duration

    def seek(self, time: float) -> None:
        self.seeks.append(time)
        self._time = time

    def advance(self, time: float) -> None:
        """Move the playhead as playback would, without a seek."""
        self._time = time


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def captions():
    """Caption set with predictable ids: c1, c2, ..."""
    counter = itertools.count(1)
    return CaptionSet(id_factory=lambda: f"c{next(counter)}")


def draft(start, end, text="سلام", **kwargs):
    return CaptionDraft(start_time=start, end_time=end, target_text=text, **kwargs)
