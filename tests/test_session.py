from unittest.mock import MagicMock

import pytest

from conftest import FakeClock
from zirnevis.subtitles import EditorSession, InvalidRangeError


@pytest.fixture
def session(captions, clock):
    return EditorSession(captions, clock, on_active_change=MagicMock(), default_duration=3.0)


def test_mark_and_commit(session, clock):
    clock.advance(1.25)
    session.playback.on_time_update(1.25)
    session.mark_start()
    clock.advance(4.0)
    session.playback.on_time_update(4.0)
    session.mark_end()
    session.draft.target_text = "سلام"

    caption = session.commit_draft()

    assert (caption.start_time, caption.end_time) == (1.25, 4.0)
    assert session.captions.all() == (caption,)
    assert session.playback.active is caption


def test_commit_prepares_next_draft(session):
    session.draft.start_time = 0
    session.draft.end_time = 2
    session.draft.target_text = "سلام"
    session.commit_draft()

    assert session.draft.start_time == 2
    assert session.draft.end_time == 5
    assert session.draft.target_text == ""


def test_commit_requires_translation(session):
    session.draft.start_time = 0
    session.draft.end_time = 2
    session.draft.target_text = "   "

    with pytest.raises(ValueError):
        session.commit_draft()
    assert len(session.captions) == 0


def test_commit_invalid_range_keeps_draft(session):
    session.draft.start_time = 3
    session.draft.end_time = 1
    session.draft.target_text = "سلام"

    with pytest.raises(InvalidRangeError):
        session.commit_draft()
    assert session.draft.target_text == "سلام"


def test_remove_active_caption_clears_active(session):
    session.draft.start_time = 0
    session.draft.end_time = 2
    session.draft.target_text = "سلام"
    caption = session.commit_draft()
    session.playback.on_time_update(1)

    session.remove(caption.id)

    assert session.playback.active is None


def test_update_retimes_active_caption(session):
    session.draft.start_time = 0
    session.draft.end_time = 2
    session.draft.target_text = "سلام"
    caption = session.commit_draft()
    session.playback.on_time_update(1)

    session.update(caption.id, start_time=1.5)

    assert session.playback.active is None


def test_select_seeks_to_caption_start(session, clock):
    session.draft.start_time = 10
    session.draft.end_time = 12
    session.draft.target_text = "سلام"
    caption = session.commit_draft()

    assert session.select(caption.id) is caption
    assert clock.seeks[-1] == 10
    assert session.playback.active is caption
    assert session.select("missing") is None


def test_marks_use_clock_time_when_opened_mid_playback(captions):
    clock = FakeClock(time=12.0)
    session = EditorSession(captions, clock)

    assert session.mark_start() == 12.0
    clock.advance(14.5)
    assert session.mark_end() == 14.5
    assert (session.draft.start_time, session.draft.end_time) == (12.0, 14.5)
