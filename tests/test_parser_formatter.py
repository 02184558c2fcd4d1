import pytest

from zirnevis.subtitles import CaptionDraft, CaptionSet, SubtitleFormatter, SubtitleParser

SRT_CONTENT = """1
00:00:01,000 --> 00:00:03,500
سلام دنیا

2
00:00:04,000 --> 00:00:06,000
خط اول
خط دوم

3
bad timing line
ignored

4
00:00:08,000 --> 00:00:07,000
inverted
"""

VTT_CONTENT = """WEBVTT

NOTE this is a comment

intro
00:01.000 --> 00:03.500
<i>Hello</i> there

00:00:04.000 --> 00:00:06.250 align:start
Second cue
"""


@pytest.fixture
def parser():
    return SubtitleParser()


@pytest.fixture
def formatter():
    return SubtitleFormatter()


def test_parse_srt(parser):
    drafts = parser.parse_srt(SRT_CONTENT)

    assert len(drafts) == 2
    assert drafts[0] == CaptionDraft(start_time=1.0, end_time=3.5, target_text="سلام دنیا")
    assert drafts[1].target_text == "خط اول\nخط دوم"


def test_parse_srt_without_indices(parser):
    drafts = parser.parse_srt("00:00:01,000 --> 00:00:02,000\nسلام\n")
    assert drafts[0].start_time == 1.0


def test_parse_srt_windows_line_endings(parser):
    drafts = parser.parse_srt(SRT_CONTENT.replace("\n", "\r\n"))
    assert len(drafts) == 2


def test_parse_vtt(parser):
    drafts = parser.parse_vtt(VTT_CONTENT)

    assert len(drafts) == 2
    assert drafts[0].start_time == 1.0
    assert drafts[0].end_time == 3.5
    assert drafts[0].target_text == "Hello there"
    assert drafts[1].end_time == 6.25


def test_parse_as_source(tmp_path):
    path = tmp_path / "original.srt"
    path.write_text("1\n00:00:01,000 --> 00:00:02,000\nHello\n", encoding="utf-8")

    drafts = SubtitleParser(as_source=True).parse_file(path)

    assert drafts[0].source_text == "Hello"
    assert drafts[0].target_text == ""


def test_parse_missing_file(parser, tmp_path):
    assert parser.parse_file(tmp_path / "missing.srt") == []


def test_format_srt(formatter):
    captions = CaptionSet()
    captions.add(CaptionDraft(start_time=4, end_time=6.25, target_text="دوم"))
    captions.add(CaptionDraft(start_time=1, end_time=3.5, target_text="اول", source_text="First"))
    captions.add(CaptionDraft(start_time=7, end_time=8))  # untranslated, skipped

    content = formatter.format_srt(captions.all())

    assert content == (
        "1\n00:00:01,000 --> 00:00:03,500\nاول\n\n"
        "2\n00:00:04,000 --> 00:00:06,250\nدوم\n"
    )


def test_format_vtt_dual(formatter):
    captions = CaptionSet()
    captions.add(CaptionDraft(start_time=1, end_time=2, target_text="سلام", source_text="Hello"))

    content = formatter.format_vtt(captions.all(), dual_subtitles=True)

    assert content == "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nسلام\nHello\n"


def test_save_and_reparse(formatter, parser, tmp_path):
    captions = CaptionSet()
    captions.add(CaptionDraft(start_time=1.25, end_time=2.75, target_text="سلام"))
    captions.add(CaptionDraft(start_time=3, end_time=4, target_text="خداحافظ"))

    for name in ("out.srt", "out.vtt"):
        path = tmp_path / "nested" / name
        assert formatter.save(captions.all(), path) is True

        drafts = parser.parse_file(path)
        assert [(d.start_time, d.end_time, d.target_text) for d in drafts] == [
            (1.25, 2.75, "سلام"),
            (3.0, 4.0, "خداحافظ"),
        ]
