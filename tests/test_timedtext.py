import pytest

from transcriptkit.exceptions import NoTranscriptAvailable
from transcriptkit.models import CaptionTrack, TranscriptLine
from transcriptkit.timedtext import parse_timed_text, select_track, timedtext_url


def _track(code):
    return CaptionTrack(language_code=code, base_url=f"https://example.com/tt?lang={code}")


def test_parse_timed_text_concatenates_and_drops_blank_lines():
    payload = {
        "events": [
            {"tStartMs": 1000, "segs": [{"utf8": "Hello "}, {"utf8": "world"}]},
            {"tStartMs": 2000, "segs": [{"utf8": "  "}]},
        ]
    }
    assert parse_timed_text(payload) == [TranscriptLine(time=1.0, text="Hello world")]


def test_parse_timed_text_skips_events_without_segments_and_keeps_order():
    payload = {
        "events": [
            {"tStartMs": 0, "dDurationMs": 5000},
            {"tStartMs": 3500, "segs": [{"utf8": "second"}]},
            {"tStartMs": 1250, "segs": [{"utf8": "\n"}, {"tOffsetMs": 10}]},
            {"tStartMs": 1500, "segs": [{"utf8": " third "}]},
        ]
    }
    lines = parse_timed_text(payload)
    assert [line.time for line in lines] == [3.5, 1.5]
    # kept text is not trimmed
    assert lines[1].text == " third "


def test_parse_timed_text_without_events_is_no_transcript():
    with pytest.raises(NoTranscriptAvailable) as exc_info:
        parse_timed_text({"wireMagic": "pb3"}, video_id="abc")
    assert exc_info.value.video_id == "abc"


def test_parse_timed_text_with_empty_events():
    assert parse_timed_text({"events": []}) == []


def test_select_track_prefers_english_regardless_of_order():
    for tracks in (
        [_track("en"), _track("de"), _track("fr")],
        [_track("de"), _track("en"), _track("fr")],
        [_track("de"), _track("fr"), _track("en")],
    ):
        assert select_track(tracks).language_code == "en"


def test_select_track_needs_exact_code():
    tracks = [_track("en-GB"), _track("en-US")]
    assert select_track(tracks) is tracks[0]


def test_select_track_falls_back_to_first():
    tracks = [_track("ja"), _track("de")]
    assert select_track(tracks) is tracks[0]
    assert select_track(tracks) is tracks[0]


def test_select_track_honors_other_language():
    tracks = [_track("en"), _track("de")]
    assert select_track(tracks, language="de").language_code == "de"


def test_select_track_empty_raises():
    with pytest.raises(NoTranscriptAvailable):
        select_track([])


def test_timedtext_url():
    assert timedtext_url("https://x/api/timedtext?v=1&lang=en") == "https://x/api/timedtext?v=1&lang=en&fmt=json3"
    assert timedtext_url("https://x/api/timedtext") == "https://x/api/timedtext?fmt=json3"
