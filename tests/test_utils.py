from transcriptkit.utils import dig, format_timestamp, format_transcript_text


def test_dig_follows_dicts_and_lists():
    data = {"a": {"b": [{"c": 1}, {"c": 2}]}}
    assert dig(data, "a", "b", 1, "c") == 2
    assert dig(data, "a", "b", -1, "c") == 2


def test_dig_resolves_missing_levels_to_default():
    data = {"a": {"b": None}, "l": [1]}
    assert dig(data, "missing") is None
    assert dig(data, "a", "b", "c") is None
    assert dig(data, "l", 5) is None
    assert dig(data, "l", "key") is None
    assert dig(data, "a", 0) is None
    assert dig("text", "a") is None
    assert dig(None, "a", default="x") == "x"


def test_format_timestamp():
    assert format_timestamp(0) == "0:00"
    assert format_timestamp(63.9) == "1:03"
    assert format_timestamp(4503) == "75:03"


def test_format_transcript_text():
    text = format_transcript_text([(1.0, "Hello world"), (65.5, "again")])
    assert text == "[0:01] Hello world\n[1:05] again"
