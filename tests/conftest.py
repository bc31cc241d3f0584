import json
import threading

import pytest
import requests

from transcriptkit.models import CaptionTrack
from transcriptkit.youtube.strategies import CaptionStrategy

VIDEO_ID = "dQw4w9WgXcQ"
TIMEDTEXT_EN = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"
TIMEDTEXT_DE = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=de"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """
    Scripted replacement for requests.Session.

    Routes are (method, url substring) pairs mapped to a FakeResponse, an
    exception instance to raise, or a callable taking (url, kwargs).
    Unrouted requests raise ConnectionError.
    """

    def __init__(self):
        self.routes = []
        self.calls = []
        self._lock = threading.Lock()
        self.closed = False

    def add(self, method, url_part, outcome):
        self.routes.append((method.upper(), url_part, outcome))
        return self

    def request(self, method, url, **kwargs):
        with self._lock:
            self.calls.append((method, url, kwargs))
        for route_method, url_part, outcome in self.routes:
            if route_method == method and url_part in url:
                if isinstance(outcome, Exception):
                    raise outcome
                if callable(outcome):
                    return outcome(url, kwargs)
                return outcome
        raise requests.ConnectionError(f"No route for {method} {url}")

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def close(self):
        self.closed = True

    def calls_to(self, url_part):
        return [call for call in self.calls if url_part in call[1]]


class StubStrategy(CaptionStrategy):
    """Strategy returning a fixed outcome and counting its calls."""

    def __init__(self, name, outcome):
        super().__init__(session=None)
        self.name = name
        self.outcome = outcome
        self.calls = 0

    def fetch_tracks(self, video_id):
        self.calls += 1
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return list(self.outcome)


def player_response(tracks=None, status="OK"):
    data = {"playabilityStatus": {"status": status}}
    if tracks is not None:
        data["captions"] = {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}}
    return data


def timed_text_payload():
    return {
        "events": [
            {"tStartMs": 0, "dDurationMs": 1000},
            {"tStartMs": 1000, "segs": [{"utf8": "Hello "}, {"utf8": "world"}]},
            {"tStartMs": 2000, "segs": [{"utf8": "  "}]},
            {"tStartMs": 3500, "segs": [{"utf8": "again"}]},
        ]
    }


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def en_track():
    return CaptionTrack(language_code="en", base_url=TIMEDTEXT_EN, name="English")


@pytest.fixture
def de_track():
    return CaptionTrack(language_code="de", base_url=TIMEDTEXT_DE, name="German")
