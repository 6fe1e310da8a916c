import os

# settings are read when gamerelease.main is imported
os.environ.setdefault("IGDB_KEY", "test-igdb-key")
os.environ.setdefault("IGDB_API_URL", "https://igdb.test")

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import orjson
import pytest
from requests.structures import CaseInsensitiveDict

from gamerelease.core.config import load_settings
from gamerelease.models.schemas import ReleaseRecord


class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200, headers: Optional[Dict[str, str]] = None, raw: Optional[bytes] = None):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self.content = raw if raw is not None else orjson.dumps(body)


class FakeSession:
    """Stands in for requests.Session; hands out queued responses in order."""
    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    def close(self):
        self.closed = True


class FakeCatalog:
    def __init__(self, records: Optional[List[ReleaseRecord]] = None, error: Optional[Exception] = None):
        self.records = records or []
        self.error = error
        self.calls = []

    def fetch_releases(self, platform_id, week):
        self.calls.append((platform_id, week))
        if self.error is not None:
            raise self.error
        return list(self.records)


def release(name: str, region: int = 1, human: str = "Oct 20, 2026", category: int = 0, **extra) -> Dict[str, Any]:
    """One release_dates entry as IGDB returns it with expand=game."""
    out = {
        "id": abs(hash((name, region, human))) % 100000,
        "game": {"id": abs(hash(name)) % 100000, "name": name},
        "date": 1792454400000,
        "human": human,
        "region": region,
        "category": category,
        "platform": 130,
    }
    out.update(extra)
    return out


@pytest.fixture
def settings():
    return load_settings(IGDB_KEY="test-igdb-key", IGDB_API_URL="https://igdb.test", _env_file=None)


@pytest.fixture
def wednesday():
    # ISO week 2026-W43 runs Mon 19 Oct .. Sun 25 Oct
    return datetime(2026, 10, 21, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_record():
    def _make(name: str, **kw) -> ReleaseRecord:
        return ReleaseRecord.model_validate(release(name, **kw))
    return _make


@pytest.fixture
def make_request():
    """Alexa request envelope as a dict."""
    def _make(request_type: str = "IntentRequest", intent: Optional[str] = None,
              console: Optional[str] = None, spoken: Optional[str] = None,
              status: str = "ER_SUCCESS_MATCH", with_slot: bool = True) -> Dict[str, Any]:
        body: Dict[str, Any] = {"type": request_type, "requestId": "amzn1.echo-api.request.test", "locale": "de-DE"}
        if intent is not None:
            slots: Dict[str, Any] = {}
            if with_slot:
                slot: Dict[str, Any] = {"name": "TYPE_OF_CONSOLE", "value": spoken if spoken is not None else console}
                if console is not None or status != "ER_SUCCESS_MATCH":
                    values = [{"value": {"name": console, "id": "id"}}] if status == "ER_SUCCESS_MATCH" else []
                    slot["resolutions"] = {"resolutionsPerAuthority": [{
                        "authority": "amzn1.er-authority.echo-sdk.test.TYPE_OF_CONSOLE",
                        "status": {"code": status},
                        "values": values,
                    }]}
                slots["TYPE_OF_CONSOLE"] = slot
            body["intent"] = {"name": intent, "confirmationStatus": "NONE", "slots": slots}
        return {"version": "1.0", "session": {"new": True}, "request": body}
    return _make
