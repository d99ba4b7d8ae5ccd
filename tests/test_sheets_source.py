"""Tests for the Google Sheets grid source, using a fake HTTP session."""

from typing import Any, List, Optional

import pytest
import requests
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import AuthorizedSession
from tenacity import wait_none

from dto.config import SheetsConfig
from errors import CredentialsError, DataSourceError, InvalidRangeError
from sources.sheets import GoogleSheetsSource


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    def __init__(self, *outcomes) -> None:
        self._outcomes: List[Any] = list(outcomes)
        self.calls: List[dict] = []

    def get(self, url: str, params: Optional[dict] = None, timeout: Optional[float] = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(GoogleSheetsSource._get.retry, "wait", wait_none())


class TestGoogleSheetsSource:

    def test_returns_values(self) -> None:
        session = FakeSession(
            FakeResponse(payload={"range": "'Boss Rush'!A1:Z100", "values": [["a"], [], ["b", "c"]]})
        )
        source = GoogleSheetsSource("sheet-id", session, timeout=3)
        assert source.fetch_grid("Boss Rush") == [["a"], [], ["b", "c"]]

        call = session.calls[0]
        assert call["url"] == (
            "https://sheets.googleapis.com/v4/spreadsheets/sheet-id/values/Boss%20Rush"
        )
        assert call["params"] == {"majorDimension": "ROWS"}
        assert call["timeout"] == 3

    def test_range_name_is_escaped(self) -> None:
        session = FakeSession(FakeResponse(payload={"values": []}))
        GoogleSheetsSource("id", session).fetch_grid("GL 4* Overall rankings!A1:B2")
        assert session.calls[0]["url"].endswith(
            "/values/GL%204%2A%20Overall%20rankings%21A1%3AB2"
        )

    def test_missing_values_is_empty_grid(self) -> None:
        session = FakeSession(FakeResponse(payload={"range": "Empty!A1:Z1000"}))
        assert GoogleSheetsSource("id", session).fetch_grid("Empty") == []

    def test_bad_request_is_invalid_range(self) -> None:
        session = FakeSession(
            FakeResponse(400, payload={"error": {"code": 400, "message": "Unable to parse range: Nope"}})
        )
        with pytest.raises(InvalidRangeError, match="Unable to parse range") as info:
            GoogleSheetsSource("id", session).fetch_grid("Nope")
        assert info.value.status_code == 400

    def test_other_http_error(self) -> None:
        session = FakeSession(FakeResponse(403, text="forbidden"))
        with pytest.raises(DataSourceError) as info:
            GoogleSheetsSource("id", session).fetch_grid("Sheet")
        assert not isinstance(info.value, InvalidRangeError)
        assert info.value.status_code == 403
        assert "forbidden" in str(info.value)

    def test_retries_connection_errors(self) -> None:
        session = FakeSession(
            requests.ConnectionError("reset"),
            requests.Timeout("slow"),
            FakeResponse(payload={"values": [["ok"]]}),
        )
        assert GoogleSheetsSource("id", session).fetch_grid("Sheet") == [["ok"]]
        assert len(session.calls) == 3

    def test_gives_up_after_retries(self) -> None:
        session = FakeSession(*[requests.ConnectionError("down")] * 3)
        with pytest.raises(DataSourceError, match="unreachable"):
            GoogleSheetsSource("id", session).fetch_grid("Sheet")
        assert len(session.calls) == 3

    def test_refresh_failure_is_credentials_error(self) -> None:
        session = FakeSession(RefreshError("invalid_grant"))
        with pytest.raises(CredentialsError):
            GoogleSheetsSource("id", session).fetch_grid("Sheet")
        assert len(session.calls) == 1


class TestFromConfig:

    def test_builds_authorized_session(self, credential_files) -> None:
        secrets_path, token_path = credential_files
        config = SheetsConfig(
            spreadsheet_id="abc",
            secrets_path=secrets_path,
            token_path=token_path,
            timeout_seconds=5,
        )
        source = GoogleSheetsSource.from_config(config)
        assert isinstance(source._session, AuthorizedSession)
        assert source._timeout == 5

    def test_missing_credentials(self, tmp_path) -> None:
        config = SheetsConfig(
            secrets_path=str(tmp_path / "nope.json"),
            token_path=str(tmp_path / "nope.json"),
        )
        with pytest.raises(CredentialsError):
            GoogleSheetsSource.from_config(config)
