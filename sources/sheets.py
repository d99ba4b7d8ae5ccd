"""
GridSource backed by the Google Sheets v4 ``values.get`` endpoint.

Requests go through a google-auth ``AuthorizedSession`` (a
``requests.Session`` that attaches and refreshes the OAuth token).

Retries connection errors and timeouts with exponential backoff via
tenacity.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import AuthorizedSession
from tenacity import (
    RetryError,
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from dto.config import SheetsConfig
from dto.leaderboard import Grid
from errors import CredentialsError, DataSourceError, InvalidRangeError
from sources.base import GridSource
from sources.credentials import load_credentials

logger = logging.getLogger(__name__)

_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"

# Retry configuration
_MAX_RETRIES = 3
_MIN_WAIT_SECONDS = 1
_MAX_WAIT_SECONDS = 10

_RETRYABLE_EXCEPTIONS = (
    requests.ConnectionError,
    requests.Timeout,
)

_retry_decorator = retry(
    retry=retry_if_exception_type(_RETRYABLE_EXCEPTIONS),
    stop=stop_after_attempt(_MAX_RETRIES),
    wait=wait_exponential(multiplier=1, min=_MIN_WAIT_SECONDS, max=_MAX_WAIT_SECONDS),
    before_sleep=before_sleep_log(logger, logging.WARNING),
)


class GoogleSheetsSource(GridSource):
    """Reads cell values from one spreadsheet through the Sheets REST API."""

    def __init__(
        self,
        spreadsheet_id: str,
        session: requests.Session,
        timeout: float = 10.0,
    ):
        self._spreadsheet_id = spreadsheet_id
        self._session = session
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: SheetsConfig) -> "GoogleSheetsSource":
        """Load the stored OAuth credentials named in *config*."""
        credentials = load_credentials(config.secrets_path, config.token_path)
        return cls(
            spreadsheet_id=config.spreadsheet_id,
            session=AuthorizedSession(credentials),
            timeout=config.timeout_seconds,
        )

    def _url(self, range_name: str) -> str:
        return f"{_BASE_URL}/{self._spreadsheet_id}/values/{quote(range_name, safe='')}"

    @_retry_decorator
    def _get(self, range_name: str) -> requests.Response:
        return self._session.get(
            self._url(range_name),
            params={"majorDimension": "ROWS"},
            timeout=self._timeout,
        )

    def fetch_grid(self, range_name: str) -> Grid:
        logger.info("Fetching range %r from spreadsheet %s", range_name, self._spreadsheet_id)
        try:
            response = self._get(range_name)
        except RefreshError as exc:
            raise CredentialsError(f"Could not refresh the OAuth token: {exc}") from exc
        except RetryError as exc:
            raise DataSourceError(
                f"Sheets API unreachable after {_MAX_RETRIES} attempts"
            ) from exc

        if response.status_code == 400:
            raise InvalidRangeError(_error_message(response), status_code=400)
        if not response.ok:
            raise DataSourceError(_error_message(response), status_code=response.status_code)

        payload = response.json()
        values = payload.get("values", [])
        logger.info("  -> %d row(s) in %s", len(values), payload.get("range", range_name))
        return values


def _error_message(response: requests.Response) -> str:
    """Pull the human-readable message out of a Google API error body."""
    try:
        body: Any = response.json()
    except ValueError:
        return f"HTTP {response.status_code}: {response.text[:200]}"
    error: Optional[dict] = body.get("error") if isinstance(body, dict) else None
    if error and error.get("message"):
        return f"HTTP {response.status_code}: {error['message']}"
    return f"HTTP {response.status_code}"
