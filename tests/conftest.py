"""Shared fixtures for the lookup tests."""

import pytest

from dto.leaderboard import Grid
from tests.fakes import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def leaderboard_grid() -> Grid:
    """A 10x6 sheet with the "100m" table at B3."""
    grid = [[""] * 6 for _ in range(10)]
    grid[2][1] = "100m"
    grid[3] = ["", "100m", "Name", "Time", "", "x"]
    grid[4] = ["", "1", "Alice", "9.81", "", ""]
    grid[5] = ["", "2", "Bob", "9.92", "", ""]
    grid[6] = ["", "3", "Carol", "10.01", "", ""]
    grid[7] = ["", "4", "Dave", "10.20", "", ""]
    return grid


@pytest.fixture
def credential_files(tmp_path):
    """Client secret and stored token files as written by the consent flow."""
    secrets = tmp_path / "client_secret.json"
    secrets.write_text(
        '{"installed": {"client_id": "client-123.apps.googleusercontent.com",'
        ' "client_secret": "shh", "redirect_uris": ["urn:ietf:wg:oauth:2.0:oob"]}}',
        encoding="utf-8",
    )
    token = tmp_path / "credentials.json"
    token.write_text(
        '{"access_token": "ya29.token", "refresh_token": "1//refresh",'
        ' "scope": "https://www.googleapis.com/auth/spreadsheets.readonly",'
        ' "token_type": "Bearer", "expiry_date": 1700000000000}',
        encoding="utf-8",
    )
    return str(secrets), str(token)
