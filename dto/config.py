"""
Configuration for the speedrun lookup.

Values come from ``SPEEDRUN_*`` environment variables (a ``.env`` file
is loaded by the CLI).  The model is passed explicitly to whatever needs
it; nothing here is mutated at runtime.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_SPREADSHEET_ID = "11gTjAkpm4D3uoxnYCN7ZfbiVnKyi7tmm9Vp9HvTkGpw"
DEFAULT_TOKEN_PATH = "secrets/credentials.json"
DEFAULT_SECRETS_PATH = "secrets/client_secret.json"

RowBoundMode = Literal["absolute", "relative"]
MatchMode = Literal["loose", "exact"]


class SheetsConfig(BaseModel):
    spreadsheet_id: str = DEFAULT_SPREADSHEET_ID
    token_path: str = DEFAULT_TOKEN_PATH
    secrets_path: str = DEFAULT_SECRETS_PATH

    # "absolute": the row count is the last absolute row index to read
    # "relative": the row count is the number of contestant rows to read
    row_bound_mode: RowBoundMode = "absolute"
    match_mode: MatchMode = "loose"

    timeout_seconds: float = Field(default=10.0, gt=0)

    @classmethod
    def from_env(cls) -> "SheetsConfig":
        """Build a config from ``SPEEDRUN_*`` environment variables."""
        return cls(
            spreadsheet_id=os.getenv("SPEEDRUN_SPREADSHEET_ID", DEFAULT_SPREADSHEET_ID),
            token_path=os.getenv("SPEEDRUN_TOKEN_PATH", DEFAULT_TOKEN_PATH),
            secrets_path=os.getenv("SPEEDRUN_SECRETS_PATH", DEFAULT_SECRETS_PATH),
            row_bound_mode=os.getenv("SPEEDRUN_ROW_BOUND", "absolute").lower(),
            match_mode=os.getenv("SPEEDRUN_MATCH", "loose").lower(),
            timeout_seconds=float(os.getenv("SPEEDRUN_TIMEOUT", "10")),
        )
