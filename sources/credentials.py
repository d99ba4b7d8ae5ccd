"""
Loads stored Google OAuth credentials.

Two files are expected, both produced by the one-off consent flow:
  - the ``installed`` client secret downloaded from Google Cloud
  - the token saved after the user granted access
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Type, TypeVar

from google.oauth2.credentials import Credentials
from pydantic import BaseModel, ValidationError

from dto.credentials import ClientSecrets, StoredToken
from errors import CredentialsError

logger = logging.getLogger(__name__)

SHEETS_READONLY_SCOPE = "https://www.googleapis.com/auth/spreadsheets.readonly"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _read_model(path: str, model: Type[_ModelT]) -> _ModelT:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialsError(f"Unable to open {path}: {exc}") from exc
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise CredentialsError(f"Malformed credentials file {path}: {exc}") from exc


def _expiry(token: StoredToken) -> Optional[datetime]:
    if token.expiry_date is None:
        return None
    # google-auth compares expiry against a naive UTC datetime
    expiry = datetime.fromtimestamp(token.expiry_date / 1000, tz=timezone.utc)
    return expiry.replace(tzinfo=None)


def load_credentials(secrets_path: str, token_path: str) -> Credentials:
    """
    Build refreshable ``Credentials`` from the client secret and stored
    token files.

    Raises ``CredentialsError`` if either file is missing or malformed,
    or if the token can neither be used nor refreshed.
    """
    secrets = _read_model(secrets_path, ClientSecrets)
    token = _read_model(token_path, StoredToken)

    if not token.access_token and not token.refresh_token:
        raise CredentialsError(
            f"Token file {token_path} has neither an access nor a refresh token"
        )

    scopes = token.scope.split() if token.scope else [SHEETS_READONLY_SCOPE]
    logger.info("Loaded OAuth credentials for client %s", secrets.installed.client_id)

    return Credentials(
        token=token.access_token,
        refresh_token=token.refresh_token,
        token_uri=secrets.installed.token_uri,
        client_id=secrets.installed.client_id,
        client_secret=secrets.installed.client_secret,
        scopes=scopes,
        expiry=_expiry(token),
    )
