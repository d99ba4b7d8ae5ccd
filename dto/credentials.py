from pydantic import BaseModel
from typing import List, Optional


class InstalledApp(BaseModel):
    client_id: str
    client_secret: str
    redirect_uris: List[str] = []
    token_uri: str = "https://oauth2.googleapis.com/token"


class ClientSecrets(BaseModel):
    """Shape of the ``client_secret.json`` downloaded from Google Cloud."""
    installed: InstalledApp


class StoredToken(BaseModel):
    """OAuth token saved after the one-off consent flow."""
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    token_type: Optional[str] = None
    expiry_date: Optional[int] = None  # epoch milliseconds
