"""Pydantic records for the persisted configuration and session credentials.

Both are immutable snapshots; saving produces a new instance rather than
mutating the cached one. Every field defaults to the empty string, which is
also what a missing store key loads as.
"""
from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: str = ""
    anon_key: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.endpoint) and bool(self.anon_key)


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = ""
    access_token: str = ""
    refresh_token: str = ""

    @property
    def is_complete(self) -> bool:
        """All three fields present; anything less routes to login."""
        return bool(self.username and self.access_token and self.refresh_token)

    @property
    def is_empty(self) -> bool:
        return not (self.username or self.access_token or self.refresh_token)
