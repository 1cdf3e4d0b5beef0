"""bitly_api.models

Typed records used by the client: the credential pair and the entries
returned by the ``clicks`` and ``errors`` actions.
"""
from __future__ import annotations

from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

__all__ = ["Credentials", "ClickInfo", "ErrorCode"]


class Credentials(BaseModel):
    """bit.ly account login and API key.  Immutable once built."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., min_length=1, description="bit.ly account login")
    api_key: SecretStr = Field(..., description="API key from the bit.ly account page")

    @field_validator("api_key")
    @classmethod
    def api_key_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("api_key must not be empty")
        return value

    def query_pairs(self) -> List[Tuple[str, str]]:
        return [("login", self.login), ("apiKey", self.api_key.get_secret_value())]


class ClickInfo(BaseModel):
    """One entry of ``data.clicks`` in a ``clicks`` response."""

    model_config = ConfigDict(extra="allow")

    global_clicks: int = Field(..., description="Clicks across every link sharing the global hash")
    user_clicks: int = Field(..., description="Clicks on this user's link")
    short_url: Optional[str] = None
    hash: Optional[str] = None
    global_hash: Optional[str] = None
    user_hash: Optional[str] = None
    error: Optional[str] = None


class ErrorCode(BaseModel):
    """One entry of ``results`` in an ``errors`` response.  Shared by the client cache, so read-only."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    error_code: Optional[int] = Field(default=None, alias="errorCode")
    error_message: Optional[str] = Field(default=None, alias="errorMessage")
    status_code: Optional[Union[int, str]] = Field(default=None, alias="statusCode")
