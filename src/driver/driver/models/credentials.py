# ABOUTME: Immutable database credentials model
# ABOUTME: Holds username, secret password and admin flag with a password-free string form

import hashlib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

ADMIN_SUFFIX = "(admin)"


class Credentials(BaseModel):
    """
    Credentials used to authenticate against a database.

    Instances are frozen pydantic models: hashable, comparable by value and
    safe to share between settings levels. A username ending in "(admin)"
    marks admin credentials, as in connection strings written for the admin
    database.

    The string form never contains the password. It carries a short SHA-256
    fingerprint instead, so that settings holding different passwords still
    have different canonical representations.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
    )

    username: str = Field(..., description="Database user name", min_length=1)
    password: SecretStr = Field(default=SecretStr(""), description="Password, never rendered in clear text")
    admin: bool = Field(default=False, description="Whether the credentials authenticate against the admin database")

    @model_validator(mode="before")
    @classmethod
    def parse_admin_suffix(cls, data: Any) -> Any:
        """Turn a trailing "(admin)" in the username into the admin flag."""
        if isinstance(data, dict):
            username = data.get("username")
            if isinstance(username, str) and username.strip().endswith(ADMIN_SUFFIX):
                data = {**data, "username": username.strip()[: -len(ADMIN_SUFFIX)], "admin": True}
        return data

    @property
    def fingerprint(self) -> str:
        """First 16 hex digits of the SHA-256 digest of the password."""
        return hashlib.sha256(self.password.get_secret_value().encode("utf-8")).hexdigest()[:16]

    def __str__(self) -> str:
        suffix = ADMIN_SUFFIX if self.admin else ""
        return f"{self.username}{suffix}#{self.fingerprint}"
