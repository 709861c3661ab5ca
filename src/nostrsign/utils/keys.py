"""Signing key loading from environment variables.

Reads a private key (64-char hex or bech32 ``nsec1``) from an environment
variable and parses it with ``nostr_sdk.Keys``. This is the only place the
package touches the process environment; the signing functions themselves
take the key as an argument.

Warning:
    Private keys must **never** be stored in configuration files, source
    code, or logged. Only the environment variable *name* is configurable.

Examples:
    ```python
    os.environ["PRIVATE_KEY"] = "nsec1..."  # pragma: allowlist secret
    config = KeysConfig()
    finish_event(template, config.private_key_hex)
    ```
"""

from __future__ import annotations

import os
from typing import Any

from nostr_sdk import Keys
from pydantic import BaseModel, Field, model_validator


ENV_PRIVATE_KEY = "PRIVATE_KEY"  # pragma: allowlist secret  # Default env var name


def load_keys_from_env(env_var: str) -> Keys:
    """Parse the private key stored in *env_var*.

    Args:
        env_var: Name of the environment variable holding the key.

    Returns:
        ``nostr_sdk.Keys`` with the secret key and its derived public key.

    Raises:
        ValueError: If the variable is unset or empty.
        nostr_sdk.NostrSdkError: If the value is not a valid key.
    """
    value = os.getenv(env_var, "").strip()

    if not value:
        raise ValueError(
            f"{env_var} environment variable is required. "
            "Generate one with: python -m nostrsign keygen"
        )

    return Keys.parse(value)


class KeysConfig(BaseModel):
    """Pydantic model that loads signing keys from an environment variable.

    Attributes:
        keys_env: Name of the environment variable to read.
        keys: Parsed ``nostr_sdk.Keys``, filled in during validation unless
            passed explicitly.

    Warning:
        ``keys`` holds a live private key. Do not dump this model to logs or
        JSON. ``arbitrary_types_allowed`` is needed because ``nostr_sdk.Keys``
        is an FFI type.
    """

    model_config = {"arbitrary_types_allowed": True}

    keys_env: str = Field(
        default=ENV_PRIVATE_KEY,
        min_length=1,
        description="Environment variable name for the private key",
    )
    keys: Keys = Field(description="Keys loaded from keys_env")

    @model_validator(mode="before")
    @classmethod
    def _load_keys_from_env(cls, data: Any) -> Any:
        if isinstance(data, dict) and "keys" not in data:
            env_var = data.get("keys_env", ENV_PRIVATE_KEY)
            data = {**data, "keys": load_keys_from_env(env_var)}
        return data

    @property
    def private_key_hex(self) -> str:
        return self.keys.secret_key().to_hex()

    @property
    def public_key_hex(self) -> str:
        return self.keys.public_key().to_hex()
