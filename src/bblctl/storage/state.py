"""Pydantic state models with zero-value defaults.

``State()`` is the zero value: what a fresh state directory contains.
All models are frozen so a snapshot handed to a command can never be
altered behind the caller's back; derive a new one with ``model_copy``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

STATE_VERSION = 1


class AWS(BaseModel):
    """AWS credentials and region."""

    model_config = {"frozen": True}

    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = ""


class KeyPair(BaseModel):
    """EC2 key pair used to reach the director VM."""

    model_config = {"frozen": True}

    name: str = ""
    public_key: str = ""
    private_key: str = ""


class BOSH(BaseModel):
    """Director coordinates, credentials and certificates."""

    model_config = {"frozen": True}

    director_address: str = ""
    director_username: str = ""
    director_password: str = ""
    director_ssl_ca: str = ""
    director_ssl_certificate: str = ""
    director_ssl_private_key: str = ""
    manifest: str = ""


class Stack(BaseModel):
    """CloudFormation stack and load balancer settings."""

    model_config = {"frozen": True}

    name: str = ""
    lb_type: str = ""
    certificate_name: str = ""


class State(BaseModel):
    """Snapshot of everything bbl has persisted for one environment.

    Attributes:
        version: Schema version of the state file.
        env_id: Generated environment identifier.
    """

    model_config = {"frozen": True}

    version: int = STATE_VERSION
    env_id: str = ""
    aws: AWS = Field(default_factory=AWS)
    key_pair: KeyPair = Field(default_factory=KeyPair)
    bosh: BOSH = Field(default_factory=BOSH)
    stack: Stack = Field(default_factory=Stack)

    @property
    def is_empty(self) -> bool:
        """True when the snapshot equals the zero value."""
        return self == State()
