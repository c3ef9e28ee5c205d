"""Pydantic models for microservice-1.

A Target is the peer we call. It has two addresses:
- primary: the name that resolves inside the container network
  (e.g. "microservice-2:8082")
- fallback: the loopback address used when running outside that network
  (e.g. "localhost:8082")

Addresses are validated when the Target is built, so a typo in the
environment fails the process at startup instead of on the first request.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Address(BaseModel):
    """A `host:port` pair reachable over plain HTTP."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)

    @field_validator("host")
    @classmethod
    def check_bare_host(cls, value: str) -> str:
        if "/" in value or ":" in value or value != value.strip():
            raise ValueError(f"host must be a bare hostname or IPv4 address, got {value!r}")
        return value

    @classmethod
    def parse(cls, value: str) -> Address:
        """Build an Address from its env-style form, `"host:port"`."""
        host, sep, port = value.strip().rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"expected 'host:port', got {value!r}")
        return cls(host=host, port=int(port))

    def url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"http://{self.host}:{self.port}{path}"

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class Target(BaseModel):
    """A named peer service with its primary and fallback address."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    primary: Address
    fallback: Address

    @classmethod
    def from_env_values(cls, name: str, primary: str, fallback: str) -> Target:
        return cls(name=name, primary=Address.parse(primary), fallback=Address.parse(fallback))


class AttemptFailure(BaseModel):
    """One failed attempt: where we tried and what the transport said."""

    address: Address
    error: str


class InvocationResult(BaseModel):
    """Outcome of one invocation against a Target.

    Success:
        payload / served_by / status_code are set. If the fallback served the
        call, `used_fallback` is True and `failures` holds the primary's error.

    Failure:
        payload and served_by are None; `failures` names both addresses.

    The status code is informational only. A reachable peer that answers 500
    is still a success here, because it *was* reachable.

    Any other combination of fields is rejected at construction.
    """

    target: str
    payload: str | None = None
    served_by: Address | None = None
    status_code: int | None = None
    used_fallback: bool = False
    failures: list[AttemptFailure] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_shape(self) -> InvocationResult:
        if self.served_by is not None:
            if self.payload is None or self.status_code is None:
                raise ValueError("a served result needs payload and status_code")
            expected = 1 if self.used_fallback else 0
            if len(self.failures) != expected:
                raise ValueError(
                    f"used_fallback={self.used_fallback} requires {expected} failure(s), got {len(self.failures)}"
                )
        else:
            if self.payload is not None or self.status_code is not None or self.used_fallback:
                raise ValueError("a failed result carries no payload, status_code or fallback flag")
            if len(self.failures) != 2:
                raise ValueError(f"a failed result names both attempts, got {len(self.failures)}")
        return self

    @property
    def ok(self) -> bool:
        return self.served_by is not None

    def describe(self, caller: str) -> str:
        """Human-readable line for the plain-text endpoint.

        Failure lines always start with "Failed to call", success lines with
        "<caller> called", so the two can't be confused.
        """
        if not self.ok:
            attempts = "; ".join(f"{f.address} -> {f.error}" for f in self.failures)
            return f"Failed to call {self.target}: {attempts}"

        if self.used_fallback:
            primary = self.failures[0]
            return (
                f"{caller} called {self.target} via fallback {self.served_by} "
                f"(primary {primary.address} failed: {primary.error}) and got: {self.payload}"
            )

        return f"{caller} called {self.target} at {self.served_by} and got: {self.payload}"
