"""Resilient HTTP invoker for calling a peer service.

Why a primary and a fallback?
- Inside Docker / Kubernetes the peer is reachable by its service name
  (e.g. "microservice-2:8082").
- On a laptop, outside that network, the same name doesn't resolve and the
  peer is on "localhost:8082".

So one invocation is:
    GET primary -> (transport error) -> GET fallback -> (transport error) -> failure

Exactly one fallback attempt, no backoff, and nothing remembered between calls:
every invocation starts from the primary again.
"""

from __future__ import annotations

import httpx

from .models import Address, AttemptFailure, InvocationResult, Target


def _describe_error(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__


class ResilientInvoker:
    """Call a Target's endpoint, falling back once on transport failure.

    Args:
        timeout: Seconds allowed per attempt (connect, read, write and pool).
            Both attempts get the full budget.
        path: Endpoint path on the peer.
        client: Optional `httpx.Client` to send requests through. It is not
            closed by the invoker. Without one, each invocation opens and closes
            its own client, which ignores proxy environment variables.

    The invoker only holds read-only settings, so a single instance can be
    shared by every request thread.
    """

    def __init__(
        self,
        timeout: float,
        path: str = "/hello",
        client: httpx.Client | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        self.timeout = float(timeout)
        self.path = path
        self._client = client

    def invoke(self, target: Target) -> InvocationResult:
        """Run one invocation against `target`.

        Never raises for transport errors (connection refused, DNS failure,
        timeouts): a double failure comes back as a failed InvocationResult.
        """
        if self._client is not None:
            return self._invoke_with(self._client, target)

        # Proxy env vars are ignored: only the peer itself may answer.
        with httpx.Client(timeout=self.timeout, trust_env=False) as client:
            return self._invoke_with(client, target)

    def _invoke_with(self, client: httpx.Client, target: Target) -> InvocationResult:
        # --- Primary -----------------------------------------------------------------
        try:
            resp = self._get(client, target.primary)
        except httpx.RequestError as e:
            primary_failure = AttemptFailure(address=target.primary, error=_describe_error(e))
            print(f"[Invoker] primary {target.primary} failed for {target.name}: {primary_failure.error}")
        else:
            return InvocationResult(
                target=target.name,
                payload=resp.text,
                served_by=target.primary,
                status_code=resp.status_code,
            )

        # --- Fallback (exactly once) ---------------------------------------------------
        try:
            resp = self._get(client, target.fallback)
        except httpx.RequestError as e:
            fallback_failure = AttemptFailure(address=target.fallback, error=_describe_error(e))
            print(
                f"[Invoker] fallback {target.fallback} failed for {target.name}: "
                f"{fallback_failure.error}. All addresses failed."
            )
            return InvocationResult(
                target=target.name,
                failures=[primary_failure, fallback_failure],
            )

        print(f"[Invoker] fallback {target.fallback} served {target.name}")
        return InvocationResult(
            target=target.name,
            payload=resp.text,
            served_by=target.fallback,
            status_code=resp.status_code,
            used_fallback=True,
            failures=[primary_failure],
        )

    def _get(self, client: httpx.Client, address: Address) -> httpx.Response:
        # No raise_for_status(): any HTTP answer means the peer was reachable.
        return client.get(address.url(self.path), timeout=self.timeout)
