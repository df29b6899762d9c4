"""Seam between subcommands and the cluster.

Subcommands never talk to brokers or name servers themselves: they hand an
operation name and its parameters to an :class:`AdminClient`. Embedders
provide a real client through :attr:`AdminConfig.client_factory`; the
default factory returns :class:`UnavailableAdminClient`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from ..errors import AdminTransportError

if TYPE_CHECKING:
    from ..core.config import AdminConfig
    from ..security.acl import RpcHook


class AdminClient(Protocol):
    """Performs one administrative operation against the cluster."""

    def invoke(self, operation: str, params: dict[str, Any]) -> Any: ...


ClientFactory = Callable[["AdminConfig", "RpcHook | None"], AdminClient]


class UnavailableAdminClient:
    """Client used when no transport is configured; every call fails."""

    def __init__(self, namesrv_addr: str | None) -> None:
        self.namesrv_addr = namesrv_addr

    def invoke(self, operation: str, params: dict[str, Any]) -> Any:
        target = self.namesrv_addr or "<unset>"
        raise AdminTransportError(
            f"No admin transport available to run '{operation}' (namesrv: {target})"
        )


def unavailable_client_factory(config: AdminConfig, rpc_hook: RpcHook | None) -> AdminClient:
    return UnavailableAdminClient(config.namesrv_addr)
