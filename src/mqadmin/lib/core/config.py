from __future__ import annotations

import dataclasses
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml  # pip install pyyaml

from ..admin.client import AdminClient, ClientFactory, unavailable_client_factory
from ..util.config_stack import ConfigScope, ConfigStack, load_yaml_scope

if TYPE_CHECKING:
    from ..security.acl import RpcHook

# Relative to the installation root, like the broker-side conf/ directory.
ACL_CONF_TOOLS_FILE = Path("conf") / "tools.yml"

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If MQADMIN_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) ${XDG_CONFIG_HOME:-~/.config}/mqadmin/config.yml
        2) sys.prefix/etc/mqadmin/config.yml
        3) /etc/mqadmin/config.yml
    """
    env_file = os.environ.get("MQADMIN_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "mqadmin" / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "mqadmin" / "config.yml"
    etc_cfg = Path("/etc/mqadmin/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    Resolution order (first existing wins, except explicit override is returned even
    if missing to make intent visible to the user):
    - MQADMIN_CONFIG_FILE env (returned as-is)
    - ${XDG_CONFIG_HOME:-~/.config}/mqadmin/config.yml (user override)
    - sys.prefix/etc/mqadmin/config.yml (pip wheels)
    - /etc/mqadmin/config.yml (system default)
    If none exist, return the last path (/etc/mqadmin/config.yml).
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def _env_scope() -> ConfigScope:
    """Environment overrides, shaped like the global config file."""
    data: dict[str, Any] = {}
    addr = os.environ.get("NAMESRV_ADDR")
    if addr:
        data["namesrv"] = {"addr": addr}
    home = os.environ.get("ROCKETMQ_HOME")
    if home:
        data["paths"] = {"rocketmq_home": home}
    return ConfigScope("env", None, data)


def load_config_stack() -> ConfigStack:
    """Build the config stack: global file, then environment."""
    stack = ConfigStack()
    try:
        stack.push(load_yaml_scope("global", global_config_path()))
    except (OSError, yaml.YAMLError):
        pass
    stack.push(_env_scope())
    return stack


# ---------- Admin configuration context ----------


@dataclass(frozen=True)
class AdminConfig:
    """Configuration handed to every subcommand execution.

    Replaces process-wide properties: the dispatcher derives a new instance
    when ``-n`` overrides the name server, before the command runs.
    """

    namesrv_addr: str | None = None
    """Name server address list, ``host:port`` entries separated by ``;``."""

    home: Path | None = None
    """Installation root; the ACL tools file lives under it."""

    client_factory: ClientFactory = field(default=unavailable_client_factory, compare=False)

    @property
    def acl_tools_file(self) -> Path | None:
        if self.home is None:
            return None
        return self.home / ACL_CONF_TOOLS_FILE

    def with_namesrv_addr(self, addr: str) -> AdminConfig:
        return dataclasses.replace(self, namesrv_addr=addr)

    def connect(self, rpc_hook: RpcHook | None) -> AdminClient:
        """Return an admin client bound to this configuration."""
        return self.client_factory(self, rpc_hook)


def load_admin_config(client_factory: ClientFactory | None = None) -> AdminConfig:
    """Resolve :class:`AdminConfig` from the global config file and environment.

    Global config (config.yml)::

      namesrv:
        addr: 127.0.0.1:9876
      paths:
        rocketmq_home: /opt/rocketmq

    ``NAMESRV_ADDR`` and ``ROCKETMQ_HOME`` take precedence over the file.
    """
    stack = load_config_stack()
    namesrv = stack.resolve_section("namesrv")
    paths = stack.resolve_section("paths")

    addr = namesrv.get("addr")
    home = paths.get("rocketmq_home")
    return AdminConfig(
        namesrv_addr=str(addr) if addr else None,
        home=Path(str(home)).expanduser() if home else None,
        client_factory=client_factory or unavailable_client_factory,
    )
