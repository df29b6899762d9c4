# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve a subcommand from argv, parse its options and run it.

One invocation takes exactly one of three paths:

- no arguments: list every command;
- ``help <command>``: print the option help of one command;
- ``<command> [options...]``: parse the options and execute the command.

Unknown commands and malformed options are reported, never raised. Errors
raised by a command are caught here, printed with their traceback, and
returned in the :class:`DispatchResult`.
"""

from __future__ import annotations

import sys
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..lib.core.config import AdminConfig, load_admin_config
from ..lib.errors import OptionParseError
from ..lib.security.acl import RpcHook, get_acl_rpc_hook
from ..lib.util.logging_utils import _log_debug
from .help import command_schema, print_command_help, print_command_list
from .options import parse_options, render_help
from .registry import CommandRegistry


class DispatchStatus(Enum):
    HELP = "help"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchResult:
    status: DispatchStatus
    command: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """True when help was shown or the command ran to completion."""
        return self.status in (DispatchStatus.HELP, DispatchStatus.SUCCESS)


class Dispatcher:
    """Routes one argv to the registry's commands.

    The configuration is an explicit :class:`AdminConfig`; ``-n`` replaces it
    with one carrying the given name server before the command executes, and
    :attr:`config` keeps reporting the replaced value afterwards.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        config: AdminConfig | None = None,
        rpc_hook: RpcHook | None = None,
        prog: str = "mqadmin",
    ) -> None:
        self.registry = registry
        self.prog = prog
        self._config = config
        self._rpc_hook = rpc_hook

    @property
    def config(self) -> AdminConfig:
        if self._config is None:
            self._config = load_admin_config()
        return self._config

    def _not_found(self, name: str) -> DispatchResult:
        print(f"The sub command {name} not exist.")
        return DispatchResult(DispatchStatus.NOT_FOUND, command=name)

    def _resolve_rpc_hook(self, config: AdminConfig) -> RpcHook | None:
        if self._rpc_hook is not None:
            return self._rpc_hook
        return get_acl_rpc_hook(config.acl_tools_file)

    def dispatch(self, argv: Sequence[str]) -> DispatchResult:
        args = list(argv)
        if not args:
            print_command_list(self.registry, self.prog)
            return DispatchResult(DispatchStatus.HELP)

        if len(args) == 2 and args[0] == "help":
            cmd = self.registry.find(args[1])
            if cmd is None:
                return self._not_found(args[1])
            print_command_help(f"{self.prog} {cmd.name}", command_schema(cmd))
            return DispatchResult(DispatchStatus.HELP, command=cmd.name)

        return self._run(args[0], args[1:])

    def _run(self, name: str, sub_args: list[str]) -> DispatchResult:
        cmd = self.registry.find(name)
        if cmd is None:
            return self._not_found(name)

        prog = f"{self.prog} {cmd.name}"
        schema = command_schema(cmd)
        try:
            options = parse_options(prog, schema, sub_args)
        except OptionParseError as e:
            print(f"{prog}: {e}", file=sys.stderr)
            print(render_help(prog, schema), end="")
            return DispatchResult(DispatchStatus.PARSE_ERROR, command=cmd.name, error=e)

        if options.has_option("h"):
            print_command_help(prog, schema)
            return DispatchResult(DispatchStatus.HELP, command=cmd.name)

        config = self.config
        if options.has_option("n"):
            config = config.with_namesrv_addr(options.get_value("n"))
            self._config = config
            _log_debug(f"namesrv address set to {config.namesrv_addr}")

        try:
            rpc_hook = self._resolve_rpc_hook(config)
            _log_debug(f"executing {cmd.name} with options {sorted(options.as_dict())}")
            cmd.execute(options, schema, rpc_hook, config)
        except Exception as e:
            traceback.print_exc(file=sys.stderr)
            _log_debug(f"{cmd.name} failed: {e!r}")
            return DispatchResult(DispatchStatus.FAILED, command=cmd.name, error=e)
        return DispatchResult(DispatchStatus.SUCCESS, command=cmd.name)
