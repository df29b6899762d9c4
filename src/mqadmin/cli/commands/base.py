# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The subcommand contract and the data-driven admin subcommand.

Every entry in the registry is a :class:`SubCommand`. Built-in commands are
:class:`AdminSubCommand` instances: a name, a description and an option
list, with execution delegated to the configured admin client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import yaml

from ...lib.errors import InvalidOptionsError
from ..options import OptionSchema, OptionSpec, ParsedOptions

if TYPE_CHECKING:
    from ...lib.core.config import AdminConfig
    from ...lib.security.acl import RpcHook


class SubCommand(ABC):
    """Capability every administrative operation exposes to the dispatcher."""

    name: str
    alias: str | None = None
    description: str = ""

    @abstractmethod
    def build_options(self, base: OptionSchema) -> OptionSchema:
        """Return *base* extended with this command's own flags."""

    @abstractmethod
    def execute(
        self,
        options: ParsedOptions,
        schema: OptionSchema,
        rpc_hook: RpcHook | None,
        config: AdminConfig,
    ) -> None:
        """Run the operation. Errors propagate to the dispatcher."""

    def matches(self, token: str) -> bool:
        """True if *token* is this command's name or alias, ignoring case."""
        wanted = token.casefold()
        if self.name.casefold() == wanted:
            return True
        return bool(self.alias) and self.alias.casefold() == wanted


@dataclass(frozen=True, eq=False)
class AdminSubCommand(SubCommand):
    """Subcommand defined by its options; runs through the admin client."""

    name: str
    description: str
    options: tuple[OptionSpec, ...] = ()
    alias: str | None = None
    one_of: tuple[tuple[str, ...], ...] = field(default=())
    """Groups of option names of which at least one must be given."""

    def build_options(self, base: OptionSchema) -> OptionSchema:
        return base.with_options(*self.options)

    def _check_groups(self, options: ParsedOptions, schema: OptionSchema) -> None:
        for group in self.one_of:
            if not any(options.has_option(key) for key in group):
                labels = ", ".join(schema.get(key).label for key in group)  # type: ignore[union-attr]
                raise InvalidOptionsError(f"{self.name}: one of {labels} is required")

    def collect_params(self, options: ParsedOptions) -> dict[str, str | bool]:
        """Values of this command's own options that were given, keyed by long name."""
        params: dict[str, str | bool] = {}
        for spec in self.options:
            if not options.has_option(spec.long):
                continue
            params[spec.long] = options.get_value(spec.long) if spec.has_arg else True
        return params

    def execute(
        self,
        options: ParsedOptions,
        schema: OptionSchema,
        rpc_hook: RpcHook | None,
        config: AdminConfig,
    ) -> None:
        self._check_groups(options, schema)
        client = config.connect(rpc_hook)
        result = client.invoke(self.name, self.collect_params(options))
        if result is None:
            return
        if isinstance(result, str):
            print(result)
        else:
            print(yaml.safe_dump(result, default_flow_style=False, sort_keys=False), end="")
