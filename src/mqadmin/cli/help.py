"""Help output: the command listing and per-command option help."""

from __future__ import annotations

from collections.abc import Iterable

from .commands.base import SubCommand
from .options import OptionSchema, global_options, render_help


def format_command_list(commands: Iterable[SubCommand], prog: str = "mqadmin") -> str:
    lines = [f"The most commonly used {prog} commands are:"]
    for cmd in commands:
        lines.append(f"   {cmd.name:<35} {cmd.description}")
    lines.append("")
    lines.append(f"See '{prog} help <command>' for more information on a specific command.")
    return "\n".join(lines)


def print_command_list(commands: Iterable[SubCommand], prog: str = "mqadmin") -> None:
    print(format_command_list(commands, prog))


def command_schema(cmd: SubCommand) -> OptionSchema:
    """Global options extended with *cmd*'s own."""
    return cmd.build_options(global_options())


def print_command_help(prog: str, schema: OptionSchema) -> None:
    print(render_help(prog, schema), end="")
