"""Option schemas and their argparse-backed parser and help renderer.

An :class:`OptionSchema` is the declarative list of flags a command accepts.
Schemas are immutable: commands extend the global schema by returning a new
one from ``with_options``.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from ..lib.errors import OptionParseError


@dataclass(frozen=True)
class OptionSpec:
    """One command-line flag."""

    short: str | None
    """Short name without the dash (``"n"``, ``"qn"``), or None for long-only."""

    long: str
    """Long name without dashes; also the key the parsed value is stored under."""

    description: str

    has_arg: bool = True
    required: bool = False

    @property
    def flags(self) -> list[str]:
        names = [f"--{self.long}"]
        if self.short:
            names.insert(0, f"-{self.short}")
        return names

    @property
    def label(self) -> str:
        return "/".join(self.flags)


def opt(
    short: str | None,
    long: str,
    description: str,
    *,
    has_arg: bool = True,
    required: bool = False,
) -> OptionSpec:
    return OptionSpec(short, long, description, has_arg=has_arg, required=required)


def flag(short: str | None, long: str, description: str) -> OptionSpec:
    return OptionSpec(short, long, description, has_arg=False)


@dataclass(frozen=True)
class OptionSchema:
    """Ordered, immutable collection of option specs."""

    specs: tuple[OptionSpec, ...] = ()

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def get(self, key: str) -> OptionSpec | None:
        """Find a spec by its short or long name."""
        for spec in self.specs:
            if key == spec.long or (spec.short is not None and key == spec.short):
                return spec
        return None

    def with_options(self, *specs: OptionSpec) -> OptionSchema:
        """Return a new schema with *specs* appended.

        Raises ValueError if a short or long name is already declared.
        """
        taken = set()
        for existing in self.specs:
            taken.update(existing.flags)
        for spec in specs:
            clash = taken.intersection(spec.flags)
            if clash:
                raise ValueError(f"Option {', '.join(sorted(clash))} is already declared")
            taken.update(spec.flags)
        return OptionSchema(self.specs + tuple(specs))


def global_options() -> OptionSchema:
    """Options every command accepts."""
    return OptionSchema(
        (
            flag("h", "help", "Print help"),
            opt("n", "namesrvAddr", "Name server address list, eg: '192.168.0.1:9876;192.168.0.2:9876'"),
        )
    )


class ParsedOptions:
    """Values parsed from the command line, looked up by short or long name."""

    def __init__(self, schema: OptionSchema, values: dict[str, Any], args: list[str]) -> None:
        self._schema = schema
        self._values = values
        self.args = args

    def _spec(self, key: str) -> OptionSpec | None:
        return self._schema.get(key)

    def has_option(self, key: str) -> bool:
        spec = self._spec(key)
        if spec is None:
            return False
        value = self._values.get(spec.long)
        if spec.has_arg:
            return value is not None
        return bool(value)

    def get_value(self, key: str, default: str | None = None) -> str | None:
        spec = self._spec(key)
        if spec is None or not spec.has_arg:
            return default
        value = self._values.get(spec.long)
        return default if value is None else value

    def as_dict(self) -> dict[str, Any]:
        """Present options only, keyed by long name."""
        return {spec.long: self._values[spec.long] for spec in self._schema if self.has_option(spec.long)}

    def __repr__(self) -> str:
        return f"ParsedOptions({self.as_dict()!r}, args={self.args!r})"


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str):  # type: ignore[override]
        raise OptionParseError(message)


def build_parser(prog: str, schema: OptionSchema) -> argparse.ArgumentParser:
    parser = _OptionParser(prog=prog, add_help=False, allow_abbrev=False)
    for spec in schema:
        # argparse %-formats help strings
        help_text = spec.description.replace("%", "%%")
        if spec.has_arg:
            parser.add_argument(
                *spec.flags,
                dest=spec.long,
                metavar=f"<{spec.long}>",
                required=spec.required,
                help=help_text,
            )
        else:
            parser.add_argument(*spec.flags, dest=spec.long, action="store_true", help=help_text)
    return parser


def _split_attached_values(schema: OptionSchema, args: Sequence[str]) -> list[str]:
    """Split ``-qn8`` into ``-qn 8`` using the longest declared short name.

    argparse only splits an attached value off a one-letter prefix, which
    would read ``-bnB`` as ``-b nB``.
    """
    exact = {f for spec in schema for f in spec.flags}
    takes_value = {f for spec in schema if spec.has_arg for f in spec.flags}
    shorts = sorted(
        (spec.short for spec in schema if spec.has_arg and spec.short), key=len, reverse=True
    )

    result: list[str] = []
    expect_value = False
    for i, token in enumerate(args):
        if expect_value:
            result.append(token)
            expect_value = False
            continue
        if token == "--":
            result.extend(args[i:])
            break
        if token.startswith("-") and not token.startswith("--") and token.split("=", 1)[0] not in exact:
            short = next((s for s in shorts if token[1:].startswith(s)), None)
            if short is not None:
                result.extend([f"-{short}", token[len(short) + 1 :]])
                continue
        result.append(token)
        expect_value = token in takes_value
    return result


def parse_options(prog: str, schema: OptionSchema, args: Sequence[str]) -> ParsedOptions:
    """Parse *args* against *schema*.

    Tokens that are not options are kept in ``ParsedOptions.args``; unknown
    options raise OptionParseError.
    """
    parser = build_parser(prog, schema)
    namespace, rest = parser.parse_known_args(_split_attached_values(schema, args))
    for token in rest:
        if token.startswith("-") and token != "-":
            raise OptionParseError(f"Unrecognized option: {token}")
    return ParsedOptions(schema, vars(namespace), rest)


def render_help(prog: str, schema: OptionSchema) -> str:
    """Usage line plus one entry per option, as argparse formats them."""
    return build_parser(prog, schema).format_help()
