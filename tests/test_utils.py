import io
import os
import tempfile
import types
import unittest.mock
from collections.abc import Iterator
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Any

from mqadmin.cli.commands.base import SubCommand
from mqadmin.cli.options import OptionSchema, opt


class RecordingCommand(SubCommand):
    """Test double that records every execute call."""

    def __init__(self, name: str, alias: str | None = None, description: str = "", error: Exception | None = None):
        self.name = name
        self.alias = alias
        self.description = description or f"{name} description"
        self.error = error
        self.calls: list[types.SimpleNamespace] = []

    def build_options(self, base: OptionSchema) -> OptionSchema:
        return base.with_options(opt("x", "extra", "extra value"))

    def execute(self, options, schema, rpc_hook, config) -> None:
        self.calls.append(
            types.SimpleNamespace(
                options=options,
                schema=schema,
                rpc_hook=rpc_hook,
                config=config,
                namesrv_addr=config.namesrv_addr,
            )
        )
        if self.error is not None:
            raise self.error


class RecordingClient:
    """Admin client that records invocations and returns a canned result."""

    def __init__(self, result: Any = None):
        self.result = result
        self.calls: list[tuple[str, dict]] = []

    def invoke(self, operation: str, params: dict) -> Any:
        self.calls.append((operation, params))
        return self.result


@contextmanager
def captured_output() -> Iterator[types.SimpleNamespace]:
    """Capture stdout and stderr; yields a namespace with ``out`` and ``err`` buffers."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        yield types.SimpleNamespace(out=out, err=err)


@contextmanager
def isolated_env(extra_env: dict[str, str] | None = None) -> Iterator[Path]:
    """Point config and state lookups at a temp directory.

    Yields the temp directory. ``NAMESRV_ADDR`` and ``ROCKETMQ_HOME`` are
    removed unless given in *extra_env*.
    """
    with tempfile.TemporaryDirectory() as td:
        base = Path(td)
        env_vars = {
            "MQADMIN_CONFIG_FILE": str(base / "config.yml"),
            "MQADMIN_STATE_DIR": str(base / "state"),
        }
        if extra_env:
            env_vars.update(extra_env)
        with unittest.mock.patch.dict(os.environ, env_vars):
            for var in ("NAMESRV_ADDR", "ROCKETMQ_HOME"):
                if var not in env_vars:
                    os.environ.pop(var, None)
            yield base
