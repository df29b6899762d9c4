"""Generic layered config resolution.

Domain-agnostic: no mqadmin service dependencies.

Terminology
-----------
- **Scope**: a single config layer (e.g. "global", "env", "cli").
- **Stack**: an ordered list of scopes, lowest-priority first.
- **deep_merge**: recursive dict merge where ``None`` deletes a key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ---------------------------------------------------------------------------
# Merge helpers
# ---------------------------------------------------------------------------


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    Rules
    -----
    * Dicts are merged recursively.
    * A ``None`` value in *override* **deletes** the corresponding key.
    * Any other value in *override* replaces the base value wholesale.
    """
    merged: dict = {}

    for key in list(base) + [k for k in override if k not in base]:
        if key in override:
            ov = override[key]
            if ov is None:
                continue
            bv = base.get(key)
            if isinstance(ov, dict) and isinstance(bv, dict):
                merged[key] = deep_merge(bv, ov)
            else:
                merged[key] = ov
        else:
            merged[key] = base[key]
    return merged


# ---------------------------------------------------------------------------
# Scope / Stack
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(load_yaml_scope("global", global_path))
        stack.push(ConfigScope("env", None, env_data))
        namesrv = stack.resolve_section("namesrv")
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve_section(self, key: str) -> dict:
        """Deep-merge one top-level section across all scopes, in push order."""
        result: dict = {}
        for scope in self._scopes:
            section = scope.data.get(key)
            if isinstance(section, dict):
                result = deep_merge(result, section)
        return result


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing.

    A file whose top level is not a mapping is treated as empty.
    """
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        data = {}
    if not isinstance(data, dict):
        data = {}
    return ConfigScope(level=level, source=path, data=data)
