# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generic config stack engine."""

import tempfile
import unittest
from pathlib import Path

import yaml

from mqadmin.lib.util.config_stack import (
    ConfigScope,
    ConfigStack,
    deep_merge,
    load_yaml_scope,
)


class DeepMergeTests(unittest.TestCase):
    """Tests for deep_merge()."""

    def test_simple_override(self) -> None:
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}
        self.assertEqual(deep_merge(base, override), {"a": 1, "b": 3, "c": 4})

    def test_nested_merge(self) -> None:
        base = {"namesrv": {"addr": "a:9876", "timeout": 3}}
        override = {"namesrv": {"addr": "b:9876"}}
        self.assertEqual(deep_merge(base, override), {"namesrv": {"addr": "b:9876", "timeout": 3}})

    def test_none_deletes_key(self) -> None:
        base = {"a": 1, "b": 2, "c": 3}
        override = {"b": None}
        self.assertEqual(deep_merge(base, override), {"a": 1, "c": 3})

    def test_none_deletes_nested_key(self) -> None:
        base = {"x": {"a": 1, "b": 2}}
        override = {"x": {"a": None}}
        self.assertEqual(deep_merge(base, override), {"x": {"b": 2}})

    def test_list_replacement(self) -> None:
        base = {"items": [1, 2, 3]}
        override = {"items": [4, 5]}
        self.assertEqual(deep_merge(base, override), {"items": [4, 5]})

    def test_inputs_not_mutated(self) -> None:
        base = {"x": {"a": 1}}
        override = {"x": {"b": 2}}
        deep_merge(base, override)
        self.assertEqual(base, {"x": {"a": 1}})
        self.assertEqual(override, {"x": {"b": 2}})

    def test_key_order_base_first(self) -> None:
        merged = deep_merge({"b": 1, "a": 1}, {"c": 1, "a": 2})
        self.assertEqual(list(merged), ["b", "a", "c"])

    def test_scalar_replaces_dict(self) -> None:
        self.assertEqual(deep_merge({"x": {"a": 1}}, {"x": "flat"}), {"x": "flat"})

    def test_both_empty(self) -> None:
        self.assertEqual(deep_merge({}, {}), {})


class ConfigStackTests(unittest.TestCase):
    """Tests for ConfigScope and ConfigStack."""

    def test_multi_level_chaining(self) -> None:
        stack = ConfigStack()
        stack.push(ConfigScope("global", None, {"s": {"a": 1, "b": 1}}))
        stack.push(ConfigScope("env", None, {"s": {"b": 2, "c": 2}}))
        stack.push(ConfigScope("cli", None, {"s": {"c": 3, "d": 3}}))
        self.assertEqual(stack.resolve_section("s"), {"a": 1, "b": 2, "c": 3, "d": 3})

    def test_section_resolution(self) -> None:
        stack = ConfigStack()
        stack.push(ConfigScope("global", None, {"namesrv": {"addr": "a:9876"}, "other": 1}))
        stack.push(ConfigScope("env", None, {"namesrv": {"addr": "b:9876"}}))
        self.assertEqual(stack.resolve_section("namesrv"), {"addr": "b:9876"})

    def test_section_resolution_ignores_non_dict(self) -> None:
        stack = ConfigStack()
        stack.push(ConfigScope("global", None, {"namesrv": "oops"}))
        self.assertEqual(stack.resolve_section("namesrv"), {})

    def test_empty_stack(self) -> None:
        self.assertEqual(ConfigStack().resolve_section("namesrv"), {})

    def test_missing_section_skipped(self) -> None:
        stack = ConfigStack()
        stack.push(ConfigScope("global", None, {"namesrv": {"addr": "a:9876"}}))
        stack.push(ConfigScope("env", None, {"paths": {"rocketmq_home": "/opt"}}))
        self.assertEqual(stack.resolve_section("namesrv"), {"addr": "a:9876"})


class LoaderTests(unittest.TestCase):
    """Tests for the YAML scope loader."""

    def test_load_yaml_scope(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "test.yml"
            p.write_text(yaml.dump({"key": "value"}), encoding="utf-8")
            scope = load_yaml_scope("test", p)
            self.assertEqual(scope.level, "test")
            self.assertEqual(scope.source, p)
            self.assertEqual(scope.data, {"key": "value"})

    def test_load_yaml_missing_file(self) -> None:
        scope = load_yaml_scope("missing", Path("/nonexistent/config.yml"))
        self.assertEqual(scope.data, {})

    def test_load_yaml_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "empty.yml"
            p.write_text("", encoding="utf-8")
            self.assertEqual(load_yaml_scope("empty", p).data, {})

    def test_load_yaml_non_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "list.yml"
            p.write_text("- a\n- b\n", encoding="utf-8")
            self.assertEqual(load_yaml_scope("list", p).data, {})


if __name__ == "__main__":
    unittest.main()
