from __future__ import annotations

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from mqadmin.lib.admin.client import UnavailableAdminClient
from mqadmin.lib.core import config as cfg

from test_utils import isolated_env


class ConfigPathTests(unittest.TestCase):
    def test_global_config_search_paths_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "config.yml"
            with unittest.mock.patch.dict(os.environ, {"MQADMIN_CONFIG_FILE": str(cfg_path)}):
                paths = cfg.global_config_search_paths()
                self.assertEqual(paths, [cfg_path.expanduser().resolve()])
                self.assertEqual(cfg.global_config_path(), cfg_path.resolve())

    def test_global_config_path_prefers_xdg(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            xdg = Path(td)
            config_file = xdg / "mqadmin" / "config.yml"
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text("namesrv:\n  addr: a:9876\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(xdg)}):
                os.environ.pop("MQADMIN_CONFIG_FILE", None)
                self.assertEqual(cfg.global_config_path(), config_file.resolve())


class LoadAdminConfigTests(unittest.TestCase):
    def test_defaults_without_file_or_env(self) -> None:
        with isolated_env():
            config = cfg.load_admin_config()
        self.assertIsNone(config.namesrv_addr)
        self.assertIsNone(config.home)
        self.assertIsNone(config.acl_tools_file)

    def test_values_from_config_file(self) -> None:
        with isolated_env() as base:
            (base / "config.yml").write_text(
                "namesrv:\n  addr: file-host:9876\npaths:\n  rocketmq_home: /opt/rocketmq\n",
                encoding="utf-8",
            )
            config = cfg.load_admin_config()
        self.assertEqual(config.namesrv_addr, "file-host:9876")
        self.assertEqual(config.home, Path("/opt/rocketmq"))
        self.assertEqual(config.acl_tools_file, Path("/opt/rocketmq/conf/tools.yml"))

    def test_environment_overrides_file(self) -> None:
        env = {"NAMESRV_ADDR": "env-host:9876", "ROCKETMQ_HOME": "/srv/mq"}
        with isolated_env(env) as base:
            (base / "config.yml").write_text(
                "namesrv:\n  addr: file-host:9876\npaths:\n  rocketmq_home: /opt/rocketmq\n",
                encoding="utf-8",
            )
            config = cfg.load_admin_config()
        self.assertEqual(config.namesrv_addr, "env-host:9876")
        self.assertEqual(config.home, Path("/srv/mq"))

    def test_malformed_config_file_ignored(self) -> None:
        with isolated_env({"NAMESRV_ADDR": "env-host:9876"}) as base:
            (base / "config.yml").write_text("namesrv: [unclosed\n", encoding="utf-8")
            config = cfg.load_admin_config()
        self.assertEqual(config.namesrv_addr, "env-host:9876")

    def test_client_factory_passed_through(self) -> None:
        def factory(config, hook):
            return UnavailableAdminClient("x")

        with isolated_env():
            config = cfg.load_admin_config(factory)
        self.assertIs(config.client_factory, factory)


class AdminConfigTests(unittest.TestCase):
    def test_with_namesrv_addr_returns_new_instance(self) -> None:
        original = cfg.AdminConfig(namesrv_addr="a:9876", home=Path("/opt/mq"))
        updated = original.with_namesrv_addr("b:9876")
        self.assertEqual(original.namesrv_addr, "a:9876")
        self.assertEqual(updated.namesrv_addr, "b:9876")
        self.assertEqual(updated.home, Path("/opt/mq"))

    def test_default_connect_returns_unavailable_client(self) -> None:
        client = cfg.AdminConfig(namesrv_addr="a:9876").connect(None)
        self.assertIsInstance(client, UnavailableAdminClient)
        self.assertEqual(client.namesrv_addr, "a:9876")


if __name__ == "__main__":
    unittest.main()
