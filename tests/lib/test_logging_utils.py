import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from mqadmin.lib.core.paths import state_root
from mqadmin.lib.util.logging_utils import _log_debug


class LogDebugTests(unittest.TestCase):
    def test_appends_timestamped_lines(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            state = Path(td) / "state"
            with unittest.mock.patch.dict(os.environ, {"MQADMIN_STATE_DIR": str(state)}):
                _log_debug("first")
                _log_debug("second")
            lines = (state / "mqadmin.log").read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("["))
        self.assertTrue(lines[0].endswith("] first"))
        self.assertTrue(lines[1].endswith("] second"))

    def test_io_errors_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "file"
            blocker.write_text("", encoding="utf-8")
            # state dir below a regular file cannot be created
            with unittest.mock.patch.dict(os.environ, {"MQADMIN_STATE_DIR": str(blocker / "state")}):
                _log_debug("dropped")


class StateRootTests(unittest.TestCase):
    def test_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with unittest.mock.patch.dict(os.environ, {"MQADMIN_STATE_DIR": td}):
                self.assertEqual(state_root(), Path(td))


if __name__ == "__main__":
    unittest.main()
