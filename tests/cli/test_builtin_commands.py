"""Tests for the built-in admin subcommands."""

import unittest

from mqadmin.cli.commands import builtin_commands, default_registry
from mqadmin.cli.commands.base import AdminSubCommand
from mqadmin.cli.dispatcher import DispatchStatus, Dispatcher
from mqadmin.cli.help import command_schema
from mqadmin.cli.options import OptionSchema, global_options, parse_options
from mqadmin.lib.core.config import AdminConfig
from mqadmin.lib.errors import AdminTransportError, InvalidOptionsError

from test_utils import RecordingClient, captured_output, isolated_env


def _config_with(client: RecordingClient, **kwargs) -> AdminConfig:
    return AdminConfig(client_factory=lambda config, hook: client, **kwargs)


class SchemaTests(unittest.TestCase):
    def test_every_command_extends_global_options_without_clash(self) -> None:
        base = global_options()
        for cmd in builtin_commands():
            schema = cmd.build_options(base)
            self.assertEqual(schema.specs[: len(base)], base.specs, cmd.name)
            self.assertEqual(len(base), 2, cmd.name)

    def test_names_are_unique_and_described(self) -> None:
        names = [cmd.name.lower() for cmd in builtin_commands()]
        self.assertEqual(len(names), len(set(names)))
        for cmd in builtin_commands():
            self.assertTrue(cmd.description, cmd.name)

    def test_one_of_groups_reference_declared_options(self) -> None:
        for cmd in builtin_commands():
            schema = command_schema(cmd)
            for group in cmd.one_of:
                for key in group:
                    self.assertIsNotNone(schema.get(key), f"{cmd.name}: {key}")


class ExecuteTests(unittest.TestCase):
    def test_params_collected_from_command_options(self) -> None:
        client = RecordingClient()
        config = _config_with(client)
        cmd = default_registry().find("updateTopic")
        schema = command_schema(cmd)
        options = parse_options(
            "mqadmin updateTopic", schema, ["-n", "h:9876", "-c", "DefaultCluster", "-t", "T1", "-r", "8"]
        )
        cmd.execute(options, schema, None, config)
        self.assertEqual(
            client.calls,
            [("updateTopic", {"clusterName": "DefaultCluster", "topic": "T1", "readQueueNums": "8"})],
        )

    def test_flags_collected_as_true(self) -> None:
        client = RecordingClient()
        cmd = default_registry().find("topicRoute")
        schema = command_schema(cmd)
        options = parse_options("mqadmin topicRoute", schema, ["-t", "T1", "-l"])
        cmd.execute(options, schema, None, _config_with(client))
        self.assertEqual(client.calls, [("topicRoute", {"topic": "T1", "list": True})])

    def test_missing_one_of_group_raises(self) -> None:
        client = RecordingClient()
        cmd = default_registry().find("updateTopic")
        schema = command_schema(cmd)
        options = parse_options("mqadmin updateTopic", schema, ["-t", "T1"])
        with self.assertRaises(InvalidOptionsError) as ctx:
            cmd.execute(options, schema, None, _config_with(client))
        self.assertIn("-b/--brokerAddr", str(ctx.exception))
        self.assertEqual(client.calls, [])

    def test_mapping_result_printed_as_yaml(self) -> None:
        client = RecordingClient({"brokerName": "broker-a", "queues": 8})
        cmd = default_registry().find("topicRoute")
        schema = command_schema(cmd)
        options = parse_options("mqadmin topicRoute", schema, ["-t", "T1"])
        with captured_output() as cap:
            cmd.execute(options, schema, None, _config_with(client))
        self.assertEqual(cap.out.getvalue(), "brokerName: broker-a\nqueues: 8\n")

    def test_string_result_printed_verbatim(self) -> None:
        client = RecordingClient("OK")
        cmd = default_registry().find("getNamesrvConfig")
        schema = command_schema(cmd)
        with captured_output() as cap:
            cmd.execute(parse_options("mqadmin getNamesrvConfig", schema, []), schema, None, _config_with(client))
        self.assertEqual(cap.out.getvalue(), "OK\n")

    def test_client_receives_config_and_hook(self) -> None:
        seen = []
        client = RecordingClient()

        def factory(config, hook):
            seen.append((config.namesrv_addr, hook))
            return client

        hook = object()
        cmd = AdminSubCommand(name="noop", description="No options.")
        schema = cmd.build_options(OptionSchema())
        cmd.execute(parse_options("mqadmin noop", schema, []), schema, hook, AdminConfig("h:9876", client_factory=factory))
        self.assertEqual(seen, [("h:9876", hook)])
        self.assertEqual(client.calls, [("noop", {})])

    def test_default_client_raises_transport_error(self) -> None:
        cmd = default_registry().find("clusterList")
        schema = command_schema(cmd)
        with self.assertRaises(AdminTransportError) as ctx:
            cmd.execute(parse_options("mqadmin clusterList", schema, []), schema, None, AdminConfig("h:9876"))
        self.assertIn("clusterList", str(ctx.exception))
        self.assertIn("h:9876", str(ctx.exception))


class DispatchBuiltinTests(unittest.TestCase):
    def test_end_to_end_with_injected_client(self) -> None:
        client = RecordingClient()
        dispatcher = Dispatcher(default_registry(), config=_config_with(client), rpc_hook=object())
        with isolated_env(), captured_output():
            result = dispatcher.dispatch(
                ["updatetopic", "-b127.0.0.1:10911", "-n127.0.0.1:9876", "-tTopicTest"]
            )
        self.assertEqual(result.status, DispatchStatus.SUCCESS)
        self.assertEqual(
            client.calls, [("updateTopic", {"brokerAddr": "127.0.0.1:10911", "topic": "TopicTest"})]
        )
        self.assertEqual(dispatcher.config.namesrv_addr, "127.0.0.1:9876")

    def test_elect_master_distinguishes_b_and_bn(self) -> None:
        client = RecordingClient()
        dispatcher = Dispatcher(default_registry(), config=_config_with(client), rpc_hook=object())
        with isolated_env(), captured_output():
            dispatcher.dispatch(
                ["electMaster", "-a", "ctrl:9878", "-bn", "broker-a", "-b", "2", "-c", "DefaultCluster"]
            )
        self.assertEqual(
            client.calls,
            [
                (
                    "electMaster",
                    {
                        "controllerAddress": "ctrl:9878",
                        "brokerId": "2",
                        "brokerName": "broker-a",
                        "clusterName": "DefaultCluster",
                    },
                )
            ],
        )

    def test_attached_values_on_multi_letter_short_options(self) -> None:
        client = RecordingClient()
        dispatcher = Dispatcher(default_registry(), config=_config_with(client), rpc_hook=object())
        with isolated_env(), captured_output():
            elect = dispatcher.dispatch(
                ["electMaster", "-a", "x:1", "-bnB", "-b", "1.1.1.1:10911", "-c", "C"]
            )
            static = dispatcher.dispatch(["updateStaticTopic", "-tT", "-qn8", "-cC"])
        self.assertEqual(elect.status, DispatchStatus.SUCCESS)
        self.assertEqual(static.status, DispatchStatus.SUCCESS)
        self.assertEqual(client.calls[0][1]["brokerName"], "B")
        self.assertEqual(client.calls[0][1]["brokerId"], "1.1.1.1:10911")
        self.assertEqual(client.calls[1][1]["totalQueueNum"], "8")

    def test_transport_failure_reported_as_failed(self) -> None:
        dispatcher = Dispatcher(default_registry(), config=AdminConfig(), rpc_hook=object())
        with isolated_env(), captured_output() as cap:
            result = dispatcher.dispatch(["clusterList"])
        self.assertEqual(result.status, DispatchStatus.FAILED)
        self.assertIn("AdminTransportError", cap.err.getvalue())


if __name__ == "__main__":
    unittest.main()
