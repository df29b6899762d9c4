"""Option specs shared by several command modules."""

from ..options import OptionSpec, opt

BROKER_ADDR = opt("b", "brokerAddr", "broker address")
CLUSTER_NAME = opt("c", "clusterName", "cluster name")
BROKER_OR_CLUSTER = (("brokerAddr", "clusterName"),)

CONTROLLER_ADDR = opt("a", "controllerAddress", "the address of controller", required=True)
INTERVAL = opt("i", "interval", "the interval(second) of get info")


def topic_option(description: str = "topic name") -> OptionSpec:
    return opt("t", "topic", description, required=True)


def group_option(long: str = "groupName", description: str = "consumer group name") -> OptionSpec:
    return opt("g", long, description, required=True)
