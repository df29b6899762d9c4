"""Cluster-wide inspection, stats and monitoring commands."""

from ..options import flag, opt
from .base import AdminSubCommand

CLUSTER_LIST = AdminSubCommand(
    name="clusterList",
    description="List cluster infos.",
    options=(
        flag("m", "moreStats", "Print more stats"),
        opt("i", "interval", "specify intervals numbers, it is in seconds"),
        opt("c", "clusterName", "which cluster"),
    ),
)

CLUSTER_RT = AdminSubCommand(
    name="clusterRT",
    description="List All clusters Message Send RT.",
    options=(
        opt("a", "amount", "message amount | default 100"),
        opt("s", "size", "message size | default 128 Byte"),
        opt("c", "cluster", "cluster name | default display all cluster"),
        opt("p", "printLog", "print as tlog | default false"),
        opt("m", "machineRoom", "machine room name | default noname"),
        opt("i", "interval", "print interval | default 10 seconds"),
    ),
)

START_MONITORING = AdminSubCommand(
    name="startMonitoring",
    description="Start Monitoring.",
)

STATS_ALL = AdminSubCommand(
    name="statsAll",
    description="Topic and Consumer tps stats.",
    options=(
        flag("a", "activeTopic", "print active topic only"),
        opt("t", "topic", "print select topic only"),
    ),
)
