"""Metadata, config and metrics export commands."""

from ..options import flag, opt
from .base import AdminSubCommand

_DEFAULT_EXPORT_DIR = "/tmp/rocketmq/export"

EXPORT_METADATA = AdminSubCommand(
    name="exportMetadata",
    description="Export metadata.",
    options=(
        opt("c", "clusterName", "choose a cluster to export"),
        opt("b", "brokerAddr", "choose a broker to export"),
        opt("f", "filePath", f"export metadata.json path | default {_DEFAULT_EXPORT_DIR}"),
        flag("t", "topic", "only export topic metadata"),
        flag("g", "subscriptionGroup", "only export subscriptionGroup metadata"),
        flag("s", "specialTopic", "need special topic metadata"),
    ),
    one_of=(("clusterName", "brokerAddr"),),
)

EXPORT_CONFIGS = AdminSubCommand(
    name="exportConfigs",
    description="Export configs.",
    options=(
        opt("c", "clusterName", "choose a cluster to export", required=True),
        opt("f", "filePath", f"export configs.json path | default {_DEFAULT_EXPORT_DIR}"),
    ),
)

EXPORT_METRICS = AdminSubCommand(
    name="exportMetrics",
    description="Export metrics.",
    options=(
        opt("c", "clusterName", "choose a cluster to export", required=True),
        opt("f", "filePath", f"export metrics.json path | default {_DEFAULT_EXPORT_DIR}"),
    ),
)

EXPORT_METADATA_IN_ROCKSDB = AdminSubCommand(
    name="exportMetadataInRocksDB",
    description="export RocksDB kv config (topics/subscriptionGroups)",
    options=(
        opt("p", "path", "Absolute path for the metadata directory", required=True),
        opt("t", "configType", "Name of kv config, e.g. topics/subscriptionGroups", required=True),
        flag("j", "jsonEnable", "Json format enable, Default: false"),
    ),
)
