"""Broker configuration and maintenance commands."""

from ..options import flag, opt
from ._common import BROKER_ADDR, BROKER_OR_CLUSTER, CLUSTER_NAME
from .base import AdminSubCommand

UPDATE_BROKER_CONFIG = AdminSubCommand(
    name="updateBrokerConfig",
    description="Update broker's config.",
    options=(
        BROKER_ADDR,
        CLUSTER_NAME,
        flag("a", "updateAllBroker", "update all brokers include slave"),
        opt("k", "key", "config key", required=True),
        opt("v", "value", "config value", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)

RESET_MASTER_FLUSH_OFFSET = AdminSubCommand(
    name="resetMasterFlushOffset",
    description="Reset master flush offset in slave.",
    options=(
        opt("b", "brokerAddr", "which broker to reset", required=True),
        opt("o", "offset", "the offset to reset at"),
    ),
)

BROKER_STATUS = AdminSubCommand(
    name="brokerStatus",
    description="Fetch broker runtime status data.",
    options=(BROKER_ADDR, CLUSTER_NAME),
    one_of=BROKER_OR_CLUSTER,
)

BROKER_CONSUME_STATS = AdminSubCommand(
    name="brokerConsumeStats",
    description="Fetch broker consume stats data.",
    options=(
        opt("b", "brokerAddr", "Broker address", required=True),
        opt("t", "timeoutMillis", "request timeout Millis"),
        opt("l", "level", "threshold of print diff"),
        opt("o", "order", "order topic"),
    ),
)

WIPE_WRITE_PERM = AdminSubCommand(
    name="wipeWritePerm",
    description="Wipe write perm of broker in all name server you defined in the -n param.",
    options=(opt("b", "brokerName", "broker name", required=True),),
)

ADD_WRITE_PERM = AdminSubCommand(
    name="addWritePerm",
    description="Add write perm of broker in all name server you defined in the -n param.",
    options=(opt("b", "brokerName", "broker name", required=True),),
)

CLEAN_EXPIRED_CQ = AdminSubCommand(
    name="cleanExpiredCQ",
    description="Clean expired ConsumeQueue on broker.",
    options=(BROKER_ADDR, CLUSTER_NAME),
    one_of=BROKER_OR_CLUSTER,
)

DELETE_EXPIRED_COMMIT_LOG = AdminSubCommand(
    name="deleteExpiredCommitLog",
    description="Delete expired CommitLog files.",
    options=(BROKER_ADDR, CLUSTER_NAME),
    one_of=BROKER_OR_CLUSTER,
)

GET_BROKER_CONFIG = AdminSubCommand(
    name="getBrokerConfig",
    description="Get broker config by cluster or special broker.",
    options=(
        opt("b", "brokerAddr", "get which broker"),
        opt("c", "clusterName", "get which cluster"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

DUMP_COMPACTION_LOG = AdminSubCommand(
    name="dumpCompactionLog",
    description="parse compaction log to message.",
    options=(opt("f", "file", "to dump file name", required=True),),
)

GET_COLD_DATA_FLOW_CTR_INFO = AdminSubCommand(
    name="getColdDataFlowCtrInfo",
    description="Get cold data flow ctr info.",
    options=(
        opt("b", "brokerAddr", "get from which broker"),
        opt("c", "clusterName", "get from which cluster"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

UPDATE_COLD_DATA_FLOW_CTR_GROUP_CONFIG = AdminSubCommand(
    name="updateColdDataFlowCtrGroupConfig",
    description="Add or update cold data flow ctr group config.",
    options=(
        opt("b", "brokerAddr", "update which broker"),
        opt("c", "clusterName", "update which cluster"),
        opt("g", "consumerGroup", "specific consumerGroup", required=True),
        opt("v", "threshold", "cold read threshold value", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)

REMOVE_COLD_DATA_FLOW_CTR_GROUP_CONFIG = AdminSubCommand(
    name="removeColdDataFlowCtrGroupConfig",
    description="Remove consumer from cold ctr config.",
    options=(
        opt("b", "brokerAddr", "update which broker"),
        opt("c", "clusterName", "update which cluster"),
        opt("g", "consumerGroup", "the consumer group will remove from the config", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)

SET_COMMIT_LOG_READ_AHEAD_MODE = AdminSubCommand(
    name="setCommitLogReadAheadMode",
    description="Set read ahead mode for all commitlog files.",
    options=(
        opt("b", "brokerAddr", "set which broker"),
        opt("c", "clusterName", "set which cluster"),
        opt("m", "commitLogReadAheadMode", "set the CommitLog read ahead mode; 0 is default, 1 random read", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)
