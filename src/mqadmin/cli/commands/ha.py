"""High availability and controller commands."""

from ..options import flag, opt
from ._common import CONTROLLER_ADDR, INTERVAL
from .base import AdminSubCommand

HA_STATUS = AdminSubCommand(
    name="haStatus",
    description="Fetch ha runtime status data.",
    options=(
        opt("b", "brokerAddr", "which broker to fetch"),
        opt("c", "clusterName", "which cluster"),
        INTERVAL,
    ),
    one_of=(("brokerAddr", "clusterName"),),
)

GET_SYNC_STATE_SET = AdminSubCommand(
    name="getSyncStateSet",
    description="Fetch syncStateSet for target brokers.",
    options=(
        CONTROLLER_ADDR,
        opt("b", "brokerName", "which broker to fetch"),
        opt("c", "clusterName", "which cluster"),
        INTERVAL,
    ),
    one_of=(("brokerName", "clusterName"),),
)

GET_BROKER_EPOCH = AdminSubCommand(
    name="getBrokerEpoch",
    description="Fetch broker epoch entries.",
    options=(
        opt("b", "brokerName", "which broker to fetch"),
        opt("c", "clusterName", "which cluster"),
        INTERVAL,
    ),
    one_of=(("brokerName", "clusterName"),),
)

GET_CONTROLLER_META_DATA = AdminSubCommand(
    name="getControllerMetaData",
    description="Get controller cluster's metadata.",
    options=(CONTROLLER_ADDR,),
)

GET_CONTROLLER_CONFIG = AdminSubCommand(
    name="getControllerConfig",
    description="Get controller config.",
    options=(CONTROLLER_ADDR,),
)

UPDATE_CONTROLLER_CONFIG = AdminSubCommand(
    name="updateControllerConfig",
    description="Update controller config.",
    options=(
        CONTROLLER_ADDR,
        opt("k", "key", "config key", required=True),
        opt("v", "value", "config value", required=True),
    ),
)

ELECT_MASTER = AdminSubCommand(
    name="electMaster",
    description="Re-elect the specified broker as master.",
    options=(
        CONTROLLER_ADDR,
        opt("b", "brokerId", "The id of the broker which requires to become master", required=True),
        opt("bn", "brokerName", "The broker name of the replicas that require to be manipulated", required=True),
        opt("c", "clusterName", "the clusterName of broker", required=True),
    ),
)

CLEAN_BROKER_METADATA = AdminSubCommand(
    name="cleanBrokerMetadata",
    description="Clean metadata of broker on controller.",
    options=(
        CONTROLLER_ADDR,
        opt("b", "brokerControllerIdsToClean", "The brokerController id list which requires to clean metadata. eg: 1;2;3"),
        opt("bn", "brokerName", "The broker name of the replicas that require to be manipulated", required=True),
        opt("c", "clusterName", "the clusterName of broker"),
        flag("l", "cleanLivingBroker", "Whether to clean up living brokers"),
    ),
)
