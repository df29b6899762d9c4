"""Topic management commands."""

from ..options import flag, opt
from ._common import BROKER_ADDR, BROKER_OR_CLUSTER, CLUSTER_NAME, topic_option
from .base import AdminSubCommand

UPDATE_TOPIC = AdminSubCommand(
    name="updateTopic",
    description="Update or create topic.",
    options=(
        opt("b", "brokerAddr", "create topic to which broker"),
        opt("c", "clusterName", "create topic to which cluster"),
        topic_option(),
        opt("r", "readQueueNums", "set read queue nums"),
        opt("w", "writeQueueNums", "set write queue nums"),
        opt("p", "perm", "set topic's permission(2|4|6), intro[2:W 4:R; 6:RW]"),
        opt("o", "order", "set topic's order(true|false)"),
        opt("u", "unit", "is unit topic (true|false)"),
        opt("s", "hasUnitSub", "has unit sub (true|false)"),
        opt("a", "attributes", "attribute(+a=b,+c=d,-e)"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

DELETE_TOPIC = AdminSubCommand(
    name="deleteTopic",
    description="Delete topic from broker and NameServer.",
    options=(
        topic_option(),
        opt("c", "clusterName", "delete topic from which cluster", required=True),
    ),
)

UPDATE_TOPIC_PERM = AdminSubCommand(
    name="updateTopicPerm",
    description="Update topic perm.",
    options=(
        opt("b", "brokerAddr", "create topic to which broker"),
        opt("c", "clusterName", "create topic to which cluster"),
        topic_option(),
        opt("p", "perm", "set topic's permission(2|4|6), intro[2:W; 4:R; 6:RW]", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)

TOPIC_ROUTE = AdminSubCommand(
    name="topicRoute",
    description="Examine topic route info.",
    options=(
        topic_option(),
        flag("l", "list", "Use list format to print data"),
    ),
)

TOPIC_STATUS = AdminSubCommand(
    name="topicStatus",
    description="Examine topic Status info.",
    options=(
        topic_option(),
        opt("c", "cluster", "cluster name or lmq parent topic, lmq is used to find the route."),
    ),
)

TOPIC_CLUSTER_LIST = AdminSubCommand(
    name="topicClusterList",
    description="Get cluster info for topic.",
    options=(topic_option(),),
)

TOPIC_LIST = AdminSubCommand(
    name="topicList",
    description="Fetch all topic list from name server.",
    options=(flag("c", "clusterModel", "clusterModel"),),
)

UPDATE_ORDER_CONF = AdminSubCommand(
    name="updateOrderConf",
    description="Create or update or delete order conf.",
    options=(
        opt("k", "topic", "topic name", required=True),
        opt("v", "orderConf", "set order conf [eg. brokerName1:num;brokerName2:num]"),
        opt("m", "method", "option type [eg. put|get|delete]", required=True),
    ),
)

CLEAN_UNUSED_TOPIC = AdminSubCommand(
    name="cleanUnusedTopic",
    description="Clean unused topic on broker.",
    options=(BROKER_ADDR, CLUSTER_NAME),
    one_of=BROKER_OR_CLUSTER,
)

ALLOCATE_MQ = AdminSubCommand(
    name="allocateMQ",
    description="Allocate MQ.",
    options=(
        topic_option(),
        opt("i", "ipList", "ipList", required=True),
    ),
)

UPDATE_STATIC_TOPIC = AdminSubCommand(
    name="updateStaticTopic",
    description="Update or create static topic, which has fixed number of queues.",
    options=(
        topic_option(),
        opt("b", "brokers", "remapping static topic to brokers, comma separated"),
        opt("c", "clusters", "remapping static topic to clusters, comma separated"),
        opt("qn", "totalQueueNum", "total queue num", required=True),
        opt("mf", "mapFile", "The mapping data file name"),
        opt("fr", "forceReplace", "Force replace the old mapping"),
    ),
)

REMAPPING_STATIC_TOPIC = AdminSubCommand(
    name="remappingStaticTopic",
    description="Remapping static topic.",
    options=(
        topic_option(),
        opt("b", "brokers", "remapping static topic to brokers, comma separated"),
        opt("c", "clusters", "remapping static topic to clusters, comma separated"),
        opt("mf", "mapFile", "The mapping data file name"),
        opt("fr", "forceReplace", "Force replace the old mapping"),
    ),
)
