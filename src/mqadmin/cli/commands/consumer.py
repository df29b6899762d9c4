"""Subscription group and consumer commands."""

from ..options import flag, opt
from ._common import BROKER_OR_CLUSTER, group_option, topic_option
from .base import AdminSubCommand

UPDATE_SUB_GROUP = AdminSubCommand(
    name="updateSubGroup",
    description="Update or create subscription group.",
    options=(
        opt("b", "brokerAddr", "create subscription group to which broker"),
        opt("c", "clusterName", "create subscription group to which cluster"),
        group_option(),
        opt("s", "consumeEnable", "consume enable"),
        opt("m", "consumeFromMinEnable", "from min offset"),
        opt("d", "consumeBroadcastEnable", "broadcast"),
        opt("o", "consumeMessageOrderly", "consume message orderly"),
        opt("q", "retryQueueNums", "retry queue nums"),
        opt("r", "retryMaxTimes", "retry max times"),
        opt("i", "brokerId", "consumer from which broker id"),
        opt("w", "whichBrokerWhenConsumeSlowly", "which broker id when consume slowly"),
        opt("a", "notifyConsumerIdsChanged", "notify consumerId changed"),
        opt(None, "attributes", "attribute(+a=b,+c=d,-e)"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

SET_CONSUME_MODE = AdminSubCommand(
    name="setConsumeMode",
    description="Set consume message mode. pull/pop etc.",
    options=(
        opt("b", "brokerAddr", "create subscription group to which broker"),
        opt("c", "clusterName", "create subscription group to which cluster"),
        opt("t", "topicName", "topic name", required=True),
        group_option(),
        opt("m", "mode", "consume mode. PULL/POP", required=True),
        opt("q", "popShareQueueNum", "num of queue which share in pop mode"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

DELETE_SUB_GROUP = AdminSubCommand(
    name="deleteSubGroup",
    description="Delete subscription group from broker.",
    options=(
        opt("b", "brokerAddr", "delete subscription group from which broker"),
        opt("c", "clusterName", "delete subscription group from which cluster"),
        opt("g", "groupName", "subscription group name", required=True),
        flag("r", "removeOffset", "remove offset"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

CONSUMER_PROGRESS = AdminSubCommand(
    name="consumerProgress",
    description="Query consumer's progress, speed.",
    options=(
        opt("g", "groupName", "consumer group name"),
        opt("t", "topicName", "topic name"),
        flag("s", "showClientIP", "Show Client IP per Queue"),
        opt("c", "cluster", "Cluster name or lmq parent topic, lmq is used to find the route."),
    ),
)

CONSUMER_STATUS = AdminSubCommand(
    name="consumerStatus",
    description="Query consumer's internal data structure.",
    options=(
        group_option("consumerGroup"),
        opt("i", "clientId", "The consumer's client id"),
        opt("b", "brokerAddr", "broker address"),
        flag("s", "jstack", "Run jstack command in the consumer progress"),
    ),
)

GET_CONSUMER_CONFIG = AdminSubCommand(
    name="getConsumerConfig",
    description="Get consumer config by subscription group name.",
    options=(opt("g", "groupName", "subscription group name", required=True),),
)

CONSUME_MESSAGE = AdminSubCommand(
    name="consumeMessage",
    description="Consume message.",
    options=(
        topic_option("Topic name"),
        opt("b", "brokerName", "Broker name"),
        opt("i", "queueId", "Queue Id"),
        opt("o", "offset", "Queue Offset"),
        opt("g", "consumerGroup", "Consumer group name"),
        opt("s", "beginTimestamp", "Begin timestamp(ms). default:0, eg:1676730526212"),
        opt("e", "endTimestamp", "End timestamp(ms). default:Long.MAX_VALUE, eg:1676730526212"),
        opt("c", "MessageNumber", "Number of message to be consumed"),
    ),
)
