"""Message query, print and send commands."""

from ..options import flag, opt
from ._common import topic_option
from .base import AdminSubCommand

_BODY_FORMAT = opt("f", "bodyFormat", "print message body by the specified format")

QUERY_MSG_BY_ID = AdminSubCommand(
    name="queryMsgById",
    description="Query Message by Id.",
    options=(
        opt("i", "msgId", "Message Id", required=True),
        opt("g", "consumerGroup", "consumer group name"),
        opt("d", "clientId", "The consumer's client id"),
        flag("s", "sendMessage", "resend message"),
        opt("u", "unitName", "unit name"),
        _BODY_FORMAT,
    ),
)

QUERY_MSG_BY_KEY = AdminSubCommand(
    name="queryMsgByKey",
    description="Query Message by Key.",
    options=(
        topic_option("Topic name"),
        opt("k", "msgKey", "Message Key", required=True),
        opt("b", "beginTimestamp", "Begin timestamp(ms). default:0, eg:1676730526212"),
        opt("e", "endTimestamp", "End timestamp(ms). default:Long.MAX_VALUE, eg:1676730526212"),
        opt("c", "maxNum", "The maximum number of messages returned by the query, default:64"),
    ),
)

QUERY_MSG_BY_UNIQUE_KEY = AdminSubCommand(
    name="queryMsgByUniqueKey",
    description="Query Message by Unique key.",
    options=(
        opt("i", "msgId", "Message Id", required=True),
        opt("g", "consumerGroup", "consumer group name"),
        opt("d", "clientId", "The consumer's client id"),
        topic_option("The topic of msg"),
        flag("a", "showAll", "Print all message, the limit is 32"),
        opt("c", "cluster", "Cluster name or lmq parent topic, lmq is used to find the route."),
    ),
)

QUERY_MSG_BY_OFFSET = AdminSubCommand(
    name="queryMsgByOffset",
    description="Query Message by offset.",
    options=(
        topic_option(),
        opt("b", "brokerName", "Broker Name", required=True),
        opt("i", "queueId", "Queue Id", required=True),
        opt("o", "offset", "Queue Offset", required=True),
        _BODY_FORMAT,
    ),
)

QUERY_MSG_TRACE_BY_ID = AdminSubCommand(
    name="queryMsgTraceById",
    description="Query a message trace.",
    options=(
        opt("i", "msgId", "Message Id", required=True),
        opt("t", "traceTopic", "The name value of message trace topic"),
        opt("b", "beginTimestamp", "Begin timestamp(ms). default:0, eg:1676730526212"),
        opt("e", "endTimestamp", "End timestamp(ms). default:Long.MAX_VALUE, eg:1676730526212"),
        opt("c", "maxNum", "The maximum number of messages returned by the query, default:64"),
    ),
)

PRINT_MSG = AdminSubCommand(
    name="printMsg",
    description="Print Message Detail.",
    options=(
        topic_option("topic name"),
        opt("c", "charsetName", "CharsetName(eg: UTF-8,GBK)"),
        opt("s", "subExpression", "Subscribe Expression(eg: TagA || TagB)"),
        opt("b", "beginTimestamp", "Begin timestamp[currentTimeMillis|yyyy-MM-dd#HH:mm:ss:SSS]"),
        opt("e", "endTimestamp", "End timestamp[currentTimeMillis|yyyy-MM-dd#HH:mm:ss:SSS]"),
        opt("d", "printBody", "print body"),
        opt("l", "lmqParentTopic", "Lmq parent topic, lmq is used to find the route."),
    ),
)

PRINT_MSG_BY_QUEUE = AdminSubCommand(
    name="printMsgByQueue",
    description="Print Message Detail by queueId.",
    options=(
        topic_option("topic name"),
        opt("a", "brokerName", "broker name", required=True),
        opt("i", "queueId", "queue id", required=True),
        opt("c", "charsetName", "CharsetName(eg: UTF-8,GBK)"),
        opt("s", "subExpression", "Subscribe Expression(eg: TagA || TagB)"),
        opt("b", "beginTimestamp", "Begin timestamp[currentTimeMillis|yyyy-MM-dd#HH:mm:ss:SSS]"),
        opt("e", "endTimestamp", "End timestamp[currentTimeMillis|yyyy-MM-dd#HH:mm:ss:SSS]"),
        opt("p", "printMsg", "print msg. eg: true | false(default)"),
        opt("d", "printBody", "print body. eg: true | false(default)"),
        opt("f", "calculate", "calculate by tag. eg: true | false(default)"),
    ),
)

SEND_MSG_STATUS = AdminSubCommand(
    name="sendMsgStatus",
    description="Send msg to broker.",
    options=(
        opt("b", "brokerName", "Broker Name", required=True),
        opt("s", "messageSize", "Message Size, Default: 128"),
        opt("c", "count", "send message count, Default: 50"),
    ),
)

SEND_MESSAGE = AdminSubCommand(
    name="sendMessage",
    description="Send a message.",
    options=(
        topic_option("Topic name"),
        opt("p", "body", "UTF-8 string format of the message body", required=True),
        opt("k", "keys", "Message keys"),
        opt("c", "tags", "Message tags"),
        opt("b", "broker", "Send message to target broker"),
        opt("i", "qid", "Send message to target queue"),
        flag("m", "msgTraceEnable", "Message Trace Enable, Default: false"),
    ),
)

CHECK_MSG_SEND_RT = AdminSubCommand(
    name="checkMsgSendRT",
    description="Check message send response time.",
    options=(
        topic_option("topic name"),
        opt("a", "amount", "message amount | default 100"),
        opt("s", "size", "message size | default 128 Byte"),
    ),
)

QUERY_CQ = AdminSubCommand(
    name="queryCq",
    description="Query cq command.",
    options=(
        topic_option("topic name"),
        opt("q", "queue", "queue num, ie. 1", required=True),
        opt("i", "index", "start queue index.", required=True),
        opt("c", "count", "how many."),
        opt("b", "broker", "broker addr."),
        opt("g", "consumer", "consumer group."),
    ),
)
