"""Consumer offset commands."""

from ..options import opt
from ._common import group_option, topic_option
from .base import AdminSubCommand

CLONE_GROUP_OFFSET = AdminSubCommand(
    name="cloneGroupOffset",
    description="Clone offset from other group.",
    options=(
        opt("s", "srcGroup", "set source consumer group", required=True),
        opt("d", "destGroup", "set destination consumer group", required=True),
        topic_option("set the topic"),
        opt("o", "offline", "the group or the topic is offline"),
    ),
)

RESET_OFFSET_BY_TIME = AdminSubCommand(
    name="resetOffsetByTime",
    description="Reset consumer offset by timestamp(without client restart).",
    options=(
        group_option("group", "set the consumer group"),
        topic_option("set the topic"),
        opt(
            "s",
            "timestamp",
            "set the timestamp[now|currentTimeMillis|yyyy-MM-dd#HH:mm:ss:SSS]",
            required=True,
        ),
        opt("f", "force", "set the force rollback by timestamp switch[true|false]"),
        opt("c", "cplus", "reset c++ client offset"),
        opt("b", "broker", "broker addr"),
        opt("q", "queue", "queue id"),
        opt("o", "offset", "Expect queue offset, not support old version broker"),
    ),
)

SKIP_ACCUMULATED_MESSAGE = AdminSubCommand(
    name="skipAccumulatedMessage",
    description="Skip all messages that are accumulated (not consumed) currently.",
    options=(
        group_option("group", "set the consumer group"),
        topic_option("set the topic"),
        opt("f", "force", "set the force rollback by timestamp switch[true|false]"),
        opt("c", "cluster", "Cluster name or lmq parent topic, lmq is used to find the route."),
    ),
)
