"""Client connection and producer inspection commands."""

from ..options import opt
from ._common import group_option, topic_option
from .base import AdminSubCommand

PRODUCER_CONNECTION = AdminSubCommand(
    name="producerConnection",
    description="Query producer's socket connection and client version.",
    options=(
        group_option("producerGroup", "producer group name"),
        topic_option(),
    ),
)

CONSUMER_CONNECTION = AdminSubCommand(
    name="consumerConnection",
    description="Query consumer's socket connection, client version and subscription.",
    options=(
        group_option("consumerGroup"),
        opt("b", "brokerAddr", "broker address"),
    ),
)

PRODUCER = AdminSubCommand(
    name="producer",
    description="Query producer's instances, connection, status, etc.",
    options=(opt("b", "broker", "broker address", required=True),),
)
