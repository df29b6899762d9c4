"""Broker container commands."""

from ..options import opt
from .base import AdminSubCommand

ADD_BROKER = AdminSubCommand(
    name="addBroker",
    description="Add a broker to specified container.",
    options=(
        opt("c", "brokerContainerAddr", "Broker container address", required=True),
        opt("b", "brokerConfigPath", "Broker config path", required=True),
    ),
)

REMOVE_BROKER = AdminSubCommand(
    name="removeBroker",
    description="Remove a broker from specified container.",
    options=(
        opt("c", "brokerContainerAddr", "Broker container address", required=True),
        opt(
            "b",
            "brokerIdentity",
            "Information to identify a broker: clusterName:brokerName:brokerId",
            required=True,
        ),
    ),
)
