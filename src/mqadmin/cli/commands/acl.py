"""Broker ACL configuration commands."""

from ..options import opt
from ._common import BROKER_ADDR, BROKER_OR_CLUSTER, CLUSTER_NAME
from .base import AdminSubCommand

UPDATE_ACL_CONFIG = AdminSubCommand(
    name="updateAclConfig",
    description="Update acl config yaml file in broker.",
    options=(
        opt("b", "brokerAddr", "update acl config file to which broker"),
        opt("c", "clusterName", "update acl config file to which cluster"),
        opt("a", "accessKey", "set accessKey in acl config file", required=True),
        opt("s", "secretKey", "set secretKey in acl config file", required=True),
        opt("w", "whiteRemoteAddress", "set white ip Address for account in acl config file"),
        opt("i", "defaultTopicPerm", "set default topicPerm in acl config file"),
        opt("u", "defaultGroupPerm", "set default GroupPerm in acl config file"),
        opt("t", "topicPerms", "set topicPerms list,eg: topicA=DENY,topicD=SUB"),
        opt("g", "groupPerms", "set groupPerms list,eg: groupD=DENY,groupD=SUB"),
        opt("m", "admin", "set admin flag in acl config file"),
    ),
    one_of=BROKER_OR_CLUSTER,
)

DELETE_ACL_CONFIG = AdminSubCommand(
    name="deleteAclConfig",
    description="Delete Acl Config Account in broker.",
    options=(
        opt("b", "brokerAddr", "delete acl config account from which broker"),
        opt("c", "clusterName", "delete acl config account from which cluster"),
        opt("a", "accessKey", "set accessKey in acl config file for deleting which account", required=True),
    ),
    one_of=BROKER_OR_CLUSTER,
)

CLUSTER_ACL_CONFIG_VERSION = AdminSubCommand(
    name="clusterAclConfigVersion",
    description="List all of acl config version information in cluster.",
    options=(BROKER_ADDR, CLUSTER_NAME),
    one_of=BROKER_OR_CLUSTER,
)

UPDATE_GLOBAL_WHITE_ADDR = AdminSubCommand(
    name="updateGlobalWhiteAddr",
    description="Update global white address for acl Config File in broker.",
    options=(
        opt("b", "brokerAddr", "update global white address to which broker"),
        opt("c", "clusterName", "update global white address to which cluster"),
        opt("g", "globalWhiteRemoteAddresses", "set globalWhiteRemoteAddress list,eg: 10.10.103.*,192.168.0.*", required=True),
        opt("p", "aclFileFullPath", "set aclFileFullPath of the acl file"),
    ),
    one_of=BROKER_OR_CLUSTER,
)
