# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Built-in admin subcommands.

Each module groups the commands of one area (topics, brokers, messages,
...) as module-level :class:`~mqadmin.cli.commands.base.AdminSubCommand`
constants. ``builtin_commands()`` lists them in the order the help listing
shows them.
"""

from __future__ import annotations

from ..registry import CommandRegistry
from . import (
    acl,
    broker,
    cluster,
    connection,
    consumer,
    container,
    export,
    ha,
    message,
    namesrv,
    offset,
    topic,
)
from .base import SubCommand


def builtin_commands() -> list[SubCommand]:
    return [
        topic.UPDATE_TOPIC,
        topic.DELETE_TOPIC,
        consumer.UPDATE_SUB_GROUP,
        consumer.SET_CONSUME_MODE,
        consumer.DELETE_SUB_GROUP,
        broker.UPDATE_BROKER_CONFIG,
        topic.UPDATE_TOPIC_PERM,
        topic.TOPIC_ROUTE,
        topic.TOPIC_STATUS,
        topic.TOPIC_CLUSTER_LIST,
        container.ADD_BROKER,
        container.REMOVE_BROKER,
        broker.RESET_MASTER_FLUSH_OFFSET,
        broker.BROKER_STATUS,
        message.QUERY_MSG_BY_ID,
        message.QUERY_MSG_BY_KEY,
        message.QUERY_MSG_BY_UNIQUE_KEY,
        message.QUERY_MSG_BY_OFFSET,
        message.QUERY_MSG_TRACE_BY_ID,
        message.PRINT_MSG,
        message.PRINT_MSG_BY_QUEUE,
        message.SEND_MSG_STATUS,
        broker.BROKER_CONSUME_STATS,
        connection.PRODUCER_CONNECTION,
        connection.CONSUMER_CONNECTION,
        consumer.CONSUMER_PROGRESS,
        consumer.CONSUMER_STATUS,
        offset.CLONE_GROUP_OFFSET,
        connection.PRODUCER,
        cluster.CLUSTER_LIST,
        topic.TOPIC_LIST,
        namesrv.UPDATE_KV_CONFIG,
        namesrv.DELETE_KV_CONFIG,
        broker.WIPE_WRITE_PERM,
        broker.ADD_WRITE_PERM,
        offset.RESET_OFFSET_BY_TIME,
        offset.SKIP_ACCUMULATED_MESSAGE,
        topic.UPDATE_ORDER_CONF,
        broker.CLEAN_EXPIRED_CQ,
        broker.DELETE_EXPIRED_COMMIT_LOG,
        topic.CLEAN_UNUSED_TOPIC,
        cluster.START_MONITORING,
        cluster.STATS_ALL,
        topic.ALLOCATE_MQ,
        message.CHECK_MSG_SEND_RT,
        cluster.CLUSTER_RT,
        namesrv.GET_NAMESRV_CONFIG,
        namesrv.UPDATE_NAMESRV_CONFIG,
        broker.GET_BROKER_CONFIG,
        consumer.GET_CONSUMER_CONFIG,
        message.QUERY_CQ,
        message.SEND_MESSAGE,
        consumer.CONSUME_MESSAGE,
        # acl
        acl.UPDATE_ACL_CONFIG,
        acl.DELETE_ACL_CONFIG,
        acl.CLUSTER_ACL_CONFIG_VERSION,
        acl.UPDATE_GLOBAL_WHITE_ADDR,
        topic.UPDATE_STATIC_TOPIC,
        topic.REMAPPING_STATIC_TOPIC,
        export.EXPORT_METADATA,
        export.EXPORT_CONFIGS,
        export.EXPORT_METRICS,
        export.EXPORT_METADATA_IN_ROCKSDB,
        ha.HA_STATUS,
        ha.GET_SYNC_STATE_SET,
        ha.GET_BROKER_EPOCH,
        ha.GET_CONTROLLER_META_DATA,
        ha.GET_CONTROLLER_CONFIG,
        ha.UPDATE_CONTROLLER_CONFIG,
        ha.ELECT_MASTER,
        ha.CLEAN_BROKER_METADATA,
        broker.DUMP_COMPACTION_LOG,
        broker.GET_COLD_DATA_FLOW_CTR_INFO,
        broker.UPDATE_COLD_DATA_FLOW_CTR_GROUP_CONFIG,
        broker.REMOVE_COLD_DATA_FLOW_CTR_GROUP_CONFIG,
        broker.SET_COMMIT_LOG_READ_AHEAD_MODE,
    ]


def default_registry() -> CommandRegistry:
    """Frozen registry of all built-in commands."""
    return CommandRegistry(builtin_commands()).freeze()
