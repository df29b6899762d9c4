"""Name server configuration and KV config commands."""

from ..options import opt
from .base import AdminSubCommand

UPDATE_KV_CONFIG = AdminSubCommand(
    name="updateKvConfig",
    description="Create or update KV config.",
    options=(
        opt("s", "namespace", "set the namespace", required=True),
        opt("k", "key", "set the key name", required=True),
        opt("v", "value", "set the key value", required=True),
    ),
)

DELETE_KV_CONFIG = AdminSubCommand(
    name="deleteKvConfig",
    description="Delete KV config.",
    options=(
        opt("s", "namespace", "set the namespace", required=True),
        opt("k", "key", "set the key name", required=True),
    ),
)

GET_NAMESRV_CONFIG = AdminSubCommand(
    name="getNamesrvConfig",
    description="Get configs of name server.",
)

UPDATE_NAMESRV_CONFIG = AdminSubCommand(
    name="updateNamesrvConfig",
    description="Update configs of name server.",
    options=(
        opt("k", "key", "config key", required=True),
        opt("v", "value", "config value", required=True),
    ),
)
