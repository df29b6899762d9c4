# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""ACL request signing for admin commands.

The tools ACL file (``<home>/conf/tools.yml``) holds the credentials used to
sign every admin request::

    accessKey: RocketMQ
    secretKey: 12345678

``get_acl_rpc_hook`` turns that file into an :class:`AclClientRpcHook`, or
``None`` when ACL is not configured.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import yaml

from ..util.logging_utils import _log_debug

ACCESS_KEY = "AccessKey"
SIGNATURE = "Signature"
SECURITY_TOKEN = "SecurityToken"


class RpcHook(Protocol):
    """Called on every outgoing admin request before it is sent."""

    def do_before_request(self, remote_addr: str | None, fields: dict[str, str]) -> dict[str, str]: ...


@dataclass(frozen=True)
class SessionCredentials:
    access_key: str
    secret_key: str
    security_token: str | None = None

    def __repr__(self) -> str:
        return f"SessionCredentials(access_key={self.access_key!r}, secret_key='***')"


def calculate_signature(data: bytes, secret_key: str) -> str:
    """HMAC-SHA1 of *data* keyed by *secret_key*, base64 encoded."""
    digest = hmac.new(secret_key.encode("utf-8"), data, hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


class AclClientRpcHook:
    """Signs request fields with the session credentials."""

    def __init__(self, credentials: SessionCredentials) -> None:
        self.credentials = credentials

    def do_before_request(self, remote_addr: str | None, fields: dict[str, str]) -> dict[str, str]:
        """Return *fields* extended with access key and signature.

        The signature covers every field value (access key and security token
        included) concatenated in key order.
        """
        signed = dict(fields)
        signed[ACCESS_KEY] = self.credentials.access_key
        if self.credentials.security_token:
            signed[SECURITY_TOKEN] = self.credentials.security_token
        content = "".join(str(signed[key]) for key in sorted(signed))
        signed[SIGNATURE] = calculate_signature(content.encode("utf-8"), self.credentials.secret_key)
        return signed


def get_acl_rpc_hook(path: Path | None) -> AclClientRpcHook | None:
    """Build the ACL hook from the tools file at *path*.

    Returns ``None`` (ACL disabled) if the path is unknown, the file is
    missing or malformed, or either key is blank.
    """
    if path is None:
        _log_debug("acl: installation root not set, acl isn't enabled")
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _log_debug(f"acl: cannot find conf file {path}, acl isn't enabled")
        return None
    except (OSError, yaml.YAMLError) as e:
        _log_debug(f"acl: failed to read {path}: {e}")
        return None

    if not isinstance(data, dict) or not data:
        _log_debug(f"acl: conf file {path} is empty, acl isn't enabled")
        return None

    access_key = str(data.get("accessKey") or "").strip()
    secret_key = str(data.get("secretKey") or "").strip()
    if not access_key or not secret_key:
        _log_debug("acl: accessKey or secretKey is blank, acl isn't enabled")
        return None

    token = data.get("securityToken")
    _log_debug(f"acl: loaded credentials for access key {access_key}")
    return AclClientRpcHook(
        SessionCredentials(access_key, secret_key, str(token) if token else None)
    )
