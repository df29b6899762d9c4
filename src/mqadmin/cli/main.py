#!/usr/bin/env python3

import sys
from collections.abc import Sequence

from ..lib.core.config import load_admin_config
from ..lib.security.acl import RpcHook
from .commands import default_registry
from .dispatcher import DispatchResult, Dispatcher


def run(argv: Sequence[str] | None = None, rpc_hook: RpcHook | None = None) -> DispatchResult:
    """Dispatch one invocation and return its outcome.

    Embedders pass their own *rpc_hook* to skip the ACL tools file lookup.
    """
    if argv is None:
        argv = sys.argv[1:]
    dispatcher = Dispatcher(default_registry(), config=load_admin_config(), rpc_hook=rpc_hook)
    return dispatcher.dispatch(argv)


def main() -> None:
    # The exit status is 0 whatever the outcome; failures are reported on the console.
    try:
        run()
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
