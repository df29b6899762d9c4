"""mqadmin package.

Modules:
- mqadmin.cli: CLI entry point package (mqadmin), dispatcher and subcommands
- mqadmin.lib.core: Configuration and paths
- mqadmin.lib.security: ACL request signing
- mqadmin.lib.admin: Admin client seam used by subcommands
- mqadmin.lib.util: Internal helpers (config stack, logging)
"""

__all__ = [
    "cli",
    "lib",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("mqadmin")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
