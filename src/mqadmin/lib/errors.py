"""Exception types raised by mqadmin."""


class MqAdminError(Exception):
    """Base class for all mqadmin errors."""


class DuplicateCommandError(MqAdminError):
    """A command name or alias is already taken in the registry."""


class RegistryFrozenError(MqAdminError):
    """The registry no longer accepts new commands."""


class OptionParseError(MqAdminError):
    """Command-line flags do not match the command's option schema."""


class InvalidOptionsError(MqAdminError):
    """Parsed options are well-formed but not a valid combination."""


class AdminTransportError(MqAdminError):
    """No admin client is able to reach the cluster."""
