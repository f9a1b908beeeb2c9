"""
Unified exception definitions
"""


class SshcError(Exception):
    """Base exception class"""
    exit_code = 1


class ConfigError(SshcError):
    """Configuration error"""
    exit_code = 78


class StoreError(SshcError):
    """Connection store error"""
    pass


class StoreIOError(StoreError):
    """Connection store could not be created, read or written"""
    exit_code = 74


class StoreParseError(StoreError):
    """Connection store contents are not a valid document"""
    exit_code = 65


class ConnectionNotFoundError(SshcError):
    """No connection saved under the requested label"""
    pass


class LaunchError(SshcError):
    """SSH client could not be started"""
    exit_code = 127
