# coding: utf8
"""
Describes exception classes used in pgfleet.
"""


class PgfleetException(Exception):
    """
    Generic pgfleet exception.
    """

    pass


class HostsFileError(PgfleetException):
    """
    Hosts file could not be read or decoded.
    """

    pass


class ConfigError(PgfleetException):
    """
    Invalid configuration or command line options.
    """

    pass


class HostProbeError(PgfleetException):
    """
    Probing a single host failed. The host is skipped.
    """

    def __init__(self, host, reason):
        super().__init__(f'{host}: {reason}')
        self.host = host
        self.reason = reason


class HostConnectionError(HostProbeError):
    """
    Could not connect to host
    """

    pass


class StatusQueryError(HostProbeError):
    """
    Status query failed after the connection was established
    """

    pass
