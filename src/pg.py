"""
Pg wrapper module. HostProber class defined here.
"""
# encoding: utf-8

import contextlib
import logging

import psycopg2

from . import helpers
from .exceptions import HostConnectionError, StatusQueryError
from .types import HostStatus, TlsMode

APPLICATION_NAME = 'pgfleet'
KEEPALIVES_COUNT = 3

IS_IN_RECOVERY_QUERY = 'SELECT pg_is_in_recovery();'
TIMELINE_QUERY = 'SELECT timeline_id FROM pg_control_checkpoint();'
REPLICA_ATTACHED_QUERY = 'SELECT EXISTS (SELECT 1 FROM pg_stat_replication);'


def connection_params(host, probe_config):
    """
    libpq connection parameters for a single host
    """
    params = {
        'host': host,
        'port': probe_config.port,
        'dbname': probe_config.dbname,
        'user': probe_config.user,
        'password': probe_config.password,
        'connect_timeout': helpers.libpq_seconds(probe_config.connect_timeout),
        'application_name': APPLICATION_NAME,
        'keepalives': 1,
        'keepalives_idle': helpers.libpq_seconds(probe_config.query_timeout),
        'keepalives_interval': helpers.libpq_seconds(probe_config.query_timeout),
        'keepalives_count': KEEPALIVES_COUNT,
        'tcp_user_timeout': helpers.to_milliseconds(probe_config.query_timeout),
        'options': '-c statement_timeout={timeout} -c default_transaction_read_only=on'.format(
            timeout=helpers.to_milliseconds(probe_config.query_timeout)
        ),
    }
    if probe_config.tls_mode == TlsMode.cert:
        params.update(
            {
                'sslmode': 'require',
                'sslrootcert': probe_config.root_cert,
                'sslcert': probe_config.client_cert,
                'sslkey': probe_config.client_key,
            }
        )
    else:
        params['sslmode'] = 'prefer'
    return params


class HostProber(object):
    """
    Collects replication status of one postgresql host
    """

    def __init__(self, host, probe_config):
        self.host = host
        self.config = probe_config
        self.conn = None

    def connect(self):
        try:
            self.conn = psycopg2.connect(**connection_params(self.host, self.config))
            self.conn.autocommit = True
        except psycopg2.Error as exc:
            helpers.log_traceback()
            raise HostConnectionError(self.host, helpers.one_line(exc))

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def _fetch_value(self, query):
        try:
            with contextlib.closing(self.conn.cursor()) as cur:
                cur.execute(query)
                row = cur.fetchone()
        except psycopg2.Error as exc:
            helpers.log_traceback()
            raise StatusQueryError(self.host, helpers.one_line(exc))
        if row is None:
            raise StatusQueryError(self.host, f'no rows returned by "{query}"')
        return row[0]

    def is_primary(self):
        """
        Primary is a host which is not in recovery
        """
        return not self._fetch_value(IS_IN_RECOVERY_QUERY)

    def get_timeline_id(self):
        """
        Timeline from the latest checkpoint in control file
        """
        return int(self._fetch_value(TIMELINE_QUERY))

    def is_replica_attached(self):
        """
        True if at least one standby is streaming from this host
        """
        return bool(self._fetch_value(REPLICA_ATTACHED_QUERY))

    def probe(self):
        """
        Connect, run status queries and return HostStatus.
        Raises HostProbeError subclasses on failure.
        """
        try:
            self.connect()
            return HostStatus(
                name=self.host,
                is_primary=self.is_primary(),
                timeline_id=self.get_timeline_id(),
                replica_attached=self.is_replica_attached(),
            )
        finally:
            self.close()


def probe_host(host, probe_config):
    return HostProber(host, probe_config).probe()
