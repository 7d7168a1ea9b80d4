#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import shutil
import tempfile
import threading
import time
from unittest import mock

import psycopg2


class FakeCursor(object):
    """
    Answers pgfleet status queries from host description
    """

    def __init__(self, host):
        self.host = host
        self.result = None

    def execute(self, query, *args):
        failing = self.host.get('fails')
        if failing and failing in query:
            raise psycopg2.ProgrammingError('permission denied for function in "%s"' % query)
        if 'pg_is_in_recovery' in query:
            self.result = (self.host['role'] == 'standby',)
        elif 'pg_control_checkpoint' in query:
            self.result = (int(self.host['timeline']),)
        elif 'pg_stat_replication' in query:
            self.result = (int(self.host['replicas']) > 0,)
        else:
            raise psycopg2.ProgrammingError('unexpected query "%s"' % query)

    def fetchone(self):
        return self.result

    def close(self):
        pass


class FakeConnection(object):
    def __init__(self, host):
        self.host = host
        self._autocommit = False
        self.closed = False

    @property
    def autocommit(self):
        return self._autocommit

    @autocommit.setter
    def autocommit(self, value):
        if self.host.get('fails') == 'autocommit':
            raise psycopg2.OperationalError('server closed the connection unexpectedly')
        self._autocommit = value

    def cursor(self):
        return FakeCursor(self.host)

    def close(self):
        self.closed = True


class FakeFleet(object):
    """
    Replacement for psycopg2.connect backed by a table of hosts
    """

    def __init__(self):
        self.hosts = {}
        self.attempts = []
        self.connections = []
        self._lock = threading.Lock()

    def connect(self, **kwargs):
        with self._lock:
            self.attempts.append(kwargs)
        host = self.hosts.get(kwargs.get('host'))
        if host is None or host['role'] == 'unreachable':
            raise psycopg2.OperationalError(
                'could not translate host name "{host}" to address: '
                'Name or service not known\n'.format(host=kwargs.get('host'))
            )
        delay = float(host.get('delay') or 0)
        if delay:
            time.sleep(delay)
        conn = FakeConnection(host)
        with self._lock:
            self.connections.append(conn)
        return conn

    def attempt_for(self, hostname):
        for attempt in self.attempts:
            if attempt.get('host') == hostname:
                return attempt
        return None


class RecordsHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def before_scenario(context, _):
    context.workdir = tempfile.mkdtemp(prefix='pgfleet-')
    context.fleet = FakeFleet()
    context.connect_patch = mock.patch('psycopg2.connect', side_effect=context.fleet.connect)
    context.connect_patch.start()

    # attached by the run step right after pgfleet configures logging
    context.log_records = RecordsHandler()

    context.hosts_file = None
    context.config_file = None
    context.output = None
    context.exit_code = None
    context.errors = ''
    context.duration = None


def after_scenario(context, _):
    logging.getLogger().removeHandler(context.log_records)
    context.connect_patch.stop()
    shutil.rmtree(context.workdir, ignore_errors=True)
