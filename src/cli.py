# coding: utf-8
"""
pgfleet command line utility:
    - read hosts file
    - probe every host for its replication status
    - print collected statuses
"""
import argparse
import sys
import logging

from . import read_config, init_logging, make_probe_config
from . import collector
from . import hosts as hosts_file
from . import report
from .exceptions import ConfigError, PgfleetException
from .types import TlsMode
from .version import __version__


def entry(args=None):
    """
    Entry point.
    """
    opts = parse_args(args)
    conf = read_config(
        filename=opts.config_file,
        options=opts,
    )
    init_logging(conf)
    try:
        opts.action(opts, conf)
    except (KeyboardInterrupt, EOFError):
        logging.error('abort')
        sys.exit(1)
    except (PgfleetException, RuntimeError) as err:
        logging.error(err)
        sys.exit(1)
    except Exception as exc:
        logging.exception(exc)
        sys.exit(1)


def status(opts, conf):
    """
    Probe hosts from hosts file and print their statuses.
    """
    probe_config = make_probe_config(conf)
    fmt = conf.get('global', 'format')
    if fmt not in report.FORMATS:
        raise RuntimeError('Unknown output format: %s' % fmt)
    try:
        workers = conf.getint('global', 'workers')
    except ValueError:
        raise ConfigError('invalid configuration: workers should be an integer, got %s' % conf.get('global', 'workers'))
    if workers < 1:
        raise ConfigError('invalid configuration: workers should be at least 1, got %d' % workers)

    targets = hosts_file.load_hosts(opts.hosts)
    statuses = collector.collect(targets, probe_config, workers=workers)
    report.print_statuses(statuses, fmt)


def parse_args(args=None):
    """
    Parse command line with cert/no-cert subcommands.
    """
    arg = argparse.ArgumentParser(
        prog='pgfleet',
        description="""
        Show role, timeline and attached replicas of PostgreSQL hosts
        """,
    )
    arg.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    arg.add_argument(
        '-c',
        '--config',
        dest='config_file',
        type=str,
        metavar='<path>',
        default='/etc/pgfleet.conf',
        help='path to pgfleet config file',
    )
    arg.add_argument('-u', '--user', required=True, metavar='<user>', help='database user')
    arg.add_argument('-p', '--password', required=True, metavar='<password>', help='database password')
    arg.add_argument('--hosts', required=True, metavar='<path>', help='file with hosts to connect to, one per line')
    arg.add_argument('--port', type=int, default=None, metavar='<port>', help='override config port (5432)')
    arg.add_argument('--dbname', default=None, metavar='<name>', help='override config database name (postgres)')
    arg.add_argument(
        '--connect-timeout',
        dest='connect_timeout',
        type=float,
        default=None,
        metavar='<sec>',
        help='limit connection establishment to this amount of seconds',
    )
    arg.add_argument(
        '--query-timeout',
        dest='query_timeout',
        type=float,
        default=None,
        metavar='<sec>',
        help='limit each status query to this amount of seconds',
    )
    arg.add_argument(
        '-w', '--workers', type=int, default=None, metavar='<int>', help='number of hosts probed simultaneously'
    )
    arg.add_argument('-f', '--format', choices=report.FORMATS, default=None, help='output format (plain)')
    arg.add_argument('--log-level', dest='log_level', default=None, metavar='<level>', help='override config log level')

    subarg = arg.add_subparsers(
        dest='command',
        metavar='{cert,no-cert}',
        help='authentication mode', title='subcommands', description='for more info, see <subcommand> -h'
    )
    subarg.required = True

    cert_arg = subarg.add_parser('cert', help='for hosts that require cert authentication')
    cert_arg.add_argument('-r', '--root-cert', dest='root_cert', required=True, help='root CA certificate file path')
    cert_arg.add_argument('--client-cert', dest='client_cert', required=True, help='client certificate file path')
    cert_arg.add_argument('--client-key', dest='client_key', required=True, help='client certificate key file path')
    cert_arg.set_defaults(action=status, tls_mode=TlsMode.cert.value)

    no_cert_arg = subarg.add_parser('no-cert', help='for hosts without client certificates')
    no_cert_arg.set_defaults(action=status, tls_mode=TlsMode.no_cert.value)

    return arg.parse_args(args)
