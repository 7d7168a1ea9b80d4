"""
Hosts file loader
"""
# encoding: utf-8

import logging

from .exceptions import HostsFileError


def parse_hosts(lines):
    """
    Yield hostnames in file order. Blank lines and '#' comments are skipped.
    """
    for line in lines:
        host = line.strip()
        if not host or host.startswith('#'):
            continue
        yield host


def load_hosts(path):
    """
    Read hosts file, one hostname per line. Any read error is fatal.
    """
    try:
        with open(path, 'r', encoding='utf-8-sig') as fobj:
            hosts = list(parse_hosts(fobj))
    except UnicodeDecodeError as exc:
        raise HostsFileError(f'could not decode hosts file {path}: {exc}')
    except OSError as exc:
        raise HostsFileError(f'could not read hosts file {path}: {exc.strerror or exc}')
    logging.debug('Loaded %d host(s) from %s', len(hosts), path)
    return hosts
