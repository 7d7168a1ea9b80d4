"""
Replication status of a fleet of PostgreSQL hosts
"""
# encoding: utf-8

import logging
import math

from configparser import NoOptionError, RawConfigParser

from .exceptions import ConfigError
from .types import ProbeConfig, TlsMode


def read_config(filename=None, options=None):
    """
    Merge config with default values and cmd options
    """
    defaults: dict[str, dict] = {
        'global': {
            'log_level': 'warning',
            'port': 5432,
            'dbname': 'postgres',
            'connect_timeout': 10,
            'query_timeout': 10,
            'workers': 8,
            'format': 'plain',
        },
        'debug': {
            'log_func_name': 'no',
        },
    }

    config = RawConfigParser()
    if not filename:
        filename = options.config_file

    config.read(filename)

    #
    # Appending default config with default values.
    #
    for section in defaults:
        if not config.has_section(section):
            config.add_section(section)
        for key, value in defaults[section].items():
            if not config.has_option(section, key):
                config.set(section, key, value)

    #
    # Rewriting global config with parameters from command line.
    #
    if options:
        for key, value in vars(options).items():
            if value is not None and not callable(value):
                config.set('global', key, value)

    return config


def init_logging(config):
    """
    Set log level and format
    """
    level = getattr(logging, config.get('global', 'log_level').upper())
    format = '{asctime} {levelname:<8}: {message}'
    if config.getboolean('debug', 'log_func_name', fallback=False):
        format = '{asctime} {levelname:<8}: {funcName:<30}: {message}'
    logging.basicConfig(level=level, format=format, style='{')


def make_probe_config(config):
    """
    Build immutable probe settings out of merged config
    """
    try:
        tls_mode = TlsMode(config.get('global', 'tls_mode'))
        probe_config = ProbeConfig(
            user=config.get('global', 'user'),
            password=config.get('global', 'password'),
            tls_mode=tls_mode,
            root_cert=config.get('global', 'root_cert', fallback=None),
            client_cert=config.get('global', 'client_cert', fallback=None),
            client_key=config.get('global', 'client_key', fallback=None),
            port=config.getint('global', 'port'),
            dbname=config.get('global', 'dbname'),
            connect_timeout=config.getfloat('global', 'connect_timeout'),
            query_timeout=config.getfloat('global', 'query_timeout'),
        )
    except ValueError as exc:
        raise ConfigError(f'invalid configuration: {exc}')
    except NoOptionError as exc:
        raise ConfigError(f'missing configuration: {exc}')

    for key in ('connect_timeout', 'query_timeout'):
        value = getattr(probe_config, key)
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f'invalid configuration: {key} should be a positive number of seconds, got {value}')

    if probe_config.tls_mode == TlsMode.cert:
        for key in ('root_cert', 'client_cert', 'client_key'):
            if not getattr(probe_config, key):
                raise ConfigError(f'{key} is required for cert authentication')
    return probe_config
