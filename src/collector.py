"""
Fan out host probes over a thread pool and gather statuses in file order
"""
# encoding: utf-8

import logging
from concurrent.futures import ThreadPoolExecutor

from .exceptions import HostConnectionError, HostProbeError
from .pg import probe_host


def _probe_or_skip(index, host, probe_config):
    try:
        logging.debug('Probing %s', host)
        return index, probe_host(host, probe_config)
    except HostConnectionError as exc:
        logging.error('Error connecting to host %s: %s', host, exc.reason)
    except HostProbeError as exc:
        logging.error('Error querying host %s: %s', host, exc.reason)
    return index, None


def collect(hosts, probe_config, workers=8):
    """
    Probe every host, one task per host.
    Returns HostStatus list ordered like hosts, unreachable hosts are dropped.
    """
    if not hosts:
        return []
    slots = [None] * len(hosts)
    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(hosts)))) as executor:
        futures = [executor.submit(_probe_or_skip, index, host, probe_config) for index, host in enumerate(hosts)]
        for future in futures:
            index, status = future.result()
            slots[index] = status

    statuses = [status for status in slots if status is not None]
    logging.info('Collected %d of %d hosts', len(statuses), len(hosts))
    return statuses
