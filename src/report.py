"""
Output of collected host statuses
"""
# encoding: utf-8

import json

import yaml

FORMATS = ('plain', 'json', 'yaml')


def _flag(value):
    return 'true' if value else 'false'


def format_plain(statuses):
    for status in statuses:
        yield '{name}, {primary}, {timeline}, {attached}'.format(
            name=status.name,
            primary=_flag(status.is_primary),
            timeline=status.timeline_id,
            attached=_flag(status.replica_attached),
        )


def render(statuses, fmt='plain'):
    """
    Render statuses as text in one of FORMATS
    """
    if fmt == 'plain':
        return '\n'.join(format_plain(statuses))
    data = [status.as_dict() for status in statuses]
    style = {'sort_keys': True, 'indent': 4}
    if fmt == 'json':
        return json.dumps(data, **style)
    if fmt == 'yaml':
        return yaml.dump(data, **style).rstrip('\n')
    raise RuntimeError('Unknown output format: %s' % fmt)


def print_statuses(statuses, fmt='plain'):
    text = render(statuses, fmt)
    if text:
        print(text)
