#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup

setup(
    name='pgfleet',
    version='1.0',
    url='https://github.com/pgfleet/pgfleet',
    description="Replication status of a fleet of PostgreSQL hosts",
    long_description="Report primary/standby role, timeline and attached replicas for a list of PostgreSQL hosts",
    license="PostgreSQL",
    platforms=["Linux", "BSD", "MacOS"],
    zip_safe=False,
    python_requires='>=3.10',
    packages=['pgfleet'],
    package_dir={'pgfleet': 'src'},
    install_requires=[
        'psycopg2-binary',
        'PyYAML',
    ],
    extras_require={
        'test': ['behave'],
    },
    entry_points={
        'console_scripts': [
            'pgfleet = pgfleet.cli:entry',
        ]
    },
)
