#!/usr/bin/python
"""A setuptools-based script for distributing and installing fclabel."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

from setuptools import setup

with open('README.markdown') as readmeFile:
    long_description = readmeFile.read()

with open('requirements.txt') as requirementsFile:
    requires = [ line.strip() for line in requirementsFile if line.strip() ]

setup(
    name = 'fclabel',
    version = '0.1.dev1',
    description = 'Parsing, formatting and questions for HTS-style full-context labels.',
    license = 'MIT (see License file)',
    packages = ['fclabel', 'fclabel.speech', 'fclabel.modelling', 'fclabel.util'],
    install_requires = requires,
    # (the query tool is run as python -m fclabel.query)
    scripts = [],
    long_description = long_description,
)
