#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
import re

from setuptools import setup, find_packages


def requires_from_file(filename):
    requirements = []
    with open(filename, 'r') as requirements_fp:
        for line in requirements_fp.readlines():
            match = re.search(r'^\s*([a-zA-Z][^#]+?)(\s*#.+)?\n$', line)
            if match:
                requirements.append(match.group(1))
    return requirements

def release_info():
    release_info = {}
    with open(os.path.join('smtpfeed', 'release.py'), 'r') as release_fp:
        exec(release_fp.read(), release_info)
    return release_info

info = release_info()

setup(
    name=info['name'],
    version=info['version'],
    description=info['description'],
    long_description=info['long_description'],
    packages = find_packages(exclude=['tests']),
    license=info['license'],
    author=info['author'],
    python_requires='>=3.6',
    install_requires=requires_from_file('requirements.txt'),
    extras_require={
        'testing': ['pytest', 'pythonic_testcase', 'dotmap'],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
