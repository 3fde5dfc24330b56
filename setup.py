#!/usr/bin/env python3
"""
Setup script for halfqwerty
"""

from setuptools import setup, find_packages
import os
import sys

# Read the version without importing the package
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'halfqwerty'))
from __version__ import __version__

# README for long_description
def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()

setup(
    name='halfqwerty',
    version=__version__,
    description='Half-QWERTY English input engine - one-handed typing with space chords',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.9',
    install_requires=[
        'evdev',         # Keycode names and key event constants for the host adapter
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'halfqwerty=halfqwerty.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Operating System :: POSIX :: Linux',
        'Topic :: Text Processing',
    ],
)
