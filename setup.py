# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import sys
import os


if sys.version_info < (3, 6):
    sys.exit('SimpleYAML requires Python 3.6+')

from setuptools import setup


# Extract the version from version.py
fname = os.path.join(os.path.dirname(__file__), 'simpleyaml', 'version.py')
with open(fname, 'r', encoding='utf8') as f:
    t = ''.join([line for line in f.readlines() if line.startswith('__version__')])
    if not t:
        raise RuntimeError('Failed to extract version from "version.py"')
    c = compile(t, 'simpleyaml/version.py', 'exec')
    version_namespace = {}
    exec(c, version_namespace)
version = version_namespace['__version__']

fname = os.path.join(os.path.dirname(__file__), 'README.rst')
with open(fname, encoding='utf8') as f:
    long_description = f.read()


setup(name = 'simpleyaml-lite',
      version = version,
      py_modules = [],
      packages = ['simpleyaml'],
      description = 'Minimal permissive parser for a practical subset of YAML',
      long_description = long_description,
      license = 'BSD',
      keywords = ['yaml', 'configuration', 'parser'],
      python_requires = '>=3.6',
      extras_require = {'test': ['pytest']},
      # https://pypi.python.org/pypi?:action=list_classifiers
      classifiers = [
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: OS Independent',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Topic :: Text Processing :: Markup',
          'Topic :: Utilities',
      ]
)
