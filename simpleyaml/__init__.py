# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .version import __version__, __version_info__


from .loading import load, loads, load_all, loads_all
from .nodes import Node
from .scalars import ScalarParser, parse_value
from .pathing import resolve
from .decoding import SimpleYAMLDecoder
