# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Lookup of values in decoded data by path, for example `servers[0].host`.

Path segments are separated by `.`.  A segment may end in an `[index]`,
which selects an element of the list stored under the segment's key.  There
is no escaping of `.`, `[`, or `]` inside keys.

A missing key and a key whose value is null both resolve to `None`; the two
cases cannot be told apart.
'''


import re

from . import grammar


PATH_SEPARATOR = grammar.LIT_GRAMMAR['path_separator']
START_PATH_INDEX = grammar.LIT_GRAMMAR['start_path_index']
END_PATH_INDEX = grammar.LIT_GRAMMAR['end_path_index']

_PATH_INDEX_RE = re.compile(grammar.RE_GRAMMAR['path_index'])




def resolve(node, path):
    '''
    Return the value at `path` within `node`, or `None` if there is no such
    value.  Resolution stops as soon as a step yields `None`.
    '''
    current = node
    val = node
    for segment in path.split(PATH_SEPARATOR):
        if START_PATH_INDEX in segment and END_PATH_INDEX in segment:
            val = _resolve_index(current, segment)
        elif isinstance(current, dict):
            val = current.get(segment)
        else:
            val = None
        if val is None:
            return None
        # Only dicts can be descended into by key
        current = val if isinstance(val, dict) else None
    return val


def _resolve_index(current, segment):
    start = segment.index(START_PATH_INDEX)
    end = segment.index(END_PATH_INDEX)
    index_string = segment[start+1:end]
    if not _PATH_INDEX_RE.fullmatch(index_string):
        return None
    if not isinstance(current, dict):
        return None
    seq = current.get(segment[:start])
    if not isinstance(seq, list):
        return None
    index = int(index_string)
    if index >= len(seq):
        return None
    return seq[index]
