# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Data model for parsed documents.

A document decodes to a `Node`, which maps string keys to values.  Values
are `None`, `bool`, `int`, `float`, `str`, `list`, or another `Node`.
'''


from . import grammar
from .pathing import resolve


SPACE = grammar.LIT_GRAMMAR['space']
TAB = grammar.LIT_GRAMMAR['tab']
TAB_WIDTH = grammar.PARAMS['tab_width']
COMMENT_DELIM = grammar.LIT_GRAMMAR['comment_delim']
LIST_ITEM = grammar.LIT_GRAMMAR['list_item']
DOCUMENT_SEPARATOR = grammar.LIT_GRAMMAR['document_separator']




class Node(dict):
    '''
    Mapping from string keys to values.  Assigning an existing key replaces
    the previous value.
    '''
    __slots__ = []

    def path(self, path):
        '''
        Return the value addressed by a path like `a.b[0].c`, or `None`.
        '''
        return resolve(self, path)

    def __repr__(self):
        return 'Node({0})'.format(dict.__repr__(self))




class Line(object):
    '''
    A single source line, with its stripped text and indentation width.

    Each leading space counts one unit and each leading tab counts
    `tab_width` units.  The two are simply summed; no tab stops.
    '''
    __slots__ = ['raw', 'text', 'indent']
    def __init__(self, raw, tab_width=TAB_WIDTH):
        self.raw = raw
        self.text = raw.strip()
        indent = 0
        for c in raw:
            if c == TAB:
                indent += tab_width
            elif c == SPACE:
                indent += 1
            else:
                break
        self.indent = indent

    def __repr__(self):
        return 'Line({0!r}, indent={1})'.format(self.raw, self.indent)

    @property
    def is_blank(self):
        return not self.text

    @property
    def is_comment(self):
        return self.text[:1] == COMMENT_DELIM

    @property
    def is_content(self):
        return bool(self.text) and self.text[:1] != COMMENT_DELIM

    @property
    def is_separator(self):
        return self.text == DOCUMENT_SEPARATOR

    @property
    def is_list_item(self):
        return self.text[:1] == LIST_ITEM and self.text != DOCUMENT_SEPARATOR

    def replace_list_item(self, tab_width=TAB_WIDTH):
        '''
        Return a new `Line` with the first list-item marker replaced by a
        space, so that the item's content keeps its column.
        '''
        return Line(self.raw.replace(LIST_ITEM, '\x20', 1), tab_width)
