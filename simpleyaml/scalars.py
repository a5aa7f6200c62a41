# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Classification of single value tokens into typed Python objects.

Rules are tried in a fixed order, and the first match wins:  empty text,
booleans, integers, floats, single-quoted strings, double-quoted strings,
inline dicts, inline lists, and finally the literal text as a string.  The
order matters; `true` must never reach the numeric rules, and `10` must be
an integer rather than a float.
'''


import logging
import math
import re

from . import grammar
from .nodes import Node


LOG = logging.getLogger(__name__)

BOOL_TRUE = grammar.LIT_GRAMMAR['bool_true']
BOOL_FALSE = grammar.LIT_GRAMMAR['bool_false']
INT_MIN = grammar.PARAMS['int_min']
INT_MAX = grammar.PARAMS['int_max']
MAX_NESTING_DEPTH = grammar.PARAMS['max_nesting_depth']

ASSIGN_KEY_VAL = grammar.LIT_GRAMMAR['assign_key_val']
SINGLEQUOTE_DELIM = grammar.LIT_GRAMMAR['singlequote_delim']
DOUBLEQUOTE_DELIM = grammar.LIT_GRAMMAR['doublequote_delim']
START_INLINE_DICT = grammar.LIT_GRAMMAR['start_inline_dict']
END_INLINE_DICT = grammar.LIT_GRAMMAR['end_inline_dict']
START_INLINE_LIST = grammar.LIT_GRAMMAR['start_inline_list']
END_INLINE_LIST = grammar.LIT_GRAMMAR['end_inline_list']
INLINE_ELEMENT_SEPARATOR = grammar.LIT_GRAMMAR['inline_element_separator']

QUOTE_DELIM_SET = set([SINGLEQUOTE_DELIM, DOUBLEQUOTE_DELIM])
OPEN_COLLECTION_SET = set([START_INLINE_DICT, START_INLINE_LIST])
CLOSE_COLLECTION_SET = set([END_INLINE_DICT, END_INLINE_LIST])
# A quote only opens a quoted element when nothing but one of these (or the
# start of the text) precedes it; otherwise it is an apostrophe
QUOTE_OPENER_SET = set([None, INLINE_ELEMENT_SEPARATOR, ASSIGN_KEY_VAL,
                        START_INLINE_DICT, START_INLINE_LIST])

_INTEGER_RE = re.compile(grammar.RE_GRAMMAR['integer'])
_FLOAT_RE = re.compile(grammar.RE_GRAMMAR['float'], re.IGNORECASE)
_HEX_FLOAT_RE = re.compile(grammar.RE_GRAMMAR['hex_float'])
_INF_OR_NAN_RE = re.compile(grammar.RE_GRAMMAR['inf_or_nan_word'], re.IGNORECASE)




class ScalarParser(object):
    '''
    Convert a trimmed value token into `None`, `bool`, `int`, `float`, `str`,
    `list`, or `Node`.  Never raises; unrecognized text is returned as is.

    By default, inline collections are split on every comma, with no regard
    for nesting or quoting.  With `nested_inline=True`, commas inside nested
    brackets or quoted elements are left alone.  Inline collections nested
    more than `max_nesting_depth` levels deep are kept as text.
    '''
    __slots__ = ['nested_inline', 'max_nesting_depth', '_split_inline']
    def __init__(self, *args, **kwargs):
        if args:
            raise TypeError('Explicit keyword arguments are required')
        nested_inline = kwargs.pop('nested_inline', False)
        max_nesting_depth = kwargs.pop('max_nesting_depth', MAX_NESTING_DEPTH)
        if nested_inline not in (True, False):
            raise TypeError('nested_inline must be a boolean')
        if isinstance(max_nesting_depth, bool) or not isinstance(max_nesting_depth, int):
            raise TypeError('max_nesting_depth must be an integer')
        if max_nesting_depth < 0:
            raise ValueError('max_nesting_depth must be >= 0')
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        self.nested_inline = nested_inline
        self.max_nesting_depth = max_nesting_depth
        if nested_inline:
            self._split_inline = self._split_inline_nested
        else:
            self._split_inline = self._split_inline_naive


    def parse(self, text):
        '''
        Classify and convert a single value token.
        '''
        return self._parse(text, 0)


    def _parse(self, text, depth):
        if not text:
            return None
        text_lower = text.lower()
        if text_lower == BOOL_TRUE:
            return True
        if text_lower == BOOL_FALSE:
            return False
        if _INTEGER_RE.fullmatch(text):
            val = int(text)
            if INT_MIN <= val <= INT_MAX:
                return val
        if _FLOAT_RE.fullmatch(text):
            val = self._parse_float(text)
            if val is not None:
                return val
        if len(text) >= 2:
            first = text[0]
            last = text[-1]
            if first == last == SINGLEQUOTE_DELIM or first == last == DOUBLEQUOTE_DELIM:
                return text[1:-1]
            if (first == START_INLINE_DICT and last == END_INLINE_DICT or
                    first == START_INLINE_LIST and last == END_INLINE_LIST):
                if depth >= self.max_nesting_depth:
                    LOG.debug('Keeping inline collection nested deeper than %d levels as text: %r',
                              self.max_nesting_depth, text)
                    return text
                if first == START_INLINE_DICT:
                    return self._parse_inline_dict(text[1:-1], depth + 1)
                return self._parse_inline_list(text[1:-1], depth + 1)
        return text


    @staticmethod
    def _parse_float(text):
        '''
        Return a float, or `None` when the value is out of range.  Only an
        explicit infinity word may produce an infinite float.
        '''
        if _HEX_FLOAT_RE.fullmatch(text):
            try:
                val = float.fromhex(text)
            except OverflowError:
                return None
        else:
            val = float(text)
        if math.isinf(val) and not _INF_OR_NAN_RE.fullmatch(text):
            return None
        return val


    def _parse_inline_dict(self, interior, depth):
        node = Node()
        if not interior.strip():
            return node
        for segment in self._split_inline(interior):
            key, sep, val = segment.partition(ASSIGN_KEY_VAL)
            if not sep:
                LOG.debug('Skipping inline dict element without "%s": %r', ASSIGN_KEY_VAL, segment)
                continue
            node[key.strip()] = self._parse(val.strip(), depth)
        return node


    def _parse_inline_list(self, interior, depth):
        if not interior.strip():
            return []
        return [self._parse(element.strip(), depth) for element in self._split_inline(interior)]


    @staticmethod
    def _split_inline_naive(interior):
        return interior.split(INLINE_ELEMENT_SEPARATOR)


    @staticmethod
    def _split_inline_nested(interior):
        '''
        Split on commas that are at the top nesting level and outside quoted
        elements.  Unbalanced closing brackets are ignored.
        '''
        elements = []
        depth = 0
        quote = None
        last = None
        start = 0
        for index, c in enumerate(interior):
            if quote is not None:
                if c == quote:
                    quote = None
                    last = c
                continue
            if c in QUOTE_DELIM_SET and last in QUOTE_OPENER_SET:
                quote = c
            elif c in OPEN_COLLECTION_SET:
                depth += 1
            elif c in CLOSE_COLLECTION_SET:
                if depth > 0:
                    depth -= 1
            elif c == INLINE_ELEMENT_SEPARATOR and depth == 0:
                elements.append(interior[start:index])
                start = index + 1
                last = None
                continue
            if not c.isspace():
                last = c
        elements.append(interior[start:])
        return elements




_DEFAULT_PARSER = ScalarParser()


def parse_value(text):
    '''
    Classify a trimmed value token with the default rules.
    '''
    return _DEFAULT_PARSER.parse(text)
