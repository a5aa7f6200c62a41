# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301


import logging

from . import erring
from . import grammar
from .nodes import Node, Line
from .scalars import ScalarParser


LOG = logging.getLogger(__name__)

BOM = grammar.LIT_GRAMMAR['bom']
NEWLINE = grammar.LIT_GRAMMAR['newline']
SPACE = grammar.LIT_GRAMMAR['space']
TAB_WIDTH = grammar.PARAMS['tab_width']
MAX_NESTING_DEPTH = grammar.PARAMS['max_nesting_depth']

ASSIGN_KEY_VAL = grammar.LIT_GRAMMAR['assign_key_val']
LITERAL_BLOCK_PREFIX = grammar.LIT_GRAMMAR['literal_block_prefix']
FOLDED_BLOCK_PREFIX = grammar.LIT_GRAMMAR['folded_block_prefix']
BLOCK_PREFIX_SET = set([LITERAL_BLOCK_PREFIX, FOLDED_BLOCK_PREFIX])

# List items starting with one of these are scalars even when they contain a
# key-value separator, e.g. `- {a: 1}` or `- "x: y"`
SCALAR_ITEM_START_SET = set([grammar.LIT_GRAMMAR['start_inline_dict'],
                             grammar.LIT_GRAMMAR['start_inline_list'],
                             grammar.LIT_GRAMMAR['singlequote_delim'],
                             grammar.LIT_GRAMMAR['doublequote_delim']])




class SimpleYAMLDecoder(object):
    '''
    Decode YAML in a string or stream.

    A decoder instance holds only configuration and is static once created.
    All state for a parse lives in local variables and is passed explicitly
    between the block-parsing methods, each of which receives a line list
    plus an index range and returns its result together with the index at
    which the caller should resume.  Thus a single decoder may be shared
    freely.

    Parsing is permissive.  Lines that cannot be interpreted are skipped,
    and nothing about the YAML itself ever raises an exception.
    '''
    __slots__ = ['tab_width', 'nested_inline', 'max_nesting_depth', '_scalar_parser']
    def __init__(self, *args, **kwargs):
        # Process args
        if args:
            raise TypeError('Explicit keyword arguments are required')
        tab_width = kwargs.pop('tab_width', TAB_WIDTH)
        nested_inline = kwargs.pop('nested_inline', False)
        max_nesting_depth = kwargs.pop('max_nesting_depth', MAX_NESTING_DEPTH)
        if isinstance(tab_width, bool) or not isinstance(tab_width, int):
            raise TypeError('tab_width must be an integer')
        if tab_width < 1:
            raise ValueError('tab_width must be >= 1')
        if nested_inline not in (True, False):
            raise TypeError('nested_inline must be a boolean')
        if isinstance(max_nesting_depth, bool) or not isinstance(max_nesting_depth, int):
            raise TypeError('max_nesting_depth must be an integer')
        if max_nesting_depth < 0:
            raise ValueError('max_nesting_depth must be >= 0')
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        self.tab_width = tab_width
        self.nested_inline = nested_inline
        self.max_nesting_depth = max_nesting_depth
        self._scalar_parser = ScalarParser(nested_inline=nested_inline,
                                           max_nesting_depth=max_nesting_depth)


    @staticmethod
    def _as_unicode_string(unicode_string_or_bytes):
        '''
        Take an object that may be a Unicode string or bytes, and return
        a Unicode string with any leading BOM removed.
        '''
        if isinstance(unicode_string_or_bytes, str):
            unicode_string = unicode_string_or_bytes
        else:
            try:
                unicode_string = unicode_string_or_bytes.decode('utf8')
            except Exception as e:
                raise erring.SourceDecodeError(e)
        if unicode_string[:1] == BOM:
            unicode_string = unicode_string[1:]
        return unicode_string


    def _source_lines(self, unicode_string_or_bytes):
        unicode_string = self._as_unicode_string(unicode_string_or_bytes)
        unicode_string = unicode_string.replace('\r\n', NEWLINE).replace('\r', NEWLINE)
        tab_width = self.tab_width
        return [Line(raw, tab_width) for raw in unicode_string.split(NEWLINE)]


    def decode(self, unicode_string_or_bytes):
        '''
        Decode the first document in a Unicode string or byte string into a
        `Node`.  Anything after a later `---` separator is discarded.
        '''
        lines = self._source_lines(unicode_string_or_bytes)
        node, _ = self._parse_block(lines, 0, len(lines), document_start=True)
        return node


    def decode_all(self, unicode_string_or_bytes):
        '''
        Decode every `---`-separated document into a list of `Node`s.
        Documents without any content lines are omitted.
        '''
        lines = self._source_lines(unicode_string_or_bytes)
        end = len(lines)
        documents = []
        index = 0
        document_start = True
        while index < end:
            start = index
            node, index = self._parse_block(lines, start, end, document_start=document_start)
            if any(line.is_content and not line.is_separator for line in lines[start:index]):
                documents.append(node)
            # Step over the separator that ended the document
            index += 1
            document_start = False
        return documents


    def parse_block(self, raw_lines):
        '''
        Parse a sequence of raw text lines into a `Node`.  The lines are not
        modified.
        '''
        tab_width = self.tab_width
        lines = [Line(raw, tab_width) for raw in raw_lines]
        node, _ = self._parse_block(lines, 0, len(lines), document_start=True)
        return node


    def _parse_block(self, lines, start, end, depth=0, document_start=False):
        '''
        Parse `lines[start:end]` into a `Node` at nesting level `depth`.

        Return the node and the index at which parsing stopped:  `end`, or
        the index of a `---` document separator.  When `document_start` is
        true, a separator that is the first content line is skipped as a
        leading marker.
        '''
        node = Node()
        parse_value = self._scalar_parser.parse
        index = start
        while index < end:
            line = lines[index]
            if not line.is_content:
                index += 1
                continue
            if line.is_separator:
                if document_start:
                    document_start = False
                    index += 1
                    continue
                break
            document_start = False
            key, sep, val = line.text.partition(ASSIGN_KEY_VAL)
            index += 1
            if not sep:
                LOG.debug('Skipping line without "%s": %r', ASSIGN_KEY_VAL, line.raw)
                continue
            key = key.strip()
            val = val.strip()
            if not val:
                node[key], index = self._parse_empty_value(lines, index, end, line.indent, depth)
            elif val[0] in BLOCK_PREFIX_SET:
                node[key], index = self._parse_block_scalar(lines, index, end, line.indent, val[0])
            else:
                node[key] = parse_value(val)
        return node, index


    @staticmethod
    def _next_content_index(lines, index, end):
        while index < end and not lines[index].is_content:
            index += 1
        return index


    def _parse_empty_value(self, lines, index, end, key_indent, depth):
        '''
        Resolve a key with no inline value.  A following list item starts a
        sequence, and a following more-indented line starts a nested block.
        Otherwise the value is `None`.
        '''
        next_index = self._next_content_index(lines, index, end)
        if next_index == end:
            return None, index
        next_line = lines[next_index]
        if next_line.is_list_item and next_line.indent >= key_indent:
            return self._parse_sequence(lines, next_index, end, depth + 1)
        if next_line.indent > key_indent and not next_line.is_separator:
            return self._parse_nested_block(lines, next_index, end, next_line.indent, depth + 1)
        return None, index


    def _too_deep(self, depth, lines, index):
        if depth <= self.max_nesting_depth:
            return False
        LOG.warning('Nesting deeper than %d levels replaced with null at line %r',
                    self.max_nesting_depth, lines[index].raw)
        return True


    def _parse_nested_block(self, lines, index, end, indent, depth):
        # Blank and comment lines inside the block do not end it
        stop = index
        scan = index
        while scan < end:
            line = lines[scan]
            if line.is_content:
                if line.indent < indent:
                    break
                stop = scan + 1
            scan += 1
        if self._too_deep(depth, lines, index):
            return None, stop
        node, _ = self._parse_block(lines, index, stop, depth)
        return node, stop


    def _parse_sequence(self, lines, index, end, depth):
        '''
        Parse a run of list items starting at `lines[index]`.

        The run ends at a blank line, or at a line that is not a list item
        indented at least as far as the first one.  Items containing a
        key-value separator open a nested mapping.
        '''
        if self._too_deep(depth, lines, index):
            return None, self._skip_sequence(lines, index, end)
        seq = []
        parse_value = self._scalar_parser.parse
        item_indent = lines[index].indent
        while index < end:
            line = lines[index]
            if line.is_blank:
                break
            if line.is_comment:
                index += 1
                continue
            if not line.is_list_item or line.indent < item_indent:
                break
            item_text = line.text[1:].strip()
            if ASSIGN_KEY_VAL in item_text and item_text[0] not in SCALAR_ITEM_START_SET:
                item, index = self._parse_sequence_mapping(lines, index, end, depth + 1)
            else:
                item = parse_value(item_text)
                index += 1
            seq.append(item)
        return seq, index


    @staticmethod
    def _skip_sequence(lines, index, end):
        '''
        Return the index just past the list items starting at `lines[index]`
        and the lines that continue them, without parsing anything.
        '''
        item_indent = lines[index].indent
        while index < end:
            line = lines[index]
            if line.is_blank:
                break
            if not line.is_comment:
                if line.is_list_item:
                    if line.indent < item_indent:
                        break
                elif line.indent <= item_indent:
                    break
            index += 1
        return index


    def _parse_sequence_mapping(self, lines, index, end, depth):
        '''
        Parse a list item of the form `- key: value` together with the lines
        that continue it.  The item marker is replaced with a space, so the
        first key lines up with the keys that follow.  Comment lines inside
        the item are skipped.
        '''
        first = lines[index].replace_list_item(self.tab_width)
        block = [first]
        indent = first.indent
        start = index
        index += 1
        while index < end:
            line = lines[index]
            if line.is_comment:
                index += 1
                continue
            if line.is_blank or line.indent < indent:
                break
            block.append(line)
            index += 1
        if self._too_deep(depth, lines, start):
            return None, index
        node, _ = self._parse_block(block, 0, len(block), depth)
        return node, index


    def _parse_block_scalar(self, lines, index, end, key_indent, style):
        '''
        Collect a `|` literal or `>` folded block.  Its lines must be
        indented past the key; the first content line sets the minimum
        indentation.  Lines are trimmed.  Interior blank lines are kept and
        trailing blank lines are dropped.
        '''
        first = index
        while first < end and lines[first].is_blank:
            first += 1
        if first == end or lines[first].indent <= key_indent:
            return '', index
        indent = lines[first].indent
        stop = first
        scan = first
        while scan < end:
            line = lines[scan]
            if not line.is_blank:
                if line.indent < indent:
                    break
                stop = scan + 1
            scan += 1
        texts = [line.text for line in lines[first:stop]]
        if style == LITERAL_BLOCK_PREFIX:
            return NEWLINE.join(texts), stop
        return self._fold(texts), stop


    @staticmethod
    def _fold(texts):
        '''
        Join consecutive lines with a space.  Each blank line becomes a
        newline, so paragraphs end up on lines of their own.
        '''
        folded = []
        for text in texts:
            if not text:
                folded.append(NEWLINE)
            elif folded and folded[-1] != NEWLINE:
                folded.append(SPACE + text)
            else:
                folded.append(text)
        return ''.join(folded)
