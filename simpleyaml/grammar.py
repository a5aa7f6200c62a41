# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301, C0330

import re




# Non-textual general parameters
PARAMS = {'tab_width': 8,
          'max_nesting_depth': 100,
          'int_min': -2**63,
          'int_max': 2**63 - 1}




# Assemble literal grammar
_RAW_LIT_GRAMMAR = [# Whitespace
                    ('tab', '\t'),
                    ('space', '\x20'),
                    ('newline', '\n'),
                    # Keywords
                    ('bool_true', 'true'),
                    ('bool_false', 'false'),
                    ('infinity_word', 'inf'),
                    ('infinity_long_word', 'infinity'),
                    ('not_a_number_word', 'nan'),
                    # Math
                    ('sign', '+-'),
                    ('dec_exponent_letter', 'eE'),
                    ('hex_exponent_letter', 'pP'),
                    # Other
                    ('bom', '\uFEFF')]

_RAW_LIT_SPECIAL = [# Special code points
                    ('comment_delim', '#'),
                    ('assign_key_val', ':'),
                    ('list_item', '-'),
                    ('start_inline_dict', '{'),
                    ('end_inline_dict', '}'),
                    ('start_inline_list', '['),
                    ('end_inline_list', ']'),
                    ('inline_element_separator', ','),
                    ('literal_block_prefix', '|'),
                    ('folded_block_prefix', '>'),
                    ('singlequote_delim', "'"),
                    ('doublequote_delim', '"'),
                    ('path_separator', '.'),
                    ('start_path_index', '['),
                    ('end_path_index', ']'),
                    # Combinations
                    ('document_separator', '{list_item}{list_item}{list_item}')]
_RAW_LIT_GRAMMAR.extend(_RAW_LIT_SPECIAL)

LIT_GRAMMAR = {}
for k, v in _RAW_LIT_GRAMMAR:
    if k in ('start_inline_dict', 'end_inline_dict'):
        LIT_GRAMMAR[k] = v
    else:
        LIT_GRAMMAR[k] = v.format(**LIT_GRAMMAR)




# Assemble regex grammar
# Numbers.  Integers are plain base 10 without underscores; floats follow the
# usual decimal syntax, and hex floats require a binary exponent.
_RAW_RE_NUM = [('sign', '[' + re.escape(LIT_GRAMMAR['sign']) + ']'),
               ('opt_sign', '{sign}?'),
               ('dec_digit', '[0-9]'),
               ('hex_digit', '[0-9a-fA-F]'),
               ('integer', '{opt_sign}{dec_digit}+'),
               ('decimal_point', '\\.'),
               ('dec_mantissa', '(?:{dec_digit}+(?:{decimal_point}{dec_digit}*)?|{decimal_point}{dec_digit}+)'),
               ('dec_exponent', '[' + LIT_GRAMMAR['dec_exponent_letter'] + ']{sign}?{dec_digit}+'),
               ('dec_float', '{opt_sign}{dec_mantissa}(?:{dec_exponent})?'),
               ('hex_prefix', '0[xX]'),
               ('hex_mantissa', '(?:{hex_digit}+(?:{decimal_point}{hex_digit}*)?|{decimal_point}{hex_digit}+)'),
               ('hex_exponent', '[' + LIT_GRAMMAR['hex_exponent_letter'] + ']{sign}?{dec_digit}+'),
               ('hex_float', '{opt_sign}{hex_prefix}{hex_mantissa}{hex_exponent}'),
               # Only infinity may carry a sign
               ('inf_or_nan_word', '(?:{opt_sign}(?:' + LIT_GRAMMAR['infinity_long_word'] + '|' +
                                   LIT_GRAMMAR['infinity_word'] + ')|' + LIT_GRAMMAR['not_a_number_word'] + ')'),
               ('float', '(?:{hex_float}|{dec_float}|{inf_or_nan_word})'),
               # Path index
               ('path_index', '{dec_digit}+')]

RE_GRAMMAR = {}
for k, v in _RAW_RE_NUM:
    RE_GRAMMAR[k] = v.format(**RE_GRAMMAR)
