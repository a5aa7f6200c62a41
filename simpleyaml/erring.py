# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


class SimpleYAMLException(Exception):
    '''
    Base SimpleYAML exception.
    '''
    pass


class DecodingException(SimpleYAMLException):
    '''
    Base decoding exception.

    Malformed YAML never raises; the parser drops what it cannot read.  Only
    problems with the source object itself end up here.
    '''
    pass


class SourceDecodeError(DecodingException):
    '''
    Error during decoding of binary source.
    '''
    def __init__(self, err_msg):
        self.err_msg = err_msg
    def __str__(self):
        return 'Could not decode binary source, or received a non-Unicode, non-bytes object:\n  {0}'.format(self.err_msg)
