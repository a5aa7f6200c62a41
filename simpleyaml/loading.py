# -*- coding: utf-8 -*-
#
# Copyright (c) 2026, SimpleYAML developers
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .decoding import SimpleYAMLDecoder


_DEFAULT_DECODER = SimpleYAMLDecoder()


def load(fp, cls=None, **kwargs):
    '''
    Load the first document from a file-like object.
    '''
    return loads(fp.read(), cls, **kwargs)


def loads(s, cls=None, **kwargs):
    '''
    Load the first document from a Unicode or byte string.
    '''
    if cls is None:
        if not kwargs:
            return _DEFAULT_DECODER.decode(s)
        return SimpleYAMLDecoder(**kwargs).decode(s)
    return cls(**kwargs).decode(s)


def load_all(fp, cls=None, **kwargs):
    '''
    Load all documents from a file-like object.
    '''
    return loads_all(fp.read(), cls, **kwargs)


def loads_all(s, cls=None, **kwargs):
    '''
    Load all documents from a Unicode or byte string, as a list.
    '''
    if cls is None:
        if not kwargs:
            return _DEFAULT_DECODER.decode_all(s)
        return SimpleYAMLDecoder(**kwargs).decode_all(s)
    return cls(**kwargs).decode_all(s)
