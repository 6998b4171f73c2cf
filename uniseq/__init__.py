# -*- coding: utf-8 -*-
import logging

from uniseq._errors import UnsupportedKindError, InfiniteSequenceError, EmptyCollectionError, NOT_FOUND

from uniseq._plist import plist, make_list, list_ref, list_set, list_remove, list_to_vector, vector_to_list, PList

from uniseq._pvector import pvector, v, PVector

from uniseq._pstream import pstream, iterate, PStream

from uniseq._kinds import Kind, kind_of, register_kind, is_list, is_vector, is_string, is_stream

from uniseq._seqcol import (count, is_empty, empty_like, same_kind, head, tail, cons, concat, reverse,
                            take, drop, take_while, drop_while, all_, any_, enumerate_, fold_left,
                            fold_right, reduce, for_each, count_matching, filter_, map_)

from uniseq._strings import WHITESPACE, charset, split, ltrim, rtrim, trim, starts_with, join, substring

from uniseq._sort import merge_sort, quick_sort

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ('UnsupportedKindError', 'InfiniteSequenceError', 'EmptyCollectionError', 'NOT_FOUND',
           'plist', 'make_list', 'list_ref', 'list_set', 'list_remove', 'list_to_vector', 'vector_to_list',
           'PList', 'pvector', 'v', 'PVector', 'pstream', 'iterate', 'PStream',
           'Kind', 'kind_of', 'register_kind', 'is_list', 'is_vector', 'is_string', 'is_stream',
           'count', 'is_empty', 'empty_like', 'same_kind', 'head', 'tail', 'cons', 'concat', 'reverse',
           'take', 'drop', 'take_while', 'drop_while', 'all_', 'any_', 'enumerate_', 'fold_left',
           'fold_right', 'reduce', 'for_each', 'count_matching', 'filter_', 'map_',
           'WHITESPACE', 'charset', 'split', 'ltrim', 'rtrim', 'trim', 'starts_with', 'join', 'substring',
           'merge_sort', 'quick_sort')
