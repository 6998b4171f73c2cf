import logging
from abc import ABCMeta, abstractmethod
from functools import singledispatch
from itertools import chain, dropwhile, islice, takewhile

from uniseq._errors import EmptyCollectionError, InfiniteSequenceError, UnsupportedKindError
from uniseq._plist import _PListBase, _EMPTY_PLIST, plist
from uniseq._pstream import PStream, _EMPTY_PSTREAM, pstream
from uniseq._pvector import PVector, _EMPTY_PVECTOR, pvector

logger = logging.getLogger(__name__)


class Kind(metaclass=ABCMeta):
    """
    The primitives of one sequence representation.

    The generic sequence functions never look at the concrete type of a sequence,
    they look up its kind and work through the primitives below. Supporting a new
    representation means implementing a Kind and registering it with
    :py:func:`register_kind`.

    The default implementations of the derived operations (``take``, ``drop``,
    ``reverse`` and so on) only use iteration and ``build``, kinds override them
    where the representation allows something cheaper.
    """
    name = None

    # Finite kinds know their length. Operations that need to see the end
    # of a sequence are refused for kinds that are not finite.
    finite = True

    @abstractmethod
    def count(self, seq):
        """ Number of elements in seq """

    def is_empty(self, seq):
        return self.count(seq) == 0

    @abstractmethod
    def empty_like(self, seq):
        """ An empty sequence of this kind """

    @abstractmethod
    def first(self, seq):
        """ The first element, raises EmptyCollectionError if there is none """

    @abstractmethod
    def rest(self, seq):
        """ Everything but the first element, empty sequences return themselves """

    @abstractmethod
    def cons(self, elem, seq):
        """ A new sequence with elem in front of seq """

    @abstractmethod
    def build(self, seq, iterable):
        """ A sequence of the same kind as seq holding the elements of iterable """

    def concat(self, seqs):
        return self.build(seqs[0], chain.from_iterable(seqs))

    def take(self, n, seq):
        if n >= self.count(seq):
            return seq
        return self.build(seq, islice(seq, n))

    def drop(self, n, seq):
        if n >= self.count(seq):
            return self.empty_like(seq)
        return self.build(seq, islice(seq, n, None))

    def take_while(self, pred, seq):
        return self.build(seq, takewhile(pred, seq))

    def drop_while(self, pred, seq):
        return self.build(seq, dropwhile(pred, seq))

    def reverse(self, seq):
        return self.build(seq, reversed(list(seq)))

    def __repr__(self):
        return '<{0} kind>'.format(self.name)


class _ListKind(Kind):
    name = 'list'

    def count(self, seq):
        return len(seq)

    def is_empty(self, seq):
        return seq is _EMPTY_PLIST

    def empty_like(self, seq):
        return _EMPTY_PLIST

    def first(self, seq):
        if not seq:
            raise EmptyCollectionError('first of empty list')
        return seq.first

    def rest(self, seq):
        return seq.rest

    def cons(self, elem, seq):
        return seq.cons(elem)

    def build(self, seq, iterable):
        return plist(iterable)

    def concat(self, seqs):
        result = seqs[-1]
        for seq in reversed(seqs[:-1]):
            result = seq + result

        return result

    def take(self, n, seq):
        head, rest = seq.split(n)
        return head

    def drop(self, n, seq):
        return seq._drop(n)

    def drop_while(self, pred, seq):
        while seq and pred(seq.first):
            seq = seq.rest

        return seq

    def reverse(self, seq):
        return seq.reverse()


class _VectorKind(Kind):
    name = 'vector'

    def count(self, seq):
        return len(seq)

    def empty_like(self, seq):
        if isinstance(seq, PVector):
            return _EMPTY_PVECTOR
        return self.build(seq, ())

    def first(self, seq):
        if not seq:
            raise EmptyCollectionError('first of empty vector')
        return seq[0]

    def rest(self, seq):
        return seq[1:]

    def cons(self, elem, seq):
        if isinstance(seq, PVector):
            return seq.cons(elem)
        return self.build(seq, chain((elem,), seq))

    def build(self, seq, iterable):
        # Native vectors stay native
        if isinstance(seq, list):
            return list(iterable)
        if isinstance(seq, tuple):
            return tuple(iterable)
        return pvector(iterable)

    def take(self, n, seq):
        if n >= len(seq):
            return seq
        return seq[:n]

    def drop(self, n, seq):
        return seq[n:]


class _StrKind(Kind):
    name = 'string'

    def count(self, seq):
        return len(seq)

    def empty_like(self, seq):
        return ''

    def first(self, seq):
        if not seq:
            raise EmptyCollectionError('first of empty string')
        return seq[0]

    def rest(self, seq):
        return seq[1:]

    def cons(self, elem, seq):
        return elem + seq

    def build(self, seq, iterable):
        return ''.join(iterable)

    def concat(self, seqs):
        return ''.join(seqs)

    def take(self, n, seq):
        if n >= len(seq):
            return seq
        return seq[:n]

    def drop(self, n, seq):
        return seq[n:]

    def _prefix_length(self, pred, seq):
        index = 0
        for ch in seq:
            if not pred(ch):
                break
            index += 1

        return index

    def take_while(self, pred, seq):
        return seq[:self._prefix_length(pred, seq)]

    def drop_while(self, pred, seq):
        return seq[self._prefix_length(pred, seq):]

    def reverse(self, seq):
        return seq[::-1]


class _StreamKind(Kind):
    name = 'stream'
    finite = False

    def count(self, seq):
        raise InfiniteSequenceError(type(seq), 'count')

    def is_empty(self, seq):
        # Whether a stream has more elements is only known after forcing it
        return False

    def empty_like(self, seq):
        return _EMPTY_PSTREAM

    def first(self, seq):
        try:
            return seq.first
        except IndexError:
            raise EmptyCollectionError('first of exhausted stream')

    def rest(self, seq):
        return seq.rest

    def cons(self, elem, seq):
        return seq.cons(elem)

    def build(self, seq, iterable):
        return pstream(iterable)

    def concat(self, seqs):
        return pstream(chain.from_iterable(seqs))

    def take(self, n, seq):
        return pvector(islice(seq, n))

    def drop(self, n, seq):
        while n > 0 and not seq._exhausted():
            seq = seq.rest
            n -= 1

        return seq

    def take_while(self, pred, seq):
        return pvector(takewhile(pred, seq))

    def drop_while(self, pred, seq):
        while not seq._exhausted() and pred(seq.first):
            seq = seq.rest

        return seq

    def reverse(self, seq):
        raise InfiniteSequenceError(type(seq), 'reverse')


LIST = _ListKind()
VECTOR = _VectorKind()
STRING = _StrKind()
STREAM = _StreamKind()


@singledispatch
def _lookup(seq):
    return None


def register_kind(cls, kind):
    """
    Make every instance of cls (and its subclasses) a sequence of the given kind.

    >>> kind_of((1, 2))
    <vector kind>
    """
    if not isinstance(kind, Kind):
        raise TypeError('Expected a Kind, got {0}'.format(type(kind).__name__))

    _lookup.register(cls, lambda seq: kind)
    logger.debug('Registered %s as %r', cls.__name__, kind)


def kind_of(seq, operation='kind_of'):
    """
    Return the kind of seq. Raises UnsupportedKindError, naming operation, if seq is
    not a sequence of any registered kind.
    """
    kind = _lookup(seq)
    if kind is None:
        raise UnsupportedKindError(type(seq), operation)

    return kind


def finite_kind_of(seq, operation):
    kind = kind_of(seq, operation)
    if not kind.finite:
        raise InfiniteSequenceError(type(seq), operation)

    return kind


register_kind(_PListBase, LIST)
register_kind(PVector, VECTOR)
register_kind(tuple, VECTOR)
register_kind(list, VECTOR)
register_kind(str, STRING)
register_kind(PStream, STREAM)


def is_list(x):
    return _lookup(x) is LIST


def is_vector(x):
    return _lookup(x) is VECTOR


def is_string(x):
    return _lookup(x) is STRING


def is_stream(x):
    return _lookup(x) is STREAM
