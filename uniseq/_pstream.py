from collections.abc import Iterable


class PStream(object):
    """
    Lazy, possibly infinite, persistent stream.

    Do not instantiate directly, instead use the factory functions :py:func:`pstream` or
    :py:func:`iterate` to create an instance.

    A stream is a chain of cells. A cell is forced the first time its ``first`` or ``rest``
    is accessed, which pulls exactly one element from the underlying iterator. The result
    is remembered so every cell is forced at most once, no matter how many streams share it.

    A stream has no length and is never considered empty, an exhausted stream simply yields
    no more elements when iterated.

    >>> s = iterate(lambda x: x + 1, 0)
    >>> s.first
    0
    >>> s.rest.rest.first
    2
    >>> s
    pstream([0, 1, 2, ...])
    >>> s.cons(-1).first
    -1
    """
    __slots__ = ('_source', '_first', '_rest')

    def __new__(cls, source, first, rest):
        self = super(PStream, cls).__new__(cls)
        self._source = source
        self._first = first
        self._rest = rest
        return self

    @staticmethod
    def _lazy(iterator):
        return PStream(iterator, None, None)

    def _force(self):
        source = self._source
        if source is not None:
            try:
                first = next(source)
            except StopIteration:
                self._source = None
            else:
                self._first = first
                self._rest = PStream._lazy(source)
                self._source = None

    def _exhausted(self):
        self._force()
        return self._rest is None

    @property
    def first(self):
        if self._exhausted():
            raise IndexError('first of exhausted stream')
        return self._first

    @property
    def rest(self):
        if self._exhausted():
            return self
        return self._rest

    def cons(self, elem):
        """
        Return a new stream with elem in front of this one. Nothing is forced.

        >>> pstream([1, 2]).cons(0)
        pstream([0, ...])
        """
        return PStream(None, elem, self)

    def __iter__(self):
        cell = self
        while not cell._exhausted():
            yield cell._first
            cell = cell._rest

    def __repr__(self):
        forced = []
        cell = self
        while cell._source is None and cell._rest is not None:
            forced.append(cell._first)
            cell = cell._rest

        items = [repr(x) for x in forced]
        if cell._source is not None:
            items.append('...')
        return 'pstream([{0}])'.format(', '.join(items))

    __str__ = __repr__


Iterable.register(PStream)

_EMPTY_PSTREAM = PStream(None, None, None)


def pstream(iterable=()):
    """
    Create a stream over the elements of iterable. Elements are pulled from
    iterable only when the stream is forced.

    >>> s = pstream([1, 2, 3])
    >>> s
    pstream([...])
    >>> list(s)
    [1, 2, 3]
    >>> s
    pstream([1, 2, 3])
    """
    if isinstance(iterable, PStream):
        return iterable

    return PStream._lazy(iter(iterable))


def _iterate(func, value):
    while value is not None:
        yield value
        value = func(value)


def iterate(func, start):
    """
    Create the stream start, func(start), func(func(start)), ... which ends
    when func returns None.

    >>> list(iterate(lambda x: x * 2 if x < 8 else None, 1))
    [1, 2, 4, 8]
    """
    return pstream(_iterate(func, start))
