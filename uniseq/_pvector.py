from collections.abc import Sequence, Hashable
from functools import wraps
from numbers import Integral


def _comparator(f):
    @wraps(f)
    def wrapper(*args, **kwds):
        if isinstance(args[0], PVector) and isinstance(args[1], PVector):
            return f(*args, **kwds)
        return NotImplemented
    return wrapper


class PVector(object):
    """
    Persistent vector. Meant as a replacement for the cases where you would normally
    use a Python list or tuple.

    Do not instantiate directly, instead use the factory functions :py:func:`v` and
    :py:func:`pvector` to create an instance.

    The elements are kept in a tuple, every updating method returns a new vector and
    leaves the original untouched. Random access and length are O(1), updates are O(n).

    The PVector implements the Sequence protocol and is Hashable.

    The following are examples of some common operations on persistent vectors:

    >>> p = v(1, 2, 3)
    >>> p2 = p.append(4)
    >>> p3 = p2.extend([5, 6, 7])
    >>> p
    pvector([1, 2, 3])
    >>> p2
    pvector([1, 2, 3, 4])
    >>> p3
    pvector([1, 2, 3, 4, 5, 6, 7])
    >>> p3[5]
    6
    >>> p.set(1, 99)
    pvector([1, 99, 3])
    """
    __slots__ = ('_items', '__weakref__')

    def __new__(cls, items):
        self = super(PVector, cls).__new__(cls)
        self._items = items
        return self

    def __len__(self):
        """
        >>> len(v(1, 2, 3))
        3
        """
        return len(self._items)

    def __getitem__(self, index):
        """
        Get value at index. Full slicing support.

        >>> v1 = v(5, 6, 7, 8)
        >>> v1[2]
        7
        >>> v1[1:3]
        pvector([6, 7])
        """
        if isinstance(index, slice):
            if index.start is None and index.stop is None and index.step is None:
                return self

            return _from_tuple(self._items[index])

        if not isinstance(index, Integral):
            raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

        try:
            return self._items[index]
        except IndexError:
            raise IndexError("PVector index out of range")

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __add__(self, other):
        return self.extend(other)

    def __mul__(self, times):
        if times <= 0:
            return _EMPTY_PVECTOR

        if times == 1:
            return self

        return _from_tuple(self._items * times)

    __rmul__ = __mul__

    def __repr__(self):
        return 'pvector({0})'.format(list(self._items))

    __str__ = __repr__

    @_comparator
    def __ne__(self, other):
        return self._items != other._items

    @_comparator
    def __eq__(self, other):
        return self is other or self._items == other._items

    @_comparator
    def __gt__(self, other):
        return self._items > other._items

    @_comparator
    def __lt__(self, other):
        return self._items < other._items

    @_comparator
    def __ge__(self, other):
        return self._items >= other._items

    @_comparator
    def __le__(self, other):
        return self._items <= other._items

    def __hash__(self):
        return hash(self._items)

    def __reduce__(self):
        # Pickling support
        return pvector, (self.tolist(),)

    def cons(self, value):
        """
        Return a new vector with value added in front.

        >>> v(1, 2).cons(0)
        pvector([0, 1, 2])
        """
        return PVector((value,) + self._items)

    def append(self, value):
        """
        Return a new vector with value appended to the end.

        >>> v(1, 2).append(3)
        pvector([1, 2, 3])
        """
        return PVector(self._items + (value,))

    def extend(self, obj):
        """
        Return a new vector with all values in obj appended to it.

        >>> v(1, 2).extend([3, 4])
        pvector([1, 2, 3, 4])
        """
        if isinstance(obj, PVector):
            if not obj._items:
                return self
            if not self._items:
                return obj
            return PVector(self._items + obj._items)

        return PVector(self._items + tuple(obj))

    def set(self, index, value):
        """
        Return a new vector with element at position index set to value.

        >>> v(1, 2, 3).set(0, 4)
        pvector([4, 2, 3])
        >>> v(1, 2, 3).set(-1, 4)
        pvector([1, 2, 4])
        """
        if not isinstance(index, Integral):
            raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

        length = len(self._items)
        if index < 0:
            index += length

        if not 0 <= index < length:
            raise IndexError("PVector index out of range")

        return PVector(self._items[:index] + (value,) + self._items[index + 1:])

    def tolist(self):
        """
        The fastest way to convert the vector into a python list.
        """
        return list(self._items)

    def totuple(self):
        return self._items

    count = Sequence.count
    index = Sequence.index


Sequence.register(PVector)
Hashable.register(PVector)

_EMPTY_PVECTOR = PVector(())


def _from_tuple(items):
    if not items:
        return _EMPTY_PVECTOR
    return PVector(items)


def pvector(iterable=()):
    """
    Create a new persistent vector containing the elements in iterable.

    >>> v1 = pvector([1, 2, 3])
    >>> v1
    pvector([1, 2, 3])
    """
    if isinstance(iterable, PVector):
        return iterable

    return _from_tuple(tuple(iterable))


def v(*elements):
    """
    Create a new persistent vector containing all parameters to this function.

    >>> v1 = v(1, 2, 3)
    >>> v1
    pvector([1, 2, 3])
    """
    return pvector(elements)
