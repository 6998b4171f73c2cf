from collections.abc import Sequence, Hashable
from functools import reduce
from numbers import Integral

from uniseq._errors import NOT_FOUND
from uniseq._pvector import pvector


class _PListBuilder(object):
    """
    Helper class to allow construction of a list without
    having to reverse it in the end.
    """
    __slots__ = ('_head', '_tail')

    def __init__(self):
        self._head = _EMPTY_PLIST
        self._tail = _EMPTY_PLIST

    def _append(self, elem, constructor):
        if not self._tail:
            self._head = constructor(elem)
            self._tail = self._head
        else:
            self._tail.rest = constructor(elem)
            self._tail = self._tail.rest

        return self._head

    def append_elem(self, elem):
        return self._append(elem, lambda e: PList(e, _EMPTY_PLIST))

    def append_plist(self, pl):
        return self._append(pl, lambda l: l)

    def build(self):
        return self._head


class _PListBase(object):
    __slots__ = ()

    # Selected implementations can be taken straight from the Sequence
    # class, other are less suitable. Especially those that work with
    # index lookups.
    count = Sequence.count
    index = Sequence.index

    def __reduce__(self):
        # Pickling support
        return plist, (list(self),)

    def __len__(self):
        # O(n), the length is not stored in the nodes
        return sum(1 for _ in self)

    def __repr__(self):
        return "plist({0})".format(list(self))
    __str__ = __repr__

    def cons(self, elem):
        """
        Return a new list with elem inserted as new head.

        >>> plist([1, 2]).cons(3)
        plist([3, 1, 2])
        """
        return PList(elem, self)

    def mcons(self, iterable):
        """
        Return a new list with all elements of iterable repeatedly cons:ed to the current list.
        NB! The elements will be inserted in the reverse order of the iterable.
        Runs in O(len(iterable)).

        >>> plist([1, 2]).mcons([3, 4])
        plist([4, 3, 1, 2])
        """
        head = self
        for elem in iterable:
            head = head.cons(elem)

        return head

    def reverse(self):
        """
        Return a reversed version of list. Runs in O(n) where n is the length of the list.

        >>> plist([1, 2, 3]).reverse()
        plist([3, 2, 1])
        """
        return _EMPTY_PLIST.mcons(self)

    def __reversed__(self):
        return iter(self.reverse())

    def split(self, index):
        """
        Split the list at position specified by index. Returns a tuple containing the
        list up until index and the list after the index. Runs in O(index).

        The second list is shared with this list.

        >>> plist([1, 2, 3, 4]).split(2)
        (plist([1, 2]), plist([3, 4]))
        """
        lb = _PListBuilder()
        right_list = self
        i = 0
        while right_list and i < index:
            lb.append_elem(right_list.first)
            right_list = right_list.rest
            i += 1

        if not right_list:
            return self, _EMPTY_PLIST

        return lb.build(), right_list

    def __iter__(self):
        li = self
        while li:
            yield li.first
            li = li.rest

    def __lt__(self, other):
        if not isinstance(other, _PListBase):
            return NotImplemented

        return tuple(self) < tuple(other)

    def __eq__(self, other):
        if not isinstance(other, _PListBase):
            return NotImplemented

        self_head = self
        other_head = other
        while self_head and other_head:
            if self_head is other_head:
                return True
            if not self_head.first == other_head.first:
                return False
            self_head = self_head.rest
            other_head = other_head.rest

        return not self_head and not other_head

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __add__(self, other):
        if not isinstance(other, _PListBase):
            return NotImplemented

        lb = _PListBuilder()
        for elem in self:
            lb.append_elem(elem)

        return lb.append_plist(other)

    def __getitem__(self, index):
        # Indexing is O(index), use a PVector for random access.
        if isinstance(index, slice):
            if index.start is not None and index.start >= 0 and index.stop is None and (index.step is None or index.step == 1):
                return self._drop(index.start)

            # Not much structural reuse possible for the other slicing cases
            return plist(tuple(self)[index])

        if not isinstance(index, Integral):
            raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

        if index < 0:
            # NB: O(n)!
            index += len(self)

        try:
            return self._drop(index).first
        except AttributeError:
            raise IndexError("PList index out of range")

    def _drop(self, count):
        if count < 0:
            raise IndexError("PList index out of range")

        head = self
        while count > 0 and head:
            head = head.rest
            count -= 1

        return head

    def __hash__(self):
        return hash(tuple(self))


class PList(_PListBase):
    """
    Classical Lisp style singly linked list. Adding elements to the head using cons is O(1).
    Element access is O(k) where k is the position of the element in the list. Taking the
    length of the list is O(n).

    Do not instantiate directly, instead use the factory functions :py:func:`make_list` or
    :py:func:`plist` to create an instance.

    Some examples:

    >>> x = plist([1, 2])
    >>> y = x.cons(3)
    >>> x
    plist([1, 2])
    >>> y
    plist([3, 1, 2])
    >>> y.first
    3
    >>> y.rest is x
    True
    >>> y[:2]
    plist([3, 1])
    """
    __slots__ = ('first', 'rest')

    def __new__(cls, first, rest):
        instance = super(PList, cls).__new__(cls)
        instance.first = first
        instance.rest = rest
        return instance

    def __bool__(self):
        return True


class _EmptyPList(_PListBase):
    __slots__ = ()

    def __bool__(self):
        return False

    @property
    def first(self):
        raise AttributeError("Empty PList has no first")

    @property
    def rest(self):
        return self


Sequence.register(PList)
Hashable.register(PList)
Sequence.register(_EmptyPList)
Hashable.register(_EmptyPList)

_EMPTY_PLIST = _EmptyPList()


def plist(iterable=(), reverse=False):
    """
    Creates a new persistent list containing all elements of iterable.
    Optional parameter reverse specifies if the elements should be inserted in
    reverse order or not.

    >>> plist([1, 2, 3])
    plist([1, 2, 3])
    >>> plist([1, 2, 3], reverse=True)
    plist([3, 2, 1])
    """
    if not reverse:
        iterable = list(iterable)
        iterable.reverse()

    return reduce(lambda pl, elem: pl.cons(elem), iterable, _EMPTY_PLIST)


def make_list(*elements):
    """
    Creates a new persistent list containing all arguments, in argument order.

    >>> make_list(1, 2, 3)
    plist([1, 2, 3])
    """
    return plist(elements)


def _node_at(lst, index):
    if not isinstance(index, Integral) or index < 0:
        return None

    node = lst
    while node and index > 0:
        node = node.rest
        index -= 1

    return node if node else None


def list_ref(lst, index):
    """
    Return the element at index, or NOT_FOUND if index is negative or past the end.

    >>> list_ref(make_list(10, 20, 30), 1)
    20
    >>> list_ref(make_list(10, 20, 30), 5)
    NOT_FOUND
    """
    node = _node_at(lst, index)
    if node is None:
        return NOT_FOUND

    return node.first


def list_set(lst, index, value):
    """
    Return a new list with the element at index replaced by value, or NOT_FOUND if
    index is out of range. The part of the list after index is shared with lst.

    >>> list_set(make_list(1, 2, 3), 1, 5)
    plist([1, 5, 3])
    """
    node = _node_at(lst, index)
    if node is None:
        return NOT_FOUND

    builder = _PListBuilder()
    head = lst
    while head is not node:
        builder.append_elem(head.first)
        head = head.rest

    return builder.append_plist(PList(value, node.rest))


def list_remove(lst, index):
    """
    Return a new list without the element at index. An index out of range returns lst
    itself.

    >>> list_remove(make_list(1, 2, 3), 0)
    plist([2, 3])
    >>> list_remove(make_list(1, 2, 3), 3)
    plist([1, 2, 3])
    """
    node = _node_at(lst, index)
    if node is None:
        return lst

    builder = _PListBuilder()
    head = lst
    while head is not node:
        builder.append_elem(head.first)
        head = head.rest

    return builder.append_plist(node.rest)


def list_to_vector(lst):
    """
    >>> list_to_vector(make_list(1, 2, 3))
    pvector([1, 2, 3])
    """
    return pvector(lst)


def vector_to_list(vec):
    """
    >>> from uniseq import v
    >>> vector_to_list(v(1, 2, 3))
    plist([1, 2, 3])
    """
    return plist(vec)
