"""
Sequence functions that work the same way on every kind of sequence: persistent
lists, vectors (``PVector`` and ``tuple``), strings and streams.

Functions that produce a sequence return one of the same kind as their input,
except that ``take`` and ``take_while`` turn a stream into a finite vector and
``enumerate_`` always produces a stream.
"""
from uniseq._errors import EmptyCollectionError, UnsupportedKindError
from uniseq._kinds import kind_of, finite_kind_of
from uniseq._pstream import pstream
from uniseq._pvector import pvector


def count(seq):
    """
    Number of elements in seq. O(1) for vectors and strings, O(n) for lists.
    Streams raise InfiniteSequenceError.

    >>> count(make_list(1, 2, 3))
    3
    """
    return kind_of(seq, 'count').count(seq)


def is_empty(seq):
    """
    True if seq has no elements. Streams are never empty.

    >>> is_empty('')
    True
    >>> is_empty(pstream([]))
    False
    """
    return kind_of(seq, 'is_empty').is_empty(seq)


def empty_like(seq):
    """
    >>> empty_like(v(1, 2))
    pvector([])
    """
    return kind_of(seq, 'empty_like').empty_like(seq)


def same_kind(seq, iterable):
    """
    A sequence of the same kind as seq containing the elements of iterable.

    >>> same_kind(make_list(0), [1, 2])
    plist([1, 2])
    """
    return kind_of(seq, 'same_kind').build(seq, iterable)


def head(seq):
    """
    First element of seq, raises EmptyCollectionError if there is none.

    >>> head('abc')
    'a'
    """
    return kind_of(seq, 'head').first(seq)


def tail(seq):
    """
    Everything but the first element. The tail of an empty sequence is empty.

    >>> tail(v(1, 2, 3))
    pvector([2, 3])
    """
    return kind_of(seq, 'tail').rest(seq)


def cons(elem, seq):
    """
    >>> cons(0, make_list(1, 2))
    plist([0, 1, 2])
    """
    return kind_of(seq, 'cons').cons(elem, seq)


def concat(*seqs):
    """
    Concatenate sequences of one kind. Lists share structure with the last list,
    streams are concatenated lazily.

    >>> concat('ab', 'c', 'de')
    'abcde'
    """
    if not seqs:
        raise TypeError('concat expects at least one sequence')

    kind = kind_of(seqs[0], 'concat')
    for seq in seqs[1:]:
        if kind_of(seq, 'concat') is not kind:
            raise UnsupportedKindError(
                type(seq), 'concat',
                "Cannot concat '{0}' with '{1}'".format(type(seqs[0]).__name__, type(seq).__name__))

    return kind.concat(seqs)


def reverse(seq):
    """
    >>> reverse(make_list(1, 2, 3))
    plist([3, 2, 1])
    """
    return finite_kind_of(seq, 'reverse').reverse(seq)


def take(n, seq):
    """
    The first n elements of seq. A stream is forced exactly n elements and the result
    is returned as a vector.

    >>> take(2, make_list(1, 2, 3))
    plist([1, 2])
    >>> take(3, iterate(lambda x: x + 1, 0))
    pvector([0, 1, 2])
    """
    kind = kind_of(seq, 'take')
    if n <= 0:
        if kind.finite:
            return kind.empty_like(seq)
        return pvector()

    return kind.take(n, seq)


def drop(n, seq):
    """
    Everything but the first n elements of seq. Dropping from a list returns a
    part of the original list.

    >>> drop(1, 'abc')
    'bc'
    """
    kind = kind_of(seq, 'drop')
    if n <= 0:
        return seq

    return kind.drop(n, seq)


def take_while(pred, seq):
    """
    >>> take_while(lambda x: x < 3, v(1, 2, 3, 1))
    pvector([1, 2])
    """
    return kind_of(seq, 'take_while').take_while(pred, seq)


def drop_while(pred, seq):
    """
    >>> drop_while(lambda x: x < 3, v(1, 2, 3, 1))
    pvector([3, 1])
    """
    return kind_of(seq, 'drop_while').drop_while(pred, seq)


def all_(pred, seq):
    """
    True if pred holds for every element, stops at the first element for which it does not.

    >>> all_(lambda x: x > 0, make_list())
    True
    """
    kind_of(seq, 'all_')
    return all(pred(x) for x in seq)


def any_(pred, seq):
    """
    True if pred holds for some element, stops at the first element for which it does.

    >>> any_(lambda x: x > 0, iterate(lambda x: x + 1, -5))
    True
    """
    kind_of(seq, 'any_')
    return any(pred(x) for x in seq)


def enumerate_(seq):
    """
    Lazy stream of (index, element) pairs.

    >>> list(enumerate_('ab'))
    [(0, 'a'), (1, 'b')]
    """
    kind_of(seq, 'enumerate_')
    return pstream(enumerate(seq))


def fold_left(func, initial, seq):
    """
    >>> fold_left(lambda acc, x: acc - x, 0, v(1, 2, 3))
    -6
    """
    kind_of(seq, 'fold_left')
    acc = initial
    for x in seq:
        acc = func(acc, x)

    return acc


def fold_right(func, initial, seq):
    """
    Fold from the right, func is called with the element first and the accumulated
    value second.

    >>> fold_right(lambda x, acc: x - acc, 0, v(1, 2, 3))
    2
    """
    finite_kind_of(seq, 'fold_right')
    acc = initial
    for x in reverse(seq):
        acc = func(x, acc)

    return acc


def reduce(func, seq):
    """
    Left fold seeded with the first element. Raises EmptyCollectionError on empty input.

    >>> reduce(lambda a, b: a + b, make_list(1, 2, 3))
    6
    """
    kind_of(seq, 'reduce')
    it = iter(seq)
    try:
        acc = next(it)
    except StopIteration:
        raise EmptyCollectionError('reduce of empty sequence')

    for x in it:
        acc = func(acc, x)

    return acc


def for_each(func, seq):
    kind_of(seq, 'for_each')
    for x in seq:
        func(x)


def count_matching(pred, seq):
    """
    Number of elements for which pred holds, the same as count(filter_(pred, seq)).

    >>> count_matching(str.isupper, 'aBcD')
    2
    """
    finite_kind_of(seq, 'count_matching')
    return sum(1 for x in seq if pred(x))


def filter_(pred, seq):
    """
    Elements of seq for which pred holds. Filtering a stream is lazy.

    >>> filter_(lambda x: x % 2 == 0, make_list(1, 2, 3, 4))
    plist([2, 4])
    """
    kind = kind_of(seq, 'filter_')
    return kind.build(seq, (x for x in seq if pred(x)))


def map_(func, seq, *seqs):
    """
    Apply func to the elements of one or more sequences in lock step, stopping at
    the end of the shortest one.

    If any input is a stream the result is a lazy stream. If all inputs are of the same
    kind the result has that kind (mapping strings concatenates the results), otherwise
    the result is a vector.

    >>> map_(lambda x: x * 10, make_list(1, 2))
    plist([10, 20])
    >>> map_(lambda a, b: a + b, v(1, 2, 3), (10, 20))
    pvector([11, 22])
    >>> map_(str.upper, 'abc')
    'ABC'
    """
    seqs = (seq,) + seqs
    kinds = [kind_of(s, 'map_') for s in seqs]
    mapped = map(func, *seqs)
    if not all(kind.finite for kind in kinds):
        return pstream(mapped)

    if all(kind is kinds[0] for kind in kinds):
        return kinds[0].build(seq, mapped)

    return pvector(mapped)


# for doctest
from uniseq._plist import make_list  # noqa: E402
from uniseq._pstream import iterate  # noqa: E402
from uniseq._pvector import v  # noqa: E402
