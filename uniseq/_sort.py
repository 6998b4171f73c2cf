import logging
from operator import lt

from uniseq._seqcol import concat, count, drop, head, same_kind, take

logger = logging.getLogger(__name__)


def _merge(left, right, comparator):
    merged = []
    xs, ys = list(left), list(right)
    i = j = 0
    while i < len(xs) and j < len(ys):
        # Only a strictly smaller right element goes first, ties keep the left one
        if comparator(ys[j], xs[i]):
            merged.append(ys[j])
            j += 1
        else:
            merged.append(xs[i])
            i += 1

    merged.extend(xs[i:])
    merged.extend(ys[j:])
    return same_kind(left, merged)


def _merge_sort(seq, comparator):
    n = count(seq)
    if n < 2:
        return seq

    middle = n // 2
    return _merge(_merge_sort(take(middle, seq), comparator),
                  _merge_sort(drop(middle, seq), comparator),
                  comparator)


def merge_sort(seq, comparator=lt):
    """
    Stable merge sort of a finite sequence. The result has the same kind as seq.

    comparator(x, y) should return True when x must come before y, the default
    is ``operator.lt``.

    >>> merge_sort([3, 1, 2])
    [1, 2, 3]
    >>> merge_sort('banana')
    'aaabnn'
    """
    logger.debug('merge_sort of %d elements', count(seq))
    return _merge_sort(seq, comparator)


def _partition(pred, seq):
    matching, rest = [], []
    for x in seq:
        if pred(x):
            matching.append(x)
        else:
            rest.append(x)

    return same_kind(seq, matching), same_kind(seq, rest)


def quick_sort(seq, comparator=lt):
    """
    Quick sort of a finite sequence. The result has the same kind as seq.

    The pivot is always the middle element of the part being sorted, so some inputs
    take quadratic time. Elements equal to the pivot that come before it in the input
    end up after it, so the sort is not stable.

    >>> quick_sort((5, 3, 8, 1))
    (1, 3, 5, 8)
    """
    n = count(seq)
    logger.debug('quick_sort of %d elements', n)
    if n < 2:
        return seq

    # Explicit stack instead of recursion, an unbalanced partition is as deep as
    # the input is long. Entries are (is_pivot, value), the top is handled first.
    ordered = []
    pending = [(False, seq)]
    while pending:
        is_pivot, value = pending.pop()
        if is_pivot:
            ordered.append(value)
            continue

        n = count(value)
        if n == 0:
            continue
        if n == 1:
            ordered.append(head(value))
            continue

        middle = n // 2
        pivot = head(drop(middle, value))
        others = concat(take(middle, value), drop(middle + 1, value))
        less, not_less = _partition(lambda x: comparator(x, pivot), others)
        pending.append((False, not_less))
        pending.append((True, pivot))
        pending.append((False, less))

    return same_kind(seq, ordered)
