"""
String utilities. Everything here is written against the generic sequence
functions, so apart from plain strings they also accept other sequences of
characters, a persistent list of characters for example.
"""
from uniseq._pvector import pvector
from uniseq._kinds import finite_kind_of
from uniseq._seqcol import (count, drop, drop_while, fold_left, is_empty, reverse, take,
                            take_while)

WHITESPACE = frozenset(' \t\r\n')

_END = object()


def charset(chars):
    """
    Create a character set with constant time membership test from an iterable of
    characters, a string for example.

    >>> sorted(charset('-_'))
    ['-', '_']
    """
    if isinstance(chars, frozenset):
        return chars

    return frozenset(chars)


def split(s, chars=WHITESPACE):
    """
    Split s into the tokens separated by runs of characters in chars. No empty tokens
    are produced. Streams raise InfiniteSequenceError.

    >>> split('  a  b ')
    pvector(['a', 'b'])
    >>> split('a,b,,c', ',')
    pvector(['a', 'b', 'c'])
    """
    # Emptiness of the remainder decides when to stop, which a stream cannot tell
    finite_kind_of(s, 'split')
    chars = charset(chars)
    is_delimiter = lambda ch: ch in chars
    is_token = lambda ch: ch not in chars

    tokens = []
    rest = drop_while(is_delimiter, s)
    while not is_empty(rest):
        token = take_while(is_token, rest)
        tokens.append(token)
        rest = drop_while(is_delimiter, drop(count(token), rest))

    return pvector(tokens)


def ltrim(s, chars=WHITESPACE):
    """
    >>> ltrim('  abc  ')
    'abc  '
    """
    chars = charset(chars)
    return drop_while(lambda ch: ch in chars, s)


def rtrim(s, chars=WHITESPACE):
    """
    >>> rtrim('  abc  ')
    '  abc'
    """
    return reverse(ltrim(reverse(s), chars))


def trim(s, chars=WHITESPACE):
    """
    >>> trim('--abc--', '-')
    'abc'
    """
    chars = charset(chars)
    return ltrim(rtrim(s, chars), chars)


def starts_with(s, prefix):
    """
    >>> starts_with('abc', 'ab')
    True
    >>> starts_with('ab', 'abc')
    False
    """
    chars = iter(s)
    for expected in prefix:
        actual = next(chars, _END)
        if actual is _END or actual != expected:
            return False

    return True


def join(strings, separator=''):
    """
    Join strings with separator placed between them.

    >>> join(['a', 'b', 'c'], '-')
    'a-b-c'
    >>> join([], '-')
    ''
    """
    joined = fold_left(lambda acc, s: acc + separator + s, '', strings)

    # Every string was preceded by separator, also the first one
    return joined[len(separator):]


def substring(s, start, length=None):
    """
    >>> substring('hello', 1, 3)
    'ell'
    >>> substring('hello', 2)
    'llo'
    """
    rest = drop(start, s)
    if length is None:
        return rest

    return take(length, rest)
