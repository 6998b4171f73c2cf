class UnsupportedKindError(TypeError):
    """
    Raised when an operation is applied to a value that is not one of the recognized
    sequence kinds, or when the operation is undefined for the kind of the value.

    Attributes:
    value_type -- The type of the offending value
    operation -- Name of the operation that was attempted
    """
    def __init__(self, value_type, operation, *args, **kwargs):
        if not args:
            args = ("'{0}' does not support '{1}'".format(value_type.__name__, operation),)
        super(UnsupportedKindError, self).__init__(*args, **kwargs)
        self.value_type = value_type
        self.operation = operation


class InfiniteSequenceError(UnsupportedKindError):
    """
    Raised when an operation that has to see the end of a sequence is applied to a stream.
    """
    def __init__(self, value_type, operation, *args, **kwargs):
        if not args:
            args = ("'{0}' may be infinite, '{1}' is not supported".format(value_type.__name__, operation),)
        super(InfiniteSequenceError, self).__init__(value_type, operation, *args, **kwargs)


class EmptyCollectionError(ValueError):
    """
    Raised by operations that need at least one element, such as ``reduce``, when given an
    empty sequence.
    """


class _NotFound(object):
    """
    Sentinel returned by list lookups that fall outside of the list. It is only equal
    to itself, test for it with ``is NOT_FOUND``.
    """
    __slots__ = ()

    def __repr__(self):
        return 'NOT_FOUND'

    def __reduce__(self):
        return 'NOT_FOUND'


NOT_FOUND = _NotFound()
