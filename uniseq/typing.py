"""
Placeholder types that can be subscripted, for use in annotations:

    from uniseq.typing import PList

    def evens(xs: PList[int]) -> PList[int]: ...

The real element types are only known to the type checker, see ``__init__.pyi``.
"""


class SubscriptableType(type):
    def __getitem__(self, key):
        return self


class PList(metaclass=SubscriptableType):
    pass


class PStream(metaclass=SubscriptableType):
    pass


class PVector(metaclass=SubscriptableType):
    pass
