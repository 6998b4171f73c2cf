# Check that the inferred types are as expected.
from typing import TYPE_CHECKING

from typing_extensions import assert_type
from uniseq import plist, pvector, pstream, take, merge_sort

if TYPE_CHECKING:
    from uniseq import PList, PVector, PStream

    assert_type(plist([1, 2]), PList[int])
    assert_type(pvector(['a']), PVector[str])
    assert_type(pstream(iter([1.0])), PStream[float])
    assert_type(take(2, pstream([1])), PVector[int])
    assert_type(merge_sort(pvector([2, 1])), PVector[int])
