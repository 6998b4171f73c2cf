import pickle

import pytest

from uniseq import pvector, v


def test_literalish_works():
    assert v() is pvector()
    assert v(1, 2) == pvector([1, 2])


def test_empty_initialization():
    seq = pvector()
    assert len(seq) == 0

    with pytest.raises(IndexError):
        seq[0]


def test_initialization_with_one_element():
    seq = pvector([3])
    assert len(seq) == 1
    assert seq[0] == 3


def test_pvector_of_pvector_is_identity():
    seq = v(1, 2)
    assert pvector(seq) is seq


def test_append_works_and_does_not_affect_original():
    seq1 = pvector([3])
    seq2 = seq1.append(2)

    assert len(seq1) == 1
    assert seq1[0] == 3

    assert len(seq2) == 2
    assert seq2[0] == 3
    assert seq2[1] == 2


def test_cons_adds_in_front():
    seq = v(1, 2)
    assert seq.cons(0) == v(0, 1, 2)
    assert seq == v(1, 2)


def test_extend():
    assert v(1, 2).extend([3, 4]) == v(1, 2, 3, 4)
    assert v(1, 2).extend(v(3)) == v(1, 2, 3)
    assert v(1, 2) + v(3) == v(1, 2, 3)


def test_extend_with_empty_returns_self():
    seq = v(1, 2)
    assert seq.extend(v()) is seq
    assert v().extend(seq) is seq


def test_set():
    seq = v(1, 2, 3)
    assert seq.set(1, 20) == v(1, 20, 3)
    assert seq.set(-1, 30) == v(1, 2, 30)
    assert seq == v(1, 2, 3)


def test_set_out_of_range():
    with pytest.raises(IndexError):
        v(1, 2).set(2, 0)

    with pytest.raises(IndexError):
        v(1, 2).set(-3, 0)


def test_index_invalid_type():
    with pytest.raises(TypeError):
        v(1, 2)['foo']


def test_negative_indexing():
    assert v(1, 2, 3)[-1] == 3


def test_slicing():
    seq = v(1, 2, 3, 4, 5)
    assert seq[1:3] == v(2, 3)
    assert seq[::2] == v(1, 3, 5)
    assert seq[::-1] == v(5, 4, 3, 2, 1)
    assert seq[:] is seq
    assert seq[10:] is v()


def test_repeat():
    assert v(1, 2) * 2 == v(1, 2, 1, 2)
    assert 2 * v(1) == v(1, 1)
    assert v(1, 2) * 0 is v()


def test_repr():
    assert repr(v()) == 'pvector([])'
    assert str(v(1, 'a')) == "pvector([1, 'a'])"


def test_compare_with_non_vector():
    assert v(1, 2) != [1, 2]
    assert not v(1, 2) == (1, 2)


def test_ordering():
    assert v(1, 2) < v(1, 3)
    assert v(1, 2) <= v(1, 2)
    assert v(2) > v(1, 5)
    assert v(2) >= v(2)


def test_hashing():
    assert hash(v(1, 2)) == hash(v(1, 2))
    assert {v(1, 2): 'a'}[v(1, 2)] == 'a'


def test_count_and_index():
    seq = v(1, 2, 1)
    assert seq.count(1) == 2
    assert seq.index(2) == 1


def test_reversed():
    assert list(reversed(v(1, 2, 3))) == [3, 2, 1]


def test_tolist_and_totuple():
    assert v(1, 2).tolist() == [1, 2]
    assert v(1, 2).totuple() == (1, 2)


def test_pickling():
    assert pickle.loads(pickle.dumps(v(1, 2, 3), -1)) == v(1, 2, 3)
    assert pickle.loads(pickle.dumps(v(), -1)) is v()
