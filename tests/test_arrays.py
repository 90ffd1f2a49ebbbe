import pytest

from corekit import arrays


def test_as_list_copies():
    source = (1, 2, 3)
    result = arrays.as_list(source)
    assert result == [1, 2, 3]
    result.append(4)
    assert source == (1, 2, 3)


@pytest.mark.parametrize("key", [1, 3, 5, 7])
def test_binary_search_finds_key(key):
    data = [1, 3, 5, 7]
    index = arrays.binary_search(data, key)
    assert data[index] == key


def test_binary_search_missing():
    assert arrays.binary_search([1, 3, 5, 7], 4) == -1
    assert arrays.binary_search([], 4) == -1


def test_binary_search_in_range():
    data = [1, 3, 5, 7]
    assert arrays.binary_search(data, 1, 1, 4) == -1
    index = arrays.binary_search(data, 5, 1, 4)
    assert data[index] == 5


def test_binary_search_invalid_range():
    with pytest.raises(IndexError):
        arrays.binary_search([1, 2, 3], 2, 2, 2)


def test_copy_of_pads_and_truncates():
    assert arrays.copy_of([1, 2], 4) == [1, 2, 0, 0]
    assert arrays.copy_of([1, 2, 3], 2) == [1, 2]
    assert arrays.copy_of(["a"], 3, "z") == ["a", "z", "z"]


def test_copy_of_range():
    assert arrays.copy_of_range([1, 2, 3, 4], 1, 3) == [2, 3]
    assert arrays.copy_of_range([1, 2], 1, 1) == []
    with pytest.raises(IndexError):
        arrays.copy_of_range([1, 2, 3], 2, 1)


def test_equals():
    assert arrays.equals([1, 2, 3], (1, 2, 3))
    assert not arrays.equals([1, 2], [1, 2, 3])
    assert not arrays.equals([1, 2], [2, 1])


def test_fill():
    data = [1, 2, 3]
    arrays.fill(data, 9)
    assert data == [9, 9, 9]


def test_sort_whole_and_range():
    data = [3, 1, 2]
    arrays.sort(data)
    assert data == [1, 2, 3]
    partial = [4, 3, 2, 1]
    arrays.sort(partial, 1, 3)
    assert partial == [4, 2, 3, 1]


def test_sort_invalid_range():
    with pytest.raises(IndexError):
        arrays.sort([1, 2], 1, 1)


def test_to_string():
    assert arrays.to_string([1, 2, 3]) == "[1, 2, 3]"
    assert arrays.to_string([]) == "[]"
    assert arrays.to_string([1.5, True]) == "[1.5, 1]"


def test_type_name():
    class Local:
        pass

    assert arrays.type_name(5) == "int"
    assert arrays.type_name(Local()).endswith("Local")