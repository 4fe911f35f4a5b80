import json

from corebox.kit.objects import clone, every, jsonify, mapobj, some, sort, sort_asc_fn, sort_desc_fn
from corebox.kit.predicates import is_array, is_number, is_object, is_object_strong, is_string


def is_even(x):
    return x % 2 == 0


def test_is_string():
    for value in (None, True, 1, {}, [], lambda: None):
        assert is_string(value) is False
    assert is_string('') is True
    assert is_string('a') is True


def test_is_number():
    for value in (None, True, {}, [], 'a', lambda: None):
        assert is_number(value) is False
    assert is_number(0) is True
    assert is_number(1.5) is True


def test_is_array():
    for value in (None, True, {}, 'a', lambda: None):
        assert is_array(value) is False
    assert is_array([]) is True
    assert is_array((1,)) is True


def test_is_object_and_strong():
    for value in (None, True, 'a', lambda: None):
        assert is_object(value) is False
        assert is_object_strong(value) is False
    assert is_object({}) and is_object({'one': 1}) and is_object([])
    assert is_object_strong({'one': 1}) is True
    assert is_object_strong([]) is False


def test_clone_is_deep_and_independent():
    source = {'one': 1, 'nested': {'list': [1]}}
    o = clone(source)
    assert o == source
    o['two'] = 2
    o['nested']['list'].append(2)
    assert source == {'one': 1, 'nested': {'list': [1]}}


def test_clone_subset():
    source = {'one': 1, 'two': 2}
    assert clone(source, ['one']) == {'one': 1}
    assert source == {'one': 1, 'two': 2}


def test_mapobj():
    source = {'one': 1, 'two': 2, 'three': 3}
    assert mapobj(source, lambda x: x * 2) == {'one': 2, 'two': 4, 'three': 6}
    assert source == {'one': 1, 'two': 2, 'three': 3}
    assert mapobj({}, lambda x: x) == {}


def test_some():
    assert some([], is_even) is False
    assert some([1, 3], is_even) is False
    assert some([1, 2, 3], is_even) is True
    assert some({}, is_even) is False
    assert some({'one': 1, 'two': 2}, is_even) is True


def test_every():
    assert every([], is_even) is True
    assert every([1, 2], is_even) is False
    assert every([2, 4], is_even) is True
    assert every({}, is_even) is True
    assert every({'one': 1, 'two': 2}, is_even) is False
    assert every({'two': 2, 'four': 4}, is_even) is True


def test_sort_is_pure():
    arr = [2, 3, 1]
    assert sort(arr, sort_asc_fn) == [1, 2, 3]
    assert sort(arr, sort_desc_fn) == [3, 2, 1]
    assert arr == [2, 3, 1]


def test_sort_custom_comparator():
    items = [{'id': 2}, {'id': 3}, {'id': 1}]
    res = sort(items, lambda a, b: 1 if a['id'] > b['id'] else -1)
    assert [i['id'] for i in res] == [1, 2, 3]


def test_jsonify():
    obj = {'one': 1}
    assert jsonify(obj) == '{"one": 1}'
    assert jsonify(obj, True) == json.dumps(obj, indent=4)
