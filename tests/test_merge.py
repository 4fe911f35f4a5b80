from corebox.kit.frozen import freeze
from corebox.kit.merge import merge, merge_overwrite_arrays


def test_merge_concatenates_arrays():
    assert merge({'a': 1, 'b': [1, 2]}, {'b': [3], 'c': 2}) == {'a': 1, 'b': [1, 2, 3], 'c': 2}


def test_merge_overwrite_arrays_replaces_arrays():
    assert merge_overwrite_arrays({'a': 1, 'b': [1, 2]}, {'b': [3], 'c': 2}) == {'a': 1, 'b': [3], 'c': 2}


def test_merge_nested_mappings_and_scalars():
    left = {'db': {'host': 'localhost', 'port': 5432}, 'debug': False}
    right = {'db': {'port': 6543}, 'debug': True}
    assert merge(left, right) == {'db': {'host': 'localhost', 'port': 6543}, 'debug': True}


def test_merge_does_not_mutate_or_alias_inputs():
    left = {'a': {'x': [1]}, 'only_left': [0]}
    right = {'a': {'y': 2}, 'only_right': {'z': 3}}
    result = merge(left, right)

    assert left == {'a': {'x': [1]}, 'only_left': [0]}
    assert right == {'a': {'y': 2}, 'only_right': {'z': 3}}

    result['a']['x'].append(99)
    result['only_left'].append(99)
    result['only_right']['z'] = 0
    assert left['a']['x'] == [1]
    assert left['only_left'] == [0]
    assert right['only_right'] == {'z': 3}


def test_scalar_replaces_mapping():
    assert merge_overwrite_arrays({'a': {'b': 1}}, {'a': 2}) == {'a': 2}


def test_merge_accepts_frozen_and_returns_plain():
    result = merge_overwrite_arrays(freeze({'a': [1], 'b': {'c': 1}}), {'b': {'d': 2}})
    assert result == {'a': [1], 'b': {'c': 1, 'd': 2}}
    result['b']['e'] = 3
    result['a'].append(2)
    assert type(result['a']) is list
