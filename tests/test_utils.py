from sort_by_example import utils


def test_sign_reduces_to_unit_values():
    assert [utils.sign(value) for value in (-7, 0, 12, -0.5, 2.5)] == [-1, 0, 1, -1, 1]


def test_three_way_compares_with_ordering_operators():
    assert utils.three_way("a", "b") == -1
    assert utils.three_way((1, 2), (1, 2)) == 0
    assert utils.three_way(3, 1) == 1


def test_is_ordered_sequence_excludes_text():
    assert utils.is_ordered_sequence(["a"])
    assert utils.is_ordered_sequence(("a",))
    assert not utils.is_ordered_sequence("abc")
    assert not utils.is_ordered_sequence(b"abc")
    assert not utils.is_ordered_sequence({"a": 1})


def test_type_name_for_messages():
    assert utils.type_name(None) == "None"
    assert utils.type_name(3) == "int"
