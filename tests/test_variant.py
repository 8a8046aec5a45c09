import pytest

from cokit.variant import BadVariantAccess, Variant

TYPES = (int, float, str)


def test_string_alternative_index_and_visit():
    var = Variant(TYPES, "SAdsad")
    assert var.index() == 2
    seen = []

    def visitor(value):
        seen.append(value)
        return "asd"

    assert var.visit(visitor) == "asd"
    assert seen == ["SAdsad"]


@pytest.mark.parametrize("value, index", [(3, 0), (2.5, 1), ("x", 2)])
def test_index_follows_type(value, index):
    var = Variant(TYPES, value)
    assert var.index() == index
    assert var.get(index) == value
    assert var.get(type(value)) == value


def test_holds_alternative():
    var = Variant(TYPES, 1.5)
    assert var.holds_alternative(float)
    assert not var.holds_alternative(int)
    assert not var.holds_alternative(str)


def test_get_wrong_alternative_raises():
    var = Variant(TYPES, 7)
    with pytest.raises(BadVariantAccess):
        var.get(2)
    with pytest.raises(BadVariantAccess):
        var.get(str)


def test_bad_access_message():
    assert str(BadVariantAccess()) == "BadVariantAccess"


def test_get_if():
    var = Variant(TYPES, "hello")
    assert var.get_if(2) == "hello"
    assert var.get_if(0) is None
    assert var.get_if(float) is None


def test_type_must_match_exactly():
    with pytest.raises(TypeError):
        Variant(TYPES, True)
    with pytest.raises(TypeError):
        Variant(TYPES, [1, 2])


def test_out_of_range_index():
    var = Variant(TYPES, 1)
    with pytest.raises(IndexError):
        var.get(3)
    with pytest.raises(IndexError):
        var.get_if(-1)


def test_unknown_type_key():
    var = Variant(TYPES, 1)
    with pytest.raises(TypeError):
        var.get(bytes)
    with pytest.raises(TypeError):
        var.holds_alternative(list)


def test_in_place_builds_alternative():
    var = Variant.in_place(TYPES, 2, "abc")
    assert var.index() == 2
    assert var.get(str) == "abc"
    empty_int = Variant.in_place(TYPES, 0)
    assert empty_int.get(0) == 0


def test_in_place_out_of_range():
    with pytest.raises(IndexError):
        Variant.in_place(TYPES, 5, 1)


def test_duplicate_type_uses_first_index():
    var = Variant((int, str, int), 4)
    assert var.index() == 0


def test_empty_types_rejected():
    with pytest.raises(TypeError):
        Variant((), 1)


def test_types_property_round_trip():
    var = Variant([int, str], "a")
    assert var.types == (int, str)