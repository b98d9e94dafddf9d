import pytest

from fixed8.fixed import Fixed, format_float


def test_default_is_zero():
    assert Fixed().raw == 0
    assert Fixed().to_int() == 0


@pytest.mark.parametrize("value", [0, 10, 100, -42])
def test_int_round_trip(value):
    f = Fixed(value)
    assert f.to_int() == value
    assert f.to_float() == float(value)


@pytest.mark.parametrize("value", [1.5, -0.25, 3.0])
def test_exact_float_round_trip(value):
    assert Fixed(value).to_float() == value


def test_subject_float_output():
    assert str(Fixed(42.42)) == "42.4219"
    assert str(Fixed(1234.4321)) == "1234.43"


def test_subject_product_output():
    b = Fixed(5.05) * Fixed(2)
    assert str(b) == "10.1016"


def test_copy_is_independent():
    original = Fixed(7)
    copy = Fixed(original)
    copy.increment()
    assert original == Fixed(7)
    assert copy > original


def test_from_raw_round_trip():
    f = Fixed(3.14159)
    assert Fixed.from_raw(f.raw) == f
    assert Fixed.from_raw(f.raw).to_float() == f.to_float()


def test_to_int_floors_negative_values():
    f = Fixed(-0.5)
    assert f.to_int() == -1


def test_comparisons_use_raw_bits():
    a, b = Fixed(1.5), Fixed(0)
    assert a > b
    assert not a < b
    assert a >= b and b <= a
    assert a != b
    assert Fixed(100) == Fixed(100.0)


def test_comparison_with_plain_numbers():
    assert Fixed(-3) < 0
    assert Fixed(2) > 0
    assert Fixed(4) == 4


def test_arithmetic_exact_cases():
    a, e = Fixed(1.5), Fixed(2.25)
    assert (a + e).to_float() == 3.75
    assert (Fixed(100) - Fixed(-42)).to_int() == 100 + 42
    assert (e * a) == Fixed(1.5 * 2.25)
    assert (Fixed(3) / Fixed(1.5)) == Fixed(2)


def test_reflected_arithmetic():
    assert 1 + Fixed(2) == Fixed(3)
    assert 5 - Fixed(2) == Fixed(3)
    assert 2 * Fixed(1.5) == Fixed(3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fixed(1) / Fixed(0)


def test_invalid_construction_raises():
    with pytest.raises(TypeError):
        Fixed("1.0")


def test_increment_and_decrement_step_one_raw_unit():
    a = Fixed()
    before = a.raw
    result = a.increment()
    assert result is a
    assert a.raw == before + 1
    a.decrement()
    assert a.raw == before


def test_post_increment_returns_previous_value():
    a = Fixed(1)
    old = a.post_increment()
    assert old == Fixed(1)
    assert a.raw == old.raw + 1
    older = a.post_decrement()
    assert older.raw == old.raw + 1
    assert a == Fixed(1)


def test_smallest_step_is_one_over_256():
    a = Fixed()
    a.increment()
    assert a.to_float() * 256 == 1.0


def test_min_and_max_pick_expected_operand():
    a, e = Fixed(1.5), Fixed(3.14159)
    assert Fixed.min(a, e) is a
    assert Fixed.max(Fixed(100), Fixed(-42)) == Fixed(100)


def test_min_and_max_on_tie_return_second():
    a, b = Fixed(2), Fixed(2)
    assert Fixed.min(a, b) is b
    assert Fixed.max(a, b) is b


def test_raw_wraps_to_32_bits():
    f = Fixed.from_raw(2**31)
    assert f.raw == -(2**31)


def test_format_float_matches_str():
    f = Fixed(1.5)
    assert format_float(f.to_float()) == str(f)
    assert format_float(1.5) == "1.5"


def test_fixed_is_unhashable():
    with pytest.raises(TypeError):
        hash(Fixed(1))