import pytest

from roarstore.errors import NonSortedIntegers


def test_message_reports_valid_prefix():
    err = NonSortedIntegers(3)
    assert str(err) == "integers are ordered up to the 3th element"


def test_valid_until_is_kept():
    assert NonSortedIntegers(42).valid_until == 42


def test_can_be_raised_and_caught_as_value_error():
    err = NonSortedIntegers(7)
    with pytest.raises(ValueError) as info:
        raise err
    assert info.value is err
    assert info.value.valid_until == 7
    assert str(info.value) == "integers are ordered up to the 7th element"