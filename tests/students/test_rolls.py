import pytest

from class_attendance.core.exceptions import ValidationError
from class_attendance.students.rolls import assign_roll_numbers, assign_rolls, split_roll


def test_rolls_continue_from_single_digit_start():
    assert assign_roll_numbers("2023CS1", 3) == ["2023CS1", "2023CS2", "2023CS3"]


def test_padding_follows_index_width_not_suffix_width():
    rolls = assign_roll_numbers("2023CS01", 3)
    assert rolls == ["2023CS1", "2023CS2", "2023CS3"]


def test_zero_base_pads_to_index_width():
    rolls = assign_roll_numbers("R0", 11)
    assert rolls[0] == "R0"
    assert rolls[9] == "R09"
    assert rolls[10] == "R10"


def test_all_digit_start_roll_has_empty_prefix():
    assert split_roll("100") == ("", 100)
    assert assign_roll_numbers("100", 2) == ["100", "101"]


def test_only_trailing_digit_run_is_incremented():
    assert split_roll("2023CS45") == ("2023CS", 45)
    assert assign_roll_numbers("2023CS45", 2) == ["2023CS45", "2023CS46"]


@pytest.mark.parametrize("start_roll", ["CS", "", "12A"])
def test_start_roll_without_trailing_digits_is_invalid(start_roll):
    with pytest.raises(ValidationError):
        assign_roll_numbers(start_roll, 1)


def test_assign_rolls_keeps_name_order():
    pairs = assign_rolls("A7", ["Asha", "Bilal", None])
    assert pairs == [("A7", "Asha"), ("A8", "Bilal"), ("A9", None)]
