import pytest

from smolrtsp.fragmentation import nal_fu_header


def test_first_fragment_sets_start_bit():
    assert nal_fu_header(True, False, 0) == 0b10000000


def test_last_fragment_sets_end_bit():
    assert nal_fu_header(False, True, 0) == 0b01000000


def test_middle_fragment_is_just_the_type():
    assert nal_fu_header(False, False, 5) == 5


@pytest.mark.parametrize("first", [False, True])
@pytest.mark.parametrize("last", [False, True])
@pytest.mark.parametrize("unit_type", range(32))
def test_bits_are_independent(first, last, unit_type):
    header = nal_fu_header(first, last, unit_type)
    assert header & 0b00111111 == unit_type
    assert bool(header & 0b10000000) == first
    assert bool(header & 0b01000000) == last