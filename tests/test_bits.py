import pytest

from boxgrid.bits import WORD_BITS, bit, full_mask, lowest_clear_bit, ordinal, value_bit


def test_bit_and_ordinal():
    assert bit(1) == 0b1
    assert bit(9) == 0b1_0000_0000
    assert ordinal(0b1) == 1
    assert ordinal(0b100) == 3
    for n in range(1, WORD_BITS + 1):
        assert ordinal(bit(n)) == n


def test_ordinal_rejects_non_single_bit_masks():
    for mask in (0, 0b11, 0b101, -1):
        with pytest.raises(ValueError):
            ordinal(mask)


def test_empty_value_has_no_bit():
    assert value_bit(0) == 0
    assert value_bit(4) == 0b1000


def test_lowest_clear_bit():
    assert lowest_clear_bit(0) == 0b1
    assert lowest_clear_bit(0b1) == 0b10
    assert lowest_clear_bit(0b1011) == 0b100
    assert lowest_clear_bit(full_mask(9)) == bit(10)


def test_full_mask_fits_word():
    assert full_mask(9) == 0x1FF
    assert full_mask(WORD_BITS) == 0xFFFF_FFFF
