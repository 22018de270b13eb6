import pytest

from algokit.hashing import HASH_MODULUS, hash_sequence, hash_string


def test_empty_sequence_hashes_to_zero():
    assert hash_sequence([]) == 0


def test_single_element_sequence_is_its_value():
    assert hash_sequence([7]) == 7


def test_two_element_sequence_rotated():
    assert hash_sequence([1, 2]) == 63


def test_negative_value_keeps_sign():
    assert hash_sequence([-5]) == -5


@pytest.mark.parametrize(
    "values",
    [[5, 2, 9, 1, 6], [1.1, 3.3, 2.2, 4.4], ["a", "f", "t", "j"], list(range(50))],
)
def test_sequence_hash_in_range(values):
    assert 0 <= hash_sequence(values) < HASH_MODULUS


def test_doubles_truncate_to_integers():
    assert hash_sequence([1.1, 3.3, 2.2, 4.4]) == hash_sequence([1, 3, 2, 4])


def test_chars_hash_as_codes():
    chars = ["a", "f", "t", "j"]
    assert hash_sequence(chars) == hash_sequence([ord(c) for c in chars])


def test_tuple_and_list_agree():
    assert hash_sequence((5, 2, 9, 1, 6)) == hash_sequence([5, 2, 9, 1, 6])


def test_multi_character_string_element_rejected():
    with pytest.raises(ValueError):
        hash_sequence(["ab"])


def test_empty_string_hashes_to_zero():
    assert hash_string("") == 0


def test_single_character_string_is_its_code():
    assert hash_string("a") == ord("a")


def test_two_character_string():
    assert hash_string("ab") == 3233


def test_str_and_bytes_agree():
    assert hash_string("fvaefeavr") == hash_string(b"fvaefeavr")


def test_string_hash_deterministic_and_order_sensitive():
    assert hash_string("fvaefeavr") == hash_string("fvaefeavr")
    assert hash_string("ab") != hash_string("ba")


def test_long_string_stays_in_signed_64_bits():
    value = hash_string("x" * 200)
    assert -(1 << 63) <= value < (1 << 63)