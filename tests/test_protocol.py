import pytest

from sigtalk.protocol import BitDecoder, char_to_bits, message_to_bits


def _decode(bits):
    decoder = BitDecoder()
    return bytes(b for b in map(decoder.feed, bits) if b is not None)


def test_char_bits_lsb_first():
    assert char_to_bits("A") == (1, 0, 0, 0, 0, 0, 1, 0)


def test_char_bits_accepts_int_and_str():
    assert char_to_bits(ord("q")) == char_to_bits("q")


def test_char_bits_masks_to_one_byte():
    assert char_to_bits(-1) == char_to_bits(255)
    assert char_to_bits(256) == char_to_bits(0)


def test_char_bits_rejects_wide_char():
    with pytest.raises(ValueError):
        char_to_bits("\u20ac")


def test_char_bits_rejects_long_string():
    with pytest.raises(ValueError):
        char_to_bits("ab")


@pytest.mark.parametrize("code", range(256))
def test_byte_round_trip(code):
    assert _decode(char_to_bits(code)) == bytes([code])


def test_message_ends_with_newline():
    bits = list(message_to_bits("abc"))
    assert len(bits) == 8 * 4
    assert _decode(bits) == b"abc\n"


def test_empty_message_is_only_terminator():
    assert _decode(message_to_bits("")) == b"\n"


def test_utf8_message_round_trip():
    assert _decode(message_to_bits("héllo")).decode("utf-8") == "héllo\n"


def test_decoder_returns_none_until_eighth_bit():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in char_to_bits("z")]
    assert results[:7] == [None] * 7
    assert results[7] == ord("z")


def test_decoder_resets_between_bytes():
    assert _decode(list(char_to_bits(255)) + list(char_to_bits(0))) == bytes([255, 0])