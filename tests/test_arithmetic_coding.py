import pytest

from arithmetic_coding import HALF, ONE, QUARTER, Coder
from bitReadWrite import BitReader, BitWriter
from frequency_model import Probability


def test_constants():
    assert ONE == 0xFFFF
    assert HALF == 0x8000
    assert QUARTER == 0x4000


def test_underflow_is_postponed_as_pending_bits():
    writer = BitWriter()
    coder = Coder()
    coder.start_encode(writer)
    # [26214, 39320] straddles the midpoint twice before it is wide again
    coder.encode_interval(Probability(2, 3), 5)
    assert coder.pending == 2
    assert (coder.low, coder.high) == (6552, 58979)
    writer.flush()
    assert writer.getvalue() == b""

    coder.finish_encode()
    # resolved 0 followed by the three pending 1s
    assert writer.getvalue() == b"\x70"
    assert coder.pending == 0


@pytest.mark.parametrize("low, expected", [(0, b"\x40"), (QUARTER, b"\x80")])
def test_finish_encode_emits_two_bits(low, expected):
    writer = BitWriter()
    coder = Coder()
    coder.start_encode(writer)
    coder.low = low
    coder.finish_encode()
    assert writer.getvalue() == expected


def test_emits_resolved_bits_for_upper_half():
    writer = BitWriter()
    coder = Coder()
    coder.start_encode(writer)
    # top 1/257 of the range is [0xFF00, 0xFFFF]: eight leading 1s settle at once
    coder.encode_interval(Probability(256, 257), 257)
    assert writer.getvalue() == b"\xff"
    assert (coder.low, coder.high) == (0, ONE)


def test_start_decode_primes_sixteen_bits():
    coder = Coder()
    coder.start_decode(BitReader(b"\x12\x34\x56"))
    assert coder.value == 0x1234
    assert coder.target_offset(257) == ((0x1234 + 1) * 257 - 1) // 0x10000


def test_decoder_follows_encoder_range():
    writer = BitWriter()
    enc = Coder()
    enc.start_encode(writer)
    intervals = [(Probability(2, 3), 5), (Probability(0, 1), 3), (Probability(7, 9), 9)]
    for prob, total in intervals:
        enc.encode_interval(prob, total)
    enc.finish_encode()

    dec = Coder()
    dec.start_decode(BitReader(writer.getvalue()))
    for prob, total in intervals:
        offset = dec.target_offset(total)
        assert prob.low <= offset < prob.high
        dec.decode_interval(prob, total)
        assert dec.low <= dec.value <= dec.high


def test_decode_past_synthetic_tail_raises_eof():
    coder = Coder()
    coder.start_decode(BitReader(b""))
    # all sixteen synthetic bits are already in `value`
    with pytest.raises(EOFError):
        coder.decode_interval(Probability(0, 1), 257)
