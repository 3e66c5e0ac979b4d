from typing import Optional

from bitReadWrite import BitReader, BitWriter, CODE_BITS, END_OF_INPUT
from frequency_model import Probability

ONE = (1 << CODE_BITS) - 1          # top value (2^16 - 1)
HALF = 1 << (CODE_BITS - 1)         # half index (midpoint)
QUARTER = HALF >> 1                 # lower quarter index


class Coder:
    """
    Range state shared by the encode and decode directions.

    low/high are inclusive 16-bit bounds; `pending` counts underflow bits
    whose value is only known once the next resolved bit is emitted.
    `value` is the decoder's 16-bit window into the bitstream and always
    sits inside [low, high].
    """

    def __init__(self):
        # working state (integers)
        self.low = 0
        self.high = ONE
        self.value = 0
        self.pending = 0

        self.output: Optional[BitWriter] = None
        self.input: Optional[BitReader] = None

    def _narrow(self, prob: Probability, total: int) -> None:
        span = self.high - self.low + 1
        # high first, both computed from the old low
        self.high = self.low + (span * prob.high) // total - 1
        self.low = self.low + (span * prob.low) // total

    def _shift(self) -> None:
        self.low = (self.low << 1) & ONE
        self.high = ((self.high << 1) + 1) & ONE

    # --- encoder renormalisation: emit bits to writer ---
    def _put_bit(self, bit: int) -> None:
        assert self.output is not None
        self.output.write_bit(bit)
        for _ in range(self.pending):
            self.output.write_bit(1 - bit)
        self.pending = 0

    def _output_bits(self) -> None:
        while True:
            if self.high < HALF:
                # E1: lower half
                self._put_bit(0)
            elif self.low >= HALF:
                # E2: upper half
                self._put_bit(1)
                self.low -= HALF
                self.high -= HALF
            elif self.low >= QUARTER and self.high < 3 * QUARTER:
                # E3: middle half (postpone)
                self.pending += 1
                self.low -= QUARTER
                self.high -= QUARTER
            else:
                break
            self._shift()

    # --- decoder renormalisation: consume bits from reader ---
    def _next_bit(self) -> int:
        assert self.input is not None, "_next_bit: no BitReader"
        bit = self.input.read_bit()
        if bit == END_OF_INPUT:
            raise EOFError("bitstream exhausted before the end-of-stream symbol")
        return bit

    def _discard_bits(self) -> None:
        while True:
            if self.high < HALF:
                # lower half -> nothing
                pass
            elif self.low >= HALF:
                self.low -= HALF
                self.high -= HALF
                self.value -= HALF
            elif self.low >= QUARTER and self.high < 3 * QUARTER:
                self.low -= QUARTER
                self.high -= QUARTER
                self.value -= QUARTER
            else:
                break
            self._shift()
            # bring in next bit
            self.value = ((self.value << 1) & ONE) | self._next_bit()

    # --- public methods to start/finish encoding and decoding ---
    def start_encode(self, output: BitWriter) -> None:
        self.output = output
        self.low = 0
        self.high = ONE
        self.pending = 0

    def start_decode(self, input: BitReader) -> None:
        self.input = input
        self.low = 0
        self.high = ONE
        self.value = 0
        # prime value with first 16 bits (MSB-first)
        for _ in range(CODE_BITS):
            self.value = (self.value << 1) | self._next_bit()

    def encode_interval(self, prob: Probability, total: int) -> None:
        """Narrow to the symbol's interval and renormalise for the encoder."""
        assert self.output is not None, "encode_interval: no BitWriter"
        self._narrow(prob, total)
        self._output_bits()

    def finish_encode(self) -> None:
        assert self.output is not None, "finish_encode: no BitWriter"
        # two more bits pin a value inside the final range
        self.pending += 1
        self._put_bit(0 if self.low < QUARTER else 1)
        self.output.flush()

    def target_offset(self, total: int) -> int:
        """Cumulative offset in [0, total) that `value` points at."""
        span = self.high - self.low + 1
        return ((self.value - self.low + 1) * total - 1) // span

    def decode_interval(self, prob: Probability, total: int) -> None:
        """Narrow to the decoded symbol's interval and renormalise for the decoder."""
        assert self.input is not None, "decode_interval: no BitReader"
        self._narrow(prob, total)
        self._discard_bits()
