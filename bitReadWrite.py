# -----------------------
# MSB-first bit IO
# -----------------------
CODE_BITS = 16
# Returned by BitReader.read_bit once the synthetic tail has drained.
END_OF_INPUT = 256


class BitWriter:
    def __init__(self):
        self._acc = 0
        self._mask = 0x80
        self._out = bytearray()

    def write_bit(self, bit: int) -> None:
        if bit not in (0, 1):
            raise ValueError(f"write_bit: expected 0 or 1, got {bit!r}")
        if bit:
            self._acc |= self._mask
        self._mask >>= 1
        if self._mask == 0:
            self._out.append(self._acc)
            self._acc = 0
            self._mask = 0x80

    def flush(self) -> None:
        # unset positions of a partial byte stay zero
        if self._mask != 0x80:
            self._out.append(self._acc)
            self._acc = 0
            self._mask = 0x80

    def getvalue(self) -> bytes:
        return bytes(self._out)


class BitReader:
    """
    Reads bits MSB-first from an in-memory buffer.

    Once the buffer is exhausted the reader keeps the decoder's register fed
    with CODE_BITS synthetic 1-bits (two all-ones bytes). After that every
    call returns END_OF_INPUT.
    """

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0
        self._current = 0
        self._mask = 1
        self._synthetic_bits = CODE_BITS

    def read_bit(self) -> int:
        if self._mask == 1:
            if self._pos < len(self._data):
                self._current = self._data[self._pos]
                self._pos += 1
            else:
                if self._synthetic_bits <= 0:
                    return END_OF_INPUT
                self._current = 0xFF
                self._synthetic_bits -= 8
            self._mask = 0x80
        else:
            self._mask >>= 1
        return 1 if self._current & self._mask else 0

