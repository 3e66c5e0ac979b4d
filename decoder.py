from typing import Optional

from arithmetic_coding import Coder
from bitReadWrite import BitReader
from frequency_model import EOF_SYMBOL, FrequencyModel


class Decoder:
    def __init__(self, reader: BitReader, legacy_zero_terminates: bool = False):
        self.reader = reader
        self.model = FrequencyModel()
        self.coder = Coder()
        # byte 0 returns without narrowing, like the terminator; breaks decoding
        self.legacy_zero_terminates = legacy_zero_terminates
        self.coder.start_decode(reader)
        self._finished = False

    def decode_symbol(self) -> int:
        """
        Decode one symbol and update coder state.
        The terminator is returned without narrowing the range.
        """
        if self._finished:
            raise RuntimeError("decode_symbol: end-of-stream symbol already decoded")
        offset = self.coder.target_offset(self.model.total)
        prob, total, symbol = self.model.symbol_for_offset(offset)

        if symbol == EOF_SYMBOL:
            self._finished = True
            return symbol
        if self.legacy_zero_terminates and symbol == 0:
            return symbol

        self.coder.decode_interval(prob, total)
        return symbol

    def decode(self, max_decode_symbols: Optional[int] = None) -> bytes:
        if self._finished:
            raise RuntimeError("Decoder instances are single-use")
        output = bytearray()
        while True:
            symbol = self.decode_symbol()
            if symbol == EOF_SYMBOL:
                break
            if max_decode_symbols is not None and len(output) >= max_decode_symbols:
                raise RuntimeError(
                    f"Decoding exceeded max_decode_symbols={max_decode_symbols} before EOF."
                )
            output.append(symbol)
        return bytes(output)
