from typing import Optional

from tqdm import tqdm

from arithmetic_coding import Coder
from bitReadWrite import BitWriter
from frequency_model import EOF_SYMBOL, FrequencyModel


class Encoder:
    """Single-use encoder: owns its model, range state and BitWriter."""

    def __init__(self, writer: Optional[BitWriter] = None):
        self.writer = writer if writer is not None else BitWriter()
        self.model = FrequencyModel()
        self.coder = Coder()
        self.coder.start_encode(self.writer)
        self._finished = False

    def encode_symbol(self, symbol: int) -> None:
        if self._finished:
            raise RuntimeError("encode_symbol: encoder already finished")
        prob, total = self.model.probability_for_symbol(symbol)
        self.coder.encode_interval(prob, total)

    def finish(self) -> bytes:
        """Append the end-of-stream symbol, resolve pending bits and flush."""
        self.encode_symbol(EOF_SYMBOL)
        self.coder.finish_encode()
        self._finished = True
        return self.writer.getvalue()

    def encode(self, data: bytes, progress: bool = False) -> bytes:
        if self._finished:
            raise RuntimeError("Encoder instances are single-use")
        for byte in tqdm(data, total=len(data), desc="Encode", unit="B", disable=not progress):
            self.encode_symbol(byte)
        return self.finish()
