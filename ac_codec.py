import logging
from dataclasses import dataclass
from typing import Optional

from bitReadWrite import BitReader
from decoder import Decoder
from encoder import Encoder

logger = logging.getLogger(__name__)


@dataclass
class CodecConfig:
    progress: bool = False
    max_decode_symbols: Optional[int] = None
    legacy_zero_terminates: bool = False


class AdaptiveByteCodec:
    """
    Adaptive order-0 arithmetic codec for byte strings.

    The encoded form has no header: the decoder stops at the in-band
    end-of-stream symbol. Each call runs on a fresh Encoder/Decoder, so one
    codec object can be used for any number of passes.
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        if self.config.max_decode_symbols is not None and self.config.max_decode_symbols < 0:
            raise ValueError("max_decode_symbols must be non-negative")

    def encode(self, data: bytes) -> bytes:
        encoded = Encoder().encode(bytes(data), progress=self.config.progress)
        logger.debug("encoded %d bytes into %d bytes", len(data), len(encoded))
        return encoded

    def decode(self, encoded: bytes) -> bytes:
        dec = Decoder(BitReader(bytes(encoded)), legacy_zero_terminates=self.config.legacy_zero_terminates)
        decoded = dec.decode(max_decode_symbols=self.config.max_decode_symbols)
        logger.debug("decoded %d bytes into %d bytes", len(encoded), len(decoded))
        return decoded


def encode(data: bytes, config: Optional[CodecConfig] = None) -> bytes:
    return AdaptiveByteCodec(config).encode(data)


def decode(encoded: bytes, config: Optional[CodecConfig] = None) -> bytes:
    return AdaptiveByteCodec(config).decode(encoded)
