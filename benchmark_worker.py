import os
import sys
import time

import pandas as pd

from ac_codec import AdaptiveByteCodec
from utils import bits_per_byte, empirical_entropy


def run_single_benchmark(text_label, text_path, csv_path):
    print(f"--- WORKER START: {text_label} ---")

    try:
        with open(text_path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        print(f"File not found: {text_path}")
        return None

    codec = AdaptiveByteCodec()

    tik = time.time()
    encoded = codec.encode(data)
    enc_time = time.time() - tik

    tik = time.time()
    decoded = codec.decode(encoded)
    dec_time = time.time() - tik

    ratio = bits_per_byte(len(data), len(encoded)) if data else 0.0
    print(f"DONE. Encode: {enc_time:.2f}s | Decode: {dec_time:.2f}s | Ratio: {ratio:.4f}")

    new_row = {
        "Text": text_label, "Bytes": len(data), "Encoded": len(encoded),
        "EncodeTime": enc_time, "DecodeTime": dec_time, "Ratio": ratio,
        "Entropy": empirical_entropy(data), "Match": decoded == data,
    }

    header = not os.path.exists(csv_path)
    pd.DataFrame([new_row]).to_csv(csv_path, mode='a', header=header, index=False)
    return new_row


if __name__ == "__main__":
    if len(sys.argv) != 4:
        sys.exit(1)
    row = run_single_benchmark(sys.argv[1], sys.argv[2], sys.argv[3])
    sys.exit(0 if row is not None and row["Match"] else 1)
