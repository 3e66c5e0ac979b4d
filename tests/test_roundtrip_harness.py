import pytest

from roundtrip_harness import InputError, main, read_input


def test_roundtrip_reports_match(tmp_path, capsys):
    src = tmp_path / "ex.txt"
    src.write_bytes(b"the quick brown fox jumps over the lazy dog\n" * 50)
    assert main(["--input", str(src)]) == 0
    out = capsys.readouterr().out
    assert "Original size: 2200 bytes" in out
    assert "roundtrip_match=True" in out


def test_compress_then_decompress(tmp_path):
    src = tmp_path / "ex.bin"
    packed = tmp_path / "ex.ac"
    restored = tmp_path / "ex.out"
    data = bytes(range(256)) * 4
    src.write_bytes(data)

    assert main(["--input", str(src), "--output", str(packed)]) == 0
    assert packed.stat().st_size > 0
    assert main(["--input", str(packed), "--output", str(restored), "--decompress"]) == 0
    assert restored.read_bytes() == data


def test_missing_input_is_reported_not_fatal(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1
    assert "Failed to read" in capsys.readouterr().err


def test_read_input_wraps_os_errors(tmp_path):
    with pytest.raises(InputError):
        read_input(str(tmp_path))
