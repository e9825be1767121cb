from pathlib import Path

from bl1tool.cli import convert_file, main
from bl1tool.image import BLOCK_SIZE, HEADER_SIZE, IMAGE_SIZE, build_image, verify_image


def _write(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


def test_convert_file_writes_built_image(tmp_path):
    data = bytes(range(200)) * 4
    src = _write(tmp_path / "led.bin", data)
    dst = tmp_path / "out.bin"
    header = convert_file(src, dst)
    written = dst.read_bytes()
    assert written == build_image(data)
    assert header == verify_image(written)
    assert header.size == len(written)


def test_convert_file_truncates_large_source(tmp_path):
    src = _write(tmp_path / "big.bin", b"\x5a" * (IMAGE_SIZE * 2))
    dst = tmp_path / "out.bin"
    header = convert_file(src, dst)
    assert header.size == IMAGE_SIZE
    assert len(dst.read_bytes()) == IMAGE_SIZE


def test_convert_file_missing_source(tmp_path):
    try:
        convert_file(tmp_path / "absent.bin", tmp_path / "out.bin")
    except FileNotFoundError as exc:
        assert "absent.bin" in str(exc)
    else:
        raise AssertionError("expected FileNotFoundError")


def test_main_success(tmp_path, capsys):
    src = _write(tmp_path / "uart.bin", b"\x01\x02\x03")
    dst = tmp_path / "uart.img"
    assert main([str(src), str(dst)]) == 0
    out = capsys.readouterr().out
    assert f"BL1 image generated successfully: {dst}" in out
    image = dst.read_bytes()
    assert len(image) == BLOCK_SIZE
    assert image[HEADER_SIZE:HEADER_SIZE + 3] == b"\x01\x02\x03"


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_no_arguments(capsys):
    assert main([]) == 1
    assert "<source file> <destination file>" in capsys.readouterr().out


def test_main_missing_source(tmp_path, capsys):
    dst = tmp_path / "out.bin"
    assert main([str(tmp_path / "absent.bin"), str(dst)]) == 1
    assert "source file open error" in capsys.readouterr().err
    assert not dst.exists()


def test_main_unwritable_destination(tmp_path, capsys):
    src = _write(tmp_path / "key.bin", b"abc")
    dst = tmp_path / "no_such_dir" / "out.bin"
    assert main([str(src), str(dst)]) == 1
    assert "destination file open error" in capsys.readouterr().err