import pytest

from signaltx.cli import format_bits, format_samples, main
from signaltx.model import TextModel


def _sections(output):
    lines = output.splitlines()
    result = {}
    for index, line in enumerate(lines):
        if line in ("Encoded:", "Modulated:"):
            result[line[:-1]] = lines[index + 1] if index + 1 < len(lines) else ""
    return lines, result


def _bits_to_bytes(bits):
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def test_format_bits_joins_digits():
    assert format_bits([1, 0, 1, 1]) == "1011"


def test_format_bits_empty():
    assert format_bits([]) == ""


def test_format_samples_two_decimals():
    assert format_samples([0.0, 1.0, -0.5]) == "0.00 1.00 -0.50"


def test_format_samples_empty():
    assert format_samples([]) == ""


def test_format_samples_count_matches_input():
    model = TextModel("a")
    model.encode("UTF-8")
    samples = model.modulate("PSK")
    assert len(format_samples(samples).split(" ")) == len(samples)


def test_main_encodes_utf8_round_trip(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("héllo", encoding="utf-8")
    assert main([str(path)]) == 0
    _, sections = _sections(capsys.readouterr().out)
    assert _bits_to_bytes(sections["Encoded"]).decode("utf-8") == "héllo"


def test_main_encodes_utf16_round_trip(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("Hi", encoding="utf-8")
    assert main([str(path), "--encoding", "utf-16"]) == 0
    _, sections = _sections(capsys.readouterr().out)
    assert _bits_to_bytes(sections["Encoded"]).decode("utf-16-le") == "Hi"


def test_main_reports_sample_rate(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("x", encoding="utf-8")
    main([str(path)])
    lines, _ = _sections(capsys.readouterr().out)
    assert lines[0] == "Sample rate: 16000 Hz"


def test_main_modulates(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("A", encoding="utf-8")
    assert main([str(path), "-m", "ASK"]) == 0
    _, sections = _sections(capsys.readouterr().out)
    samples = sections["Modulated"].split(" ")
    assert len(samples) == 8 * TextModel.SAMPLES_PER_BIT
    assert all(len(value.split(".")[1]) == 2 for value in samples)


def test_main_without_modulation_has_no_section(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("A", encoding="utf-8")
    main([str(path)])
    _, sections = _sections(capsys.readouterr().out)
    assert "Modulated" not in sections


def test_main_saves_text(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("line one\nline two\n", encoding="utf-8")
    assert main([str(source), "--save", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "line one\nline two\n"


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Cannot open file" in capsys.readouterr().err


def test_main_requires_input():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2