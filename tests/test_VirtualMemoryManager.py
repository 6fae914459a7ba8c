import argparse
import logging

import pytest

from SimulatorError import InvalidAddress, EmptyInput
from VirtualMemoryManager import parse_address, read_addresses, run, main, check_frames


@pytest.mark.parametrize("line, expected", [("0\n", 0), ("  256 ", 256), ("65535", 65535)])
def test_parse_address(line, expected):
    assert parse_address(line) == expected


@pytest.mark.parametrize("line", ["-1", "65536", "12ab", "0x10", "1.5", "", "²"])
def test_parse_address_rejects(line):
    with pytest.raises(InvalidAddress):
        parse_address(line)


def test_read_addresses_skips_blank_lines(address_file):
    path = address_file(["16916", "", "62493"])
    assert read_addresses(path) == [16916, 62493]


def test_read_addresses_reports_the_bad_line(address_file):
    path = address_file(["16916", "62493", "oops"])
    with pytest.raises(InvalidAddress) as excinfo:
        read_addresses(path)
    assert excinfo.value.line_number == 3
    assert excinfo.value.line == "oops"
    assert path in str(excinfo.value)


def test_run_formats_results_and_summary(backing_store_path):
    output = run([256, 256, 515], backing_store_path)
    assert output == [
        "Virtual address: 256 TLB: 0 Physical address: 0 Value: 1",
        "Virtual address: 256 TLB: 0 Physical address: 0 Value: 1",
        "Virtual address: 515 TLB: 1 Physical address: 259 Value: 2",
        "Number of Translated Addresses = 3",
        "Page Faults = 2",
        "Page Fault Rate = 0.667",
        "TLB Hits = 1",
        "TLB Hit Rate = 0.333",
    ]


def test_run_without_addresses_raises(backing_store_path):
    with pytest.raises(EmptyInput):
        run([], backing_store_path)


@pytest.mark.parametrize("frames", ["0", "257", "many"])
def test_check_frames_rejects(frames):
    with pytest.raises(argparse.ArgumentTypeError):
        check_frames(frames)


def test_main_writes_output_file(backing_store_path, address_file, tmp_path):
    output_path = tmp_path / "out.txt"
    addresses = address_file(["256", "512", "256"])
    assert main([addresses, "-b", backing_store_path, "-o", str(output_path), "-p", "lru"]) == 0
    lines = output_path.read_text().splitlines()
    assert lines[0] == "Virtual address: 256 TLB: 0 Physical address: 0 Value: 1"
    assert lines[2] == "Virtual address: 256 TLB: 0 Physical address: 0 Value: 1"
    assert lines[-1] == "TLB Hit Rate = 0.333"


def test_main_prints_to_stdout(backing_store_path, address_file, capsys):
    assert main([address_file(["1"]), "-b", backing_store_path, "--frames", "4", "--strict-tlb"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Virtual address: 1 TLB: 0 Physical address: 1 Value: 0\n")
    assert "Page Faults = 1" in out


def test_main_rejects_unknown_policy(backing_store_path, address_file, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([address_file(["1"]), "-b", backing_store_path, "-p", "opt"]) == 1
    assert "unknown replacement policy" in caplog.text


@pytest.mark.parametrize("lines", [[], ["1", "bogus"]])
def test_main_fails_without_output(backing_store_path, address_file, tmp_path, lines):
    output_path = tmp_path / "out.txt"
    assert main([address_file(lines), "-b", backing_store_path, "-o", str(output_path)]) == 1
    assert not output_path.exists()


def test_main_fails_on_missing_backing_store(address_file, tmp_path, caplog):
    output_path = tmp_path / "out.txt"
    missing = str(tmp_path / "nope.bin")
    assert main([address_file(["1"]), "-b", missing, "-o", str(output_path)]) == 1
    assert missing in caplog.text
    assert not output_path.exists()


def test_main_fails_on_missing_address_file(backing_store_path, tmp_path):
    assert main([str(tmp_path / "none.txt"), "-b", backing_store_path]) == 1


def test_undecodable_line_is_an_invalid_address(backing_store_path, tmp_path, caplog):
    path = tmp_path / "addresses.txt"
    path.write_bytes(b"256\n\xff\xfe\n")
    with pytest.raises(InvalidAddress) as excinfo:
        read_addresses(str(path))
    assert excinfo.value.line_number == 2
    assert main([str(path), "-b", backing_store_path]) == 1
    assert str(path) in caplog.text


def test_main_fails_on_unwritable_output(backing_store_path, address_file, tmp_path, caplog):
    output_path = str(tmp_path / "no" / "out.txt")
    assert main([address_file(["256"]), "-b", backing_store_path, "-o", output_path]) == 1
    assert "could not write output file" in caplog.text
    assert "address file" not in caplog.text


def test_run_logs_frame_occupancy(backing_store_path, caplog):
    with caplog.at_level(logging.INFO):
        run([256, 512, 256], backing_store_path, num_frames=4)
    assert "2 of 4 frames occupied, 2 pages resident" in caplog.text
