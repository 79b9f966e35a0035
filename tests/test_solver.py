"""
End-to-end tests: solve(), receipts and the command line entry point.
"""

import io
import json
import logging
import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from schematic.cli import main
from schematic.errors import MalformedGrid, NumberParseFailure
from schematic.logging_config import setup_logging
from schematic.receipts import log_receipt, text_sha
from schematic.solver import calculate_part_1, calculate_part_2, format_answers, solve


SAMPLE = (
    "467..114..\n"
    "...*......\n"
    "..35..633.\n"
    "......#...\n"
    "617*......\n"
    ".....+.58.\n"
    "..592.....\n"
    "......755.\n"
    "...$.*....\n"
    ".664.598..\n"
)


# ==============================================================================
# Solver
# ==============================================================================

def test_sample_answers():
    result = solve(SAMPLE)
    assert result.part1 == 4361, f"Expected 4361, got {result.part1}"
    assert result.part2 == 467835, f"Expected 467835, got {result.part2}"


def test_part_helpers():
    assert calculate_part_1(SAMPLE) == 4361
    assert calculate_part_2(SAMPLE) == 467835


def test_empty_input_answers_zero():
    result = solve("")
    assert (result.part1, result.part2) == (0, 0)


def test_format_answers():
    assert format_answers(solve(SAMPLE)) == "Part 1 Answer: 4361\nPart 2 Answer: 467835"


def test_parse_failure_aborts():
    """No partial results: the error propagates out of solve()."""
    with pytest.raises(NumberParseFailure):
        solve(SAMPLE + "99999999999*\n")
    with pytest.raises(MalformedGrid):
        solve("1\t*")


def test_receipt_contents():
    receipt = solve(SAMPLE).receipt
    assert receipt.input_sha == text_sha(SAMPLE)
    assert len(receipt.input_sha) == 64
    assert receipt.part1 == 4361
    assert receipt.stats.n_resolved_gears == 2
    assert receipt.timing_ms >= 0


def test_solve_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="schematic"):
        solve(SAMPLE)
    assert "part1=4361" in caplog.text


# ==============================================================================
# Receipts
# ==============================================================================

def test_log_receipt_appends_jsonl(tmp_path):
    record = solve(SAMPLE).receipt.to_record()
    path = log_receipt(record, out_dir=str(tmp_path))
    log_receipt(record, out_dir=str(tmp_path))

    lines = path.read_text().splitlines()
    assert len(lines) == 2
    loaded = json.loads(lines[0])
    assert loaded["part2"] == 467835
    assert loaded["stats"]["shape"] == [10, 10]


# ==============================================================================
# Logging
# ==============================================================================

def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


# ==============================================================================
# Command Line
# ==============================================================================

def test_cli_prints_answers(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text(SAMPLE)
    assert main([str(src)]) == 0
    out = capsys.readouterr().out
    assert "Part 1 Answer: 4361" in out
    assert "Part 2 Answer: 467835" in out


def test_cli_writes_receipt(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text(SAMPLE)
    runs = tmp_path / "runs"
    assert main([str(src), "--receipts", str(runs)]) == 0
    record = json.loads((runs / "receipts.jsonl").read_text())
    assert record["part1"] == 4361


def test_cli_reports_parse_error(tmp_path, capsys):
    src = tmp_path / "bad.txt"
    src.write_text("12.\n4294967296\n")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err
    assert "4294967296" in captured.err


def test_cli_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.txt")])
    assert exc.value.code == 2


def test_cli_invalid_utf8(tmp_path, capsys):
    """Undecodable bytes are reported with their line, not a traceback."""
    src = tmp_path / "bad.txt"
    src.write_bytes(b"467..\n12*\xff\n")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: line 2, column 4" in captured.err


def test_cli_reads_stdin_bytes(monkeypatch, capsys):
    class FakeStdin:
        buffer = io.BytesIO(SAMPLE.encode())

    monkeypatch.setattr(sys, "stdin", FakeStdin())
    assert main([]) == 0
    assert "Part 2 Answer: 467835" in capsys.readouterr().out
