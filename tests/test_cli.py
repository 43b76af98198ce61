"""
Test the reactor command line entry point
"""
import io
import json

import pytest

from reactor.cli import build_parser, main, parse_region


def test_prints_lit_count(small_example_file, capsys):
    assert main([str(small_example_file)]) == 0
    assert capsys.readouterr().out.strip() == "39"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("on x=10..12,y=10..12,z=10..12\n"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out.strip() == "27"


def test_init_region(data_dir, capsys):
    assert main([str(data_dir / "sample_init.txt"), "--init"]) == 0
    assert capsys.readouterr().out.strip() == "590784"


def test_explicit_region_and_no_coalesce(data_dir, capsys):
    assert main([str(data_dir / "sample_init.txt"), "--region=-50..50", "--no-coalesce"]) == 0
    assert capsys.readouterr().out.strip() == "590784"


def test_region_value_forms(small_example_file, capsys):
    assert main([str(small_example_file), "--region", "11..12"]) == 0
    assert capsys.readouterr().out.strip() == "7"
    assert main([str(small_example_file), "--region=-5..10"]) == 0
    assert capsys.readouterr().out.strip() == "1"


def test_parse_error_exits_2(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("on x=0..1,y=0..1,z=0..1\nflip x=0..1,y=0..1,z=0..1\n", encoding="utf-8")
    assert main([str(bad)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err


def test_missing_file_exits_2(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "Cannot read" in capsys.readouterr().err


def test_report_and_index(small_example_file, tmp_path, capsys):
    report = tmp_path / "out" / "run.json"
    index = tmp_path / "out" / "run_index.json"
    args = [str(small_example_file), "--report", str(report), "--index", str(index)]
    assert main(args) == 0
    assert main(args) == 0
    capsys.readouterr()

    run = json.loads(report.read_text(encoding="utf-8"))
    assert run["result"]["lit_count"] == 39
    assert run["input"]["instruction_count"] == 4
    assert run["engine"] == {"coalesce": True, "region": None}
    assert [s["volume"] for s in run["progress"]["per_step"]] == [27, 46, 38, 39]
    assert run["diagnostics"]["peak_cuboid_count"] >= run["result"]["cuboid_count"]

    entries = json.loads(index.read_text(encoding="utf-8"))
    assert len(entries) == 2
    assert entries[0]["lit_count"] == 39
    assert entries[0]["record_path"] == str(report)


def test_verbose_logs_each_step(small_example_file, capsys):
    assert main([str(small_example_file), "-v"]) == 0
    err = capsys.readouterr().err
    assert "step 0 (on)" in err
    assert "step 2 (off)" in err


def test_log_file(small_example_file, tmp_path, capsys):
    log_file = tmp_path / "reactor.log"
    assert main([str(small_example_file), "--log-file", str(log_file)]) == 0
    assert "39 lit points" in log_file.read_text(encoding="utf-8")


def test_parse_region():
    assert parse_region("-50..50") == (-50, 50)
    with pytest.raises(Exception):
        parse_region("50..-50")
    with pytest.raises(Exception):
        parse_region("abc")


def test_help_mentions_options(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    for flag in ("--region", "--init", "--no-coalesce", "--report", "--index", "--show"):
        assert flag in out
