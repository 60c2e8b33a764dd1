import io
import json
import sys

from service_order.scripts import run_service
from service_order.scripts.run_service import main, read_input_path

SCENARIO_A = "alice waiting 5\nbob waiting 10\ncarol missed 3\ndave waiting 7\n"


def test_prints_service_order(write_records, capsys):
    main([write_records(SCENARIO_A)])

    assert capsys.readouterr().out == (
        "serve order\n"
        "1. alice waiting time 5\n"
        "2. bob waiting time 10\n"
        "3. dave waiting time 7\n"
        "4. carol missed time 3\n"
        "\n"
        "total time 25\n"
    )


def test_prompts_for_path_when_not_given(write_records, capsys, monkeypatch):
    path = write_records("gina missed 6\n")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"\n  {path} extra\n"))

    main([])

    out = capsys.readouterr().out
    assert out.startswith("enter input file name\nserve order\n")
    assert "1. gina missed time 6" in out
    assert out.endswith("total time 6\n")


def test_no_path_on_stdin_exits_quietly(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main([])
    assert capsys.readouterr().out == "enter input file name\n"


def test_read_input_path_takes_first_token():
    assert read_input_path(io.StringIO("  records.txt more\n")) == "records.txt"


def test_missing_file_reports_open_failure(tmp_path, capsys):
    # Ends normally after the message, like a successful run
    assert main([str(tmp_path / "missing.txt")]) is None
    assert capsys.readouterr().out == "file open failed\n"


def test_no_valid_records_reports_same_message(write_records, capsys):
    assert main([write_records("frank delayed 4\n")]) is None
    assert capsys.readouterr().out == "file open failed\n"


def test_saves_json_results(write_records, tmp_path, capsys):
    output = tmp_path / "results.json"
    main([write_records(SCENARIO_A), "-o", str(output), "-d"])

    results = json.loads(output.read_text())
    assert results['total_duration'] == 25
    assert [e['label'] for e in results['events']] == ["waiting"] * 3 + ["missed"]
    assert results['metrics']['classes']['missed']['served'] == 1

    out = capsys.readouterr().out
    assert "=== Service Metrics ===" in out
    assert f"Results saved to: {output}" in out


def test_saves_plot(write_records, tmp_path, capsys):
    plot_file = tmp_path / "order.png"
    main([write_records(SCENARIO_A), "--plot-file", str(plot_file)])

    assert plot_file.exists()
    assert f"Plot saved to: {plot_file}" in capsys.readouterr().out


def test_verbose_logs_discards(write_records, caplog, monkeypatch):
    monkeypatch.setattr(run_service, "configure_logging", lambda verbose: None)
    with caplog.at_level("DEBUG", logger="service_order"):
        main([write_records("eve waiting -1\nalice waiting 5\n"), "-v"])

    assert any("negative_duration" in r.getMessage() for r in caplog.records)


def test_plain_run_does_not_load_plotting(write_records, capsys, monkeypatch):
    monkeypatch.delitem(sys.modules, "service_order.visualization.plotting", raising=False)
    monkeypatch.delitem(sys.modules, "service_order.visualization", raising=False)

    main([write_records(SCENARIO_A)])

    assert "service_order.visualization.plotting" not in sys.modules
    assert capsys.readouterr().out.endswith("total time 25\n")
