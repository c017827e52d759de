"""
Tests: command-line entry point.

Run with:
    pytest req_analyzer/tests/test_main.py -v
"""

import io
import json
import logging

from req_analyzer.main import main, run


class TestCli:
    def test_prints_document_for_file(self, tmp_path, capsys):
        req = tmp_path / "req.txt"
        req.write_text("Guest checkout for the web shop", encoding="utf-8")

        assert main([str(req)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("TECHNICAL DESIGN DOCUMENT")
        assert "Guest User" in out

    def test_json_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("bank transfer"))

        assert main(["--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["automationLogic"]["riskFlags"] == [
            "Regulatory Compliance Risk",
            "Standard Implementation",
        ]

    def test_verbose_json_keeps_stdout_parseable(self, monkeypatch, capsys):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        monkeypatch.setattr("sys.stdin", io.StringIO("bank transfer"))

        assert main(["--json", "-v"]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["automationLogic"]["suggestedEffortHours"] == 160
        assert "Analyzing 13 characters" in captured.err

    def test_run_returns_record(self):
        assert run("").automation_logic.suggested_effort_hours == 80
