"""
End-to-end tests for the command-line interface.
"""

import pytest

from uidump_parser.cli import main
from uidump_parser.dispatch import NO_CRITERIA_MESSAGE
from uidump_parser.utils.logging import setup_logging


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.xml"
    path.write_bytes(
        b'<root><node resource-id="a" text="hi"/><node resource-id="b" text="lo"/>'
        b'<node resource-id="c"/></root>'
    )
    return path


class TestMain:
    """Tests for cli.main."""

    def test_resource_id_print_only(self, scenario_file, capsys):
        """Should print exactly the requested attribute."""
        code = main(["--file", str(scenario_file), "--resource-id", "a", "--print-only", "text"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "text: hi\n"

    def test_short_options(self, scenario_file, capsys):
        """Should accept the short option forms."""
        code = main(["-f", str(scenario_file), "-r", "a", "-p", "text"])
        assert code == 0
        assert capsys.readouterr().out == "text: hi\n"

    def test_missing_print_only_attribute(self, scenario_file, capsys):
        """Should print the not-found notice and still succeed."""
        code = main(["--file", str(scenario_file), "--resource-id", "c", "--print-only", "text"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "Attribute 'text' not found on node node\n"

    def test_nonexistent_file(self, tmp_path, capsys):
        """Should exit 1 with an error naming the file."""
        path = tmp_path / "nonexistent.xml"
        code = main(["--file", str(path), "--text", "hi"])
        captured = capsys.readouterr()
        assert code == 1
        assert "nonexistent.xml" in captured.err
        assert captured.out == ""

    def test_missing_file_option(self, capsys):
        """Should exit 1 when no file is given."""
        code = main(["--text", "hi"])
        assert code == 1
        assert "XML file is required" in capsys.readouterr().err

    def test_no_criteria(self, scenario_file, capsys):
        """Should succeed with only the usage notice on stderr."""
        code = main(["--file", str(scenario_file)])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == ""
        assert NO_CRITERIA_MESSAGE in captured.err

    def test_malformed_filter_means_no_criteria(self, scenario_file, capsys):
        """Should ignore a filter without '=' silently."""
        code = main(["--file", str(scenario_file), "--filter-attribute", "text"])
        captured = capsys.readouterr()
        assert code == 0
        assert NO_CRITERIA_MESSAGE in captured.err

    def test_bounds_flag(self, sample_file, capsys):
        """Should print bounds of each match."""
        code = main(["--file", str(sample_file), "--text", "Instagram", "--filter-attribute", "package=com.example", "--bounds"])
        assert code == 0
        assert capsys.readouterr().out == "bounds: [0,63][540,210]\n"

    def test_identical_runs(self, sample_file, capsys):
        """Should produce byte-identical output on repeated runs."""
        argv = ["--file", str(sample_file), "--class", "android.widget.TextView"]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first
        assert first.count("Node: node\n") == 3

    def test_debug_traces_to_stdout(self, scenario_file, capsys):
        """Should emit debug tracing only with --debug."""
        main(["--file", str(scenario_file), "--resource-id", "a", "--debug"])
        assert "Processing node: node" in capsys.readouterr().out
        main(["--file", str(scenario_file), "--resource-id", "a"])
        assert "Processing node" not in capsys.readouterr().out

    def test_config_file_defaults(self, scenario_file, tmp_path, capsys):
        """Should read options from --config, overridable on the command line."""
        config = tmp_path / "config.yaml"
        config.write_text(f"file: '{scenario_file}'\nresource_id: b\nprint_only: text\n", encoding="utf-8")
        assert main(["--config", str(config)]) == 0
        assert capsys.readouterr().out == "text: lo\n"
        assert main(["--config", str(config), "--resource-id", "a"]) == 0
        assert capsys.readouterr().out == "text: hi\n"

    def test_invalid_config_file(self, tmp_path, capsys):
        """Should exit 1 on a schema-invalid config."""
        config = tmp_path / "config.yaml"
        config.write_text("unknown: 1\n", encoding="utf-8")
        assert main(["--config", str(config)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_log_file_from_environment(self, scenario_file, tmp_path, monkeypatch, capsys):
        """Should write debug records to $UIDUMP_LOG_FILE."""
        log_path = tmp_path / "logs" / "uidump.log"
        monkeypatch.setenv("UIDUMP_LOG_FILE", str(log_path))
        main(["--file", str(scenario_file), "--resource-id", "a"])
        assert "Processing node: node" not in capsys.readouterr().out
        assert "Processing node: node" in log_path.read_text(encoding="utf-8")
        monkeypatch.delenv("UIDUMP_LOG_FILE")
        setup_logging()

    def test_deeply_nested_file(self, tmp_path, capsys):
        """Should search documents nested deeper than 256 levels."""
        depth = 300
        path = tmp_path / "deep.xml"
        path.write_bytes(b"<n>" * depth + b'<n resource-id="x"/>' + b"</n>" * depth)
        code = main(["--file", str(path), "--resource-id", "x", "--print-only", "resource-id"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "resource-id: x\n"

    def test_invalid_attribute_names_do_not_crash(self, scenario_file, capsys):
        """Should treat malformed attribute names as absent."""
        code = main(["--file", str(scenario_file), "--filter-attribute", "{weird=1"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == ""
        code = main(["--file", str(scenario_file), "--resource-id", "a", "--print-only", "{weird"])
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "Attribute '{weird' not found on node node\n"

    def test_no_debug_overrides_config(self, scenario_file, tmp_path, capsys):
        """Should switch off debug and bounds set in the config file."""
        config = tmp_path / "config.yaml"
        config.write_text(f"file: '{scenario_file}'\nresource_id: a\nbounds: true\ndebug: true\n", encoding="utf-8")
        assert main(["--config", str(config), "--no-debug", "--no-bounds", "--print-only", "text"]) == 0
        assert capsys.readouterr().out == "text: hi\n"
        assert main(["--config", str(config), "--no-debug", "--no-bounds"]) == 0
        out = capsys.readouterr().out
        assert "Processing node" not in out
        assert out.startswith("Node: node\n")

    def test_help_exits_zero(self, capsys):
        """Should print usage with examples and exit 0."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--filter-attribute" in out
        assert "Examples:" in out

    def test_unknown_option_exits_one(self, capsys):
        """Should exit 1 on an unknown option."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--nope"])
        assert exc_info.value.code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
