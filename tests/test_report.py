"""Tests for the console report."""

from evstats.aggregation.aggregator import Aggregator
from evstats.report.console import main, render_report


class TestRenderReport:
    """Tests for render_report."""

    def test_contains_all_sections(self, scenario_csv):
        """Every section is rendered."""
        report = render_report(Aggregator(scenario_csv))
        assert "Dataset Statistics:" in report
        assert "Total Rows: 3" in report
        assert "Dataset Preview:" in report
        assert "Top 10 EV Makes:" in report
        assert "Available Years:\n2021, 2022" in report

    def test_ranked_makes(self, scenario_csv):
        """Makes are listed by rank."""
        report = render_report(Aggregator(scenario_csv))
        assert "1. Tesla: 2 vehicles" in report
        assert "2. Nissan: 1 vehicles" in report

    def test_latest_year_summary(self, scenario_csv):
        """The most recent year is summarized."""
        report = render_report(Aggregator(scenario_csv))
        assert "Statistics for 2022:" in report
        assert "Total EVs: 1" in report
        assert "Average Range: 0 miles" in report
        assert "  PHEV: 1" in report
        assert "Color Distribution (simulated):" in report

    def test_preview_rows_truncated(self, write_csv):
        """Preview rows are cut to 100 characters."""
        long_row = "Tesla," + "x" * 200
        report = render_report(Aggregator(write_csv("Make,Notes\n" + long_row)))
        assert f"1: {long_row[:100]}..." in report

    def test_missing_column_degrades_section(self, write_csv):
        """A missing column disables its sections, others still render."""
        report = render_report(Aggregator(write_csv("Model Year\n2020\n")))
        assert "Top EV Makes: unavailable (Make column not found in dataset)" in report
        assert "Statistics for 2020:" in report
        assert "Total Rows: 2" in report

    def test_header_only_has_no_year_summary(self, header_only_csv):
        """No years means no year summary."""
        report = render_report(Aggregator(header_only_csv))
        assert "Statistics for" not in report


class TestMain:
    """Tests for the command-line entry point."""

    def test_prints_report(self, scenario_csv, capsys):
        """main prints the report and returns 0."""
        assert main(["--dataset", str(scenario_csv), "--top", "1"]) == 0
        out = capsys.readouterr().out
        assert "Top 1 EV Makes:" in out
        assert "2. Nissan" not in out

    def test_missing_dataset_exit_code(self, tmp_path):
        """main returns 1 for a missing dataset."""
        assert main(["--dataset", str(tmp_path / "missing.csv")]) == 1

    def test_directory_dataset_exit_code(self, tmp_path):
        """main returns 1 when the dataset path is a directory."""
        assert main(["--dataset", str(tmp_path)]) == 1

    def test_undecodable_bytes_still_report(self, tmp_path, capsys):
        """A file with non-UTF-8 bytes still produces a full report."""
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"Make,Model Year\nCitro\xebn,2021\nTesla,2021\n")
        assert main(["--dataset", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Statistics for 2021:" in out
        assert "Total EVs: 2" in out
