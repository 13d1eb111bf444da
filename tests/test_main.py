"""Tests for the batch and interactive entry points."""

from unittest.mock import AsyncMock, patch

import pandas as pd
import pytest

from marketing_finder import interactive, main
from marketing_finder.config import get_settings
from marketing_finder.exceptions import ConfigurationError
from marketing_finder.models import Candidate, VerificationOutcome


def _write_companies(path, *companies):
    path.write_text("company\n" + "".join(f"{c}\n" for c in companies))


class TestBuildParser:
    """Test batch CLI argument defaults."""

    def test_defaults(self):
        """Test default input and output paths."""
        args = main.build_parser().parse_args([])
        assert args.input_file == "companies.csv"
        assert args.output_file == "results.csv"

    def test_positional_paths(self):
        """Test that both paths can be given positionally."""
        args = main.build_parser().parse_args(["in.csv", "out.csv"])
        assert (args.input_file, args.output_file) == ("in.csv", "out.csv")


class TestProcessCsv:
    """Test the batch pipeline with a stubbed search service."""

    @pytest.mark.asyncio
    async def test_end_to_end(self, tmp_path, stub_service):
        """Test the Acme/Globex batch scenario through CSV files."""
        input_file = tmp_path / "companies.csv"
        output_file = tmp_path / "results.csv"
        _write_companies(input_file, "Acme", "Globex")

        async def search(company_name):
            return [Candidate(name="Jane Doe")] if company_name == "Acme" else []

        stub_service.search_candidates.side_effect = search
        stub_service.verify_candidate.return_value = VerificationOutcome(
            is_confirmed=True, role="Chief Marketing Officer (CMO)"
        )

        count = await main.process_csv(str(input_file), str(output_file), service=stub_service)

        assert count == 2
        df = pd.read_csv(output_file, dtype=str, keep_default_na=False)
        assert df.values.tolist() == [
            ["Acme", "Jane Doe", "Chief Marketing Officer (CMO)", "Yes"],
            ["Globex", "Not Found", "N/A", "N/A"],
        ]
        stub_service.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_closes_service_it_creates(self, tmp_path, stub_service):
        """Test that a service built from settings is closed afterwards."""
        input_file = tmp_path / "companies.csv"
        _write_companies(input_file, "Acme")

        with patch.object(main, "create_search_service", return_value=stub_service):
            await main.process_csv(str(input_file), str(tmp_path / "out.csv"))

        stub_service.close.assert_awaited_once()


class TestRun:
    """Test the console script wrapper."""

    def test_success_exit_code(self, tmp_path, stub_service):
        """Test exit code 0 after a successful run."""
        input_file = tmp_path / "companies.csv"
        output_file = tmp_path / "results.csv"
        _write_companies(input_file, "Acme")

        with patch.object(main, "create_search_service", return_value=stub_service):
            exit_code = main.run([str(input_file), str(output_file)])

        assert exit_code == 0
        assert output_file.exists()

    def test_unknown_log_level_still_runs(self, tmp_path, stub_service, monkeypatch):
        """Test that a bad LOG_LEVEL does not stop the batch run."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        get_settings.cache_clear()
        input_file = tmp_path / "companies.csv"
        _write_companies(input_file, "Acme")

        try:
            with patch.object(main, "create_search_service", return_value=stub_service):
                exit_code = main.run([str(input_file), str(tmp_path / "out.csv")])
        finally:
            get_settings.cache_clear()

        assert exit_code == 0

    def test_missing_input_exit_code(self, tmp_path):
        """Test exit code 1 when the input file is missing."""
        exit_code = main.run([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv")])
        assert exit_code == 1


class TestInteractive:
    """Test interactive console output."""

    @pytest.mark.asyncio
    async def test_prints_confirmed_results(self, stub_service, capsys):
        """Test the numbered list of confirmed results."""
        stub_service.search_candidates.return_value = [
            Candidate(name="Jane Doe"),
            Candidate(name="John Smith"),
        ]
        stub_service.verify_candidate.side_effect = [
            VerificationOutcome(is_confirmed=True, role="Marketing Director"),
            VerificationOutcome(is_confirmed=False, role=""),
        ]

        exit_code = await interactive.find_marketing_head("Acme", service=stub_service)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "1. Jane Doe - Marketing Director" in out
        assert "John Smith" in out  # progress line only
        assert "Unverified candidates" not in out

    @pytest.mark.asyncio
    async def test_prints_unverified_candidates(self, stub_service, capsys):
        """Test the numbered list of unverified candidates."""
        stub_service.search_candidates.return_value = [
            Candidate(name="Jane Doe"),
            Candidate(name="John Smith"),
        ]
        stub_service.verify_candidate.return_value = VerificationOutcome()

        exit_code = await interactive.find_marketing_head("Acme", service=stub_service)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Unverified candidates" in out
        assert "1. Jane Doe" in out
        assert "2. John Smith" in out

    @pytest.mark.asyncio
    async def test_prints_not_found(self, stub_service, capsys):
        """Test output when no candidate is found."""
        exit_code = await interactive.find_marketing_head("Globex", service=stub_service)

        assert exit_code == 0
        assert "No marketing head profiles found for Globex." in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_error_ends_session(self, stub_service, capsys):
        """Test that an error is printed and ends the session."""
        stub_service.search_candidates.side_effect = ConfigurationError("SerpAPI key not found.")

        exit_code = await interactive.find_marketing_head("Acme", service=stub_service)

        assert exit_code == 1
        assert "SerpAPI key not found." in capsys.readouterr().out
        stub_service.close.assert_not_awaited()

    def test_empty_company_name(self, capsys):
        """Test that an empty company name is rejected."""
        with patch.object(interactive.Prompt, "ask", return_value="   "):
            assert interactive.main() == 1
        assert "Company name is required." in capsys.readouterr().out

    def test_main_runs_lookup(self):
        """Test that main passes the entered name to the lookup."""
        with patch.object(interactive.Prompt, "ask", return_value="Acme"), patch.object(
            interactive, "find_marketing_head", AsyncMock(return_value=0)
        ) as mock_find:
            assert interactive.main() == 0
        mock_find.assert_awaited_once_with("Acme")
