"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from md2folder.cli import main


class TestMain:
    """Tests for main."""

    def test_expands_file(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A successful run prints the summary and exits 0."""
        code = main([str(sample_file)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Documents: 3" in out
        assert (sample_file.parent / "notes" / "Chapter Two.md").exists()

    def test_dry_run(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--dry-run leaves the filesystem alone."""
        code = main([str(sample_file), "--dry-run"])

        assert code == 0
        assert "Dry run" in capsys.readouterr().out
        assert not (sample_file.parent / "notes").exists()

    def test_json_output(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--json prints the result model."""
        code = main([str(sample_file), "--json", "-o", str(sample_file.parent / "out")])

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert [doc["title"] for doc in payload["documents"]] == [
            "Intro",
            "Chapter One",
            "Chapter Two",
        ]

    def test_error_exit_code(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Expansion failures print to stderr and exit 1."""
        (sample_file.parent / "notes").mkdir()

        code = main([str(sample_file)])

        assert code == 1
        assert "Folder already exists" in capsys.readouterr().err

    def test_reject_leading(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--reject-leading turns leading content into an error."""
        source = tmp_path / "doc.md"
        source.write_text("preface\n\n# A\n", encoding="utf-8")

        code = main([str(source), "--reject-leading"])

        assert code == 1
        assert "before the first level-1 heading" in capsys.readouterr().err

    def test_missing_argument(self) -> None:
        """argparse exits with status 2 when the source is missing."""
        with pytest.raises(SystemExit) as excinfo:
            main([])

        assert excinfo.value.code == 2

    def test_bad_leading_content_setting(
        self, sample_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unusable policy from the environment exits 1 with a message."""
        with patch("md2folder.cli.MD2FOLDER_LEADING_CONTENT", "ignore"):
            code = main([str(sample_file)])

        assert code == 1
        assert "Unknown leading content policy 'ignore'" in capsys.readouterr().err
        assert not (sample_file.parent / "notes").exists()
