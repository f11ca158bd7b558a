"""Tests for the termtip command-line interface."""

import io
import json

import pytest
from rich.console import Console

from termtip import cli
from termtip.core.glossary import Glossary


@pytest.fixture
def output(monkeypatch):
    """Capture everything the CLI prints"""
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buffer, width=200, color_system=None))
    return buffer


@pytest.fixture
def brand_args(brand_glossary_file):
    return ["--no-builtin", "--glossary", str(brand_glossary_file)]


class TestAnnotate:

    def test_json_segments(self, output, brand_args):
        code = cli.main(brand_args + ["annotate", "--json", "I", "love", "UNIQLO", "basics"])

        assert code == 0
        assert json.loads(output.getvalue()) == [
            {"kind": "plain", "text": "I love "},
            {"kind": "term", "text": "UNIQLO", "definition": "Japanese fast-fashion retailer", "key": "uniqlo"},
            {"kind": "plain", "text": " basics"},
        ]

    def test_table_output(self, output, brand_args):
        code = cli.main(brand_args + ["annotate", "A little black dress"])

        assert code == 0
        text = output.getvalue()
        assert "Glossary Terms" in text
        assert "A simple black cocktail dress." in text

    def test_no_terms(self, output, brand_args):
        assert cli.main(brand_args + ["annotate", "plain words only"]) == 0
        assert "No glossary terms found." in output.getvalue()

    def test_read_from_file(self, output, brand_args, tmp_path):
        path = tmp_path / "text.txt"
        path.write_text("Wear a trench coat.", encoding="utf-8")

        assert cli.main(brand_args + ["annotate", "--json", "--file", str(path)]) == 0
        segments = json.loads(output.getvalue())
        assert [s["text"] for s in segments] == ["Wear a ", "trench coat", "."]

    def test_missing_input_file(self, output, brand_args, tmp_path):
        code = cli.main(brand_args + ["annotate", "--file", str(tmp_path / "missing.txt")])
        assert code == 1
        assert "Cannot read" in output.getvalue()

    def test_segments_text_once(self, output, monkeypatch):
        glossary = Glossary(custom_terms={"trench": "Raincoat"}, include_builtin=False)
        calls = []
        original = glossary.segment

        def counting_segment(text):
            calls.append(text)
            return original(text)

        monkeypatch.setattr(glossary, "segment", counting_segment)
        monkeypatch.setattr(glossary, "extract_terms", None)

        cli.TermTipCLI(glossary).annotate("A trench and a Trench")

        assert calls == ["A trench and a Trench"]
        text = output.getvalue()
        assert "Raincoat" in text
        assert text.count("Raincoat") == 1


class TestQueries:

    def test_lookup(self, output, brand_args):
        assert cli.main(brand_args + ["lookup", "Little", "Black", "Dress"]) == 0
        assert "A simple black cocktail dress." in output.getvalue()

    def test_lookup_missing(self, output, brand_args):
        assert cli.main(brand_args + ["lookup", "tuxedo"]) == 1
        assert "Term not found: tuxedo" in output.getvalue()

    def test_search(self, output, brand_args):
        assert cli.main(brand_args + ["search", "coat"]) == 0
        assert "trench coat" in output.getvalue()

    def test_search_no_results(self, output, brand_args):
        assert cli.main(brand_args + ["search", "tuxedo"]) == 1

    def test_stats(self, output, brand_args):
        assert cli.main(brand_args + ["stats"]) == 0
        assert "Total Terms" in output.getvalue()

    def test_builtin_glossary_by_default(self, output):
        assert cli.main(["lookup", "bias", "cut"]) == 0
        assert "45-degree angle" in output.getvalue()


class TestExport:

    def test_export_to_stdout(self, output, brand_args):
        assert cli.main(brand_args + ["export", "--format", "json"]) == 0
        assert json.loads(output.getvalue())["uniqlo"] == "Japanese fast-fashion retailer"

    def test_export_to_file(self, output, brand_args, tmp_path):
        path = tmp_path / "glossary.csv"
        assert cli.main(brand_args + ["export", "--format", "csv", "--output", str(path)]) == 0
        assert path.read_text(encoding="utf-8").splitlines()[0] == "term,definition"
        assert "Exported 3 terms" in output.getvalue()


class TestErrors:

    def test_bad_glossary_file(self, output, tmp_path):
        code = cli.main(["--glossary", str(tmp_path / "missing.yaml"), "stats"])
        assert code == 1
        assert "Glossary file not found" in output.getvalue()

    def test_bad_config_file(self, output, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("glossary:\n  unknown_option: true\n", encoding="utf-8")
        assert cli.main(["--config", str(path), "stats"]) == 1

    def test_config_file_glossary(self, output, brand_glossary_file, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            f"glossary:\n  include_builtin: false\n  extra_files:\n    - {brand_glossary_file.as_posix()}\n",
            encoding="utf-8",
        )
        assert cli.main(["--config", str(path), "lookup", "uniqlo"]) == 0
        assert "Japanese fast-fashion retailer" in output.getvalue()

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
