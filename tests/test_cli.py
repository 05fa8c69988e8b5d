# ==============================================
# Tests for the CLI
# ==============================================

import json
import warnings

import pytest
from click.testing import CliRunner

from settings_guessr import cli
from settings_guessr.cli import main, EXIT_INVALID_INPUT, EXIT_SOURCE_UNAVAILABLE
from settings_guessr.ingest import sources


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def documents_file(tmp_path):
    path = tmp_path / "documents.json"
    path.write_text(json.dumps([{"price": 10}, {"price": 20}, {"price": 5}]))
    return path


class TestSuccess:

    def test_file_argument(self, runner, documents_file):
        result = runner.invoke(main, [str(documents_file)])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "displayed_attributes": [],
            "searchable_attributes": [],
            "filterable_attributes": ["price"],
            "sortable_attributes": ["price"],
        }

    def test_piped_stream(self, runner):
        result = runner.invoke(main, [], input='{"id": "1"}\n{"id": "2"}\n{"id": "3"}\n')

        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["filterable_attributes"] == ["id"]
        assert output["searchable_attributes"] == []

    def test_output_is_pretty_printed(self, runner, documents_file):
        result = runner.invoke(main, [str(documents_file)])
        assert '\n  "displayed_attributes": []' in result.output

    def test_stats(self, runner, documents_file):
        result = runner.invoke(main, [str(documents_file), "--stats"])

        assert result.exit_code == 0
        price = json.loads(result.output)["fields"]["price"]
        assert price["total"] == 3
        assert price["percentages"]["sortable"] == 100
        assert price["settings"] == ["filterable", "sortable"]

    def test_sort_searchable(self, runner):
        document = '{"title": "hello", "name": "world"}'

        discovery = json.loads(runner.invoke(main, [], input=document).output)
        ordered = json.loads(runner.invoke(main, ["--sort-searchable"], input=document).output)

        assert discovery["searchable_attributes"] == ["title", "name"]
        assert ordered["searchable_attributes"] == ["name", "title"]

    def test_searchable_order_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("SETTINGS_GUESSR_SEARCHABLE_ORDER", "sorted")

        result = runner.invoke(main, [], input='{"title": "hello", "name": "world"}')

        assert json.loads(result.output)["searchable_attributes"] == ["name", "title"]

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "settings-guessr" in result.output


class TestFailures:

    def test_empty_input(self, runner):
        result = runner.invoke(main, [], input="   ")

        assert result.exit_code == EXIT_INVALID_INPUT
        assert "empty stream" in result.output

    def test_invalid_document(self, runner):
        result = runner.invoke(main, [], input="[1]")

        assert result.exit_code == EXIT_INVALID_INPUT
        assert "document #0" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.json")])
        assert result.exit_code == EXIT_SOURCE_UNAVAILABLE

    def test_nothing_piped(self, runner, monkeypatch):
        monkeypatch.setattr(sources, "stdin_is_interactive", lambda stream: True)

        result = runner.invoke(main, [])

        assert result.exit_code == EXIT_SOURCE_UNAVAILABLE
        assert "Usage: pipe your documents" in result.output

    def test_deeply_nested_input(self, runner):
        result = runner.invoke(main, [], input="[" * 100000 + "]" * 100000)

        assert result.exit_code == EXIT_INVALID_INPUT
        assert not isinstance(result.exception, RecursionError)

    def test_lone_surrogate_in_field_name(self, runner):
        result = runner.invoke(main, [], input=r'{"\ud800x": 1}')

        assert result.exit_code == EXIT_INVALID_INPUT
        assert "document #0" in result.output


class TestStdin:

    def test_no_deprecation_warnings(self, runner, documents_file):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(main, [str(documents_file)])

        assert result.exit_code == 0
        assert not [
            w for w in caught
            if issubclass(w.category, DeprecationWarning) and w.filename == cli.__file__
        ]

    def test_dash_reads_piped_input(self, runner):
        result = runner.invoke(main, ["-"], input='{"price": 1}')

        assert result.exit_code == 0
        assert json.loads(result.output)["sortable_attributes"] == ["price"]
