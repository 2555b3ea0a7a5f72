"""
CLI Command Integration Tests.

Tests for CLI command operations including:
- inspect: metadata card, element table, JSON output
- export: CSV files per ontology
- formats: extension listing
- Exit codes for missing inputs, parse failures and bad configuration
"""

import csv
import io
import json
import locale

import pytest

from fixtures import MALFORMED_TTL, PIZZA_TTL, SIMPLE_NT
from ontology_table.app.cli import helpers
from ontology_table.app.cli.commands import InspectCommand
from ontology_table.constants import ExitCode
from ontology_table.main import main
from ontology_table.shared.models import BatchResult


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command from an empty directory so no config.json is picked up."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield workdir
    helpers._clear_managed_handlers()
    helpers._LOGGING_SIGNATURE = None
    helpers._LAST_LOG_FILE = None


@pytest.fixture
def ontology_dir(tmp_path):
    directory = tmp_path / "ontologies"
    directory.mkdir()
    (directory / "pizza.ttl").write_text(PIZZA_TTL, encoding="utf-8")
    (directory / "animals.nt").write_text(SIMPLE_NT, encoding="utf-8")
    return directory


@pytest.mark.integration
class TestFormatsCommand:

    def test_lists_extensions(self, capsys):
        assert main(["formats"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert ".ttl" in out
        assert "application/n-quads" in out


@pytest.mark.integration
class TestMain:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == ExitCode.ERROR
        assert "inspect" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "ontology-table" in capsys.readouterr().out

    def test_applies_user_collation(self, monkeypatch):
        calls = []
        monkeypatch.setattr(locale, "setlocale", lambda category, name=None: calls.append((category, name)))
        assert main(["formats"]) == ExitCode.SUCCESS
        assert (locale.LC_COLLATE, "") in calls

    def test_unknown_locale_is_not_fatal(self, monkeypatch, capsys):
        def failing(category, name=None):
            raise locale.Error("unsupported locale setting")

        monkeypatch.setattr(locale, "setlocale", failing)
        assert main(["formats"]) == ExitCode.SUCCESS
        assert ".ttl" in capsys.readouterr().out


@pytest.mark.integration
class TestInspectCommand:
    """inspect command"""

    def test_single_file(self, pizza_file, capsys):
        assert main(["inspect", str(pizza_file)]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert "Pizza Ontology" in out
        assert "rdfs:label" in out
        assert "(showing 6 of 6 rows; 6 elements total)" in out
        assert "Processed 1 file(s): 1 succeeded" in out

    def test_query_and_max_rows(self, pizza_file, capsys):
        code = main(["inspect", str(pizza_file), "--query", "topping", "--max-rows", "1"])
        assert code == ExitCode.SUCCESS
        assert "(showing 1 of 2 rows; 6 elements total)" in capsys.readouterr().out

    def test_directory(self, ontology_dir, capsys):
        assert main(["inspect", str(ontology_dir), "--no-progress"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert "✓ animals.nt (animals.nt): 4 triples" in out
        assert "✓ Pizza Ontology (pizza.ttl): 30 triples" in out

    def test_json_output(self, pizza_file, capsys):
        code = main(["inspect", str(pizza_file), "--json", "--sort-column", "0", "--sort-direction", "desc"])
        assert code == ExitCode.SUCCESS

        payload = json.loads(capsys.readouterr().out)
        doc = payload["documents"][0]
        assert doc["metadata"]["ontology_name"] == "Pizza Ontology"
        assert doc["triple_count"] == 30
        assert len(doc["table"]["rows"]) == 6
        assert payload["failures"] == []

    def test_parse_failure_continues(self, tmp_path, pizza_file, capsys):
        broken = tmp_path / "broken.ttl"
        broken.write_text(MALFORMED_TTL, encoding="utf-8")

        code = main(["inspect", str(broken), str(pizza_file), "--no-progress"])
        assert code == ExitCode.PARSE_ERROR
        out = capsys.readouterr().out
        assert "✗ broken.ttl" in out
        assert "Pizza Ontology" in out
        assert "2 file(s): 1 succeeded, 1 failed" in out

    def test_badly_encoded_file_does_not_stop_batch(self, tmp_path, pizza_file, capsys):
        latin1 = tmp_path / "latin1.ttl"
        latin1.write_bytes('<http://example.org/cafe> <http://example.org/name> "Café" .\n'.encode("latin-1"))

        code = main(["inspect", str(latin1), str(pizza_file), "--no-progress"])
        assert code == ExitCode.SUCCESS
        out = capsys.readouterr().out
        assert "✓ latin1.ttl (latin1.ttl): 1 triples" in out
        assert "✓ Pizza Ontology (pizza.ttl): 30 triples" in out
        assert "2 file(s): 2 succeeded" in out

    def test_missing_path(self, tmp_path, capsys):
        assert main(["inspect", str(tmp_path / "missing.ttl")]) == ExitCode.FILE_NOT_FOUND
        assert "✗" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, pizza_file, capsys):
        config = tmp_path / "config.json"
        config.write_text("{broken", encoding="utf-8")
        code = main(["inspect", str(pizza_file), "--config", str(config)])
        assert code == ExitCode.CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().out

    def test_display_config_applies(self, tmp_path, pizza_file, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"display": {"max_rows": 3, "progress": False}}), encoding="utf-8")
        assert main(["inspect", str(pizza_file), "--config", str(config)]) == ExitCode.SUCCESS
        assert "(showing 3 of 6 rows; 6 elements total)" in capsys.readouterr().out

    def test_custom_batch_runner(self, pizza_file, capsys):
        calls = []

        def runner(documents, show_progress=False):
            calls.append([name for name, _ in documents])
            return BatchResult()

        args = type("Args", (), {})()
        args.paths = [str(pizza_file)]
        args.recursive = False
        args.no_progress = True
        args.log_level = None
        args.json = False
        args.query = ""
        args.sort_column = None
        args.sort_direction = "asc"
        args.max_rows = None
        args.max_cell_width = None

        assert InspectCommand(batch_runner=runner).execute(args) == ExitCode.SUCCESS
        assert calls == [["pizza.ttl"]]


@pytest.mark.integration
class TestExportCommand:
    """export command"""

    def test_writes_csv(self, tmp_path, pizza_file, capsys):
        out_dir = tmp_path / "exports"
        assert main(["export", str(pizza_file), "--output-dir", str(out_dir)]) == ExitCode.SUCCESS

        target = out_dir / "PizzaOntology.csv"
        rows = list(csv.reader(io.StringIO(target.read_text(encoding="utf-8"))))
        assert rows[0][:3] == ["iri", "rdf:type", "rdfs:label"]
        assert len(rows) == 7
        assert "✓ Exported 6 rows" in capsys.readouterr().out

    def test_filename_falls_back_for_unnamed(self, tmp_path, ontology_dir):
        out_dir = tmp_path / "exports"
        code = main(["export", str(ontology_dir), "-o", str(out_dir), "--no-progress"])
        assert code == ExitCode.SUCCESS
        assert sorted(p.name for p in out_dir.iterdir()) == ["AnimalsNt.csv", "PizzaOntology.csv"]

    def test_sorted_export(self, tmp_path, pizza_file):
        out_dir = tmp_path / "exports"
        main(["export", str(pizza_file), "-o", str(out_dir), "--query", "owl#Class",
              "--sort-column", "0", "--sort-direction", "desc"])
        rows = list(csv.reader(io.StringIO((out_dir / "PizzaOntology.csv").read_text(encoding="utf-8"))))
        assert [r[0] for r in rows[1:]] == [
            "http://example.org/pizza#Topping",
            "http://example.org/pizza#Pizza",
            "http://example.org/pizza#Margherita",
        ]

    def test_output_dir_from_config(self, tmp_path, pizza_file):
        out_dir = tmp_path / "from-config"
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"export": {"output_dir": str(out_dir)}}), encoding="utf-8")
        assert main(["export", str(pizza_file), "-c", str(config)]) == ExitCode.SUCCESS
        assert (out_dir / "PizzaOntology.csv").exists()

    def test_output_dir_is_file(self, tmp_path, pizza_file, capsys):
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("", encoding="utf-8")
        assert main(["export", str(pizza_file), "-o", str(not_a_dir)]) == ExitCode.ERROR
