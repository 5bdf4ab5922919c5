"""
Tests for the `dotdata` command line.
"""
import json
from pathlib import Path
import yaml

from dotdata.cli import main


def invoke(runner, settings_dir: Path, *args: str):
    """Run the CLI with an isolated settings directory."""
    return runner.invoke(main, ["--settings-dir", str(settings_dir), *args])


def test_get_value(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "get", str(doc_path), "b/d/d3")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == "D3"

def test_get_container(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "--indent", "0", "get", str(doc_path), "b.d")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == '{"d1": "D1", "d2": "D2", "d3": "D3"}'

def test_get_missing_reports_error(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "get", str(doc_path), "foo.bar")
    assert result.exit_code == 1
    assert 'No data exists at the given path: "foo » bar"' in result.output

def test_get_with_default(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "get", str(doc_path), "foo.bar", "--default", "false")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) is False

def test_get_empty_path(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "get", str(doc_path), "")
    assert result.exit_code == 1
    assert "Path cannot be an empty string" in result.output

def test_has(runner, settings_dir, doc_path):
    found = invoke(runner, settings_dir, "has", str(doc_path), "f.g.h")
    assert found.exit_code == 0
    assert found.output.strip() == "true"

    missing = invoke(runner, settings_dir, "has", str(doc_path), "b.c.C1")
    assert missing.exit_code == 1
    assert missing.output.strip() == "false"

def test_set_prints_document_and_leaves_file(runner, settings_dir, doc_path):
    before = doc_path.read_text(encoding="utf-8")
    result = invoke(runner, settings_dir, "set", str(doc_path), "x.y", "[1, 2]")
    assert result.exit_code == 0, result.output
    out = json.loads(result.output)
    assert out["x"] == {"y": [1, 2]}
    assert out["a"] == "A"
    assert doc_path.read_text(encoding="utf-8") == before

def test_set_blocked(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "set", str(doc_path), "a.b", "1")
    assert result.exit_code == 1
    assert 'Key path "a"' in result.output

def test_append(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "append", str(doc_path), "c", "c4")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["c"] == ["c1", "c2", "c3", "c4"]

def test_remove(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "remove", str(doc_path), "b.d")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["b"] == {"b": "B", "c": ["C1", "C2", "C3"]}

def test_merge_modes(runner, settings_dir, doc_path, tmp_path):
    other = tmp_path / "other.yaml"
    other.write_text("a: Z\nc: [c4]\nnew: {k: v}\n", encoding="utf-8")

    replaced = json.loads(invoke(runner, settings_dir, "merge", str(doc_path), str(other)).output)
    assert replaced["a"] == "Z"
    assert replaced["c"] == ["c4"]
    assert replaced["new"] == {"k": "v"}

    preserved = json.loads(
        invoke(runner, settings_dir, "merge", str(doc_path), str(other), "--mode", "preserve").output
    )
    assert preserved["a"] == "A"
    assert preserved["c"] == ["c1", "c2", "c3"]

    merged = json.loads(
        invoke(runner, settings_dir, "merge", str(doc_path), str(other), "--mode", "merge").output
    )
    assert merged["c"] == ["c1", "c2", "c3", "c4"]

def test_inspect(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "inspect", str(doc_path), "b.d")
    assert result.exit_code == 0, result.output
    info = json.loads(result.output)
    assert info["exists"] is True
    assert info["kind"] == "container"
    assert info["size"] == 3
    assert info["keys"] == ["d1", "d2", "d3"]
    assert info["depth"] == 2

def test_inspect_missing(runner, settings_dir, doc_path):
    info = json.loads(invoke(runner, settings_dir, "inspect", str(doc_path), "nope").output)
    assert info["exists"] is False
    assert info["kind"] is None

def test_yaml_output(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "-o", "yaml", "get", str(doc_path), "b.d")
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"d1": "D1", "d2": "D2", "d3": "D3"}

def test_yaml_input_by_extension(runner, settings_dir, tmp_path):
    doc = tmp_path / "doc.yml"
    doc.write_text("server:\n  port: 8080\n", encoding="utf-8")
    result = invoke(runner, settings_dir, "get", str(doc), "server/port")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == 8080

def test_non_mapping_document(runner, settings_dir, tmp_path):
    doc = tmp_path / "list.json"
    doc.write_text("[1, 2]", encoding="utf-8")
    result = invoke(runner, settings_dir, "get", str(doc), "a")
    assert result.exit_code == 1
    assert "must be a mapping" in result.output

def test_settings_set_and_show(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "settings", "set", "output_format", "yaml")
    assert result.exit_code == 0, result.output
    assert json.loads((settings_dir / "settings.json").read_text())["output_format"] == "yaml"

    shown = invoke(runner, settings_dir, "settings", "show")
    assert yaml.safe_load(shown.output)["output_format"] == "yaml"

    # Saved format now applies to other commands
    got = invoke(runner, settings_dir, "get", str(doc_path), "b.d")
    assert yaml.safe_load(got.output) == {"d1": "D1", "d2": "D2", "d3": "D3"}

def test_settings_set_rejects_unknown_key(runner, settings_dir):
    result = invoke(runner, settings_dir, "settings", "set", "colour", "blue")
    assert result.exit_code == 1
    assert "Unknown setting 'colour'" in result.output

def test_settings_set_rejects_bad_value(runner, settings_dir):
    result = invoke(runner, settings_dir, "settings", "set", "output_format", "xml")
    assert result.exit_code == 1
    assert "Unknown output format" in result.output

def test_date_in_yaml_document(runner, settings_dir, tmp_path):
    doc = tmp_path / "doc.yaml"
    doc.write_text("when: 2024-01-01\nlog:\n  at: 2024-01-01 10:30:00\n", encoding="utf-8")

    result = invoke(runner, settings_dir, "get", str(doc), "when")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == "2024-01-01"

    result = invoke(runner, settings_dir, "get", str(doc), "log")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"at": "2024-01-01T10:30:00"}

def test_date_as_value_argument(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "set", str(doc_path), "x", "2024-01-01")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["x"] == "2024-01-01"

def test_date_kept_as_date_in_yaml_output(runner, settings_dir, doc_path):
    result = invoke(runner, settings_dir, "-o", "yaml", "set", str(doc_path), "x", "2024-01-01")
    assert result.exit_code == 0, result.output
    assert "x: 2024-01-01" in result.output
