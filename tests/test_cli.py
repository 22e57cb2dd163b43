import json

from typer.testing import CliRunner

from checkfields.cli import app
from checkfields.loader import load_document

runner = CliRunner()

SCHEMA_TOML = """
[name]
type = "string"

[tags]
type = "array"
value = [{ label = { type = "string" } }]
"""


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_document_toml(tmp_path):
    schema = load_document(write(tmp_path, "schema.toml", SCHEMA_TOML))
    assert schema["tags"]["value"][0]["label"] == {"type": "string"}


def test_check_ok(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": "x", "tags": [{"label": "a"}]}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["check", data, schema])
    assert result.exit_code == 0
    assert "OK" in result.stdout


def test_check_reports_reason(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": 5, "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["check", data, schema])
    assert result.exit_code == 1
    assert "DATA_FIELD_INVALID_TYPE" in result.stdout


def test_check_with_error_overrides(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": 5, "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    errors = write(tmp_path, "errors.toml", '[data_field_invalid_type]\nreason = "BAD_TYPE"\n')
    result = runner.invoke(app, ["check", data, schema, "--errors", errors])
    assert result.exit_code == 1
    assert "BAD_TYPE" in result.stdout


def test_unsupported_document(tmp_path):
    data = write(tmp_path, "data.yaml", "name: x\n")
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["check", data, schema])
    assert result.exit_code == 2


def test_failure_record_is_json(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": 5, "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["check", data, schema])
    record = json.loads(result.stdout.split("\n", 1)[1])
    assert record["field"]["key"] == "name"


def test_verbose_logs_loading(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": "x", "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["-v", "check", data, schema])
    assert result.exit_code == 0
    assert "checkfields.loader - DEBUG - Loading" in result.output


def test_malformed_json(tmp_path):
    data = write(tmp_path, "data.json", "{bad")
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    result = runner.invoke(app, ["check", data, schema])
    assert result.exit_code == 2


def test_malformed_toml(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": "x", "tags": []}))
    schema = write(tmp_path, "schema.toml", "[name\ntype = ")
    result = runner.invoke(app, ["check", data, schema])
    assert result.exit_code == 2


def test_overrides_must_be_a_table(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": "x", "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    errors = write(tmp_path, "errors.json", json.dumps(["DATA_FIELDS_MISSING"]))
    result = runner.invoke(app, ["check", data, schema, "--errors", errors])
    assert result.exit_code == 2


def test_slot_override_must_be_a_table(tmp_path):
    data = write(tmp_path, "data.json", json.dumps({"name": "x", "tags": []}))
    schema = write(tmp_path, "schema.toml", SCHEMA_TOML)
    errors = write(tmp_path, "errors.toml", 'data_fields_missing = "GONE"\n')
    result = runner.invoke(app, ["check", data, schema, "--errors", errors])
    assert result.exit_code == 2
