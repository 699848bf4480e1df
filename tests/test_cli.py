"""Tests for the command line."""

import json

import pytest
import yaml

from gtfs2openapi.__main__ import guess_output_type, main


class TestMain:

    def test_yaml_to_stdout(self, catalog_file, capsys):
        assert main([str(catalog_file)]) == 0
        document = yaml.safe_load(capsys.readouterr().out)
        assert document["openapi"] == "3.0.3"
        schemas = document["components"]["schemas"]
        assert schemas["Stop"]["required"] == ["stop_id"]
        assert schemas["Stop"]["properties"]["stop_lat"]["$ref"] == "#/components/schemas/Latitude"

    def test_json_output_file(self, catalog_file, tmp_path, capsys):
        output = tmp_path / "out" / "openapi.json"
        assert main([str(catalog_file), "-o", str(output)]) == 0
        assert "Wrote OPENAPI" in capsys.readouterr().out
        document = json.loads(output.read_text(encoding="utf-8"))
        assert "Color" in document["components"]["schemas"]

    def test_bare_schema_map(self, catalog_file, capsys):
        assert main([str(catalog_file), "--format", "schemas", "--registry", "inline",
                     "--naming", "raw", "--output-type", "json"]) == 0
        schemas = json.loads(capsys.readouterr().out)
        assert list(schemas) == ["stops", "frequencies", "agency"]
        assert schemas["stops"]["properties"]["stop_lat"]["format"] == "double"

    def test_info_options(self, catalog_file, capsys):
        assert main([str(catalog_file), "--title", "My feed", "--api-version", "3.1"]) == 0
        info = yaml.safe_load(capsys.readouterr().out)["info"]
        assert info["title"] == "My feed"
        assert info["version"] == "3.1"

    def test_output_is_identical_across_runs(self, catalog_file, tmp_path):
        first = tmp_path / "first.yaml"
        second = tmp_path / "second.yaml"
        assert main([str(catalog_file), "-o", str(first)]) == 0
        assert main([str(catalog_file), "-o", str(second)]) == 0
        assert first.read_bytes() == second.read_bytes()

    def test_unknown_type_writes_nothing(self, tmp_path, catalog, capsys):
        catalog[1]["properties"][2]["type"] = "banana"
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog), encoding="utf-8")
        output = tmp_path / "openapi.yaml"
        output.write_text("previous", encoding="utf-8")

        assert main([str(path), "-o", str(output)]) == 1
        assert "banana" in capsys.readouterr().err
        assert output.read_text(encoding="utf-8") == "previous"

    def test_missing_catalog(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert capsys.readouterr().out.strip()


@pytest.mark.parametrize("output, expected", [
    (None, "yaml"),
    ("openapi.yaml", "yaml"),
    ("openapi.JSON", "json"),
    ("out/schemas.json", "json"),
])
def test_guess_output_type(output, expected):
    assert guess_output_type(output) == expected
