"""Tests for the supertoml command line."""

import json
import tomllib

import pytest
from click.testing import CliRunner

from supertoml import __version__
from supertoml.cli import cli


@pytest.fixture
def runner(clear_env):
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(write_document):
    return write_document(
        """
        [base]
        host = "localhost"

        [app]
        _.before = ["base"]
        port = 8080
        url = "http://{{ host }}:{{ port }}"
        format = "{{ _.args.output_format }}"
        """
    )


class TestCLIMain:
    """Test argument handling."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "supertoml" in result.output

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "TABLE_NAME" in result.output

    def test_missing_arguments(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 2

    def test_unknown_output_format(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app", "--output", "yaml"])

        assert result.exit_code == 2


class TestCLIOutput:
    """Test resolving and printing a table."""

    def test_default_toml(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app"])

        assert result.exit_code == 0
        assert tomllib.loads(result.output) == {
            "format": "toml",
            "host": "localhost",
            "port": 8080,
            "url": "http://localhost:8080",
        }

    def test_json(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app", "-o", "json"])

        assert result.exit_code == 0
        values = json.loads(result.output)
        assert values["url"] == "http://localhost:8080"
        assert values["format"] == "json"

    def test_dotenv(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app", "--output", "dotenv"])

        assert result.exit_code == 0
        assert result.output == (
            "format=dotenv\nhost=localhost\nport=8080\nurl=http://localhost:8080\n"
        )

    def test_output_from_environment(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app"], env={"SUPERTOML_OUTPUT": "exports"})

        assert result.exit_code == 0
        assert 'export "port=8080"' in result.output

    def test_option_overrides_environment(self, runner, config_file):
        result = runner.invoke(
            cli, [str(config_file), "app", "-o", "tfvars"], env={"SUPERTOML_OUTPUT": "json"}
        )

        assert result.exit_code == 0
        assert "port = 8080" in result.output


class TestCLIErrors:
    """Test error reporting."""

    def test_missing_file(self, runner, temp_dir):
        result = runner.invoke(cli, [str(temp_dir / "missing.toml"), "app"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Failed to read file" in result.output

    def test_missing_table(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "nope"])

        assert result.exit_code == 1
        assert "Table 'nope' not found" in result.output

    def test_cycle(self, runner, write_document):
        path = write_document(
            """
            [a]
            _.before = ["b"]

            [b]
            _.before = ["a"]
            """
        )

        result = runner.invoke(cli, [str(path), "a"])

        assert result.exit_code == 1
        assert "Cycle detected when processing table 'a'" in result.output

    def test_invalid_setting(self, runner, config_file):
        result = runner.invoke(cli, [str(config_file), "app"], env={"SUPERTOML_MAX_DEPTH": "many"})

        assert result.exit_code == 1
        assert "SUPERTOML_MAX_DEPTH" in result.output

    @pytest.mark.parametrize("output_format", ["toml", "tfvars", "dotenv"])
    def test_null_value_in_yaml(self, runner, write_document, output_format):
        path = write_document("app:\n  x: null\n  y: 1\n", name="config.yaml")

        result = runner.invoke(cli, [str(path), "app", "-o", output_format])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "null values are not supported" in result.output

    def test_undecodable_document(self, runner, temp_dir):
        path = temp_dir / "binary.toml"
        path.write_bytes(b'[app]\nx = "\xff\xfe"\n')

        result = runner.invoke(cli, [str(path), "app"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Failed to parse document" in result.output
