"""Tests for serviceforge CLI commands."""

import sys
import textwrap

import pytest
from click.testing import CliRunner

from serviceforge.cli.main import cli

MODULE_NAME = "cli_sample_services"

SAMPLE_SERVICES = textwrap.dedent(
    """
    from serviceforge import Param, Service, before_hook


    class ComplexCalculation(Service):
        start_number = Param(int)
        end_number = Param(int, default=2)

        @before_hook
        def _set_magic_number(self):
            self._magic_number = 42

        def perform(self):
            return self.start_number + self.end_number + self._magic_number


    class Greeting(Service):
        name = Param(str)
        message = Param(str, default=lambda svc: "Hello, " + svc.name)

        def perform(self):
            return {"message": self.message, "length": len(self.message)}


    class Unrenderable(Service):
        def perform(self):
            return object()


    NOT_A_SERVICE = 42
    """
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def service_path(tmp_path, monkeypatch):
    """Write sample services to a temp dir exposed via SERVICEFORGE_SERVICE_PATH."""
    (tmp_path / f"{MODULE_NAME}.py").write_text(SAMPLE_SERVICES)
    monkeypatch.setenv("SERVICEFORGE_SERVICE_PATH", str(tmp_path))
    monkeypatch.delitem(sys.modules, MODULE_NAME, raising=False)
    monkeypatch.setattr(sys, "path", list(sys.path))
    return tmp_path


class TestDescribe:
    def test_lists_parameters_and_hooks(self, runner, service_path):
        result = runner.invoke(cli, ["describe", f"{MODULE_NAME}:ComplexCalculation"])
        assert result.exit_code == 0, result.output
        assert "ComplexCalculation" in result.output
        assert "Parameters (2):" in result.output
        assert "start_number: int  required" in result.output
        assert "end_number: int  default=2" in result.output
        assert "1. _set_magic_number (method)" in result.output

    def test_producer_default(self, runner, service_path):
        result = runner.invoke(cli, ["describe", f"{MODULE_NAME}:Greeting"])
        assert result.exit_code == 0, result.output
        assert "message: str  default=<lambda>()" in result.output
        assert "Before hooks (0):" in result.output

    def test_bad_target_format(self, runner, service_path):
        result = runner.invoke(cli, ["describe", "no_colon_here"])
        assert result.exit_code == 2
        assert "package.module:ClassName" in result.output

    def test_missing_module(self, runner, service_path):
        result = runner.invoke(cli, ["describe", "does_not_exist_anywhere:Thing"])
        assert result.exit_code == 2
        assert "Cannot import module" in result.output

    def test_missing_class(self, runner, service_path):
        result = runner.invoke(cli, ["describe", f"{MODULE_NAME}:Nope"])
        assert result.exit_code == 2
        assert "not found" in result.output

    def test_not_a_service(self, runner, service_path):
        result = runner.invoke(cli, ["describe", f"{MODULE_NAME}:NOT_A_SERVICE"])
        assert result.exit_code == 2
        assert "is not a Service class" in result.output


class TestCall:
    def test_call_with_arguments(self, runner, service_path):
        result = runner.invoke(
            cli,
            ["call", f"{MODULE_NAME}:ComplexCalculation", "-a", "start_number=1", "-a", "end_number=3"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "46"

    def test_call_uses_default(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:ComplexCalculation", "--arg", "start_number=1"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "45"

    def test_missing_required(self, runner, service_path):
        result = runner.invoke(cli, ["call", f"{MODULE_NAME}:ComplexCalculation"])
        assert result.exit_code == 1
        assert "ParameterRequired: Missing required arguments: start_number" in result.output

    def test_quoted_value_stays_string(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:ComplexCalculation", "-a", "start_number='1'"]
        )
        assert result.exit_code == 1
        assert "InvalidParameterValue" in result.output

    def test_unknown_parameter(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:ComplexCalculation", "-a", "bogus=1"]
        )
        assert result.exit_code == 1
        assert "UnknownParameter: Parameter bogus unknown" in result.output

    def test_malformed_assignment(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:ComplexCalculation", "-a", "start_number"]
        )
        assert result.exit_code == 2
        assert "name=value" in result.output

    def test_blank_parameter_name(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:ComplexCalculation", "-a", " =1"]
        )
        assert result.exit_code == 2
        assert "name=value" in result.output
        assert "UnknownParameter" not in result.output

    def test_yaml_output(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:Greeting", "-a", "name=Ada", "--format", "yaml"]
        )
        assert result.exit_code == 0, result.output
        assert "message: Hello, Ada" in result.output
        assert "length: 10" in result.output

    def test_text_output_for_string(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:Greeting", "-a", "name=Ada", "-a", "message=Hi"]
        )
        assert result.exit_code == 0, result.output
        assert "'message': 'Hi'" in result.output

    def test_unrenderable_yaml(self, runner, service_path):
        result = runner.invoke(
            cli, ["call", f"{MODULE_NAME}:Unrenderable", "--format", "yaml"]
        )
        assert result.exit_code == 1
        assert "cannot be rendered as YAML" in result.output


class TestLogLevel:
    def test_invalid_log_level(self, runner, service_path):
        result = runner.invoke(
            cli, ["--log-level", "loud", "describe", f"{MODULE_NAME}:Greeting"]
        )
        assert result.exit_code == 2
        assert "Unknown log level" in result.output
