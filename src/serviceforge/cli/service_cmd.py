"""Service CLI commands: describe and call."""

import importlib
import sys

import click
import yaml

from serviceforge.config import ServiceConfig
from serviceforge.core.service import Service
from serviceforge.errors import ParameterError
from serviceforge.parameters import is_producer


def load_service(target: str, config: ServiceConfig | None = None) -> type[Service]:
    """Import a Service subclass from a ``module:ClassName`` target."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"'{target}' must look like 'package.module:ClassName'", param_hint="TARGET"
        )

    if config is not None:
        for path in reversed(config.service_path):
            if path not in sys.path:
                sys.path.insert(0, path)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Cannot import module '{module_name}': {e}", param_hint="TARGET"
        )

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise click.BadParameter(
                f"'{attr_path}' not found in module '{module_name}'", param_hint="TARGET"
            )

    if not (isinstance(obj, type) and issubclass(obj, Service)):
        raise click.BadParameter(f"'{target}' is not a Service class", param_hint="TARGET")
    return obj


def parse_assignments(assignments: tuple[str, ...]) -> dict:
    """Parse ``name=value`` pairs; values are YAML scalars or collections."""
    arguments = {}
    for item in assignments:
        name, sep, raw = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(
                f"'{item}' must look like name=value", param_hint="--arg"
            )
        try:
            arguments[name] = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise click.BadParameter(f"Cannot parse value for '{name}': {e}", param_hint="--arg")
    return arguments


@click.command()
@click.argument("target")
@click.pass_obj
def describe(config: ServiceConfig, target: str):
    """Show the parameters and before hooks of a service."""
    service = load_service(target, config)

    click.echo(click.style(f"{service.__qualname__} ({service.__module__})", bold=True))

    parameters = service.parameters()
    click.echo(f"\nParameters ({len(parameters)}):")
    for parameter in parameters:
        if parameter.has_default:
            default = parameter.default
            detail = (
                f"default={getattr(default, '__name__', 'callable')}()"
                if is_producer(default)
                else f"default={default!r}"
            )
        else:
            detail = click.style("required", fg="yellow")
        click.echo(f"  {parameter.name}: {parameter.describe_acceptance()}  {detail}")

    hooks = service.before_hooks()
    click.echo(f"\nBefore hooks ({len(hooks)}):")
    for i, ref in enumerate(hooks, 1):
        click.echo(f"  {i}. {ref.label} ({ref.kind.value})")


@click.command("call")
@click.argument("target")
@click.option(
    "--arg",
    "-a",
    "assignments",
    multiple=True,
    help="Parameter assignment as name=value. Values are parsed as YAML.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "text"]),
    default="text",
    show_default=True,
    help="How to print the result.",
)
@click.pass_obj
def call_cmd(config: ServiceConfig, target: str, assignments: tuple[str, ...], output_format: str):
    """Run a service with the given arguments and print its result."""
    service = load_service(target, config)
    arguments = parse_assignments(assignments)

    try:
        result = service.call(**arguments)
    except ParameterError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")

    if output_format == "yaml":
        try:
            click.echo(yaml.safe_dump(result, sort_keys=False).rstrip())
        except yaml.YAMLError:
            raise click.ClickException(
                f"Result of type {type(result).__name__} cannot be rendered as YAML"
            )
    else:
        click.echo(result if isinstance(result, str) else repr(result))
