#!/usr/bin/env python
import json
import logging
import os
import sys

import click

import autonames.config_loader as config_loader
from autonames.driver import NamingDriver
from autonames.exceptions import AutoNamesError
from autonames.rule_table import default_rule_table, describe_rules


__version__ = "0.1"


def my_excepthook(exc_type, exc_value, exc_traceback):
    print(f"Unhandled error: {exc_type}, {exc_value}, {exc_traceback}")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _echo_warning(msg: str) -> None:
    click.echo(click.style(f"  WARNING: {msg}", fg="yellow"))


def _fail(err: Exception, debug: bool) -> None:
    if debug:
        raise err
    click.echo(click.style(f"\n  ERROR: {err}\n", fg="red", bold=True))
    sys.exit(1)


def _validate_template(template: str) -> None:
    if not template.endswith(".json"):
        click.echo(
            click.style(
                f"\nERROR: {template} is not a JSON template. Please pass a CloudFormation .json file.\n",
                fg="red",
                bold=True,
            )
        )
        sys.exit(1)


def _load_driver(service: str) -> NamingDriver:
    service_data = config_loader.load_service_file(service)
    driver = NamingDriver(
        service_data,
        service_path=os.path.dirname(os.path.abspath(service)),
        diagnostics=_echo_warning,
    )
    if not driver.is_aws_template:
        click.echo(
            click.style(
                "\nERROR: Service provider is not aws, nothing to name.\n",
                fg="red",
                bold=True,
            )
        )
        sys.exit(1)
    driver.initialize_config()
    return driver


@click.version_option(version=__version__, prog_name="cfnautonames")
@click.group()
def cli():
    """
    cfnautonames generates readable resource names for CloudFormation templates

    For help with a specific command type:

    cfnautonames [COMMAND] --help

    """
    pass


@cli.command()
@click.option("--debug", is_flag=True, default=False, help="Dump exception tracebacks")
@click.option(
    "--service",
    default="serverless.yml",
    help="Service definition holding custom.awsAutoResourceNames",
)
@click.option("--template", required=True, help="CloudFormation JSON template to name")
@click.option(
    "--outfile",
    default=None,
    help="Write the named template here instead of updating it in place",
)
def apply(debug, service, template, outfile):
    """Inserts resource names into a CloudFormation template"""
    if not debug:
        sys.excepthook = my_excepthook
    _configure_logging(debug)
    _validate_template(template)
    try:
        driver = _load_driver(service)
        cf_template = config_loader.load_template_file(template)
        driver.apply_on_template(cf_template)
        outfile = outfile or template
        config_loader.write_template_file(outfile, cf_template)
    except (AutoNamesError, OSError, json.JSONDecodeError) as e:
        _fail(e, debug)
        return
    click.echo(f"\nNamed {len(cf_template.get('Resources') or {})} resources into {outfile}")
    click.echo("\nCompleted!")


@cli.command()
@click.option("--debug", is_flag=True, default=False, help="Dump exception tracebacks")
@click.option(
    "--service",
    default="serverless.yml",
    help="Service definition holding custom.awsAutoResourceNames",
)
def functions(debug, service):
    """Lists the generated name of every service function as JSON"""
    if not debug:
        sys.excepthook = my_excepthook
    _configure_logging(debug)
    try:
        driver = _load_driver(service)
        names = driver.function_names()
    except (AutoNamesError, OSError) as e:
        _fail(e, debug)
        return
    click.echo(json.dumps(names, indent=4, sort_keys=True))


@cli.command()
def rules():
    """Lists the resource types that receive generated names"""
    click.echo(click.style("\nNaming rules:\n", fg="white", bold=True))
    for rule in describe_rules(default_rule_table()):
        if rule["naming"]:
            click.echo(f"  {rule['type']:<45} {rule['property']}")
        else:
            click.echo(f"  {rule['type']:<45} (no name)")


if __name__ == "__main__":
    cli()
