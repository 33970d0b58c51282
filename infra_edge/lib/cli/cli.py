import json
import logging

import click

from infra_edge.lib.links import Resource, ResourceNotLinkedError


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command(name="list")
def list_links():
    """List the names of the linked resources"""
    for name in sorted(Resource):
        click.echo(name)


@cli.command()
@click.argument("name")
@click.option("--raw", is_flag=True, help="Print the JSON value only")
def get(name, raw):
    """Print the value of a linked resource"""
    try:
        value = json.dumps(Resource[name], indent=2, sort_keys=True)
    except ResourceNotLinkedError as e:
        raise click.ClickException(str(e))

    if raw:
        click.echo(value)
    else:
        echo_key_value(name, value)


def run():
    exit(cli())


if __name__ == "__main__":
    run()
