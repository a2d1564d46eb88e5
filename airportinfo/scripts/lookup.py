import logging
from typing import Optional

import click
from requests import exceptions

from airportinfo.client import AirportInfo
from airportinfo.config import common_conf
from airportinfo.errors import AirportApiHttpError, InvalidCodeError
from airportinfo.utils import setup_logging

logger = logging.getLogger(__name__)

LOOKUP_ERRORS = (InvalidCodeError, AirportApiHttpError, NotImplementedError, exceptions.RequestException)


def error_message(e: Exception) -> str:
    # requests errors embed the request url, which carries the api key
    if isinstance(e, exceptions.RequestException):
        return f"Could not reach the airport API ({type(e).__name__})"
    return str(e)


@click.group()
@click.option("--api-key", default=None, help="api key, overrides the configured one", type=str)
@click.option("--verbose", is_flag=True, help="log requests")
@click.pass_context
def cli(ctx: click.Context, api_key: Optional[str], verbose: bool) -> None:
    setup_logging(level=logging.DEBUG if verbose else logging.INFO)
    if verbose:
        logging.getLogger("airportinfo").setLevel(logging.DEBUG)

    params = common_conf.client_params
    if api_key is not None:
        params["api_key"] = api_key
    ctx.obj = AirportInfo(**params)


@click.command(name="icao")
@click.argument("code")
@click.pass_obj
def icao(client: AirportInfo, code: str) -> None:
    """Look up an airport by its ICAO code"""
    try:
        click.echo(client.find_by_icao(code))
    except LOOKUP_ERRORS as e:
        raise click.ClickException(error_message(e))


@click.command(name="iata")
@click.argument("code")
@click.pass_obj
def iata(client: AirportInfo, code: str) -> None:
    """Look up an airport by its IATA code"""
    try:
        click.echo(client.find_by_iata(code))
    except LOOKUP_ERRORS as e:
        raise click.ClickException(error_message(e))


@click.command(name="lid")
@click.argument("code")
@click.option("--authority", required=True, help="local authority", type=click.Choice(["FAA", "TC"], case_sensitive=False))
@click.pass_obj
def lid(client: AirportInfo, code: str, authority: str) -> None:
    """Look up an airport by its FAA or Transport Canada location identifier"""
    try:
        click.echo(client.find_by_lid(code, authority))
    except LOOKUP_ERRORS as e:
        raise click.ClickException(error_message(e))


@click.command(name="image")
@click.argument("code")
@click.option("--code-type", default="ICAO", help="ICAO, IATA or LID", type=str)
@click.option("--output", required=True, help="file to write the image to", type=click.Path(dir_okay=False))
@click.pass_obj
def image(client: AirportInfo, code: str, code_type: str, output: str) -> None:
    """Download an airport image"""
    try:
        content = client.get_airport_image(code, code_type)
    except LOOKUP_ERRORS as e:
        raise click.ClickException(error_message(e))

    with open(output, "wb") as f:
        f.write(content)
    logger.info(f"Wrote {len(content)} bytes to {output}")


cli.add_command(icao)
cli.add_command(iata)
cli.add_command(lid)
cli.add_command(image)


if __name__ == "__main__":
    cli()
