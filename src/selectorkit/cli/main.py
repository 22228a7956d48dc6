"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging

import click

from selectorkit import __version__
from selectorkit.builder import css_selector_builder
from selectorkit.errors import NotAnObjectError, SelectorError
from selectorkit.jsonproto import from_json, to_json
from selectorkit.model.part import Combinator
from selectorkit.selector import Renderable
from selectorkit.shapes import Rectangle

_COMBINATORS = {c.value for c in Combinator if c is not Combinator.DESCENDANT}


class Number(click.ParamType):
    """An int when the text is integral, otherwise a float."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = Number()


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """selectorkit - build CSS selectors from the command line."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _split_part(token: str) -> tuple[str, str]:
    kind, sep, value = token.partition(":")
    if not sep:
        raise click.BadParameter(
            f"expected KIND:VALUE or a combinator, got {token!r}", param_hint="TOKENS"
        )
    return kind, value


def _is_combinator(token: str) -> bool:
    return token in _COMBINATORS or (token != "" and token.strip() == "")


def assemble(tokens: tuple[str, ...]) -> Renderable:
    """Turn CLI tokens into a renderable selector.

    Part tokens accumulate into one compound selector; a combinator token
    closes it and starts the next.
    """
    operands: list[Renderable | str] = []
    pending: list[tuple[str, str]] = []
    for token in tokens:
        if _is_combinator(token):
            if not pending:
                raise click.BadParameter(
                    f"combinator {token!r} has no selector on its left", param_hint="TOKENS"
                )
            operands.append(css_selector_builder.build(pending))
            operands.append(token)
            pending = []
        else:
            pending.append(_split_part(token))
    if not pending:
        raise click.BadParameter("expected a selector after the last combinator", param_hint="TOKENS")
    operands.append(css_selector_builder.build(pending))
    first, *rest = operands
    return css_selector_builder.chain(first, *rest)  # type: ignore[arg-type]


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND:VALUE parts and combinators.

    Example: selectorkit build element:div id:main + element:table class:data
    """
    try:
        selector = assemble(tokens)
    except SelectorError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(selector.render())


@cli.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
def rectangle(width: int | float, height: int | float) -> None:
    """Print a rectangle as JSON together with its area."""
    rect = Rectangle(width, height)
    click.echo(to_json(rect))
    click.echo(f"area: {rect.area():g}")


@cli.command()
@click.argument("text")
def rehydrate(text: str) -> None:
    """Decode a JSON object as a Rectangle and print its area."""
    try:
        record = from_json(Rectangle, text)
        area = record.area()
    except (json.JSONDecodeError, NotAnObjectError, AttributeError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"area: {area:g}")


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, debug: bool) -> None:
    """Start the selector web API."""
    from dataclasses import replace

    from selectorkit.config import SelectorKitConfig
    from selectorkit.web.app import create_app

    config = SelectorKitConfig.from_env()
    config = replace(
        config,
        host=host or config.host,
        port=port if port is not None else config.port,
    )
    app = create_app(config=config)
    click.echo(f"Starting selectorkit on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
