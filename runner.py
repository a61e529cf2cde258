import logging
import sys
from typing import Optional

import click

from patterns.exceptions import InvalidArgumentException, validate_size
from patterns.execution import run_verification_given_config
from patterns.renderer.config import get_config
from patterns.renderer.core import Renderer


def _parse_size(value: str) -> int:
    """
    Turn the raw --size text into a pattern size.

    :raises InvalidArgumentException: for non-numeric text and non-positive numbers
    """
    try:
        size = int(value)
    except ValueError:
        raise InvalidArgumentException(value)
    return validate_size(size)


def _print_pattern(renderer: Renderer, size: int, show_regions: bool):
    click.echo(renderer.generate_banner())
    if show_regions:
        click.echo(renderer.generate_preamble(size), nl=False)
    if renderer.pattern_label is not None:
        click.echo(renderer.pattern_label)
    renderer.function(size)


def _print_examples(renderer: Renderer):
    click.echo("\nExamples of other sizes:")
    click.echo("------------------------")
    for example_size in renderer.example_sizes:
        click.echo(f"\nn = {example_size}:")
        renderer.function(example_size)


def _print_listing(renderer: Renderer):
    click.echo(f"{renderer.name}: {renderer.title}")
    click.echo(f"    {renderer.description.strip()}")
    click.echo(f"    n: {renderer.size.description.strip()}")


@click.command()
@click.option(
    "--pattern",
    "-p",
    multiple=True,
    type=click.Choice(["triangle", "square"]),
    help="Specify patterns to work on. Can be used multiple times.",
)
@click.option(
    "--size",
    "-s",
    type=str,
    help="Size parameter n of the pattern to print.",
)
@click.option(
    "--regions/--no-regions",
    default=True,
    help="Show the diagonal region map before small concentric squares.",
)
@click.option(
    "--examples",
    is_flag=True,
    help="Print each pattern at its example sizes.",
)
@click.option(
    "--list",
    "list_patterns",
    is_flag=True,
    help="Describe the selected patterns and their size parameter.",
)
@click.option(
    "--verify",
    is_flag=True,
    help="Check the rendered patterns against the nested-loop references.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging.",
)
def main(
    pattern: Optional[list[str]] = None,
    size: Optional[str] = None,
    regions: bool = True,
    examples: bool = False,
    list_patterns: bool = False,
    verify: bool = False,
    debug: bool = False,
):
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    config = get_config()
    renderers: list[Renderer] = config.get_renderers(pattern)

    if verify:
        if not run_verification_given_config(config, [r.name for r in renderers]):
            sys.exit(1)
        return

    if list_patterns:
        for renderer in renderers:
            _print_listing(renderer)
        return

    if size is None and not examples:
        raise click.UsageError(
            "Either --size, --examples, --list or --verify is required."
        )

    if size is not None:
        # Reject invalid sizes before any banner or pattern is printed
        try:
            parsed_size: int = _parse_size(size)
        except InvalidArgumentException as e:
            click.echo(e.message)
            sys.exit(1)

        for renderer in renderers:
            _print_pattern(renderer, parsed_size, show_regions=regions)

    if examples:
        for renderer in renderers:
            _print_examples(renderer)


if __name__ == "__main__":
    main()
