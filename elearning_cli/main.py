import click

from elearning_cli import config
from elearning_cli.registry import Registry
from elearning_cli.seed import print_listings, seed_demo_data
from elearning_cli.shell import Shell
from elearning_cli.utils.logging_config import configure_from_env


def build_registry(seed: bool) -> Registry:
    registry = Registry()
    if seed:
        seed_demo_data(registry)
    return registry


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    configure_from_env()
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@cli.command()
@click.option(
    "--seed/--no-seed",
    default=lambda: config.SEED_DEMO_DATA,
    help="Load the demo instructor, courses, student and enrollment first",
)
def shell(seed: bool) -> None:
    """Start the interactive shell over a fresh in-memory registry."""
    registry = build_registry(seed)
    print_listings(registry)
    Shell(registry).run()


@cli.command()
def demo() -> None:
    """Seed the demo data, print every listing and exit."""
    registry = build_registry(seed=True)
    print_listings(registry)


if __name__ == "__main__":
    cli()
