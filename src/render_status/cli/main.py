"""Command-line entry point for render-deploy-status."""

import click

from render_status import __version__
from render_status.cli.commands.parse import parse
from render_status.cli.commands.watch import watch


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="render-deploy-status")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Mirror Render PR preview deploys onto GitHub.

    Commands:

        watch  Poll the deploy announced by a Render comment

        parse  Show how a comment would be parsed
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


main.add_command(watch)
main.add_command(parse)


if __name__ == "__main__":
    main()
