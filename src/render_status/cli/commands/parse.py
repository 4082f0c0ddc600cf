"""CLI command for checking how a comment is parsed."""

from __future__ import annotations

import json
import sys
from typing import TextIO

import click

from render_status.lib.errors import CommentParseError
from render_status.parser.comment import parse_comment


@click.command(name="parse")
@click.argument("comment_file", type=click.File("r"), default="-", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the identity as JSON")
def parse(comment_file: TextIO, as_json: bool) -> None:
    """Parse a Render PR comment and print the service identity.

    COMMENT_FILE is a file holding the comment body; reads stdin by default.

    Exit codes: 0 when parsed or skipped, 2 when a Render comment is
    missing a field.

    Example:

        render-deploy-status parse comment.txt --json
    """
    text = comment_file.read()

    try:
        identity = parse_comment(text)
    except CommentParseError as e:
        click.secho(f"Error: {e.message}", fg="red", err=True)
        sys.exit(2)

    if identity is None:
        click.secho("Not a Render comment, skipping", fg="yellow")
        return

    if as_json:
        click.echo(json.dumps(identity.model_dump(mode="json"), indent=2))
        return

    click.echo(f"  Server URL:    {identity.server_url}")
    click.echo(f"  Service name:  {identity.service_name}")
    click.echo(f"  Service ID:    {identity.service_id}")
    click.echo(f"  Dashboard URL: {identity.dashboard_url}")
