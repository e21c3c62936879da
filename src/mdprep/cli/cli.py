"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdprep.cli.commands import crosspost_cmd, frontmatter_cmd, strip_cmd, tags_cmd, validate_cmd


app = typer.Typer(name="mdprep", no_args_is_help=True, help="Markdown article normalization and pre-submission checks")

app.command(name="validate")(validate_cmd)
app.command(name="frontmatter")(frontmatter_cmd)
app.command(name="tags")(tags_cmd)
app.command(name="strip")(strip_cmd)
app.command(name="crosspost")(crosspost_cmd)
