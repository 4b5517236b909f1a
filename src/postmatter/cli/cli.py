"""CLI entrypoint: Typer app definition and command registration"""

import typer

from postmatter.cli.commands import check_cmd, directives_cmd, export_cmd, show_cmd


app = typer.Typer(name="postmatter", no_args_is_help=True, help="Front-matter content loader for static-site posts")

app.command(name="show")(show_cmd)
app.command(name="check")(check_cmd)
app.command(name="export")(export_cmd)
app.command(name="directives")(directives_cmd)
