"""CLI entrypoint: Typer app definition and command registration"""

import typer

from fileinspect.cli.commands import diff_cmd, hash_cmd, info_cmd, main_callback, summary_cmd, walk_cmd


app = typer.Typer(name="fileinspect", no_args_is_help=True, help="File inspection and line diff utilities")

app.callback()(main_callback)
app.command(name="diff")(diff_cmd)
app.command(name="summary")(summary_cmd)
app.command(name="walk")(walk_cmd)
app.command(name="info")(info_cmd)
app.command(name="hash")(hash_cmd)
