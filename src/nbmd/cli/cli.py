"""CLI entrypoint: Typer app definition and command registration"""

import typer

from nbmd.cli.commands import meta_cmd, render_cmd, toc_cmd


app = typer.Typer(name="nbmd", no_args_is_help=True, help="Notebook markdown to HTML renderer")

app.command(name="render")(render_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="meta")(meta_cmd)
