"""CLI entrypoint: Typer app definition and command registration"""

import typer

from blogpub.cli.commands import (
    categories_cmd,
    check_cmd,
    export_cmd,
    list_cmd,
    show_cmd,
    slugs_cmd,
    tags_cmd,
)


app = typer.Typer(name="blogpub", no_args_is_help=True, help="Markdown blog content pipeline")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="tags")(tags_cmd)
app.command(name="categories")(categories_cmd)
app.command(name="slugs")(slugs_cmd)
app.command(name="check")(check_cmd)
app.command(name="export")(export_cmd)
