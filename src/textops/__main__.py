from textops.cli import cli

cli()
