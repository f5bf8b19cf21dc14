from fileheader.cli import cli

cli()
