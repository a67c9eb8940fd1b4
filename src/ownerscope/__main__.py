from ownerscope.cli.main import cli

cli()
