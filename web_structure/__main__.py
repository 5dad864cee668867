from web_structure.cli import cli

cli()
