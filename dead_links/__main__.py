from dead_links.cli import cli

cli()
