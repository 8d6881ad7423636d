from turbotest.cli.main import cli

cli()
