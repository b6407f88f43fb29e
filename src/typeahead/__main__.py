from typeahead.main import cli

cli()
