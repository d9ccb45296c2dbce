from clipp.presentation.cli.app import app

app(prog_name="clipp")
