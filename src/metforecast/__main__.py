from metforecast.cli import app

app(prog_name="metforecast")
