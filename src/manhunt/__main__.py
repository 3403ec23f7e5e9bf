from manhunt.cli import app

app(prog_name="manhunt")
