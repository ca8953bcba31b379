from logmerge.cli import app

app(prog_name="logmerge")
