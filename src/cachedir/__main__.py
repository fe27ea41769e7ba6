from cachedir.cli import run

run()
