from devcycle.cli import run

run()
