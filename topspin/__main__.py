from topspin.cli import run

run()
