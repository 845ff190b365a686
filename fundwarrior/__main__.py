from fundwarrior.cli import run

run()
