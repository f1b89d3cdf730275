from randints.main import run

run()
