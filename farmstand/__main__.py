from farmstand.main import run

run()
