from schedconf.main import run

run()
