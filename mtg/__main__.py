from mtg.main import app

app(prog_name="mtg")
