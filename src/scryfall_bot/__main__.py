from scryfall_bot.main import run

run()
