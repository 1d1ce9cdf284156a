import asyncio

from scryfall_bot.formatter import LEGALITY_FORMATS, CardFormatter, clip


class FakeLookup:
    def __init__(self, symbology=None, rulings=None):
        self.symbology = symbology
        self.rulings = rulings or {}
        self.symbology_calls = 0

    async def get_symbology(self):
        self.symbology_calls += 1
        return self.symbology

    async def get_rulings(self, uri):
        return self.rulings.get(uri)


SYMBOLOGY = {"data": [{"symbol": "{B/R}", "svg_uri": "https://svgs.scryfall.io/card-symbols/BR.svg"}]}


def test_general_info_links_symbols_and_shows_thumbnail():
    card = {
        "name": "Asmoranomardicadaistinaculdacar",
        "mana_cost": "",
        "type_line": "Legendary Creature — Human Wizard",
        "oracle_text": "As long as you've discarded a card this turn, you may pay {B/R} to cast this spell.",
        "scryfall_uri": "https://scryfall.com/card/mh2/186/asmoranomardicadaistinaculdacar",
        "image_uris": {"small": "https://cards.scryfall.io/small/front/d/9/d99a9a7d.jpg"},
    }
    formatter = CardFormatter(FakeLookup(symbology=SYMBOLOGY))

    result = asyncio.run(formatter.format_general(card))

    assert "Asmoranomardicadaistinaculdacar" in result.plain_text
    assert "{B/R}" in result.plain_text
    assert "[{B/R}](https://svgs.scryfall.io/card-symbols/BR.svg)" in result.embed.description
    assert "*Legendary Creature — Human Wizard*" in result.embed.description
    assert result.embed.thumbnail.url == "https://cards.scryfall.io/small/front/d/9/d99a9a7d.jpg"
    assert result.embed.url == card["scryfall_uri"]


def test_unknown_symbols_are_left_alone():
    formatter = CardFormatter(FakeLookup(symbology=SYMBOLOGY))
    assert asyncio.run(formatter.replace_symbols("{T}: Add {B/R}.")) == (
        "{T}: Add [{B/R}](https://svgs.scryfall.io/card-symbols/BR.svg)."
    )


def test_symbology_load_retries_until_available():
    lookup = FakeLookup(symbology=None)
    formatter = CardFormatter(lookup)

    asyncio.run(formatter.replace_symbols("{B/R}"))
    assert formatter.initialized is False

    lookup.symbology = SYMBOLOGY
    asyncio.run(formatter.replace_symbols("{B/R}"))
    asyncio.run(formatter.replace_symbols("{B/R}"))

    assert formatter.initialized is True
    assert lookup.symbology_calls == 2


def test_prices():
    card = {
        "name": "Black Lotus",
        "prices": {"usd": "500000.00", "usd_foil": None, "eur": "400000.00", "tix": "50.00"},
        "scryfall_uri": "https://scryfall.com/card/vma/4/black-lotus",
    }
    result = asyncio.run(CardFormatter(FakeLookup()).format_prices(card))

    assert "USD: $500000.00" in result.plain_text
    assert "EUR: €400000.00" in result.plain_text
    assert "USD Foil: N/A" in result.plain_text
    assert "- **USD:** $500000.00" in result.embed.description
    assert "- **TIX:** 50.00 TIX" in result.embed.description


def test_rulings_come_through_lookup():
    uri = "https://api.scryfall.com/cards/d5135755/rulings"
    card = {"name": "Gush", "rulings_uri": uri, "scryfall_uri": "https://scryfall.com/card/mm/31/gush"}
    lookup = FakeLookup(
        rulings={uri: {"data": [{"published_at": "2019-07-12", "comment": "You can return any two Islands you control."}]}}
    )

    result = asyncio.run(CardFormatter(lookup).format_rulings(card))

    assert "You can return any two Islands you control." in result.plain_text
    assert "- [2019-07-12] You can return any two Islands you control." in result.embed.description


def test_rulings_empty():
    card = {"name": "Island", "rulings_uri": "https://api.scryfall.com/cards/x/rulings"}
    result = asyncio.run(CardFormatter(FakeLookup()).format_rulings(card))

    assert "No rulings found." in result.plain_text
    assert result.embed.description == "No rulings found."


def test_legality_lists_every_format():
    card = {
        "name": "Brainstorm",
        "legalities": {"standard": "not_legal", "modern": "not_legal", "legacy": "legal", "vintage": "restricted"},
        "scryfall_uri": "https://scryfall.com/card/a25/46/brainstorm",
    }
    result = asyncio.run(CardFormatter(FakeLookup()).format_legality(card))

    assert "legacy: legal" in result.plain_text
    assert "vintage: restricted" in result.plain_text
    assert "pioneer: not legal" in result.plain_text
    fields = {f.name: f.value for f in result.embed.fields}
    assert list(fields) == LEGALITY_FORMATS
    assert fields["legacy"] == "legal"


def test_image_falls_back_to_first_face():
    card = {
        "name": "Delver of Secrets // Insectile Aberration",
        "card_faces": [{"image_uris": {"normal": "https://cards.scryfall.io/normal/front/delver.jpg"}}],
        "scryfall_uri": "https://scryfall.com/card/isd/51/delver-of-secrets",
    }
    result = asyncio.run(CardFormatter(FakeLookup()).format(card, "image"))

    assert result.embed.image.url == "https://cards.scryfall.io/normal/front/delver.jpg"
    assert result.plain_text.endswith("delver.jpg")


def test_image_missing():
    result = asyncio.run(CardFormatter(FakeLookup()).format_image({"name": "Token"}))
    assert result.plain_text == "Token - No image available"


def test_clip():
    assert clip("short", 10) == "short"
    clipped = clip("x" * 50, 10)
    assert len(clipped) == 10
    assert clipped.endswith("…")
