"""Static price and catalog tables, one pair per pricing tier.

Product codes are four digits, one per pricing field:
length (1 normal, 2 cropped), sleeve (1 long, 2 short),
style (1 sweater, 2 cardigan), collar (1 crew, 2 polo).

Each tier's price table and catalog table must agree on price for the same
garment. Only the resolver in ``pricing.py`` reads these.
"""

from __future__ import annotations

from decimal import Decimal

WHOLESALE_PRICES: dict[str, Decimal] = {
    "normal_long_sweater_crew": Decimal("110.40"),
    "normal_long_sweater_polo": Decimal("120.90"),
    "normal_long_cardigan_crew": Decimal("127.90"),
    "normal_long_cardigan_polo": Decimal("138.40"),
    "normal_short_sweater_crew": Decimal("104.20"),
    "normal_short_sweater_polo": Decimal("114.70"),
    "normal_short_cardigan_crew": Decimal("121.80"),
    "normal_short_cardigan_polo": Decimal("132.30"),
    "cropped_long_sweater_crew": Decimal("100.40"),
    "cropped_long_sweater_polo": Decimal("110.90"),
    "cropped_long_cardigan_crew": Decimal("117.90"),
    "cropped_long_cardigan_polo": Decimal("128.40"),
    "cropped_short_sweater_crew": Decimal("94.20"),
    "cropped_short_sweater_polo": Decimal("104.70"),
    "cropped_short_cardigan_crew": Decimal("111.80"),
    "cropped_short_cardigan_polo": Decimal("122.30"),
}

WHOLESALE_FALLBACK_PRICE = Decimal("94.20")

# code -> (shopify product id, default variant id, unit price)
WHOLESALE_CATALOG: dict[str, tuple[str, str, Decimal]] = {
    "1111": ("9552915333448", "49468121301320", Decimal("110.40")),
    "1112": ("9552915398984", "49468121334088", Decimal("120.90")),
    "1121": ("9552915464520", "49468121366856", Decimal("127.90")),
    "1122": ("9552915530056", "49468121399624", Decimal("138.40")),
    "1211": ("9552915628360", "49468121432392", Decimal("104.20")),
    "1212": ("9552915726664", "49468121465160", Decimal("114.70")),
    "1221": ("9552915792200", "49468121497928", Decimal("121.80")),
    "1222": ("9552915890504", "49468121530696", Decimal("132.30")),
    "2111": ("9552915956040", "49468121563464", Decimal("100.40")),
    "2112": ("9552916021576", "49468121596232", Decimal("110.90")),
    "2121": ("9552916087112", "49468121629000", Decimal("117.90")),
    "2122": ("9552916119880", "49468121661768", Decimal("128.40")),
    "2211": ("9552916218184", "49468121694536", Decimal("94.20")),
    "2212": ("9552916283720", "49468121727304", Decimal("104.70")),
    "2221": ("9552916316488", "49468121760072", Decimal("111.80")),
    "2222": ("9552916414792", "49468121792840", Decimal("122.30")),
}

RETAIL_PRICES: dict[str, Decimal] = {
    "normal_long_sweater_crew": Decimal("219.00"),
    "normal_long_sweater_polo": Decimal("239.00"),
    "normal_long_cardigan_crew": Decimal("255.00"),
    "normal_long_cardigan_polo": Decimal("275.00"),
    "normal_short_sweater_crew": Decimal("209.00"),
    "normal_short_sweater_polo": Decimal("229.00"),
    "normal_short_cardigan_crew": Decimal("245.00"),
    "normal_short_cardigan_polo": Decimal("265.00"),
    "cropped_long_sweater_crew": Decimal("199.00"),
    "cropped_long_sweater_polo": Decimal("219.00"),
    "cropped_long_cardigan_crew": Decimal("235.00"),
    "cropped_long_cardigan_polo": Decimal("255.00"),
    "cropped_short_sweater_crew": Decimal("189.00"),
    "cropped_short_sweater_polo": Decimal("209.00"),
    "cropped_short_cardigan_crew": Decimal("225.00"),
    "cropped_short_cardigan_polo": Decimal("245.00"),
}

RETAIL_FALLBACK_PRICE = Decimal("189.00")

RETAIL_CATALOG: dict[str, tuple[str, str, Decimal]] = {
    "1111": ("9561204408648", "49512735457608", Decimal("219.00")),
    "1112": ("9561204474184", "49512735490376", Decimal("239.00")),
    "1121": ("9561204539720", "49512735523144", Decimal("255.00")),
    "1122": ("9561204605256", "49512735555912", Decimal("275.00")),
    "1211": ("9561204670792", "49512735588680", Decimal("209.00")),
    "1212": ("9561204736328", "49512735621448", Decimal("229.00")),
    "1221": ("9561204801864", "49512735654216", Decimal("245.00")),
    "1222": ("9561204867400", "49512735686984", Decimal("265.00")),
    "2111": ("9561204932936", "49512735719752", Decimal("199.00")),
    "2112": ("9561204998472", "49512735752520", Decimal("219.00")),
    "2121": ("9561205064008", "49512735785288", Decimal("235.00")),
    "2122": ("9561205129544", "49512735818056", Decimal("255.00")),
    "2211": ("9561205195080", "49512735850824", Decimal("189.00")),
    "2212": ("9561205260616", "49512735883592", Decimal("209.00")),
    "2221": ("9561205326152", "49512735916360", Decimal("225.00")),
    "2222": ("9561205391688", "49512735949128", Decimal("245.00")),
}

# Digit position -> attribute values, used to decode a product code.
CODE_DIGITS: tuple[tuple[str, dict[str, str]], ...] = (
    ("length", {"1": "normal", "2": "cropped"}),
    ("sleeve", {"1": "long", "2": "short"}),
    ("style", {"1": "sweater", "2": "cardigan"}),
    ("collar", {"1": "crew", "2": "polo"}),
)
