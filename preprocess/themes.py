"""
Keyword based theme tagging
"""

from typing import List, Tuple


# (theme, keywords) - a theme applies as soon as one keyword is contained in the text
THEME_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("creation", ("creation", "created", "create", "formed", "beginning", "origin", "genesis", "first day")),
    ("angels", ("angel", "seraph", "cherub", "ophan", "metatron", "sandalphon", "michael", "gabriel", "raphael", "ministering")),
    ("demons", ("demon", "satan", "lilith", "shedim", "samael", "evil spirit", "azazel", "prince of darkness")),
    ("heaven", ("heaven", "paradise", "throne", "celestial", "firmament", "divine chariot", "merkavah", "heavenly")),
    ("hell", ("hell", "gehenna", "gehinom", "underworld", "punishment", "sheol")),
    ("messiah", ("messiah", "redemption", "end of days", "olam haba", "world to come", "messianic")),
    ("torah", ("torah", "scripture", "law", "commandment", "covenant", "revelation", "sinai", "tablets")),
    ("patriarchs", ("abraham", "isaac", "jacob", "sarah", "rebecca", "rachel", "leah", "patriarch")),
    ("moses", ("moses", "pharaoh", "egypt", "plagues", "red sea", "burning bush", "sinai")),
    ("adam-eve", ("adam", "eve", "garden of eden", "eden", "forbidden fruit", "tree of knowledge", "first man", "first woman")),
    ("noah", ("noah", "flood", "ark", "deluge", "rainbow")),
    ("mysticism", ("kabbalah", "sefirot", "zohar", "mystical", "meditation", "divine name", "secret", "hidden")),
    ("creatures", ("leviathan", "behemoth", "ziz", "phoenix", "golem", "dragon", "re'em", "monster", "beast")),
    ("soul", ("soul", "neshama", "ruach", "nefesh", "spirit", "afterlife", "reincarnation", "treasury of souls")),
    ("prophecy", ("prophet", "prophecy", "vision", "dream", "revelation", "seer")),
    ("temple", ("temple", "tabernacle", "mishkan", "sanctuary", "holy of holies", "ark of the covenant")),
    ("exile", ("exile", "diaspora", "wandering", "scattered", "captivity", "babylon")),
    ("holy-land", ("jerusalem", "zion", "israel", "canaan", "promised land", "holy land")),
)

THEMES: Tuple[str, ...] = tuple(theme for theme, _ in THEME_KEYWORDS)


def extract_themes(text: str) -> List[str]:
    """Returns the matching themes, in taxonomy order"""
    lower_text = (text or "").lower()
    return [
        theme
        for theme, keywords in THEME_KEYWORDS
        if any(keyword in lower_text for keyword in keywords)
    ]
