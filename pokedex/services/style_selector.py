from pokedex.models import SpeciesFacts, TranslationStyle

CAVE_HABITAT = "cave"


def select_style(facts: SpeciesFacts) -> TranslationStyle:
    """Rule: Legendary OR habitat is exactly 'cave' -> Yoda. Otherwise -> Shakespeare."""
    if facts.is_legendary or facts.habitat == CAVE_HABITAT:
        return TranslationStyle.SOLEMN
    return TranslationStyle.ARCHAIC
