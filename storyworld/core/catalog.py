"""
Static catalog of story settings and themes, plus the content safety word list.

Catalog entries are immutable reference data; selections point at these
objects rather than copying them.
"""

from .errors import UnknownCatalogEntry
from .types import CatalogKind, Setting, Theme

SETTINGS: tuple[Setting, ...] = (
    Setting(
        id="fantasy",
        name="Fantasy Kingdom",
        description="A magical land with castles, dragons, and adventure around every corner!",
        icon="castle",
        color="storyworld-fantasy",
    ),
    Setting(
        id="space",
        name="Outer Space",
        description="Explore distant planets, meet friendly aliens, and discover the wonders of the universe.",
        icon="rocket",
        color="storyworld-space",
    ),
    Setting(
        id="forest",
        name="Enchanted Forest",
        description="Towering trees, friendly animals, and magical plants fill this special woodland.",
        icon="trees",
        color="storyworld-forest",
    ),
    Setting(
        id="underwater",
        name="Underwater Adventure",
        description="Dive deep beneath the waves to explore coral reefs and meet colorful sea creatures.",
        icon="fish",
        color="storyworld-underwater",
    ),
    Setting(
        id="mystery",
        name="Mystery City",
        description="Solve puzzles and follow clues in a city full of surprises and friendly neighborhoods.",
        icon="search",
        color="storyworld-mystery",
    ),
)

THEMES: tuple[Theme, ...] = (
    Theme(
        id="friendship",
        name="Friendship",
        description="A story about making new friends and working together through challenges.",
        icon="heart-handshake",
    ),
    Theme(
        id="courage",
        name="Courage",
        description="Face fears and discover inner strength on an exciting journey.",
        icon="shield",
    ),
    Theme(
        id="discovery",
        name="Discovery",
        description="Explore new places and learn amazing things about the world.",
        icon="compass",
    ),
    Theme(
        id="teamwork",
        name="Teamwork",
        description="Join forces to accomplish goals that can't be achieved alone.",
        icon="users",
    ),
    Theme(
        id="obstacles",
        name="Overcoming Obstacles",
        description="Find creative ways to solve problems and overcome challenges.",
        icon="mountain",
    ),
)

_SETTINGS_BY_ID = {s.id: s for s in SETTINGS}
_THEMES_BY_ID = {t.id: t for t in THEMES}


def get_setting(setting_id: str) -> Setting:
    """Look up a setting by id."""
    try:
        return _SETTINGS_BY_ID[setting_id]
    except KeyError:
        raise UnknownCatalogEntry(CatalogKind.SETTING.value, setting_id) from None


def get_theme(theme_id: str) -> Theme:
    """Look up a theme by id."""
    try:
        return _THEMES_BY_ID[theme_id]
    except KeyError:
        raise UnknownCatalogEntry(CatalogKind.THEME.value, theme_id) from None


def get_entry(kind: CatalogKind, entry_id: str):
    """Look up a setting or theme by kind and id."""
    if CatalogKind(kind) is CatalogKind.SETTING:
        return get_setting(entry_id)
    return get_theme(entry_id)


# =============================================================================
# Content Safety
# =============================================================================

BANNED_WORDS: tuple[str, ...] = (
    "violent", "scary", "kill", "murder", "blood", "weapon", "gun", "knife",
    "die", "death", "hate", "fight", "evil", "devil", "terror", "horror",
)


def find_banned_words(text: str) -> list[str]:
    """Return the banned words contained in text (case-insensitive substring match)."""
    lowered = text.lower()
    return [word for word in BANNED_WORDS if word in lowered]


def is_content_safe(text: str) -> bool:
    """True if text contains none of the banned words."""
    return not find_banned_words(text)
