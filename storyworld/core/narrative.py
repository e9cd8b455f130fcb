"""
Templated narrative synthesis.

Turns a setting, a theme and a roster into a fixed-shape story by string
interpolation. The first complete character is the protagonist; the next
one (if any) speaks the supporting dialogue lines. No randomness, so the
same input always produces the same story.
"""

import logging

from .types import Character, Scene, Setting, StoryContent, Theme

logger = logging.getLogger(__name__)


def _supporting_line(supporting: list[Character], with_friend: str, alone: str) -> str:
    if supporting:
        return with_friend.format(friend=supporting[0].name)
    return alone


def _build_scenes(hero: Character, supporting: list[Character], setting: Setting, theme: Theme) -> list[Scene]:
    traits = hero.traits_phrase
    return [
        Scene(
            description=f"{hero.name} was exploring the {setting.name} when suddenly something unexpected happened.",
            dialogue=[
                f'"I wonder what adventures await me today," said {hero.name}.',
                _supporting_line(
                    supporting,
                    '"Hello there! I\'ve been looking for someone like you," said {friend}.',
                    'A mysterious voice called out, "Hello there! I\'ve been looking for someone like you."',
                ),
            ],
            image_prompt=(
                f"A friendly, child-appropriate scene of {hero.name} in the {setting.name}, "
                f"looking surprised and excited."
            ),
        ),
        Scene(
            description=(
                f"The challenge related to {theme.name} became clear, "
                f"and {hero.name} knew what needed to be done."
            ),
            dialogue=[
                f'"This won\'t be easy, but I know I can do it because I\'m {traits}," said {hero.name}.',
                _supporting_line(
                    supporting,
                    '"We believe in you! We\'ll help you," said {friend}.',
                    f'"You can do it!" encouraged the friendly creatures of the {setting.name}.',
                ),
            ],
            image_prompt=(
                f"A colorful illustration showing {hero.name} facing a challenge "
                f"in the {setting.name} with determination."
            ),
        ),
        Scene(
            description=f"Using {traits}, {hero.name} found a creative solution to the problem.",
            dialogue=[
                f'"I\'ve got it! We can work together and solve this," exclaimed {hero.name}.',
                _supporting_line(
                    supporting,
                    '"Your plan is brilliant! That\'s why we\'re friends," replied {friend}.',
                    '"What a wonderful idea!" the friendly creatures cheered.',
                ),
            ],
            image_prompt=(
                f"A joyful scene showing {hero.name} and friends working together "
                f"to solve a problem in the {setting.name}."
            ),
        ),
    ]


def synthesize(setting: Setting, theme: Theme, characters: list[Character]) -> StoryContent:
    """
    Render a story for the given selections.

    Only complete characters are used, in roster order. Callers are expected
    to check readiness first; with no complete character an empty
    StoryContent is returned.

    Args:
        setting: Selected setting
        theme: Selected theme
        characters: The roster (incomplete entries are skipped)

    Returns:
        StoryContent with exactly three scenes, or StoryContent.empty()
    """
    cast = [c for c in characters if c.is_complete]
    if not cast:
        logger.warning("synthesize called without a complete character; returning empty story")
        return StoryContent.empty()

    hero, supporting = cast[0], cast[1:]

    return StoryContent(
        title=f"{hero.name}'s {theme.name} Adventure in the {setting.name}",
        introduction=(
            f"Once upon a time in the {setting.name}, there lived a {hero.traits[0]} "
            f"character named {hero.name}. {hero.name} was known for being {hero.personality}. "
            f"Today was special because {hero.name} was about to discover the true meaning of {theme.name}."
        ),
        scenes=_build_scenes(hero, supporting, setting, theme),
        conclusion=(
            f"Through this adventure, {hero.name} learned the true meaning of {theme.name}. "
            f"Everyone in the {setting.name} celebrated their success, and {hero.name} "
            f"felt proud to be {hero.traits_phrase}. The end!"
        ),
    )
