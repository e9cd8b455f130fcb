"""
Story wizard constants for StoryWorld.

Limits enforced on the character roster and the shape of synthesized stories.
"""

STORY_CONSTANTS = {
    "min_characters": 1,  # Roster always holds at least one character
    "max_characters": 5,
    "max_traits": 5,  # Per character
    "scene_count": 3,  # Scenes in every synthesized story
}
