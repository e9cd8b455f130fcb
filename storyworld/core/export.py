"""Plain-text export of a synthesized story."""

import re

from .types import StoryContent


def export_story_text(content: StoryContent) -> str:
    """
    Render a story as a flat text document.

    Layout: title, introduction, one "Scene N:" block per scene with its
    description and dialogue, then the conclusion.
    """
    lines = [content.title, "", content.introduction, ""]

    for number, scene in enumerate(content.scenes, start=1):
        lines.append(f"Scene {number}:")
        lines.append(scene.description)
        lines.append("")
        lines.extend(scene.dialogue)
        lines.append("")

    lines.append(content.conclusion)
    return "\n".join(lines) + "\n"


def export_filename(content: StoryContent) -> str:
    """Download filename for a story, e.g. "Mira's_Courage_Adventure.txt"."""
    stem = re.sub(r"\s+", "_", content.title.strip()) or "story"
    return f"{stem}.txt"
