"""Unit tests for plain-text story export."""

from storyworld.core.export import export_filename, export_story_text
from storyworld.core.narrative import synthesize
from storyworld.core.types import StoryContent


class TestExportStoryText:
    def test_sections_in_order(self, forest, courage, mira):
        story = synthesize(forest, courage, [mira])
        text = export_story_text(story)

        positions = [
            text.index(story.title),
            text.index(story.introduction),
            text.index("Scene 1:"),
            text.index("Scene 2:"),
            text.index("Scene 3:"),
            text.index(story.conclusion),
        ]
        assert positions == sorted(positions)

    def test_includes_dialogue_not_prompts(self, forest, courage, mira):
        story = synthesize(forest, courage, [mira])
        text = export_story_text(story)

        for scene in story.scenes:
            assert scene.description in text
            for line in scene.dialogue:
                assert line in text
            assert scene.image_prompt not in text

    def test_title_first_line(self, forest, courage, mira):
        story = synthesize(forest, courage, [mira])
        assert export_story_text(story).splitlines()[0] == story.title


class TestExportFilename:
    def test_whitespace_replaced(self, forest, courage, mira):
        story = synthesize(forest, courage, [mira])
        assert export_filename(story) == "Mira's_Courage_Adventure_in_the_Enchanted_Forest.txt"

    def test_empty_title(self):
        assert export_filename(StoryContent.empty()) == "story.txt"
