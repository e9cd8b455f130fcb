"""Unit tests for templated story synthesis."""

import pytest

from storyworld.core.catalog import SETTINGS, THEMES
from storyworld.core.narrative import synthesize
from storyworld.core.types import Character


class TestSynthesizeExample:
    """The Mira / Enchanted Forest / Courage example."""

    @pytest.fixture
    def story(self, forest, courage, mira):
        return synthesize(forest, courage, [mira])

    def test_title(self, story):
        assert story.title == "Mira's Courage Adventure in the Enchanted Forest"

    def test_introduction(self, story):
        assert "Mira" in story.introduction
        assert "brave" in story.introduction
        assert "bold" in story.introduction

    def test_three_scenes(self, story):
        assert story.scene_count == 3

    def test_conclusion(self, story):
        assert "Mira" in story.conclusion
        assert "brave and curious" in story.conclusion
        assert story.conclusion.endswith("The end!")

    def test_no_illustrations_yet(self, story):
        assert all(scene.image_url is None for scene in story.scenes)


class TestSynthesizeShape:
    @pytest.mark.parametrize("setting", SETTINGS, ids=lambda s: s.id)
    @pytest.mark.parametrize("theme", THEMES, ids=lambda t: t.id)
    def test_every_scene_is_filled(self, setting, theme, mira):
        story = synthesize(setting, theme, [mira])

        assert len(story.scenes) == 3
        for scene in story.scenes:
            assert scene.description.strip()
            assert len(scene.dialogue) >= 1
            assert scene.image_prompt.strip()
            assert setting.name in scene.image_prompt

    def test_deterministic(self, forest, courage, mira, otto):
        first = synthesize(forest, courage, [mira, otto])
        second = synthesize(forest, courage, [mira, otto])
        assert first == second

    def test_supporting_character_speaks(self, forest, courage, mira, otto):
        story = synthesize(forest, courage, [mira, otto])
        for scene in story.scenes:
            assert "Otto" in scene.dialogue[1]

    def test_generic_voice_without_supporting_character(self, forest, courage, mira):
        story = synthesize(forest, courage, [mira])
        assert story.scenes[0].dialogue[1].startswith("A mysterious voice called out")
        assert "friendly creatures of the Enchanted Forest" in story.scenes[1].dialogue[1]

    def test_first_complete_character_is_protagonist(self, forest, courage, mira, otto):
        incomplete = Character(name="Nobody", personality="quiet")
        story = synthesize(forest, courage, [incomplete, otto, mira])

        assert story.title.startswith("Otto's")
        assert "Mira" in story.scenes[0].dialogue[1]
        assert "Nobody" not in story.introduction

    def test_no_complete_character_gives_empty_story(self, forest, courage):
        story = synthesize(forest, courage, [Character(name="Half")])
        assert story.is_empty
        assert story.title == ""
