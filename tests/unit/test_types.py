"""Unit tests for storyworld/core/types.py."""

from storyworld.core.types import Character, Scene, StoryContent


class TestCharacter:
    def test_new_characters_get_distinct_ids(self):
        assert Character().id != Character().id

    def test_complete(self, mira):
        assert mira.is_complete

    def test_incomplete_without_traits(self):
        assert not Character(name="Mira", personality="bold").is_complete

    def test_incomplete_without_personality(self):
        assert not Character(name="Mira", personality=" ", traits=["brave"]).is_complete

    def test_traits_phrase(self, mira):
        assert mira.traits_phrase == "brave and curious"
        assert Character(traits=["kind"]).traits_phrase == "kind"


class TestStoryContent:
    def test_empty(self):
        content = StoryContent.empty()
        assert content.is_empty
        assert content.scene_count == 0

    def test_illustrated_count(self):
        content = StoryContent(
            title="T",
            introduction="I",
            scenes=[
                Scene(description="a", dialogue=["x"], image_prompt="p", image_url="https://1.png"),
                Scene(description="b", dialogue=["y"], image_prompt="q"),
            ],
            conclusion="C",
        )
        assert content.illustrated_count == 1
