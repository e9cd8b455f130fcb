"""
Character roster editing.

The roster always holds between one and five characters, and each
character holds at most five traits. Operations that would break either
bound raise RosterLimitError and leave the roster untouched.
"""

from copy import deepcopy
from typing import Iterable, Optional

from storyworld.config import STORY_CONSTANTS
from .errors import RosterLimitError
from .types import Character


class Roster:
    """Mutable list of characters for the story being built."""

    def __init__(self, characters: Optional[list[Character]] = None):
        self.max_characters = STORY_CONSTANTS["max_characters"]
        self.min_characters = STORY_CONSTANTS["min_characters"]
        self.max_traits = STORY_CONSTANTS["max_traits"]
        self.characters: list[Character] = []
        self.replace(characters if characters is not None else [Character()])

    def __len__(self) -> int:
        return len(self.characters)

    def __iter__(self):
        return iter(self.characters)

    def get(self, character_id: str) -> Character:
        """Find a character by id."""
        for character in self.characters:
            if character.id == character_id:
                return character
        raise KeyError(f"Character {character_id} not found")

    def complete_characters(self) -> list[Character]:
        return [c for c in self.characters if c.is_complete]

    @property
    def has_complete_character(self) -> bool:
        return any(c.is_complete for c in self.characters)

    # === Whole-roster operations ===

    def replace(self, characters: Iterable[Character]) -> None:
        """
        Replace the whole roster after checking both bounds.

        Raises:
            RosterLimitError: If the roster size or any trait list is out of range
        """
        new_characters = [deepcopy(c) for c in characters]
        if not self.min_characters <= len(new_characters) <= self.max_characters:
            raise RosterLimitError(
                f"A story needs between {self.min_characters} and {self.max_characters} characters"
            )
        for character in new_characters:
            if len(character.traits) > self.max_traits:
                raise RosterLimitError(
                    f"{character.name or 'A character'} has more than {self.max_traits} traits"
                )
        ids = [c.id for c in new_characters]
        if len(set(ids)) != len(ids):
            raise ValueError("Character ids must be unique within a roster")
        self.characters = new_characters

    def snapshot(self) -> list[Character]:
        """Deep copy of the roster, safe to hand to the narrative synthesizer."""
        return deepcopy(self.characters)

    # === Character operations ===

    def add_character(self) -> Character:
        """Append a new empty character."""
        if len(self.characters) >= self.max_characters:
            raise RosterLimitError(f"You can only create up to {self.max_characters} characters")
        character = Character()
        self.characters.append(character)
        return character

    def remove_character(self, character_id: str) -> None:
        """Remove a character. The last remaining character cannot be removed."""
        character = self.get(character_id)
        if len(self.characters) <= self.min_characters:
            raise RosterLimitError("You need at least one character for your story")
        self.characters.remove(character)

    def update_character(
        self,
        character_id: str,
        name: Optional[str] = None,
        personality: Optional[str] = None,
    ) -> Character:
        """Update the free-text fields of a character. None leaves a field as is."""
        character = self.get(character_id)
        if name is not None:
            character.name = name
        if personality is not None:
            character.personality = personality
        return character

    # === Trait operations ===

    def add_trait(self, character_id: str, trait: str) -> Character:
        """
        Add a trait tag to a character.

        Blank and duplicate traits are ignored.

        Raises:
            RosterLimitError: If the character already has the maximum number of traits
        """
        character = self.get(character_id)
        trait = trait.strip()
        if not trait or trait in character.traits:
            return character
        if len(character.traits) >= self.max_traits:
            raise RosterLimitError(f"You can only add up to {self.max_traits} traits per character")
        character.traits.append(trait)
        return character

    def remove_trait(self, character_id: str, trait: str) -> Character:
        character = self.get(character_id)
        character.traits = [t for t in character.traits if t != trait]
        return character
