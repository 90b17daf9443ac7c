from __future__ import annotations

# Bump the version whenever the list changes: index -> word is shared by
# every copy of the game, so reordering changes every round's word.
WORD_LIST_VERSION = 1

WORD_LIST: tuple[str, ...] = (
    "volcano", "library", "pizza", "dinosaur", "astronaut",
    "rainbow", "penguin", "chocolate", "submarine", "guitar",
    "elephant", "hurricane", "treasure", "jungle", "wizard",
    "pyramid", "dolphin", "tornado", "castle", "robot",
    "butterfly", "mountain", "spaceship", "dragon", "unicorn",
    "pirate", "hospital", "detective", "skeleton", "flamingo",
    "waterfall", "superhero", "campfire", "kangaroo", "avalanche",
    "lightning", "mushroom", "scarecrow", "telescope", "octopus",
    "helicopter", "goldfish", "firework", "nightmare", "mermaid",
    "thunderstorm", "crocodile", "sunflower", "jellyfish", "snowman",
)  # fmt: skip
