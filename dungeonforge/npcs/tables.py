"""Vocabulary for NPC generation.

Biome-keyed tables fall back to ``dungeon``; race-keyed name tables fall back
to ``Human``. Avatars resolve race+class, then the race default, then
``DEFAULT_AVATAR``.
"""
from __future__ import annotations

from typing import Dict, List

from ..vocab import KeyedTable

DIFFICULTY_MODIFIER = KeyedTable(
    "npc_difficulty_modifier",
    {"easy": 0.7, "medium": 1.0, "hard": 1.3, "deadly": 1.6},
    default="medium",
)

RACES_BY_BIOME = KeyedTable(
    "races_by_biome",
    {
        "dungeon": ["Human", "Dwarf", "Halfling", "Gnome", "Elf"],
        "cave": ["Dwarf", "Goblin", "Kobold", "Duergar", "Svirfneblin"],
        "forest": ["Elf", "Half-Elf", "Gnome", "Firbolg", "Centaur"],
        "crypt": ["Human", "Tiefling", "Aasimar", "Variant Human", "Dhampir"],
        "temple": ["Human", "Aasimar", "Dragonborn", "Tiefling", "Deva"],
        "tower": ["Human", "Elf", "Gnome", "Tiefling", "Githyanki"],
    },
    default="dungeon",
)

CLASSES_BY_BIOME = KeyedTable(
    "classes_by_biome",
    {
        "dungeon": ["Fighter", "Rogue", "Wizard", "Cleric", "Ranger"],
        "cave": ["Barbarian", "Ranger", "Druid", "Fighter", "Rogue"],
        "forest": ["Ranger", "Druid", "Bard", "Sorcerer", "Monk"],
        "crypt": ["Cleric", "Paladin", "Warlock", "Necromancer", "Death Knight"],
        "temple": ["Cleric", "Paladin", "Monk", "Divine Soul", "Celestial"],
        "tower": ["Wizard", "Sorcerer", "Warlock", "Artificer", "Arcane Trickster"],
    },
    default="dungeon",
)

NAMES_BY_RACE: KeyedTable[Dict[str, List[str]]] = KeyedTable(
    "names_by_race",
    {
        "Human": {
            "first": ["Alaric", "Beatrice", "Cedric", "Diana", "Edmund", "Fiona", "Gareth", "Helena", "Ivan", "Juliana"],
            "last": ["Blackwood", "Goldsmith", "Ironforge", "Lightbringer", "Shadowmere", "Stormwind", "Thornfield", "Whitehall"],
        },
        "Elf": {
            "first": ["Aerdrie", "Berrian", "Caelynn", "Dayereth", "Enna", "Galinndan", "Hadarai", "Immeral", "Korfel", "Lamlis"],
            # Helder appears twice
            "last": ["Amakir", "Amarthen", "Amarillis", "Helder", "Hornraven", "Helder", "Meliamne", "Nailo", "Siannodel", "Xiloscient"],
        },
        "Dwarf": {
            "first": ["Adrik", "Baern", "Darrak", "Eberk", "Fargrim", "Gardain", "Harbek", "Kildrak", "Morgran", "Orsik"],
            "last": ["Battlehammer", "Brawnanvil", "Dankil", "Fireforge", "Frostbeard", "Gorunn", "Holderhek", "Ironfist", "Loderr", "Lutgehr"],
        },
        "Halfling": {
            "first": ["Alton", "Beau", "Cade", "Eldon", "Garret", "Lyle", "Milo", "Osborn", "Roscoe", "Wellby"],
            "last": ["Brushgather", "Goodbarrel", "Greenbottle", "High-hill", "Hilltopple", "Leagallow", "Tealeaf", "Thorngage", "Tosscobble", "Underbough"],
        },
        "Gnome": {
            "first": ["Alston", "Brocc", "Burgell", "Dimble", "Eldon", "Fonkin", "Gimble", "Glim", "Jebeddo", "Kellen"],
            "last": ["Beren", "Daergel", "Folkor", "Garrick", "Nackle", "Murnig", "Ningel", "Raulnor", "Scheppen", "Timbers"],
        },
    },
    default="Human",
)

APPEARANCES = [
    "weathered and battle-scarred",
    "young and eager",
    "mysterious and hooded",
    "well-dressed and refined",
    "grizzled and experienced",
    "nervous and twitchy",
    "calm and composed",
    "energetic and enthusiastic",
]

BEHAVIORS = [
    "speaks in riddles",
    "constantly sharpens weapons",
    "studies ancient tomes",
    "mutters prayers under their breath",
    "watches the shadows carefully",
    "hums old tavern songs",
    "counts coins obsessively",
    "tells tales of past adventures",
]

LOCATIONS = KeyedTable(
    "npc_locations",
    {
        "dungeon": "deep within these stone corridors",
        "cave": "in the depths of this cavern system",
        "forest": "among the ancient trees",
        "crypt": "within these hallowed halls",
        "temple": "before the sacred altar",
        "tower": "high in this mystical spire",
    },
    default="dungeon",
)

DEFAULT_AVATAR = "👤"

AVATARS: Dict[str, Dict[str, str]] = {
    "Human": {"Fighter": "🛡️", "Rogue": "🗡️", "Wizard": "🔮", "Cleric": "⚕️", "default": "👤"},
    "Elf": {"Ranger": "🏹", "Wizard": "🔮", "Rogue": "🗡️", "default": "🧝"},
    "Dwarf": {"Fighter": "⚒️", "Cleric": "⚕️", "Barbarian": "🪓", "default": "👨‍🦲"},
    "Halfling": {"Rogue": "🗡️", "Bard": "🎵", "default": "👶"},
    "Gnome": {"Wizard": "🔮", "Artificer": "⚙️", "default": "👴"},
    "Goblin": {"default": "👺"},
    "Kobold": {"default": "🦎"},
    "Tiefling": {"Warlock": "😈", "default": "👹"},
}

PERSONALITY_TRAITS = [
    "Brave and honorable",
    "Cunning and opportunistic",
    "Wise and contemplative",
    "Cheerful and optimistic",
    "Brooding and mysterious",
    "Ambitious and driven",
    "Loyal and dependable",
    "Eccentric and unpredictable",
    "Cautious and paranoid",
    "Generous and kind-hearted",
]

MOTIVATIONS_BY_BIOME = KeyedTable(
    "motivations_by_biome",
    {
        "dungeon": [
            "Seeks ancient treasure hidden within",
            "Guards family secrets buried here",
            "Hunts the monster that destroyed their village",
            "Researches the dungeon's dark history",
        ],
        "cave": [
            "Protects the natural balance of the caves",
            "Searches for rare minerals and gems",
            "Hides from surface world persecution",
            "Studies unique cave ecosystems",
        ],
        "forest": [
            "Protects the sacred grove from intruders",
            "Seeks harmony between nature and civilization",
            "Hunts poachers and defilers",
            "Guards ancient druidic secrets",
        ],
        "crypt": [
            "Seeks to put restless spirits to rest",
            "Protects sacred burial grounds",
            "Hunts undead abominations",
            "Researches necromantic mysteries",
        ],
        "temple": [
            "Serves their deity faithfully",
            "Protects holy relics and artifacts",
            "Seeks divine guidance and wisdom",
            "Battles unholy corruption",
        ],
        "tower": [
            "Pursues arcane knowledge and power",
            "Guards magical secrets and spells",
            "Conducts mystical experiments",
            "Seeks to unlock cosmic mysteries",
        ],
    },
    default="dungeon",
)

SECRETS = [
    "Knows the location of a hidden passage",
    "Carries a map to ancient treasure",
    "Is actually royalty in disguise",
    "Made a pact with a powerful entity",
    "Possesses a cursed magical item",
    "Is the last of their bloodline",
    "Knows the dungeon's true purpose",
    "Has seen the future in visions",
    "Is secretly working for the enemy",
    "Guards the key to a great mystery",
]
