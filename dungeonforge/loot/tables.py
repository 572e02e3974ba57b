from __future__ import annotations

from typing import Dict, List

from ..vocab import KeyedTable

RARITIES = ("common", "uncommon", "rare", "epic", "legendary")

# Suffix ("of Shadows") only applies from rare upward
SUFFIXED_RARITIES = frozenset({"rare", "epic", "legendary"})

# Rarity weight configuration per difficulty, ordered as RARITIES
RARITY_WEIGHTS = KeyedTable(
    "rarity_weights",
    {
        "easy": (70, 25, 4, 1, 0),
        "medium": (50, 30, 15, 4, 1),
        "hard": (30, 35, 25, 8, 2),
        "deadly": (20, 30, 30, 15, 5),
    },
    default="medium",
)

DIFFICULTY_MODIFIER = KeyedTable(
    "loot_difficulty_modifier",
    {"easy": 0.5, "medium": 1.0, "hard": 1.5, "deadly": 2.0},
    default="medium",
)

TYPES_BY_BIAS = KeyedTable(
    "types_by_bias",
    {
        "treasure": ["gem", "jewelry", "art", "currency"],
        "valuable": ["gem", "jewelry", "art"],
        "weapons": ["weapon", "armor", "shield"],
        "scrolls": ["scroll", "book", "map"],
        "consumables": ["potion", "food", "component"],
        "equipment": ["tool", "gear", "weapon", "armor"],
        "holy": ["relic", "symbol", "scroll"],
        "magical": ["wand", "staff", "orb", "potion", "scroll"],
        "royal": ["jewelry", "art", "weapon", "crown"],
        "combat": ["weapon", "armor", "potion"],
        "general": ["weapon", "armor", "potion", "gem", "tool"],
    },
    default="general",
)

# room type -> (item count, bias)
ROOM_LOOT = KeyedTable(
    "room_loot",
    {
        "Treasury": (4, "valuable"),
        "Armory": (3, "weapons"),
        "Library": (2, "scrolls"),
        "Kitchen": (2, "consumables"),
        "Barracks": (3, "equipment"),
        "Chapel": (2, "holy"),
        "Laboratory": (3, "magical"),
        "Throne Room": (4, "royal"),
        "Chamber": (2, "general"),
        "Hall": (1, "general"),
    },
    default="Chamber",
)

UNKNOWN_ICON = "❓"

ICONS: Dict[str, List[str]] = {
    "weapon": ["⚔️", "🗡️", "🏹", "🔨", "🪓"],
    "armor": ["🛡️", "🥾", "👕", "👑", "🧤"],
    "shield": ["🛡️"],
    "potion": ["🧪", "🍶", "🥤"],
    "scroll": ["📜", "📋", "📃"],
    "book": ["📖", "📚", "📕"],
    "gem": ["💎", "💍", "🔮", "💠"],
    "jewelry": ["💍", "📿", "👑", "⌚"],
    "art": ["🎨", "🏺", "🪞", "🕯️"],
    "currency": ["🪙", "💰", "💵"],
    "tool": ["🔧", "⚒️", "🪚", "🔑"],
    "gear": ["🎒", "🪢", "🧭"],
    "wand": ["🪄", "✨"],
    "staff": ["🪄", "🦯"],
    "orb": ["🔮", "💎"],
    "relic": ["✨", "🏺", "📿"],
    "symbol": ["✝️", "☪️", "🕎", "☯️"],
    "map": ["🗺️", "📜"],
    "component": ["🌿", "🦴", "⭐", "🔥"],
    "food": ["🍖", "🍞", "🧀", "🍯"],
    "crown": ["👑", "💎"],
}

# Inclusive gp ranges; all five are rolled for every item
VALUE_RANGES = (
    ("common", 1, 50),
    ("uncommon", 51, 250),
    ("rare", 251, 1000),
    ("epic", 1001, 5000),
    ("legendary", 5001, 25000),
)

TYPE_VALUE_MULTIPLIER = {
    "weapon": 1.5,
    "armor": 1.3,
    "jewelry": 2.0,
    "art": 1.8,
    "gem": 2.5,
    "potion": 0.8,
    "scroll": 1.2,
    "currency": 1.0,
}

DESCRIPTIONS = KeyedTable(
    "item_descriptions",
    {
        "weapon": [
            "A well-balanced weapon with a keen edge.",
            "This weapon bears the marks of many battles.",
            "Crafted with exceptional skill and attention to detail.",
            "The metal gleams with an otherworldly sheen.",
        ],
        "armor": [
            "Sturdy protection that has weathered many conflicts.",
            "This armor shows signs of masterful craftsmanship.",
            "Lightweight yet durable, perfect for adventurers.",
            "Enhanced with protective enchantments.",
        ],
        "potion": [
            "A bubbling liquid that glows faintly in the dark.",
            "The contents swirl mysteriously within the bottle.",
            "Smells of herbs and magical ingredients.",
            "Crafted by a skilled alchemist.",
        ],
        "gem": [
            "This precious stone catches light beautifully.",
            "A flawless gem of exceptional clarity.",
            "The facets seem to hold inner fire.",
            "Valued by collectors and jewelers alike.",
        ],
        "scroll": [
            "Ancient parchment covered in mystic symbols.",
            "The writing glows faintly with magical power.",
            "Contains knowledge from a bygone age.",
            "Carefully preserved despite its age.",
        ],
    },
    default="weapon",
)

PREFIXES = KeyedTable(
    "rarity_prefixes",
    {
        "common": ["Simple", "Basic", "Plain", "Ordinary", "Standard"],
        "uncommon": ["Fine", "Quality", "Masterwork", "Superior", "Elegant"],
        "rare": ["Exquisite", "Enchanted", "Mystical", "Ancient", "Noble"],
        "epic": ["Legendary", "Mythical", "Divine", "Celestial", "Draconic"],
        "legendary": ["Artifact", "Godly", "Eternal", "Ultimate", "Transcendent"],
    },
    default="common",
)

GENERIC_NOUN = "Item"

BASE_NOUNS: Dict[str, List[str]] = {
    "weapon": ["Sword", "Blade", "Dagger", "Axe", "Mace", "Bow", "Crossbow", "Spear", "Hammer"],
    "armor": ["Chainmail", "Leather Armor", "Plate Mail", "Robes", "Cloak", "Boots", "Gauntlets"],
    "shield": ["Shield", "Buckler", "Tower Shield"],
    "potion": ["Healing Potion", "Mana Potion", "Elixir", "Philter", "Draught"],
    "scroll": ["Spell Scroll", "Map", "Deed", "Letter", "Contract"],
    "book": ["Spellbook", "Tome", "Grimoire", "Manual", "Chronicle"],
    "gem": ["Ruby", "Emerald", "Sapphire", "Diamond", "Opal", "Amethyst"],
    "jewelry": ["Ring", "Necklace", "Bracelet", "Amulet", "Circlet"],
    "art": ["Painting", "Sculpture", "Vase", "Tapestry", "Mirror"],
    "tool": ["Lockpicks", "Rope", "Grappling Hook", "Crowbar", "Hammer"],
    "wand": ["Wand", "Rod"],
    "staff": ["Staff", "Quarterstaff"],
    "orb": ["Crystal Orb", "Scrying Orb"],
    "crown": ["Crown", "Tiara", "Diadem"],
}

BIOME_SUFFIXES = KeyedTable(
    "biome_suffixes",
    {
        "dungeon": ["of the Deep", "of Shadows", "of Stone"],
        "cave": ["of the Depths", "of Crystal", "of Echoes"],
        "forest": ["of the Grove", "of Nature", "of the Wild"],
        "crypt": ["of the Dead", "of Souls", "of Eternity"],
        "temple": ["of Light", "of Faith", "of the Divine"],
        "tower": ["of Power", "of Wisdom", "of the Arcane"],
    },
    default="dungeon",
)
