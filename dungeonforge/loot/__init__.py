from .generator import LootItem, LootTable, generate_item, generate_loot, gold_item

__all__ = ["LootItem", "LootTable", "generate_item", "generate_loot", "gold_item"]
