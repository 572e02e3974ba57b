from .generator import NPC, generate_npc, generate_npcs, npc_avatar

__all__ = ["NPC", "generate_npc", "generate_npcs", "npc_avatar"]
