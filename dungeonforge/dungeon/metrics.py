from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'rooms_requested': 0,
        'rooms_placed': 0,
        'placement_attempts': 0,
        'tree_edges': 0,
        'extra_edges': 0,
        'corridor_cells': 0,
        'loop_cells': 0,
        'connected': False,
        'door_candidates': 0,
        'doors_placed': 0,
        'encounters': 0,
        'runtime_ms': 0.0,
    }
