"""
entity_state.py
---------------
Defines runtime state enumerations shared by all entity types.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity still participates in the simulation.

    Entities are flagged DEAD during a scan and compacted out of their
    collection once the scan completes.
    """
    ALIVE = 0
    DEAD = 1
