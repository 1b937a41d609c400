"""Trait codec: pack and unpack 4-bit trait slots inside a culture value.

Slot 0 occupies the lowest 4 bits. Bits above ``NUM_FEATURES * TRAIT_BITS``
are ignored by ``extract`` and cleared by ``replace``.
"""

from __future__ import annotations

from typing import Sequence

from culture_diffusion.config.constants import (
    EMPTY_CULTURE,
    NUM_FEATURES,
    TRAIT_BITS,
    TRAIT_MASK,
)

SLOT_CLEAR_MASKS: tuple[int, ...] = tuple(
    EMPTY_CULTURE & ~(TRAIT_MASK << (TRAIT_BITS * slot)) for slot in range(NUM_FEATURES)
)
"""Per-slot masks, each clearing exactly the 4 bits of its slot."""


def extract(value: int, slot: int) -> int:
    """Return the trait stored at ``slot``."""
    return (value >> (TRAIT_BITS * slot)) & TRAIT_MASK


def replace(value: int, trait: int, slot: int) -> int:
    """Return ``value`` with the trait at ``slot`` overwritten by ``trait``."""
    return (value & SLOT_CLEAR_MASKS[slot]) | (trait << (TRAIT_BITS * slot))


def decode(value: int) -> tuple[int, ...]:
    """Unpack every trait slot, lowest slot first."""
    return tuple(extract(value, slot) for slot in range(NUM_FEATURES))


def encode(traits: Sequence[int]) -> int:
    """Pack ``traits`` (lowest slot first) into a culture value."""
    if len(traits) != NUM_FEATURES:
        raise ValueError(f"expected {NUM_FEATURES} traits, got {len(traits)}")
    value = 0
    for slot, trait in enumerate(traits):
        if not 0 <= trait <= TRAIT_MASK:
            raise ValueError(f"trait at slot {slot} out of range: {trait}")
        value |= trait << (TRAIT_BITS * slot)
    return value
