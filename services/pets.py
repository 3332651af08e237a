from typing import List, Optional, Union

from domain.constants import (
    IMAGE_BG_SET,
    IMAGE_HOST,
    IMAGE_SET,
    IMAGE_SIZE,
    PET_COUNT,
    PET_NAME_TEMPLATE,
)
from domain.models import Pet


def generate_pets(count: int = PET_COUNT) -> List[Pet]:
    """Build the in-memory dataset: Cutie #1 .. Cutie #count, in order."""
    return [Pet(PET_NAME_TEMPLATE.format(n=n)) for n in range(1, count + 1)]


def name_hash(name: str) -> int:
    """32-bit signed polynomial hash (31*h + c) over UTF-16 code units.

    Kept bit-compatible with JVM ``String.hashCode`` so avatar URLs stay
    stable across the mobile and web versions of the demo.
    """
    h = 0
    encoded = name.encode('utf-16-be')
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def pet_image_url(pet: Union[Pet, str]) -> str:
    name = pet.name if isinstance(pet, Pet) else pet
    return f"{IMAGE_HOST}/{name_hash(name)}?set={IMAGE_SET}&size={IMAGE_SIZE}&bgset={IMAGE_BG_SET}"


def pet_at(pets: List[Pet], index: Optional[int]) -> Optional[Pet]:
    if index is None or index < 0 or index >= len(pets):
        return None
    return pets[index]
