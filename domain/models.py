from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Pet:
    name: str


class Route(str, Enum):
    """Navigation destinations. Values double as the `page` query param."""
    LIST = 'list'
    DETAILS = 'details'
