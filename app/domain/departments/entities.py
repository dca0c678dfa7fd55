"""
Domain entities for the departments bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


@dataclass
class Department:
    """A department in the catalog.

    The id is assigned by storage on creation and is 0 until then.
    Names keep their whitespace exactly as given. A missing description
    is normalized to the empty string.
    """

    name: Optional[str]
    description: Optional[str] = ""
    id: int = 0

    def __post_init__(self) -> None:
        if self.description is None:
            self.description = ""

