"""Typed identifiers for stored records and weak references."""
from typing import NewType

ProductId = NewType("ProductId", int)
UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
