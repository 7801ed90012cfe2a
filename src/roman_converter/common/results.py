"""Result models for batch conversion.

Batch conversions never stop on a bad item; each input produces a
ConversionResult carrying either the converted value or the error message.
"""
from typing import Literal, Optional

from pydantic import BaseModel, TypeAdapter


Direction = Literal["to_roman", "from_roman"]


class ConversionResult(BaseModel):
    """Outcome of converting one input token.

    Attributes:
        source: The normalised input (stripped, uppercased)
        direction: Which conversion was attempted, or None if the token
                   could not be classified
        result: Converted value as text, or None on failure
        error: Error message, or None on success
    """
    source: str
    direction: Optional[Direction] = None
    result: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# Used by the CLI to serialise a batch as a JSON array
ConversionResultList = TypeAdapter(list[ConversionResult])
