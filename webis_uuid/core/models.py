"""Pydantic model for the two-part record name."""

from pydantic import BaseModel

NAME_SEPARATOR = ":"


class RecordName(BaseModel):
    """Scheme prefix plus the record's scheme-specific internal ID.

    Either part may be empty. Only ``str`` values are accepted.
    """

    prefix: str
    internal_id: str

    model_config = {"frozen": True, "strict": True}

    @property
    def canonical_name(self) -> str:
        return f"{self.prefix}{NAME_SEPARATOR}{self.internal_id}"
