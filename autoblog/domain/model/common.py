"""Base model for AutoBlog entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for profiles, identities and messages.

    Entities are immutable; changes produce a new instance.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
