"""Content briefs, photos and the generated blog document.

Briefs and sections are tagged variants: the ``type`` field is the
discriminator and anything outside the known set fails validation.
"""

import base64
import binascii
from typing import Annotated, ClassVar, Literal, Union

from pydantic import ConfigDict, Field, model_validator

from autoblog.domain.model.common import DomainModel


class BriefBase(DomainModel):
    """Fields shared by every brief variant."""

    mood: str = Field(default="", max_length=500)
    notes: str = Field(default="", max_length=2000)
    rating: int = Field(default=4, ge=0, le=5)
    style_sample: str | None = Field(default=None, max_length=5000)

    # Fields that must be non-blank before a generation may start
    required_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        """Return the required fields that are empty or blank."""
        return [
            name
            for name in self.required_fields
            if not str(getattr(self, name) or "").strip()
        ]


class RestaurantBrief(BriefBase):
    """Brief for a restaurant review (맛집)."""

    type: Literal["restaurant"] = "restaurant"
    name: str = Field(default="", max_length=200)
    location: str = Field(default="", max_length=200)
    menu: str = Field(default="", max_length=500)

    required_fields: ClassVar[tuple[str, ...]] = ("name", "location")


class GeneralBrief(BriefBase):
    """Brief for a free-topic post."""

    type: Literal["general"] = "general"
    subject: str = Field(default="", max_length=200)
    category: str = Field(default="", max_length=100)

    required_fields: ClassVar[tuple[str, ...]] = ("subject", "category")


ContentBrief = Annotated[
    Union[RestaurantBrief, GeneralBrief], Field(discriminator="type")
]


class PhotoPayload(DomainModel):
    """Encoded still image attached to a generation request.

    Accepts raw base64 or a ``data:<mime>;base64,<data>`` URL, in which case
    the mime type is taken from the URL header.
    """

    data: str
    mime_type: str = "image/jpeg"

    @model_validator(mode="before")
    @classmethod
    def split_data_url(cls, values):
        if isinstance(values, dict):
            data = values.get("data")
            if isinstance(data, str) and data.startswith("data:") and "," in data:
                header, payload = data.split(",", 1)
                mime = header[len("data:") :].split(";", 1)[0]
                values = {**values, "data": payload}
                if mime:
                    values["mime_type"] = mime
        return values

    def decode(self) -> bytes:
        """Decode the image bytes.

        Raises:
            ValueError: If the payload is not valid base64
        """
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Photo is not valid base64: {e}") from e


class SectionBase(DomainModel):
    # Fields outside a section's own variant, such as imageIndex on a text
    # section, are rejected rather than dropped
    model_config = ConfigDict(extra="forbid")

    content: str


class TextSection(SectionBase):
    type: Literal["text"] = "text"


class SubtitleSection(SectionBase):
    type: Literal["subtitle"] = "subtitle"


class SummarySection(SectionBase):
    type: Literal["summary"] = "summary"


class ImageSection(SectionBase):
    """Caption for one of the uploaded photos."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["image"] = "image"
    image_index: int = Field(alias="imageIndex", ge=0)


BlogSection = Annotated[
    Union[TextSection, ImageSection, SubtitleSection, SummarySection],
    Field(discriminator="type"),
]


class GeneratedBlog(DomainModel):
    """Structured blog post returned by the model."""

    title: str = Field(min_length=1)
    sections: list[BlogSection] = Field(min_length=1)
    tags: list[str]

    def out_of_range_images(self, photo_count: int) -> list[int]:
        """Return image indexes that do not point into the photo list."""
        return [
            section.image_index
            for section in self.sections
            if isinstance(section, ImageSection)
            and section.image_index >= photo_count
        ]
