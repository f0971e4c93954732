"""Domain model entities for AutoBlog."""

from autoblog.domain.model.blog import (
    BlogSection,
    ContentBrief,
    GeneralBrief,
    GeneratedBlog,
    ImageSection,
    PhotoPayload,
    RestaurantBrief,
    SubtitleSection,
    SummarySection,
    TextSection,
)
from autoblog.domain.model.identity import AuthIdentity
from autoblog.domain.model.message import SupportMessage
from autoblog.domain.model.profile import UserProfile, WritingStyle

__all__ = [
    "AuthIdentity",
    "BlogSection",
    "ContentBrief",
    "GeneralBrief",
    "GeneratedBlog",
    "ImageSection",
    "PhotoPayload",
    "RestaurantBrief",
    "SubtitleSection",
    "SummarySection",
    "SupportMessage",
    "TextSection",
    "UserProfile",
    "WritingStyle",
]
