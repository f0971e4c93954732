"""Blog generation use cases."""

from .generate_blog import GenerateBlogRequest, GenerateBlogResponse, GenerateBlogUseCase

__all__ = ["GenerateBlogRequest", "GenerateBlogResponse", "GenerateBlogUseCase"]
