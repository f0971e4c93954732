"""Naver Login adapter."""

from .client import MockNaverClient, NaverClient, RealNaverClient

__all__ = ["NaverClient", "RealNaverClient", "MockNaverClient"]
