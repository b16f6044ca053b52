"""Version Tag Parser - classify repository tags and decompose them into version fields."""

from .models import ParseResult, VersionInfo, VersionType
from .parser_registry import ParserRegistry

__all__ = ["ParseResult", "ParserRegistry", "VersionInfo", "VersionType"]
