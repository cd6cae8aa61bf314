"""Domain services."""

from .base import Service
from .fuzzy_ranker import FuzzyRanker, RankingOptions
from .search_service import SearchService
from .snippet_service import SnippetService
from .tag_service import TagService
from .transfer_service import TransferService

__all__ = [
    "FuzzyRanker",
    "RankingOptions",
    "SearchService",
    "Service",
    "SnippetService",
    "TagService",
    "TransferService",
]
