from .core.models.document import Document
from .core.models.taggable import TaggableRecord
from .core.models.tags import join_tags, normalize_tags
from .core.queries.predicates import TagMatch, TagPredicate, TagQueryBuilder
from .core.repositories.document_store import DocumentStore
from .core.repositories.implementations.memory.document_store import InMemoryDocumentStore
from .core.repositories.implementations.supabase.document_store import SupabaseDocumentStore
from .core.schemas.tags import TagFrequencyEntry
from .core.services.tag_aggregation_service import TagAggregator
from .core.services.tagging_service import TaggingService

__all__ = [
    "Document",
    "DocumentStore",
    "InMemoryDocumentStore",
    "SupabaseDocumentStore",
    "TagAggregator",
    "TagFrequencyEntry",
    "TagMatch",
    "TagPredicate",
    "TagQueryBuilder",
    "TaggableRecord",
    "TaggingService",
    "join_tags",
    "normalize_tags",
]
