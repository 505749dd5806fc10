from permission_templates.infrastructure.indexing.logging_indexer import (
    LoggingPermissionIndexer,
)

__all__ = ["LoggingPermissionIndexer"]
