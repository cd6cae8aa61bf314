"""SQLAlchemy table definitions for SnipForge.

Tags are stored as a JSON array in a text column; see ``TagSet.to_json``.
The schema is created at engine startup by ``init_schema``.
"""

from sqlalchemy import Column, DateTime, Index, MetaData, String, Table, Text

metadata = MetaData()

snippets_table = Table(
    "snippets",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("language", String(64), nullable=False, server_default="plaintext"),
    Column("tags", Text, nullable=False, server_default="[]"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_snippets_updated_at", snippets_table.c.updated_at)
