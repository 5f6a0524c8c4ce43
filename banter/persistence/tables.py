"""SQLAlchemy table definitions for Banter.

A single key-value table backs every topic's comments, votes and
preferences, keyed the same way browser local storage is.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# STORAGE ITEMS TABLE (key-value)
# ============================================================================
storage_items_table = Table(
    "storage_items",
    metadata,
    Column("key", String(512), primary_key=True),  # e.g. 'comments:Pikachu'
    Column("value", Text, nullable=False),  # Serialized JSON or plain string
    Column("size_bytes", Integer, nullable=False),  # Counted against the quota
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
