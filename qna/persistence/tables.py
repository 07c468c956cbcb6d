"""SQLAlchemy table definitions.

These match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),  # serial
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("tags", postgresql.ARRAY(Text), nullable=True),  # NULL means no tags
    Column("created_on", TIMESTAMP, nullable=False, server_default="NOW()"),
)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=False),
    Column("created_on", TIMESTAMP, nullable=False, server_default="NOW()"),
    # No ON DELETE CASCADE: deleting a question never removes its answers
    Column(
        "corresponding_question",
        Integer,
        ForeignKey("questions.id"),
        nullable=True,
    ),
)

Index("idx_answers_corresponding_question", answers_table.c.corresponding_question)

# ============================================================================
# ACCOUNTS TABLE (email is the lookup key)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", Integer, Identity(always=False), nullable=False, unique=True),
    Column("email", String(255), primary_key=True),
    Column("password", String(255), nullable=False),
)

# ============================================================================
# PASSWORDS TABLE (login credentials)
# ============================================================================
passwords_table = Table(
    "passwords",
    metadata,
    Column("client_id", Text, primary_key=True),
    Column("client_secret", Text, nullable=False),
    Column("full_name", Text, nullable=False),
    Column("email", Text, nullable=False),
)
