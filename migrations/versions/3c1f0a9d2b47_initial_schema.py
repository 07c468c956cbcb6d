"""initial_schema

Create the schema of the Q&A service:
- Questions (optional text[] tags)
- Answers (reference their question; no cascade on delete)
- Accounts (email is the primary key, id is a serial)
- Passwords (client credentials for token login)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-19 10:12:44.518301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("tags", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column(
            "created_on",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "answers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_on",
            postgresql.TIMESTAMP(),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("corresponding_question", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["corresponding_question"], ["questions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_answers_corresponding_question", "answers", ["corresponding_question"]
    )

    # id is a serial but not the key; lookups go by email
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), sa.Identity(always=False), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("email"),
        sa.UniqueConstraint("id"),
    )

    op.create_table(
        "passwords",
        sa.Column("client_id", sa.Text(), nullable=False),
        sa.Column("client_secret", sa.Text(), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("client_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("passwords")
    op.drop_table("accounts")
    op.drop_index("idx_answers_corresponding_question", table_name="answers")
    op.drop_table("answers")
    op.drop_table("questions")
