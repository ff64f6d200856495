"""
Create flashcards table.
"""

from alembic import op
import sqlalchemy as sa

# --- Alembic identifiers ---
revision = "0001_create_flashcards_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sqlite_autoincrement=True,
    )

    op.create_index(
        "ix_flashcards_created_at",
        "flashcards",
        ["created_at"],
    )


def downgrade():
    op.drop_index("ix_flashcards_created_at", table_name="flashcards")
    op.drop_table("flashcards")
