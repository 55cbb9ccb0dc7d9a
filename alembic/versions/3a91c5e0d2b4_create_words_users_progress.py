"""create words, users and progress tables

Revision ID: 3a91c5e0d2b4
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3a91c5e0d2b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


EXAM_TYPES = ("IELTS", "TOEFL")
DIFFICULTIES = ("A1", "A2", "B1", "B2", "C1", "C2")
PROGRESS_STATUSES = ("NEW", "LEARNING", "MASTERED")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("daily_goal", sa.Integer(), nullable=False, server_default="10"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_username"), ["username"], unique=True)

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("term", sa.String(length=100), nullable=False),
        sa.Column("translation", sa.String(length=255), nullable=False),
        sa.Column("definition", sa.Text(), nullable=False),
        sa.Column("example_sentence", sa.Text(), nullable=False),
        sa.Column("audio_url", sa.String(length=500), nullable=True),
        sa.Column("exam_type", sa.Enum(*EXAM_TYPES, name="exam_type", native_enum=False), nullable=False),
        sa.Column("difficulty", sa.Enum(*DIFFICULTIES, name="difficulty", native_enum=False), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    with op.batch_alter_table("words", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_words_term"), ["term"], unique=True)
        batch_op.create_index(batch_op.f("ix_words_exam_type"), ["exam_type"], unique=False)
        batch_op.create_index(batch_op.f("ix_words_difficulty"), ["difficulty"], unique=False)

    op.create_table(
        "progress",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("word_id", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            sa.Enum(*PROGRESS_STATUSES, name="progress_status", native_enum=False),
            nullable=False,
        ),
        sa.Column("next_review", sa.DateTime(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["word_id"], ["words.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "word_id", name="uq_progress_user_word"),
    )
    with op.batch_alter_table("progress", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_progress_user_id"), ["user_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_progress_word_id"), ["word_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_progress_status"), ["status"], unique=False)
        batch_op.create_index(batch_op.f("ix_progress_next_review"), ["next_review"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("progress", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_progress_next_review"))
        batch_op.drop_index(batch_op.f("ix_progress_status"))
        batch_op.drop_index(batch_op.f("ix_progress_word_id"))
        batch_op.drop_index(batch_op.f("ix_progress_user_id"))
    op.drop_table("progress")

    with op.batch_alter_table("words", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_words_difficulty"))
        batch_op.drop_index(batch_op.f("ix_words_exam_type"))
        batch_op.drop_index(batch_op.f("ix_words_term"))
    op.drop_table("words")

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_username"))
    op.drop_table("users")
