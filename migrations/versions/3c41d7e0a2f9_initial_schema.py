"""initial_schema

Create the schema for AutoBlog:
- User profiles (credit balance, unlimited flag, writing styles)
- Auth identities (Naver accounts backing the identity keys)
- Support messages (user to operator inbox)

Revision ID: 3c41d7e0a2f9
Revises:
Create Date: 2026-01-12 10:04:51.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d7e0a2f9"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USER_PROFILES table (keyed by identity key, e.g. "naver:123")
    # ========================================================================
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("credit_balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unlimited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "email_verified_reward_granted",
            sa.Boolean(),
            nullable=False,
            server_default="false",
        ),
        sa.Column(
            "writing_styles",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("linked_provider_id", sa.String(255), nullable=True),
        # Bumped on every write; ledger updates are conditional on it
        sa.Column("revision", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("credit_balance >= 0", name="ck_user_profiles_balance"),
    )
    op.create_index("idx_user_profiles_created_at", "user_profiles", ["created_at"])

    # ========================================================================
    # AUTH_IDENTITIES table
    # ========================================================================
    op.create_table(
        "auth_identities",
        sa.Column("identity_key", sa.String(255), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),  # 'naver'
        sa.Column("provider_user_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("email_verified", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("display_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("identity_key"),
        sa.UniqueConstraint("email", name="uq_auth_identities_email"),
        sa.UniqueConstraint(
            "provider", "provider_user_id", name="uq_auth_identities_provider"
        ),
    )

    # ========================================================================
    # SUPPORT_MESSAGES table
    # ========================================================================
    op.create_table(
        "support_messages",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("reply_content", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("user_read", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("replied_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'replied')", name="ck_support_messages_status"
        ),
    )
    op.create_index("idx_support_messages_user_id", "support_messages", ["user_id"])
    op.create_index(
        "idx_support_messages_created_at", "support_messages", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_support_messages_created_at", table_name="support_messages")
    op.drop_index("idx_support_messages_user_id", table_name="support_messages")
    op.drop_table("support_messages")
    op.drop_table("auth_identities")
    op.drop_index("idx_user_profiles_created_at", table_name="user_profiles")
    op.drop_table("user_profiles")
