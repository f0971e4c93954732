"""SQLAlchemy table definitions for AutoBlog.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USER PROFILES TABLE (keyed by identity key, e.g. "naver:123")
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("email", String(255), nullable=False),
    Column("credit_balance", Integer, nullable=False, server_default="0"),
    Column("unlimited", Boolean, nullable=False, server_default="false"),
    Column(
        "email_verified_reward_granted",
        Boolean,
        nullable=False,
        server_default="false",
    ),
    Column("writing_styles", JSONB, nullable=False, server_default="[]"),
    Column("linked_provider_id", String(255), nullable=True),
    Column("revision", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("credit_balance >= 0", name="ck_user_profiles_balance"),
)

Index("idx_user_profiles_created_at", user_profiles_table.c.created_at)

# ============================================================================
# AUTH IDENTITIES TABLE (backing records for identity keys)
# ============================================================================
auth_identities_table = Table(
    "auth_identities",
    metadata,
    Column("identity_key", String(255), primary_key=True),
    Column("provider", String(50), nullable=False),
    Column("provider_user_id", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("email_verified", Boolean, nullable=False, server_default="true"),
    Column("display_name", String(255), nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("email", name="uq_auth_identities_email"),
    UniqueConstraint("provider", "provider_user_id", name="uq_auth_identities_provider"),
)

# ============================================================================
# SUPPORT MESSAGES TABLE
# ============================================================================
support_messages_table = Table(
    "support_messages",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", String(255), nullable=False),
    Column("user_email", String(255), nullable=False),
    Column("subject", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("reply_content", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("user_read", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("replied_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'replied')", name="ck_support_messages_status"
    ),
)

Index("idx_support_messages_user_id", support_messages_table.c.user_id)
Index("idx_support_messages_created_at", support_messages_table.c.created_at)
