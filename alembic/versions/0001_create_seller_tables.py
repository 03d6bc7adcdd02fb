"""create_seller_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    """created_at / updated_at columns (from TimestampMixin)."""
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _seller_fk() -> sa.Column:
    return sa.Column(
        "seller_id",
        sa.Integer(),
        sa.ForeignKey("seller.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Apply migration - create seller, product, customer_order and post tables."""
    # Create seller table
    op.create_table(
        "seller",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=100), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="seller"),
        sa.Column("city", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("followers", sa.Integer(), nullable=False, server_default="0"),
        # Storefront
        sa.Column("store_name", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("store_description", sa.Text(), nullable=False, server_default=""),
        sa.Column("profile_image", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("social_links", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        # Onboarding & KYC
        sa.Column("onboarding_step", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("bank_details", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("documents", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        *_timestamps(),
        # Constraints
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("role IN ('seller', 'admin')", name="ck_seller_valid_role"),
        sa.CheckConstraint("followers >= 0", name="ck_seller_followers_non_negative"),
        sa.CheckConstraint("onboarding_step >= 1", name="ck_seller_onboarding_step_positive"),
    )
    op.create_index("ix_seller_email", "seller", ["email"], unique=True)

    # Create product table
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), nullable=False),
        _seller_fk(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("original_price", sa.Numeric(precision=12, scale=2), nullable=False, server_default="0"),
        sa.Column("category", sa.String(length=30), nullable=False),
        sa.Column("subcategory", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("size", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("material", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("stock", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("images", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("colors", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("tags", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("units_sold", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("delivery", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("rating_average", sa.Numeric(precision=3, scale=2), nullable=False, server_default="0"),
        sa.Column("rating_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        # Constraints
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "category IN ('clothing', 'electronics', 'home', 'beauty', 'books', 'sports', 'other')",
            name="ck_product_valid_category",
        ),
        sa.CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        sa.CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
        sa.CheckConstraint("units_sold >= 0", name="ck_product_units_sold_non_negative"),
    )
    op.create_index("ix_product_seller_id", "product", ["seller_id"])
    op.create_index("ix_product_seller_category", "product", ["seller_id", "category"])
    op.create_index("ix_product_seller_created", "product", ["seller_id", "created_at"])

    # Create customer_order table
    op.create_table(
        "customer_order",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.String(length=40), nullable=False),
        _seller_fk(),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("product.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("total_amount", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        # Customer
        sa.Column("customer_name", sa.String(length=100), nullable=False),
        sa.Column("customer_email", sa.String(length=255), nullable=False),
        sa.Column("customer_phone", sa.String(length=30), nullable=False),
        sa.Column("customer_address", sa.Text(), nullable=False),
        # Payment & fulfilment
        sa.Column("payment_method", sa.String(length=20), nullable=False, server_default="cod"),
        sa.Column("payment_status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("tracking_number", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        *_timestamps(),
        # Constraints
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("quantity >= 1", name="ck_customer_order_quantity_positive"),
        sa.CheckConstraint("total_amount >= 0", name="ck_customer_order_total_non_negative"),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'shipped', 'delivered', 'cancelled')",
            name="ck_customer_order_valid_status",
        ),
        sa.CheckConstraint(
            "payment_method IN ('cod', 'online', 'wallet')",
            name="ck_customer_order_valid_payment_method",
        ),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'paid', 'failed', 'refunded')",
            name="ck_customer_order_valid_payment_status",
        ),
    )
    op.create_index("ix_customer_order_order_id", "customer_order", ["order_id"], unique=True)
    op.create_index("ix_customer_order_seller_id", "customer_order", ["seller_id"])
    op.create_index("ix_customer_order_product_id", "customer_order", ["product_id"])
    op.create_index("ix_customer_order_seller_status", "customer_order", ["seller_id", "status"])
    op.create_index("ix_customer_order_seller_created", "customer_order", ["seller_id", "created_at"])

    # Create post table
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), nullable=False),
        _seller_fk(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("media", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("media_type", sa.String(length=10), nullable=False, server_default="image"),
        sa.Column(
            "tagged_product_id",
            sa.Integer(),
            sa.ForeignKey("product.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("liked_by", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        # Constraints
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("media_type IN ('image', 'video')", name="ck_post_valid_media_type"),
        sa.CheckConstraint(
            "views >= 0 AND likes >= 0 AND comments >= 0",
            name="ck_post_counters_non_negative",
        ),
    )
    op.create_index("ix_post_seller_id", "post", ["seller_id"])
    op.create_index("ix_post_seller_created", "post", ["seller_id", "created_at"])


def downgrade() -> None:
    """Revert migration - drop all seller tables."""
    op.drop_index("ix_post_seller_created", table_name="post")
    op.drop_index("ix_post_seller_id", table_name="post")
    op.drop_table("post")

    op.drop_index("ix_customer_order_seller_created", table_name="customer_order")
    op.drop_index("ix_customer_order_seller_status", table_name="customer_order")
    op.drop_index("ix_customer_order_product_id", table_name="customer_order")
    op.drop_index("ix_customer_order_seller_id", table_name="customer_order")
    op.drop_index("ix_customer_order_order_id", table_name="customer_order")
    op.drop_table("customer_order")

    op.drop_index("ix_product_seller_created", table_name="product")
    op.drop_index("ix_product_seller_category", table_name="product")
    op.drop_index("ix_product_seller_id", table_name="product")
    op.drop_table("product")

    op.drop_index("ix_seller_email", table_name="seller")
    op.drop_table("seller")
