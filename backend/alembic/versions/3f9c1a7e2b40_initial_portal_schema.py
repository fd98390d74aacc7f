"""initial_portal_schema

Revision ID: 3f9c1a7e2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1a7e2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PERIOD_TYPES = "('weekly', 'monthly')"


def _owned_by_hotel() -> list[sa.Column]:
    return [
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("hotel_id", sa.UUID(), sa.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False),
        sa.Column("updated_by", sa.UUID(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    ]


def _period() -> list[sa.Column]:
    return [
        sa.Column("period_type", sa.String(20), nullable=False),
        sa.Column("period_start", sa.Date(), nullable=False),
        sa.Column("period_end", sa.Date(), nullable=False),
    ]


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("scope", sa.String(50), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("role IN ('administrator', 'editor', 'viewer')", name="ck_users_role"),
        sa.CheckConstraint("scope IN ('corporate', 'property')", name="ck_users_scope"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "hotels",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("brand", sa.String(50), nullable=False),
        sa.Column("region", sa.String(100), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        _created_at(),
        sa.CheckConstraint("brand IN ('virgin_hotels', 'virgin_limited_edition')", name="ck_hotels_brand"),
        sa.CheckConstraint("status IN ('active', 'inactive')", name="ck_hotels_status"),
    )
    op.create_index("ix_hotels_brand", "hotels", ["brand"])

    op.create_table(
        "user_hotel_assignments",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hotel_id", sa.UUID(), sa.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False),
        _created_at(),
        sa.UniqueConstraint("user_id", "hotel_id", name="uq_user_hotel_assignments_user_hotel"),
    )
    op.create_index("ix_user_hotel_assignments_user_id", "user_hotel_assignments", ["user_id"])
    op.create_index("ix_user_hotel_assignments_hotel_id", "user_hotel_assignments", ["hotel_id"])

    op.create_table(
        "str_data",
        *_owned_by_hotel(),
        *_period(),
        *[sa.Column(f"occupancy_{s}", sa.Numeric(5, 2), nullable=False) for s in ("actual", "budget", "prior_year", "comp_set")],
        *[sa.Column(f"adr_{s}", sa.Numeric(10, 2), nullable=False) for s in ("actual", "budget", "prior_year", "comp_set")],
        *[sa.Column(f"revpar_{s}", sa.Numeric(10, 2), nullable=False) for s in ("actual", "budget", "prior_year", "comp_set")],
        sa.Column("mpi", sa.Numeric(6, 2), nullable=False),
        sa.Column("ari", sa.Numeric(6, 2), nullable=False),
        sa.Column("rgi", sa.Numeric(6, 2), nullable=False),
        _created_at(),
        sa.CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_str_data_period_type"),
    )
    op.create_index("ix_str_data_hotel_id", "str_data", ["hotel_id"])
    op.create_index("idx_str_data_period", "str_data", ["period_start", "period_end"])

    op.create_table(
        "web_analytics_data",
        *_owned_by_hotel(),
        *_period(),
        sa.Column("sessions", sa.Integer()),
        sa.Column("users", sa.Integer()),
        sa.Column("bounce_rate", sa.Numeric(5, 2)),
        sa.Column("booking_engine_conversion_rate", sa.Numeric(5, 2)),
        sa.Column("revenue_direct_bookings", sa.Numeric(12, 2)),
        sa.Column("traffic_organic", sa.Integer()),
        sa.Column("traffic_paid", sa.Integer()),
        sa.Column("traffic_direct", sa.Integer()),
        sa.Column("traffic_referral", sa.Integer()),
        _created_at(),
        sa.CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_web_analytics_data_period_type"),
    )
    op.create_index("ix_web_analytics_data_hotel_id", "web_analytics_data", ["hotel_id"])

    op.create_table(
        "paid_media_data",
        *_owned_by_hotel(),
        *_period(),
        sa.Column("channel", sa.String(100), nullable=False),
        sa.Column("spend", sa.Numeric(10, 2)),
        sa.Column("roas", sa.Numeric(6, 2)),
        sa.Column("cpa", sa.Numeric(10, 2)),
        sa.Column("impressions", sa.Integer()),
        sa.Column("clicks", sa.Integer()),
        sa.Column("ctr", sa.Numeric(5, 2)),
        _created_at(),
        sa.CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_paid_media_data_period_type"),
    )
    op.create_index("ix_paid_media_data_hotel_id", "paid_media_data", ["hotel_id"])

    op.create_table(
        "annual_strategies",
        *_owned_by_hotel(),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("strategy_summary", sa.Text()),
        sa.Column("sales_strategy", sa.Text()),
        sa.Column("rm_strategy", sa.Text()),
        sa.Column("ecommerce_strategy", sa.Text()),
        sa.Column("revenue_goal", sa.Numeric(12, 2)),
        sa.Column("revpar_goal", sa.Numeric(10, 2)),
        sa.Column("market_share_goal", sa.Numeric(5, 2)),
        _created_at(),
        sa.UniqueConstraint("hotel_id", "year", name="uq_annual_strategies_hotel_year"),
    )
    op.create_index("ix_annual_strategies_hotel_id", "annual_strategies", ["hotel_id"])

    op.create_table(
        "quarterly_strategies",
        *_owned_by_hotel(),
        sa.Column(
            "annual_strategy_id",
            sa.UUID(),
            sa.ForeignKey("annual_strategies.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("quarter", sa.Integer(), nullable=False),
        sa.Column("strategy_summary", sa.Text()),
        sa.Column("sales_initiatives", sa.Text()),
        sa.Column("rm_initiatives", sa.Text()),
        sa.Column("ecommerce_initiatives", sa.Text()),
        _created_at(),
        sa.UniqueConstraint("hotel_id", "year", "quarter", name="uq_quarterly_strategies_hotel_year_quarter"),
        sa.CheckConstraint("quarter >= 1 AND quarter <= 4", name="ck_quarterly_strategies_quarter"),
    )
    op.create_index("ix_quarterly_strategies_hotel_id", "quarterly_strategies", ["hotel_id"])
    op.create_index("ix_quarterly_strategies_annual_strategy_id", "quarterly_strategies", ["annual_strategy_id"])

    op.create_table(
        "tactics",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("hotel_id", sa.UUID(), sa.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "quarterly_strategy_id",
            sa.UUID(),
            sa.ForeignKey("quarterly_strategies.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("discipline", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("owner_id", sa.UUID(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("due_date", sa.Date()),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("kpi_target", sa.Text()),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "discipline IN ('sales', 'revenue_management', 'ecommerce')", name="ck_tactics_discipline"
        ),
        sa.CheckConstraint("status IN ('not_started', 'in_progress', 'completed')", name="ck_tactics_status"),
    )
    op.create_index("ix_tactics_hotel_id", "tactics", ["hotel_id"])
    op.create_index("idx_tactics_status", "tactics", ["status"])

    op.create_table(
        "weekly_updates",
        *_owned_by_hotel(),
        sa.Column("week_start", sa.Date(), nullable=False),
        sa.Column("week_end", sa.Date(), nullable=False),
        *[
            sa.Column(name, sa.Text())
            for name in (
                "str_summary",
                "web_analytics_summary",
                "paid_media_summary",
                "tactics_deployed",
                "whats_working",
                "whats_not_working",
                "adjustments_planned",
                "promotions_in_market",
            )
        ],
        _created_at(),
    )
    op.create_index("ix_weekly_updates_hotel_id", "weekly_updates", ["hotel_id"])


def downgrade() -> None:
    for table in (
        "weekly_updates",
        "tactics",
        "quarterly_strategies",
        "annual_strategies",
        "paid_media_data",
        "web_analytics_data",
        "str_data",
        "user_hotel_assignments",
        "hotels",
        "users",
    ):
        op.drop_table(table)
