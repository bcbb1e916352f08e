"""Initial schema: catalogue, shows, bookings with audit columns.

Revision ID: 001
Revises: None
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_by", sa.String(100), nullable=True),
        sa.Column("modified_date", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        *_audit_columns(),
    )
    op.create_index("ix_cities_id", "cities", ["id"])

    op.create_table(
        "partners",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        *_audit_columns(),
    )
    op.create_index("ix_partners_id", "partners", ["id"])

    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("language", sa.String(50), nullable=True),
        sa.Column("genre", sa.String(50), nullable=True),
        sa.Column("duration_in_minutes", sa.Integer(), nullable=False, server_default=sa.text("0")),
        *_audit_columns(),
        sa.CheckConstraint("duration_in_minutes >= 0", name="check_movie_duration_non_negative"),
    )
    op.create_index("ix_movies_id", "movies", ["id"])
    op.create_index("ix_movies_title", "movies", ["title"])

    op.create_table(
        "theatres",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("partner_id", sa.Integer(), sa.ForeignKey("partners.id"), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_theatres_id", "theatres", ["id"])
    op.create_index("ix_theatres_city_id", "theatres", ["city_id"])
    op.create_index("ix_theatres_partner_id", "theatres", ["partner_id"])

    op.create_table(
        "shows",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("movie_id", sa.Integer(), sa.ForeignKey("movies.id"), nullable=False),
        sa.Column("theatre_id", sa.Integer(), sa.ForeignKey("theatres.id"), nullable=False),
        sa.Column("show_time", sa.DateTime(timezone=True), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_shows_id", "shows", ["id"])
    op.create_index("ix_shows_movie_id", "shows", ["movie_id"])
    op.create_index("ix_shows_theatre_id", "shows", ["theatre_id"])
    # Day-window search and the future-booking guard both filter on show_time
    op.create_index("ix_shows_show_time", "shows", ["show_time"])
    op.create_index("ix_shows_theatre_time", "shows", ["theatre_id", "show_time"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "show_id", sa.Integer(),
            sa.ForeignKey("shows.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("booking_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'CONFIRMED'")),
        *_audit_columns(),
        sa.CheckConstraint("status IN ('CONFIRMED', 'CANCELLED')", name="check_booking_status"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_show_id", "bookings", ["show_id"])

    op.create_table(
        "booking_seats",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "booking_id", sa.Integer(),
            sa.ForeignKey("bookings.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("seat_number", sa.String(20), nullable=False),
        sa.UniqueConstraint("booking_id", "seat_number", name="uq_booking_seat"),
    )
    op.create_index("ix_booking_seats_booking_id", "booking_seats", ["booking_id"])


def downgrade() -> None:
    op.drop_table("booking_seats")
    op.drop_table("bookings")
    op.drop_table("shows")
    op.drop_table("theatres")
    op.drop_table("movies")
    op.drop_table("partners")
    op.drop_table("cities")
