"""create trip planner schema

Revision ID: 20261017_0900_create_trip_planner_schema
Revises:
Create Date: 2026-10-17 09:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261017_0900_create_trip_planner_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def _moderation():
    return [
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('moderation_results', sa.JSON(), nullable=True),
        sa.Column('is_flagged', sa.Boolean(), nullable=False, server_default=sa.false()),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True, index=True),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('email_verified_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_table(
        'personal_access_tokens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('token_id', sa.String(64), nullable=False, unique=True, index=True),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'places',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('external_place_id', sa.String(255), nullable=True, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(512), nullable=True),
        sa.Column('lat', sa.Float(), nullable=False, index=True),
        sa.Column('lng', sa.Float(), nullable=False, index=True),
        sa.Column('category', sa.String(64), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('destination_country', sa.String(255), nullable=False),
        sa.Column('destination_city', sa.String(255), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False, index=True),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(32), nullable=False, server_default='planning', index=True),
        sa.Column('is_group', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('progress', sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'trip_participants',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('role', sa.String(32), nullable=False, server_default='viewer'),
        sa.Column('joined_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'itinerary_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('place_id', sa.Integer(), sa.ForeignKey('places.id'), nullable=True, index=True),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'map_checkpoints',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('place_id', sa.Integer(), sa.ForeignKey('places.id'), nullable=True, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
        sa.Column('checked_in_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'checkpoint_images',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('map_checkpoint_id', sa.Integer(), sa.ForeignKey('map_checkpoints.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('file_path', sa.String(512), nullable=False),
        sa.Column('caption', sa.String(255), nullable=True),
        sa.Column('uploaded_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('moderation_results', sa.JSON(), nullable=True),
        sa.Column('is_flagged', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_table(
        'checklist_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('content', sa.String(255), nullable=False),
        sa.Column('is_checked', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_table(
        'trip_diaries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('entry_date', sa.Date(), nullable=False),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('mood', sa.String(64), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'shares',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('permission', sa.String(32), nullable=False, server_default='viewer'),
        sa.Column('token', sa.String(255), nullable=False, unique=True),
        *_timestamps(),
    )
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('entity_type', sa.String(64), nullable=False, index=True),
        sa.Column('entity_id', sa.Integer(), nullable=False, index=True),
        sa.Column('content', sa.Text(), nullable=False),
        *_moderation(),
        *_timestamps(),
    )
    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('reviewable_type', sa.String(64), nullable=False, index=True),
        sa.Column('reviewable_id', sa.Integer(), nullable=False, index=True),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        *_moderation(),
        *_timestamps(),
    )
    op.create_table(
        'favorites',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('favoritable_type', sa.String(64), nullable=False),
        sa.Column('favoritable_id', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('type', sa.String(64), nullable=False),
        sa.Column('content', sa.String(1024), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('source_type', sa.String(32), nullable=False),
        sa.Column('source_text', sa.Text(), nullable=True),
        sa.Column('source_language', sa.String(16), nullable=False),
        sa.Column('translated_text', sa.Text(), nullable=False),
        sa.Column('target_language', sa.String(16), nullable=False),
        sa.Column('file_path', sa.String(512), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        'translations',
        'notifications',
        'favorites',
        'reviews',
        'comments',
        'shares',
        'trip_diaries',
        'checklist_items',
        'checkpoint_images',
        'map_checkpoints',
        'itinerary_items',
        'trip_participants',
        'trips',
        'places',
        'personal_access_tokens',
        'users',
    ):
        op.drop_table(table)
