"""Create deck, card and study_session tables

Revision ID: 001_initial_migration
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_migration'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create the deck, card and study_session tables.
    """
    op.create_table(
        'deck',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_studied_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='deck_pkey')
    )

    op.create_table(
        'card',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('front', sa.String(), nullable=False),
        sa.Column('back', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='new'),
        sa.Column('last_reviewed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['deck_id'], ['deck.id'], name='card_deck_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='card_pkey'),
        sa.CheckConstraint(
            "status IN ('new', 'easy', 'good', 'again')",
            name='card_status_check'
        )
    )
    op.create_index(op.f('ix_card_deck_id'), 'card', ['deck_id'], unique=False)

    # At most one stored session per deck
    op.create_table(
        'study_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('state', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['deck_id'], ['deck.id'], name='study_session_deck_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='study_session_pkey')
    )
    op.create_index(op.f('ix_study_session_deck_id'), 'study_session', ['deck_id'], unique=True)


def downgrade() -> None:
    """
    Drop all tables.
    """
    op.drop_index(op.f('ix_study_session_deck_id'), table_name='study_session')
    op.drop_table('study_session')
    op.drop_index(op.f('ix_card_deck_id'), table_name='card')
    op.drop_table('card')
    op.drop_table('deck')
