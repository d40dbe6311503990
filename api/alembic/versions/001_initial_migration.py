"""Initial migration: create concept and word tables

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create concept table
    op.create_table(
        'concept',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    # Every query filters on the owner
    op.create_index(op.f('ix_concept_user_id'), 'concept', ['user_id'], unique=False)

    # Create word table
    op.create_table(
        'word',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('concept_id', sa.Integer(), nullable=False),
        sa.Column('word', sa.String(), nullable=True),
        sa.Column('language', sa.String(), nullable=True),
        sa.Column('ipa', sa.String(), nullable=True),
        sa.Column('nuance', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['concept_id'], ['concept.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_word_concept_id'), 'word', ['concept_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_word_concept_id'), table_name='word')
    op.drop_table('word')
    op.drop_index(op.f('ix_concept_user_id'), table_name='concept')
    op.drop_table('concept')
