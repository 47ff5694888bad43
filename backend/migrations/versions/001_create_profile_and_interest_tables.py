"""Create profile and interest tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'profile',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=True),
        sa.Column('gender', sa.Text(), nullable=False),
        sa.Column('dob', sa.Date(), nullable=False),
        sa.Column('height_feet', sa.Integer(), nullable=False),
        sa.Column('height_inches', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('religion', sa.Text(), nullable=True),
        sa.Column('community', sa.Text(), nullable=True),
        sa.Column('community_preference', sa.Text(), nullable=True),
        sa.Column('marital_status', sa.Text(), nullable=True),
        sa.Column('city', sa.Text(), nullable=True),
        sa.Column('state', sa.Text(), nullable=True),
        sa.Column('country', sa.Text(), nullable=True),
        sa.Column('contact', sa.Text(), nullable=True),
        sa.Column('time_of_birth', sa.Text(), nullable=True),
        sa.Column('place_of_birth', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_profile_email'),
        sa.CheckConstraint("gender IN ('male', 'female')", name='ck_profile_gender'),
        sa.CheckConstraint('height_inches >= 0 AND height_inches <= 11', name='ck_profile_height_inches'),
    )
    op.create_index('idx_profile_candidates', 'profile', ['gender', 'community_preference'])

    op.create_table(
        'interest',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('from_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('to_profile_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('mutual', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('mutual_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['from_profile_id'], ['profile.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['to_profile_id'], ['profile.id'], ondelete='CASCADE'),
        # One interest per ordered pair; makes check-and-create atomic
        sa.UniqueConstraint('from_profile_id', 'to_profile_id', name='uq_interest_from_to'),
    )
    op.create_index('idx_interest_to_profile', 'interest', ['to_profile_id'])
    op.create_index('idx_interest_mutual', 'interest', ['mutual'])


def downgrade():
    op.drop_index('idx_interest_mutual', table_name='interest')
    op.drop_index('idx_interest_to_profile', table_name='interest')
    op.drop_table('interest')
    op.drop_index('idx_profile_candidates', table_name='profile')
    op.drop_table('profile')
