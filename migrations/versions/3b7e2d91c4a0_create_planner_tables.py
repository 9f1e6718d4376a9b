"""Create menu, meal log and demo wallet tables

Revision ID: 3b7e2d91c4a0
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2d91c4a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'menu_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=True),
        sa.Column('calories', sa.Integer(), nullable=True),
        sa.Column('is_vegan', sa.Boolean(), nullable=True),
        sa.Column('contains_gluten', sa.Boolean(), nullable=True),
        sa.Column('contains_peanuts', sa.Boolean(), nullable=True),
        sa.Column('contains_dairy', sa.Boolean(), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=True),
        sa.Column('popularity_score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('restaurant_name', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('menu_item', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_menu_item_category'), ['category'], unique=False)
        batch_op.create_index(batch_op.f('ix_menu_item_is_available'), ['is_available'], unique=False)
        batch_op.create_index(batch_op.f('ix_menu_item_restaurant_name'), ['restaurant_name'], unique=False)

    op.create_table(
        'meal_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.String(length=100), nullable=False),
        sa.Column('meal_id', sa.Integer(), nullable=False),
        sa.Column('log_date', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['meal_id'], ['menu_item.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('meal_log', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_log_student_id'), ['student_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_log_meal_id'), ['meal_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_log_log_date'), ['log_date'], unique=False)

    op.create_table(
        'demo_wallet',
        sa.Column('student_id', sa.String(length=100), nullable=False),
        sa.Column('balance', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint('student_id'),
    )


def downgrade():
    op.drop_table('demo_wallet')
    with op.batch_alter_table('meal_log', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_meal_log_log_date'))
        batch_op.drop_index(batch_op.f('ix_meal_log_meal_id'))
        batch_op.drop_index(batch_op.f('ix_meal_log_student_id'))
    op.drop_table('meal_log')
    with op.batch_alter_table('menu_item', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_menu_item_restaurant_name'))
        batch_op.drop_index(batch_op.f('ix_menu_item_is_available'))
        batch_op.drop_index(batch_op.f('ix_menu_item_category'))
    op.drop_table('menu_item')
