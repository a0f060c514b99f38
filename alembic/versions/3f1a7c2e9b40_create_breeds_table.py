"""create breeds table

Revision ID: 3f1a7c2e9b40
Revises:
Create Date: 2025-01-10 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a7c2e9b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'breeds',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('species', sa.String(length=100), nullable=False),
        sa.Column('pet_size', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('weight_min', sa.Float(), nullable=False),
        sa.Column('weight_max', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('breeds')
