"""Create materials table

Revision ID: 3c1f9a7e2b10
Revises:
Create Date: 2026-10-12 14:02:31.418263

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "materials",
        sa.Column("material_id", sa.String(length=32), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("formula_pretty", sa.String(length=100), nullable=False),
        sa.Column("elements", sa.JSON(), nullable=False),
        sa.Column("chemsys", sa.String(length=100), nullable=False),
        sa.Column("density", sa.Float(), nullable=False),
        sa.Column("volume", sa.Float(), nullable=False),
        sa.Column("nsites", sa.Integer(), nullable=False),
        sa.Column("symmetry", sa.JSON(), nullable=False),
        sa.Column("universal_anisotropy", sa.Float(), nullable=False),
        sa.Column("homogeneous_poisson", sa.Float(), nullable=False),
        sa.Column("elasticity", sa.JSON(), nullable=True),
        sa.Column("validation", sa.JSON(), nullable=True),
        sa.Column("band_gap", sa.Float(), nullable=True),
        sa.Column("formation_energy_per_atom", sa.Float(), nullable=True),
        sa.Column("is_stable", sa.Boolean(), nullable=True),
        sa.Column("is_metal", sa.Boolean(), nullable=True),
    )
    op.create_index("ix_materials_position", "materials", ["position"], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_materials_position", table_name="materials")
    op.drop_table("materials")
