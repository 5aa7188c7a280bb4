"""Explicit exercise muscle group, timezone-aware timestamps

Revision ID: 002
Revises: 001
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TIMESTAMP_COLUMNS = {
    'users': ('created_at', 'updated_at'),
    'mesocycles': ('created_at', 'updated_at'),
    'weeks': ('created_at',),
    'workouts': ('created_at',),
    'exercises': ('created_at',),
    'sets': ('created_at',),
}


def upgrade() -> None:
    """Add exercises.muscle_group; store timestamps with time zone (existing values are UTC)."""
    with op.batch_alter_table('exercises') as batch_op:
        batch_op.add_column(sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True))

    for table, columns in TIMESTAMP_COLUMNS.items():
        with op.batch_alter_table(table) as batch_op:
            for column in columns:
                batch_op.alter_column(
                    column,
                    existing_type=sa.DateTime(),
                    type_=sa.DateTime(timezone=True),
                    existing_nullable=False,
                    postgresql_using=f"{column} AT TIME ZONE 'UTC'",
                )


def downgrade() -> None:
    for table, columns in TIMESTAMP_COLUMNS.items():
        with op.batch_alter_table(table) as batch_op:
            for column in columns:
                batch_op.alter_column(
                    column,
                    existing_type=sa.DateTime(timezone=True),
                    type_=sa.DateTime(),
                    existing_nullable=False,
                    postgresql_using=f"{column} AT TIME ZONE 'UTC'",
                )

    with op.batch_alter_table('exercises') as batch_op:
        batch_op.drop_column('muscle_group')
