"""create score_record table

Revision ID: 4c7e9a1f2b3d
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7e9a1f2b3d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Tables created by `flask db-reset` already carry the schema
    if 'score_record' in set(insp.get_table_names()):
        return

    op.create_table(
        'score_record',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_name', sa.String(length=64), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('attempts', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('score_record') as batch_op:
        batch_op.create_index(batch_op.f('ix_score_record_player_name'), ['player_name'], unique=False)


def downgrade():
    insp = sa.inspect(op.get_bind())
    if 'score_record' not in set(insp.get_table_names()):
        return
    with op.batch_alter_table('score_record') as batch_op:
        batch_op.drop_index(batch_op.f('ix_score_record_player_name'))
    op.drop_table('score_record')
