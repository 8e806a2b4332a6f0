"""create_books_table

Revision ID: 0001_create_books_table
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_books_table'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column(
            'isbn',
            sa.Text(),
            nullable=False,
            comment='International Standard Book Number'
        ),
        sa.Column('amazon_url', sa.Text(), nullable=False),
        sa.Column('author', sa.Text(), nullable=False),
        sa.Column('language', sa.Text(), nullable=False),
        sa.Column(
            'pages',
            sa.Integer(),
            nullable=False,
            comment='Number of pages in the book'
        ),
        sa.Column('publisher', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column(
            'year',
            sa.Integer(),
            nullable=False,
            comment='Publication year'
        ),
        sa.PrimaryKeyConstraint('isbn'),
    )
    op.create_index(op.f('ix_books_author'), 'books', ['author'], unique=False)
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_index(op.f('ix_books_author'), table_name='books')
    op.drop_table('books')
