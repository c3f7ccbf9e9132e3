"""create saved_articles, authors, articles and projects tables

Revision ID: 2026_10_18_01
Revises: 
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "2026_10_18_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "saved_articles",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("primary_keyword", sa.Text(), nullable=True),
        sa.Column("user_lsi_keywords", sa.JSON(), nullable=False),
        sa.Column("articles", sa.JSON(), nullable=True),
        sa.Column("markdown_content", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("generation_settings", sa.JSON(), nullable=True),
        sa.Column("search_intent", sa.JSON(), nullable=True),
        sa.Column("seo_analysis", sa.JSON(), nullable=True),
        sa.Column("keyword_research_data", sa.JSON(), nullable=True),
        sa.Column("saved_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_saved_articles_saved_at", "saved_articles", ["saved_at"])

    op.create_table(
        "authors",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
    )
    op.create_index("ix_authors_name", "authors", ["name"], unique=True)

    op.create_table(
        "articles",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("slug", sa.Text(), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("author_id", sa.String(length=36), sa.ForeignKey("authors.id"), nullable=False),
    )
    op.create_index("ix_articles_slug", "articles", ["slug"], unique=True)
    op.create_index("ix_articles_published_at", "articles", ["published_at"])
    op.create_index("ix_articles_author_id", "articles", ["author_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("project_url", sa.Text(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_projects_title", "projects", ["title"])


def downgrade():
    op.drop_table("projects")
    op.drop_table("articles")
    op.drop_table("authors")
    op.drop_table("saved_articles")
