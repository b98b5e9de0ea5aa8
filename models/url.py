"""
Database table for the url shortener.

One row per mapping:
- id: the short identifier (random or chosen by the caller)
- original_url: the long URL, stored exactly as it was submitted

Rows are never updated or deleted. The primary key is what keeps
identifiers unique, so inserts are expected to fail on a duplicate id.
"""

from sqlalchemy import Column, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UrlMapping(Base):
    __tablename__ = "urls"

    id = Column(Text, primary_key=True)
    original_url = Column(Text, nullable=False)

    def __repr__(self):
        return f"<UrlMapping(id='{self.id}', original_url='{self.original_url[:50]}')>"
