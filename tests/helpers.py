"""
Shared test data: sample books, transformers and SQLAlchemy models.
"""

from typing import Dict, List

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from transmit.transformation import TransformerAbstract

TEST_BOOKS: List[Dict] = [
    {
        "id": 1,
        "title": "Hogfather",
        "yr": "1998",
        "author_name": "Philip K Dick",
        "author_email": "philip@example.org",
        "characters": [{"name": "Death"}, {"name": "Hex"}],
        "publisher": "Elephant books",
    },
    {
        "id": 2,
        "title": "Game Of Kill Everyone",
        "yr": "2014",
        "author_name": "George R. R. Satan",
        "author_email": "george@example.org",
        "characters": [{"name": "Ned Stark"}, {"name": "Tywin Lannister"}],
        "publisher": "Bloody Fantasy inc.",
    },
]


def book_transformer(book: Dict) -> Dict:
    return {"id": book["id"], "author": book["author_name"]}


class CharacterTransformer(TransformerAbstract):
    def transform(self, character):
        return {"name": character["name"]}


class PublisherTransformer(TransformerAbstract):
    def transform(self, publisher):
        return {"name": publisher}


class BookTransformer(TransformerAbstract):
    available_includes = ("characters", "publisher", "sequel")

    def transform(self, book):
        return {"id": book["id"], "author": book["author_name"]}

    def include_characters(self, book, params):
        return self.collection(book["characters"], CharacterTransformer())

    def include_publisher(self, book, params):
        return self.item(book["publisher"], PublisherTransformer())

    def include_sequel(self, book, params):
        return None


# SQLAlchemy models shared by query, pagination and integration tests
Base = declarative_base()


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)

    books = relationship("Book", back_populates="author")


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    year = Column(Integer)
    created_at = Column(String)
    author_id = Column(Integer, ForeignKey("authors.id"))

    author = relationship("Author", back_populates="books")
