from .book_dtos import BookDetailsDto

__all__ = ["BookDetailsDto"]
