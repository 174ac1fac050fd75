from .borrower_dtos import BorrowerDto

__all__ = ["BorrowerDto"]
