"""Pydantic schemas for Borrower API request/response validation."""

from pydantic import BaseModel, Field

from lending.application.borrowers.use_cases.dtos import BorrowerDto


class RegisterBorrowerRequest(BaseModel):
    """Schema for registering a borrower.

    Only presence is checked here; blank names and malformed addresses are
    rejected by the domain.
    """

    name: str = Field(..., max_length=255, description="Borrower's full name")
    email: str = Field(..., max_length=320, description="Borrower's email address")


class BorrowerResponse(BaseModel):
    """Schema for Borrower response."""

    id: str
    name: str
    email: str

    @classmethod
    def from_dto(cls, dto: BorrowerDto) -> "BorrowerResponse":
        return cls(id=dto.id, name=dto.name, email=dto.email)
