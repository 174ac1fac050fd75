from lending.domain.borrowers.entities.borrower import Borrower
from lending.domain.common.value_objects import BorrowerId, EmailAddress
from lending.models import Borrower as BorrowerORM


class BorrowerMapper:
    """Mapper for Borrower ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BorrowerORM) -> Borrower:
        """Convert ORM model to domain entity."""
        return Borrower.reconstitute(
            id=BorrowerId(orm_model.id),
            name=orm_model.name,
            email_address=EmailAddress(orm_model.email),
        )

    def to_orm(self, domain_entity: Borrower, orm_model: BorrowerORM | None = None) -> BorrowerORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.email = domain_entity.email_address.value
            return orm_model

        return BorrowerORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            email=domain_entity.email_address.value,
        )
