from lending.domain.catalog.entities.catalog_entry import CatalogEntry
from lending.domain.common.value_objects import Isbn
from lending.models import CatalogEntry as CatalogEntryORM


class CatalogEntryMapper:
    """Mapper for CatalogEntry ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CatalogEntryORM) -> CatalogEntry:
        """Convert ORM model to domain entity."""
        return CatalogEntry.reconstitute(
            isbn=Isbn(orm_model.isbn),
            title=orm_model.title,
            author=orm_model.author,
        )

    def to_orm(
        self, domain_entity: CatalogEntry, orm_model: CatalogEntryORM | None = None
    ) -> CatalogEntryORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; the ISBN is the key and never changes
            orm_model.title = domain_entity.title
            orm_model.author = domain_entity.author
            return orm_model

        # Create new
        return CatalogEntryORM(
            isbn=domain_entity.isbn.value,
            title=domain_entity.title,
            author=domain_entity.author,
        )
