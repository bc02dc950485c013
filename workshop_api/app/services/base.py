"""
Shared plumbing for resource services.

``DocumentService`` maps one store collection onto a pydantic read
model: documents are validated into the model on the way out, and
models are dumped with their wire (camelCase) names on the way in, so
the stored JSON matches what the API returns.
"""

import logging
import uuid
from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from workshop_api.app.core.db import Collection, DocumentStore
from workshop_api.app.core.errors import NotFoundError, StoreError

ReadModel = TypeVar("ReadModel", bound=BaseModel)

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Return a fresh random identifier for a new document."""
    return str(uuid.uuid4())


class DocumentService(Generic[ReadModel]):
    """Base class for services backed by a single collection."""

    collection_name: str
    read_model: Type[ReadModel]
    # Human readable resource name used in messages ("Speaker not found").
    label: str

    def __init__(self, store: DocumentStore):
        self.collection: Collection = store.collection(self.collection_name)

    def _to_document(self, entity: ReadModel) -> dict:
        return entity.model_dump(mode="json", by_alias=True, exclude_none=True)

    async def _save(self, entity: ReadModel) -> ReadModel:
        await self.collection.put(entity.id, self._to_document(entity))
        return entity

    async def list(self) -> List[ReadModel]:
        """Return every document of the collection that fits the read model."""
        entities = []
        for document in await self.collection.list():
            try:
                entities.append(self.read_model.model_validate(document))
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed %s document %s: %s",
                    self.collection_name,
                    document.get("id"),
                    exc.errors(include_url=False),
                )
        return entities

    async def get(self, entity_id: str) -> ReadModel:
        """Return one entity; raise ``NotFoundError`` if its key is absent."""
        try:
            document = await self.collection.get(entity_id)
        except NotFoundError as exc:
            raise NotFoundError(f"{self.label} not found") from exc
        try:
            return self.read_model.model_validate(document)
        except PydanticValidationError as exc:
            raise StoreError(f"Malformed {self.label.lower()} document {entity_id}") from exc

    async def delete(self, entity_id: str) -> None:
        """Delete an entity.  Deleting an absent key is not an error."""
        await self.collection.delete(entity_id)
        logger.info("Deleted %s %s", self.label.lower(), entity_id)
