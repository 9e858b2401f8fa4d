from typing import Any, Dict, List, Optional, Type

from beanie import Document, UpdateResponse


def serialize_document(document: Document) -> Dict[str, Any]:
    """Render a stored document as a JSON-ready dict, keeping the Mongo `_id` key.

    Fields that are absent from the stored document come back as None on the
    model and are left out, so responses only carry what was written.
    """
    return document.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"revision_id"})


class DocumentRepository:
    """Field-equality access to a single Beanie collection.

    Every method returns plain dicts so the service layer does not depend on
    Beanie and can be exercised against an in-memory store.
    """

    def __init__(self, document_model: Type[Document]):
        self.document_model = document_model

    def _from_raw(self, raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if not raw:
            return None
        return serialize_document(self.document_model.model_validate(raw))

    async def find_all(self) -> List[Dict[str, Any]]:
        documents = await self.document_model.find_all().to_list()
        return [serialize_document(doc) for doc in documents]

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        document = await self.document_model.find_one(filters)
        return serialize_document(document) if document else None

    # Validates through the model but writes only the fields that were supplied
    async def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        document = self.document_model(**data)
        payload = document.model_dump(by_alias=True, exclude_unset=True, exclude={"id", "revision_id"})
        result = await self.document_model.get_motor_collection().insert_one(dict(payload))
        return self._from_raw({**payload, "_id": result.inserted_id})

    async def find_one_and_update(self, filters: Dict[str, Any], values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        document = await self.document_model.find_one(filters).update(
            {"$set": values},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        return serialize_document(document) if document else None

    async def find_one_and_delete(self, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        raw = await self.document_model.get_motor_collection().find_one_and_delete(filters)
        return self._from_raw(raw)
