# app/shared/database/documents.py
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def to_object_id(id_str: str) -> ObjectId:
    """Convertir id de la ruta a ObjectId, 400 si no es válido"""
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail="Invalid id")


def try_object_id(id_str: Any) -> Optional[ObjectId]:
    """Igual que to_object_id pero sin fallar"""
    if isinstance(id_str, ObjectId):
        return id_str
    if isinstance(id_str, str) and ObjectId.is_valid(id_str):
        return ObjectId(id_str)
    return None


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Documento de Mongo a dict serializable (ObjectId -> str)"""
    if doc is None:
        return None
    d = {**doc}
    if isinstance(d.get("_id"), ObjectId):
        d["_id"] = str(d["_id"])
    return d


def serialize_many(docs) -> List[Dict[str, Any]]:
    return [serialize(doc) for doc in docs]


# Resultados de escritura con la misma forma que devuelve el driver
def insert_result(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


def update_result(result: UpdateResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(result.upserted_id) if result.upserted_id is not None else None,
    }


def delete_result(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
