# catalog_gateway/db/serialize.py
import logging

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError

from catalog_gateway.errors import BadRequest

logger = logging.getLogger(__name__)


def rows_to_models(rows, schema, entity: str) -> list:
    """
    Validate each row/document on its own. A record that does not fit the
    response model is dropped from the list instead of failing the request.
    """
    items = []
    for row in rows:
        try:
            items.append(schema.model_validate(row))
        except ValidationError as e:
            logger.warning("skipping unreadable %s row: %s", entity, e.errors()[0].get("msg"))
    return items


def to_object_id(id_str: str, entity: str) -> ObjectId:
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        raise BadRequest(f"Invalid {entity} ID")


def doc_to_dict(doc: dict) -> dict:
    out = {}
    for k, v in doc.items():
        if k == "_id":
            out["id"] = str(v)
        elif isinstance(v, ObjectId):
            out[k] = str(v)
        else:
            out[k] = v
    return out


def docs_to_models(docs, schema, entity: str) -> list:
    return rows_to_models((doc_to_dict(d) for d in docs), schema, entity)
