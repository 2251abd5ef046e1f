# services/owners.py
from typing import List


async def populate_owners(db, documents: List[dict]) -> List[dict]:
    """Replace each document's owner id with {id, username}, or None if it doesn't resolve."""
    owner_ids = list({doc["owner"] for doc in documents if doc.get("owner")})
    users = {}
    if owner_ids:
        found = await db.users.find(
            {"id": {"$in": owner_ids}}, {"_id": 0, "id": 1, "username": 1}
        ).to_list(None)
        users = {u["id"]: {"id": u["id"], "username": u["username"]} for u in found}

    for doc in documents:
        doc["owner"] = users.get(doc.get("owner"))
    return documents
