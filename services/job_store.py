# services/job_store.py
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from errors import NotFoundError, ValidationError
from models.job import Job, JobCreate
from services.owners import populate_owners

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "company", "description")


def validate_job(payload: JobCreate) -> List[dict]:
    return [
        {"loc": field, "msg": f"{field.capitalize()} is required"}
        for field in REQUIRED_FIELDS
        if not getattr(payload, field).strip()
    ]


async def create_job(db, payload: JobCreate, owner_id: Optional[str] = None) -> Job:
    problems = validate_job(payload)
    if problems:
        raise ValidationError("Invalid job listing", problems)

    job_dict = payload.model_dump()
    for field in REQUIRED_FIELDS:
        job_dict[field] = job_dict[field].strip()
    job_dict["id"] = str(uuid.uuid4())
    job_dict["owner"] = owner_id
    job_dict["createdAt"] = datetime.now(timezone.utc).isoformat()

    await db.jobs.insert_one(job_dict)
    job_dict.pop("_id", None)
    logger.info(f"Created job {job_dict['id']} at {job_dict['company']}, owner={owner_id}")

    await populate_owners(db, [job_dict])
    return Job(**job_dict)


async def get_job(db, job_id: str) -> Job:
    job = await db.jobs.find_one({"id": job_id}, {"_id": 0})
    if not job:
        logger.warning(f"Job not found: {job_id}")
        raise NotFoundError("Job not found")
    await populate_owners(db, [job])
    return Job(**job)


async def list_jobs(db) -> List[Job]:
    jobs = await db.jobs.find({}, {"_id": 0}).to_list(None)
    await populate_owners(db, jobs)
    return [Job(**j) for j in jobs]
