# routes/jobs.py
from fastapi import APIRouter, Depends
from typing import List, Optional
import logging

from database import get_db
from models.job import Job, JobCreate
from services import job_store
from .auth import get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("", response_model=Job, status_code=201)
async def create_job(
    job: JobCreate,
    db=Depends(get_db),
    current_user: Optional[dict] = Depends(get_optional_user),
):
    owner_id = current_user["id"] if current_user else None
    logger.info(f"Posting job '{job.title}' at '{job.company}' for owner={owner_id}")
    return await job_store.create_job(db, job, owner_id)


@router.get("", response_model=List[Job])
async def get_jobs(db=Depends(get_db)):
    return await job_store.list_jobs(db)


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, db=Depends(get_db)):
    return await job_store.get_job(db, job_id)
