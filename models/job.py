# models/job.py
from pydantic import BaseModel
from typing import Optional

from models.quiz import OwnerRef


class JobCreate(BaseModel):
    title: str = ""
    company: str = ""
    location: Optional[str] = None
    description: str = ""
    salary: Optional[str] = None


class Job(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    description: str
    salary: Optional[str] = None
    owner: Optional[OwnerRef] = None
    createdAt: str
