import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from school_connect.auth.dependencies import get_current_user, ensure_role, ensure_self_or_admin
from school_connect.database import InMemoryDB, get_db
from school_connect.models import User
from school_connect.resources import crud
from school_connect.resources.schemas import (
    ResourceCreate, ResourceResponse, ResourceRequestCreate, ResourceRequestResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/resources",
    tags=["resources"],
)


@router.get("", response_model=List[ResourceResponse])
async def get_resources(
    user_id: int = Query(..., alias="userId"),
    resource_type: Optional[str] = Query(None, alias="type"),
    tag: Optional[str] = Query(None),
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, user_id, "Forbidden: not authorized to access these resources")
    try:
        return crud.get_resources(db, resource_type=resource_type, tag=tag)
    except Exception as e:
        logger.error(f"Error fetching resources: {e}")
        raise HTTPException(status_code=500, detail="Error fetching resources")


@router.post("", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
async def create_resource(
    resource: ResourceCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Share a file or link. Teachers and admins only."""
    ensure_role(current_user, ("teacher", "admin"), "Forbidden: not authorized to add resources")
    if not resource.title or not resource.type or not resource.url:
        raise HTTPException(status_code=400, detail="Title, type, and URL are required")

    try:
        db_resource = crud.create_resource(db, resource, uploaded_by=current_user.id)
        logger.info(f"Resource {db_resource.id} added by user {current_user.id}")
        return db_resource
    except Exception as e:
        logger.error(f"Error adding resource: {e}")
        raise HTTPException(status_code=500, detail="Error adding resource")


@router.post("/request", response_model=ResourceRequestResponse, status_code=status.HTTP_201_CREATED)
async def request_resource(
    payload: ResourceRequestCreate,
    db: InMemoryDB = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not payload.title:
        raise HTTPException(status_code=400, detail="Title is required")

    try:
        request = crud.create_request(db, current_user.id, payload.title, payload.description)
        logger.info(f"Resource request {request.id} filed by user {current_user.id}")
        return request
    except Exception as e:
        logger.error(f"Error requesting resource: {e}")
        raise HTTPException(status_code=500, detail="Error requesting resource")
