from typing import List, Optional

from school_connect.database import InMemoryDB
from school_connect.models import Resource, ResourceRequest
from school_connect.resources.schemas import ResourceCreate


def get_resources(db: InMemoryDB, resource_type: Optional[str] = None, tag: Optional[str] = None) -> List[Resource]:
    """Shared resources, newest first, optionally narrowed by type or tag."""
    resources = list(db.resources)
    if resource_type:
        resources = [r for r in resources if r.type == resource_type]
    if tag:
        tag = tag.lower()
        resources = [r for r in resources if tag in (t.lower() for t in r.tags)]
    resources.sort(key=lambda r: r.created_at, reverse=True)
    return resources


def create_resource(db: InMemoryDB, resource: ResourceCreate, uploaded_by: int) -> Resource:
    db_resource = Resource(
        id=db.next_id("resources"),
        title=resource.title,
        type=resource.type,
        url=resource.url,
        uploaded_by=uploaded_by,
        description=resource.description or None,
        tags=list(resource.tags),
    )
    db.resources.append(db_resource)
    return db_resource


def create_request(db: InMemoryDB, user_id: int, title: str, description: Optional[str]) -> ResourceRequest:
    request = ResourceRequest(
        id=db.next_id("resource_requests"),
        user_id=user_id,
        title=title,
        description=description or None,
    )
    db.resource_requests.append(request)
    return request
