from typing import List

from school_connect.database import InMemoryDB
from school_connect.models import CalendarEvent

# Event audiences are stored in plural form ("teachers", "parents").
AUDIENCES = {
    "teacher": "teachers",
    "parent": "parents",
    "admin": "admins",
}


def audience_for_role(role: str) -> str:
    role = role.strip().lower()
    return AUDIENCES.get(role, role)


def get_events_for_role(db: InMemoryDB, role: str) -> List[CalendarEvent]:
    """Events addressed to the role's audience, earliest start first."""
    audience = audience_for_role(role)
    events = [e for e in db.events if audience in e.audience]
    events.sort(key=lambda e: e.start_time)
    return events
