import logging
from typing import Dict, List

from school_connect import models

logger = logging.getLogger(__name__)

# Tables held by the store, one list per entity.
TABLES = (
    "users",
    "students",
    "student_notes",
    "attendance_records",
    "grades",
    "assignments",
    "assignment_statuses",
    "messages",
    "events",
    "news",
    "resources",
    "resource_requests",
    "notifications",
)


class InMemoryDB:
    """
    Process-local store. Every entity lives in a plain list that handlers
    filter, append to and splice; nothing survives a restart.
    """

    def __init__(self, seed: bool = True):
        self._seed = seed
        self.reset()

    def reset(self) -> None:
        """Drop every record and session, then reload the seed data."""
        self.users: List[models.User] = []
        self.students: List[models.Student] = []
        self.student_notes: List[models.StudentNote] = []
        self.attendance_records: List[models.AttendanceRecord] = []
        self.grades: List[models.Grade] = []
        self.assignments: List[models.Assignment] = []
        self.assignment_statuses: List[models.AssignmentStatus] = []
        self.messages: List[models.Message] = []
        self.events: List[models.CalendarEvent] = []
        self.news: List[models.NewsItem] = []
        self.resources: List[models.Resource] = []
        self.resource_requests: List[models.ResourceRequest] = []
        self.notifications: List[models.Notification] = []
        self.sessions: Dict[str, models.Session] = {}
        self._sequences: Dict[str, int] = {}

        if self._seed:
            from school_connect.seed import load_seed_data
            load_seed_data(self)
            logger.info(
                "In-memory store seeded - "
                + ", ".join(f"{table}: {len(getattr(self, table))}" for table in TABLES)
            )

    def next_id(self, table: str, field: str = "id") -> int:
        """
        Allocate the next integer for `field` of `table`.

        The counter starts after the largest value present and never goes
        back, so ids freed by a delete are not handed out again.
        """
        key = f"{table}.{field}"
        if key not in self._sequences:
            rows = getattr(self, table)
            self._sequences[key] = max((getattr(row, field) for row in rows), default=0)
        self._sequences[key] += 1
        return self._sequences[key]


db = InMemoryDB()


def get_db() -> InMemoryDB:
    """FastAPI dependency returning the process-wide store."""
    return db
