"""
Demo records loaded into the in-memory store on startup.

Two accounts exist out of the box:
    teacher@example.com / teacher123  (id 1, teacher)
    parent@example.com  / parent123   (id 2, parent)
"""
from datetime import date, datetime, timezone

from school_connect import models
from school_connect.security import hash_password


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def load_seed_data(db) -> None:
    db.users.extend([
        models.User(
            id=1,
            name="Jane Smith",
            email="teacher@example.com",
            password=hash_password("teacher123"),
            role="teacher",
            created_at=_ts("2023-01-15T00:00:00"),
        ),
        models.User(
            id=2,
            name="John Doe",
            email="parent@example.com",
            password=hash_password("parent123"),
            role="parent",
            created_at=_ts("2023-01-20T00:00:00"),
        ),
    ])

    db.students.extend([
        models.Student(
            id=101, name="Emma Doe", grade=5, parent_id=2, teacher_id=1,
            date_of_birth=date(2013, 5, 12), emergency_contact="+1234567890",
            created_at=_ts("2023-01-15T00:00:00"),
        ),
        models.Student(
            id=102, name="Michael Doe", grade=3, parent_id=2, teacher_id=1,
            date_of_birth=date(2015, 9, 22), emergency_contact="+1234567890",
            medical_info="Allergic to peanuts",
            created_at=_ts("2023-01-15T00:00:00"),
        ),
    ])

    db.student_notes.extend([
        models.StudentNote(
            id=1, student_id=101, teacher_id=1,
            note="Emma is showing great improvement in math this quarter.",
            created_at=_ts("2023-05-15T00:00:00"),
        ),
        models.StudentNote(
            id=2, student_id=102, teacher_id=1,
            note="Michael struggled with the recent science project. Need to follow up with parents.",
            created_at=_ts("2023-05-20T00:00:00"),
        ),
    ])

    attendance = [
        (101, date(2023, 6, 1), "present", None, "2023-06-01T09:00:00"),
        (102, date(2023, 6, 1), "present", None, "2023-06-01T09:00:00"),
        (101, date(2023, 6, 2), "absent", "Parent called to report illness", "2023-06-02T09:00:00"),
        (102, date(2023, 6, 2), "present", None, "2023-06-02T09:00:00"),
        (101, date(2023, 6, 5), "present", None, "2023-06-05T09:00:00"),
        (102, date(2023, 6, 5), "tardy", "Arrived 15 minutes late", "2023-06-05T09:15:00"),
    ]
    for index, (student_id, day, status, notes, created) in enumerate(attendance, start=1):
        db.attendance_records.append(models.AttendanceRecord(
            id=index, student_id=student_id, date=day, status=status,
            notes=notes, marked_by=1, created_at=_ts(created),
        ))

    grades = [
        (101, "Math", "Fractions Quiz", 90, date(2023, 5, 15), "Excellent work!"),
        (101, "Science", "Plant Life Cycle Project", 85, date(2023, 5, 20),
         "Good presentation, but missing some details."),
        (101, "English", "Book Report", 95, date(2023, 5, 25), "Outstanding analysis and writing!"),
        (102, "Math", "Fractions Quiz", 80, date(2023, 5, 15),
         "Good effort, but needs more practice with improper fractions."),
        (102, "Science", "Plant Life Cycle Project", 70, date(2023, 5, 20),
         "Project was incomplete and missing key components."),
        (102, "English", "Book Report", 85, date(2023, 5, 25), "Good insights, but some grammatical errors."),
    ]
    for index, (student_id, subject, name, score, day, comments) in enumerate(grades, start=1):
        db.grades.append(models.Grade(
            id=index, student_id=student_id, teacher_id=1, subject=subject,
            assignment_name=name, score=score, max_score=100, date=day,
            comments=comments, created_at=_ts(day.isoformat() + "T00:00:00"),
        ))

    db.assignments.extend([
        models.Assignment(
            id=1, teacher_id=1, subject="Math", title="Multiplication Worksheet",
            description="Complete the multiplication tables 1-12",
            due_date=date(2023, 6, 10), created_at=_ts("2023-06-01T00:00:00"),
        ),
        models.Assignment(
            id=2, teacher_id=1, subject="Science", title="Weather Journal",
            description="Track and record the weather for one week",
            due_date=date(2023, 6, 15), created_at=_ts("2023-06-02T00:00:00"),
        ),
        models.Assignment(
            id=3, teacher_id=1, subject="English", title="Vocabulary Quiz",
            description="Study the vocabulary words for Friday's quiz",
            due_date=date(2023, 6, 9), created_at=_ts("2023-06-01T00:00:00"),
        ),
    ])
    statuses = [(1, 101, "in_progress"), (1, 102, "not_started"), (2, 101, "not_started"),
                (2, 102, "not_started"), (3, 101, "not_started"), (3, 102, "not_started")]
    for index, (assignment_id, student_id, status) in enumerate(statuses, start=1):
        db.assignment_statuses.append(models.AssignmentStatus(
            id=index, assignment_id=assignment_id, student_id=student_id, status=status,
        ))

    db.messages.extend([
        models.Message(
            id=1, chat_id=101, sender_id=1, recipient_id=2,
            content="Hello, I wanted to discuss your child's progress in science class.",
            read=True, created_at=_ts("2023-06-01T10:00:00"),
        ),
        models.Message(
            id=2, chat_id=101, sender_id=2, recipient_id=1,
            content="Great! I've been wanting to talk about that. How is she doing?",
            read=True, created_at=_ts("2023-06-01T10:15:00"),
        ),
        models.Message(
            id=3, chat_id=101, sender_id=1, recipient_id=2,
            content="She's doing well overall, but I think she could use some extra help with the lab work.",
            read=False, created_at=_ts("2023-06-01T10:20:00"),
        ),
        models.Message(
            id=4, chat_id=102, sender_id=1, recipient_id=3,
            content="Just a reminder that the permission slips for the field trip are due tomorrow.",
            read=False, created_at=_ts("2023-06-02T09:30:00"),
        ),
    ])

    db.events.extend([
        models.CalendarEvent(
            id=1, title="Parent-Teacher Conference",
            description="Discuss student progress and address any concerns",
            location="School Auditorium",
            start_time=_ts("2023-06-15T15:00:00"), end_time=_ts("2023-06-15T19:00:00"),
            type="meeting", created_by=1, audience=["teachers", "parents"],
            created_at=_ts("2023-05-20T00:00:00"),
        ),
        models.CalendarEvent(
            id=2, title="Math Test - Grade 5",
            description="Fractions and decimals unit test",
            location="Classroom 103",
            start_time=_ts("2023-06-10T09:00:00"), end_time=_ts("2023-06-10T10:30:00"),
            type="assignment", created_by=1, audience=["teachers", "parents"],
            created_at=_ts("2023-05-25T00:00:00"),
        ),
        models.CalendarEvent(
            id=3, title="School Field Trip",
            description="Science museum visit",
            location="City Science Museum",
            start_time=_ts("2023-06-20T08:00:00"), end_time=_ts("2023-06-20T15:00:00"),
            type="school", created_by=1, audience=["teachers", "parents"],
            created_at=_ts("2023-05-10T00:00:00"),
        ),
        models.CalendarEvent(
            id=4, title="Faculty Meeting",
            description="End of year planning and assessment discussion",
            location="Staff Room",
            start_time=_ts("2023-06-12T14:00:00"), end_time=_ts("2023-06-12T16:00:00"),
            type="meeting", created_by=1, audience=["teachers"],
            created_at=_ts("2023-05-28T00:00:00"),
        ),
    ])

    db.news.extend([
        models.NewsItem(
            id=1, title="Summer School Registration Now Open",
            content="Registration for summer school programs is now open. "
                    "Visit the school office or website to sign up.",
            category="announcement", publish_date=date(2023, 5, 15), author="Admin",
            featured=True, created_at=_ts("2023-05-15T00:00:00"),
        ),
        models.NewsItem(
            id=2, title="Student Art Exhibition",
            content="Join us for the annual student art exhibition in the school gallery. "
                    "Opening night is June 5th at 6 PM.",
            category="event", publish_date=date(2023, 5, 20), author="Art Department",
            created_at=_ts("2023-05-20T00:00:00"),
        ),
        models.NewsItem(
            id=3, title="End-of-Year Schedule",
            content="Please note the adjusted schedule for the last week of school. "
                    "Early dismissal on Friday, June 23rd.",
            category="announcement", publish_date=date(2023, 5, 25), author="Principal",
            featured=True, created_at=_ts("2023-05-25T00:00:00"),
        ),
        models.NewsItem(
            id=4, title="New Math Curriculum for Next Year",
            content="We're excited to announce our new math curriculum for the 2023-2024 school year. "
                    "More information coming soon.",
            category="newsletter", publish_date=date(2023, 6, 1), author="Curriculum Committee",
            created_at=_ts("2023-06-01T00:00:00"),
        ),
    ])

    db.resources.extend([
        models.Resource(
            id=1, title="Math Worksheets - Grade 5",
            description="Practice worksheets for 5th grade math curriculum",
            type="document", url="https://example.com/resources/math-g5.pdf",
            uploaded_by=1, tags=["math", "grade 5", "practice"],
            created_at=_ts("2023-05-10T00:00:00"),
        ),
        models.Resource(
            id=2, title="Science Lab Safety Guidelines",
            description="Safety procedures for all school science labs",
            type="document", url="https://example.com/resources/lab-safety.pdf",
            uploaded_by=1, tags=["science", "safety", "lab"],
            created_at=_ts("2023-05-15T00:00:00"),
        ),
        models.Resource(
            id=3, title="Parent Volunteer Sign-up Form",
            description="Form for parents to sign up for volunteer opportunities",
            type="document", url="https://example.com/resources/volunteer-form.pdf",
            uploaded_by=1, tags=["parent", "volunteer", "form"],
            created_at=_ts("2023-05-20T00:00:00"),
        ),
    ])

    db.resource_requests.append(models.ResourceRequest(
        id=1, user_id=2, title="Reading List for Summer",
        description="Could we get a recommended reading list for summer break?",
        created_at=_ts("2023-06-01T00:00:00"),
    ))

    db.notifications.extend([
        models.Notification(
            id=1, user_id=1, title="New Assignment Posted",
            message="A new Math assignment has been posted", type="assignment",
            created_at=_ts("2023-06-01T10:00:00"),
        ),
        models.Notification(
            id=2, user_id=2, title="Student Attendance",
            message="Your child was absent today", type="attendance", read=True,
            created_at=_ts("2023-06-02T09:30:00"),
        ),
        models.Notification(
            id=3, user_id=1, title="Faculty Meeting",
            message="Reminder: Faculty meeting tomorrow at 3 PM", type="event",
            created_at=_ts("2023-06-03T14:45:00"),
        ),
    ])
