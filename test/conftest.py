"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ranker.app import create_app
from ranker.core.config import RankerConfig
from ranker.db.client import DbClient, DbConfig
from ranker.db.models import (
    Course,
    Faculty,
    Professor,
    ProfessorCourse,
    ProfessorFaculty,
    ProfessorTag,
    ProfessorUniversity,
    Review,
    ReviewVisibility,
    Tag,
    University,
)


@pytest.fixture
def db_client():
    """In-memory SQLite store shared by every session of one test."""
    client = DbClient(DbConfig(url_override="sqlite://"))
    client.create_tables()
    try:
        yield client
    finally:
        client.engine.dispose()


@pytest.fixture
def session(db_client):
    session = db_client.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _review(review_id, course, visibility, created_at, overall=4.0):
    return Review(
        id=review_id,
        course=course,
        overall_rating=overall,
        teaching_quality=4.0,
        difficulty_level=3.0,
        class_interest=5.0,
        mandatory_attendance=True,
        detailed_comment=f"Comment {review_id}",
        grade_obtained="A",
        created_at=created_at,
        visibility_status=visibility,
    )


@pytest.fixture
def seeded(session):
    """
    Five professors, best rated first:

    1 María García     4.8  12 reviews  UNAL (Mathematics) + IPN (Physics), Sciences
    5 Lucía Fernández  4.5  20 reviews  IPN, Sciences
    2 John Smith       3.5   4 reviews  UNAL, Engineering
    3 Ana Torres       3.0   0 reviews  IPN, Engineering + Sciences
    4 Pedro Gómez      2.1   7 reviews  UC (no department), no faculty
    """
    unal = University(id=1, name="Universidad Nacional", acronym="UNAL", department="Mathematics")
    ipn = University(id=2, name="Instituto Politécnico", acronym="IPN", department="Physics")
    uc = University(id=3, name="Universidad Central", acronym="UC", department=None)
    engineering = Faculty(id=1, name="Engineering")
    sciences = Faculty(id=2, name="Sciences")
    calculus = Course(id=1, name="Calculus")
    mechanics = Course(id=2, name="Mechanics")
    clear = Tag(id=1, name="Clear explanations", type="positive")
    tough = Tag(id=2, name="Tough grader", type="negative")

    garcia = Professor(id=1, full_name="María García", average_rating=4.8, review_count=12)
    garcia.universities = [ProfessorUniversity(university=unal), ProfessorUniversity(university=ipn)]
    garcia.faculties = [ProfessorFaculty(faculty=sciences)]
    garcia.courses = [ProfessorCourse(course=calculus), ProfessorCourse(course=mechanics)]
    garcia.tags = [ProfessorTag(tag=clear), ProfessorTag(tag=tough)]
    garcia.reviews = [
        _review(1, calculus, ReviewVisibility.VISIBLE, datetime(2024, 3, 1, 12, 0)),
        _review(2, mechanics, ReviewVisibility.HIDDEN, datetime(2024, 1, 1, 12, 0)),
        _review(3, mechanics, ReviewVisibility.VISIBLE, datetime(2024, 2, 1, 12, 0)),
        _review(4, calculus, ReviewVisibility.PENDING, datetime(2024, 4, 1, 12, 0)),
    ]

    smith = Professor(id=2, full_name="John Smith", average_rating=3.5, review_count=4)
    smith.universities = [ProfessorUniversity(university=unal)]
    smith.faculties = [ProfessorFaculty(faculty=engineering)]

    torres = Professor(id=3, full_name="Ana Torres", average_rating=3.0, review_count=0)
    torres.universities = [ProfessorUniversity(university=ipn)]
    torres.faculties = [ProfessorFaculty(faculty=engineering), ProfessorFaculty(faculty=sciences)]

    gomez = Professor(id=4, full_name="Pedro Gómez", average_rating=2.1, review_count=7)
    gomez.universities = [ProfessorUniversity(university=uc)]

    fernandez = Professor(id=5, full_name="Lucía Fernández", average_rating=4.5, review_count=20)
    fernandez.universities = [ProfessorUniversity(university=ipn)]
    fernandez.faculties = [ProfessorFaculty(faculty=sciences)]

    session.add_all([garcia, smith, torres, gomez, fernandez])
    session.commit()
    return session


@pytest.fixture
def client(db_client, seeded):
    app = create_app(RankerConfig(log_level="error"), db_client)
    with TestClient(app) as test_client:
        yield test_client
