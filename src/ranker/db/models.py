# src/ranker/db/models.py
"""SQLAlchemy models for professors and everything hanging off them.

The aggregate columns on ``Professor`` (``average_rating`` and
``review_count``) are maintained by an external writer. This package only
reads them.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SQLAlchemyEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class ReviewVisibility(str, enum.Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    PENDING = "pending"


class Professor(Base):
    __tablename__ = "professors"

    id = Column(Integer, primary_key=True)
    full_name = Column(String(256), nullable=False, index=True)
    average_rating = Column(Float, nullable=False, default=0.0, index=True)
    review_count = Column(Integer, nullable=False, default=0)

    universities = relationship("ProfessorUniversity", back_populates="professor")
    faculties = relationship("ProfessorFaculty", back_populates="professor")
    courses = relationship("ProfessorCourse", back_populates="professor")
    tags = relationship("ProfessorTag", back_populates="professor")
    reviews = relationship(
        "Review",
        back_populates="professor",
        order_by="Review.created_at.desc()",
    )

    __table_args__ = (
        CheckConstraint(
            "average_rating >= 0 AND average_rating <= 5",
            name="ck_professor_average_rating",
        ),
        CheckConstraint("review_count >= 0", name="ck_professor_review_count"),
    )

    def __repr__(self) -> str:
        return f"<Professor id={self.id} name={self.full_name!r}>"


class University(Base):
    __tablename__ = "universities"

    id = Column(Integer, primary_key=True)
    name = Column(String(256), nullable=False)
    acronym = Column(String(32), nullable=False)
    department = Column(String(256))


class Faculty(Base):
    __tablename__ = "faculties"

    id = Column(Integer, primary_key=True)
    name = Column(String(256), nullable=False)


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    name = Column(String(256), nullable=False)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True)
    name = Column(String(128), nullable=False)
    type = Column(String(64), nullable=False)


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    professor_id = Column(
        Integer, ForeignKey("professors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    overall_rating = Column(Float, nullable=False)
    teaching_quality = Column(Float, nullable=False)
    difficulty_level = Column(Float, nullable=False)
    class_interest = Column(Float, nullable=False)
    mandatory_attendance = Column(Boolean, nullable=False, default=False)
    detailed_comment = Column(Text)
    grade_obtained = Column(String(16))
    created_at = Column(
        DateTime,
        nullable=False,
        # Stored as naive UTC
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
    )
    visibility_status = Column(
        SQLAlchemyEnum(
            ReviewVisibility,
            name="review_visibility",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=ReviewVisibility.PENDING,
    )

    professor = relationship("Professor", back_populates="reviews")
    course = relationship("Course")


# ===== Join records =====


class ProfessorUniversity(Base):
    __tablename__ = "professor_universities"

    professor_id = Column(
        Integer, ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True
    )
    university_id = Column(
        Integer, ForeignKey("universities.id", ondelete="CASCADE"), primary_key=True
    )

    professor = relationship("Professor", back_populates="universities")
    university = relationship("University")


class ProfessorFaculty(Base):
    __tablename__ = "professor_faculties"

    professor_id = Column(
        Integer, ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True
    )
    faculty_id = Column(
        Integer, ForeignKey("faculties.id", ondelete="CASCADE"), primary_key=True
    )

    professor = relationship("Professor", back_populates="faculties")
    faculty = relationship("Faculty")


class ProfessorCourse(Base):
    __tablename__ = "professor_courses"

    professor_id = Column(
        Integer, ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True
    )
    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )

    professor = relationship("Professor", back_populates="courses")
    course = relationship("Course")


class ProfessorTag(Base):
    __tablename__ = "professor_tags"

    professor_id = Column(
        Integer, ForeignKey("professors.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)

    professor = relationship("Professor", back_populates="tags")
    tag = relationship("Tag")
