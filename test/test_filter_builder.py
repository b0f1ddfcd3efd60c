"""Tests for the professor filter predicate."""

import pytest
from sqlalchemy.dialects import sqlite

from ranker.core.exceptions import InvalidCriteriaError
from ranker.core.models.search import ProfessorFilter
from ranker.core.query.builder import FilterBuilder
from ranker.core.query.executor import ProfessorQueryExecutor
from ranker.core.query.operators import apply_operator
from ranker.core.query.pagination import Pagination
from ranker.db.models import Professor


def matching_ids(session, **criteria):
    predicate = FilterBuilder(ProfessorFilter(**criteria)).build()
    professors = ProfessorQueryExecutor(session).fetch_page(predicate, Pagination(limit=100))
    return [professor.id for professor in professors]


def compiled(**criteria) -> str:
    predicate = FilterBuilder(ProfessorFilter(**criteria)).build()
    return str(predicate.compile(dialect=sqlite.dialect()))


def test_empty_criteria_matches_everyone(seeded):
    assert matching_ids(seeded) == [1, 5, 2, 3, 4]


def test_name_is_case_insensitive_substring(seeded):
    assert matching_ids(seeded, name="garcía") == [1]
    assert matching_ids(seeded, name="SMITH") == [2]
    assert matching_ids(seeded, name="o") == [2, 3, 4]


def test_name_folds_accented_capitals(seeded):
    assert matching_ids(seeded, name="GARCÍA") == [1]
    assert matching_ids(seeded, name="FERNÁNDEZ") == [5]
    assert matching_ids(seeded, name="gÓmez") == [4]


def test_empty_name_imposes_no_constraint(seeded):
    assert matching_ids(seeded, name="") == [1, 5, 2, 3, 4]


def test_like_wildcards_in_name_are_literal(seeded):
    assert matching_ids(seeded, name="%") == []
    assert matching_ids(seeded, name="J_hn") == []


def test_rating_range_is_inclusive(seeded):
    assert matching_ids(seeded, min_rating=3, max_rating=4.5) == [5, 2, 3]


def test_rating_bounds_apply_independently(seeded):
    assert matching_ids(seeded, min_rating=4.5) == [1, 5]
    assert matching_ids(seeded, max_rating=3) == [3, 4]


def test_min_reviews(seeded):
    assert matching_ids(seeded, min_reviews=10) == [1, 5]
    assert matching_ids(seeded, min_reviews=0) == [1, 5, 2, 3, 4]


def test_university_id(seeded):
    assert matching_ids(seeded, university_id=1) == [1, 2]
    assert matching_ids(seeded, university_id=99) == []


def test_faculty_id(seeded):
    assert matching_ids(seeded, faculty_id=1) == [2, 3]


def test_department_is_case_insensitive_substring(seeded):
    assert matching_ids(seeded, department="math") == [1, 2]
    assert matching_ids(seeded, department="PHYS") == [1, 5, 3]


def test_university_and_department_must_match_the_same_link(seeded):
    # García is linked to UNAL (Mathematics) and IPN (Physics); no single
    # link is both university 1 and a physics department.
    assert matching_ids(seeded, university_id=1, department="Physics") == []
    assert matching_ids(seeded, university_id=2, department="Physics") == [1, 5, 3]
    assert matching_ids(seeded, university_id=1, department="Math") == [1, 2]


def test_university_and_department_share_one_exists():
    sql = compiled(university_id=1, department="Physics")
    assert sql.count("FROM professor_universities") == 1


def test_separate_relations_get_separate_exists():
    sql = compiled(university_id=1, faculty_id=2)
    assert sql.count("FROM professor_universities") == 1
    assert sql.count("FROM professor_faculties") == 1


def test_criteria_are_anded(seeded):
    assert matching_ids(seeded, faculty_id=2, min_reviews=15) == [5]
    assert matching_ids(seeded, name="a", university_id=2, max_rating=4.6) == [5, 3]


def test_builder_is_repeatable():
    builder = FilterBuilder(ProfessorFilter(university_id=1, department="x"))
    first = str(builder.build().compile(dialect=sqlite.dialect()))
    second = str(builder.build().compile(dialect=sqlite.dialect()))
    assert first == second


def test_unknown_operator_is_rejected():
    with pytest.raises(InvalidCriteriaError):
        apply_operator(Professor.average_rating, "between", 3)
