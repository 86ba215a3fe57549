from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.core.management.base import CommandError
from django.db import connection

from courses import store as store_module
from courses.models import Course, Department, Semester
from courses.store import Store, conditional_update


def make_course(course_id="TÖL101G", title="Tölvunarfræði 1", **extra):
    fields = {"units": 6.0, "semester": Semester.AUTUMN, "level": None, "url": None, **extra}
    return SimpleNamespace(course_id=course_id, title=title, **fields)


@pytest.fixture
def department():
    return Department.objects.create(title="Tölvunarfræðideild", slug="tolvunarfraedideild", description="")


@pytest.mark.django_db
def test_insert_department_returns_id_and_rejects_duplicates():
    store = Store()
    descriptor = SimpleNamespace(title="Saga", slug="saga", description="Sagnfræði")

    department_id = store.insert_department(descriptor)

    assert Department.objects.get(pk=department_id).slug == "saga"
    assert store.insert_department(descriptor) is None
    assert Department.objects.count() == 1


@pytest.mark.django_db
def test_insert_course_counts_only_valid_rows(department):
    store = Store()

    assert store.insert_course(make_course(), department.pk) is not None
    # Duplicate course id, bad semester and over-long title are all rejected
    assert store.insert_course(make_course(title="Annað"), department.pk) is None
    assert store.insert_course(make_course("TÖL102G", "Önnur", semester="Vetur"), department.pk) is None
    assert store.insert_course(make_course("TÖL103G", "x" * 65), department.pk) is None
    # The connection is still usable after a failed insert
    assert store.insert_course(make_course("TÖL104G", "Gagnasafnsfræði"), department.pk) is not None
    assert Course.objects.filter(department=department).count() == 2


def test_close_releases_the_alias_connection(monkeypatch):
    store = Store(using="secondary")
    closed = []
    monkeypatch.setattr(store.connection, "close", lambda: closed.append(store.using))

    store.close()

    assert closed == ["secondary"]


@pytest.mark.django_db(databases=["default", "secondary"])
def test_inserts_are_validated_against_the_store_alias():
    store = Store(using="secondary")

    department_id = store.insert_department(SimpleNamespace(title="Saga", slug="saga", description=""))

    assert store.insert_course(make_course(), department_id) is not None
    assert Course.objects.using("secondary").get().department_id == department_id
    assert not Department.objects.exists()
    # The department only exists on the other alias
    assert Store().insert_course(make_course("TÖL102G", "Önnur"), department_id) is None


def test_schema_operations_report_failure(monkeypatch):
    def fail(*args, **kwargs):
        raise CommandError("no such migration")

    monkeypatch.setattr(store_module, "call_command", fail)
    store = Store()
    assert store.drop_schema() is False
    assert store.create_schema() is False


@pytest.mark.django_db(transaction=True)
def test_drop_and_create_schema_round_trip():
    Department.objects.create(title="Saga", slug="saga")
    store = Store()

    assert store.drop_schema() is True
    assert "courses_department" not in connection.introspection.table_names()
    assert store.create_schema() is True
    assert "courses_department" in connection.introspection.table_names()
    assert Department.objects.count() == 0


@pytest.mark.django_db
def test_conditional_update_only_touches_given_fields(department):
    course = Course.objects.create(department=department, course_id="A1", title="Gamalt", semester=Semester.SPRING, level="Grunnám")
    before = course.updated

    updated = conditional_update(Course, course.pk, ["title", None, "level"], ["Nýtt", "ignored", None])

    assert updated.title == "Nýtt"
    assert updated.level == "Grunnám"
    assert updated.semester == Semester.SPRING
    assert updated.updated >= before


@pytest.mark.django_db
def test_conditional_update_without_changes_or_row_returns_none(department):
    assert conditional_update(Department, department.pk, [None, "title"], ["x", None]) is None
    assert conditional_update(Department, department.pk + 100, ["title"], ["Ekkert"]) is None
