"""Tests for the class factory."""

import logging

import pytest

import classstruct
import cstest


def test_extend_returns_new_class():
    Animal = classstruct.Object.extend("Animal")
    Dog = Animal.extend("Dog")
    Cat = Animal.extend("Cat")

    assert isinstance(Dog, classstruct.Class)
    assert Dog.super is Animal
    assert Cat.super is Animal
    assert Dog is not Cat
    assert repr(Dog) == "Class<Dog>"


def test_create_class_matches_extend():
    Base = classstruct.create_class(classstruct.Object, "Base")
    assert Base.type() == "Base"
    assert Base.super is classstruct.Object
    assert Base.instance_of(classstruct.Object)


def test_extend_on_instance():
    """Extension is only allowed on classes."""
    Point = cstest.make_point()
    point = Point(1, 2)
    with pytest.raises(classstruct.InvalidExtendTarget) as exc_info:
        point.extend("Point3")
    assert exc_info.value.target is point


@cstest.params("target", none=None, text="Object", mapping={})
def test_create_class_bad_parent(key, target):
    with pytest.raises(classstruct.InvalidExtendTarget):
        classstruct.create_class(target, "Child")


def test_create_class_bad_name():
    with pytest.raises(TypeError):
        classstruct.Object.extend(42)


def test_super_member_is_reserved():
    with pytest.raises(TypeError):
        classstruct.Object.extend("Bad", members={"super": None})


def test_members_are_inherited_by_classes():
    """Class lookups continue through every parent class."""
    Base = classstruct.Object.extend("Base", members={"label": "base", "size": 1})
    Sub = Base.extend("Sub", members={"size": 2})
    assert Sub.label == "base"
    assert Sub.size == 2
    assert Base.size == 1
    with pytest.raises(AttributeError):
        Sub.missing


def test_members_mapping_is_copied():
    members = {"label": "one"}
    Base = classstruct.Object.extend("Base", members=members)
    members["label"] = "two"
    assert Base.label == "one"


def test_class_is_immutable():
    Point = cstest.make_point()
    with pytest.raises(AttributeError):
        Point.x = 1
    with pytest.raises(AttributeError):
        del Point.label


def test_constructor_is_late_bound():
    Late = classstruct.Object.extend("Late")
    with pytest.raises(classstruct.MissingConstructor):
        Late()

    Late.constructor = cstest.returning(ready=True)
    assert Late().ready is True

    del Late.constructor
    with pytest.raises(classstruct.MissingConstructor):
        Late()
    with pytest.raises(AttributeError):
        del Late.constructor


def test_constructor_assignment_checks():
    Late = classstruct.Object.extend("Late", members={"constructor": cstest.returning()})
    with pytest.raises(TypeError):
        Late.constructor = "not callable"

    Late.constructor = None
    with pytest.raises(classstruct.MissingConstructor):
        Late()


def test_none_constructor_member_is_dropped():
    Empty = classstruct.Object.extend("Empty", members={"constructor": None})
    with pytest.raises(classstruct.MissingConstructor):
        Empty()


def test_extend_logs_creation(caplog):
    with caplog.at_level(logging.DEBUG, logger="classstruct"):
        classstruct.Object.extend("Logged")
    assert "Created class Logged extending Object" in caplog.text
