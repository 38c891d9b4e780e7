"""Tests for the instance factory and instance mutation."""

import copy
import pickle

import pytest

import classstruct
import cstest


def test_create_instance():
    Point = cstest.make_point()
    fields = {"x": 1, "y": 2}
    point = classstruct.create_instance(Point, None, fields)
    fields["x"] = 10

    assert point.x == 1
    assert point.cls is Point
    assert point.super is None
    assert point.type() == "Point"


def test_create_instance_with_parent():
    Point = cstest.make_point()
    Point3 = Point.extend("Point3")
    parent = Point(1, 2)
    point = classstruct.create_instance(Point3, parent, {"z": 3})
    assert (point.x, point.y, point.z) == (1, 2, 3)
    assert point.instance_of(Point)


def test_create_instance_checks():
    Point = cstest.make_point()
    with pytest.raises(TypeError):
        classstruct.create_instance(Point(), None)
    with pytest.raises(TypeError):
        classstruct.create_instance(Point, Point)


def test_mutation():
    Point = cstest.make_point()
    point = Point(1, 2)
    point.x = 5
    point["z"] = 9
    del point.y

    assert dict(classstruct.own_fields(point)) == {"x": 5, "z": 9}
    with pytest.raises(AttributeError):
        del point.y
    with pytest.raises(KeyError):
        del point["y"]


def test_own_fields_is_read_only():
    Point = cstest.make_point()
    fields = classstruct.own_fields(Point(1, 2))
    with pytest.raises(TypeError):
        fields["x"] = 3
    with pytest.raises(TypeError):
        classstruct.own_fields(Point)


def test_parent_fields_are_not_copied():
    """Assignments land on the instance, leaving the parent untouched."""
    Point = cstest.make_point()
    Point3 = Point.extend("Point3")
    point = Point3(1, 2)
    point.z = 3
    assert "z" not in classstruct.own_fields(point.super)

    point.super.x = 7
    assert point.x == 1


def test_instances_are_not_iterable():
    Point = cstest.make_point()
    with pytest.raises(TypeError):
        iter(Point())


def test_copy_instance():
    Point = cstest.make_point()
    Point3 = Point.extend("Point3")
    point = Point3(1, 2)

    duplicate = copy.copy(point)
    duplicate.x = 9
    assert point.x == 1
    assert duplicate.cls is Point3
    assert duplicate.super is point.super


def test_deepcopy_instance():
    Point = cstest.make_point()
    Point3 = Point.extend("Point3")
    point = Point3(1, [2])

    duplicate = copy.deepcopy(point)
    duplicate.y.append(3)
    assert point.y == [2]
    assert duplicate.cls is Point3
    assert duplicate.super is not point.super
    assert duplicate.super.x == 1
    assert copy.deepcopy(Point3) is Point3


def test_classes_are_not_pickled():
    Point = cstest.make_point()
    with pytest.raises(TypeError):
        pickle.dumps(Point)
    with pytest.raises(TypeError):
        pickle.dumps(Point(1, 2))
