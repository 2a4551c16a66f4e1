"""Tests for model events and type extension."""

import pytest

from modelkit import Model


def test_triggers_initialize_when_created():
    MyModel = Model.extend()
    called = []

    MyModel.on("initialize", lambda model: called.append(model))

    model = MyModel()

    assert called == [model]


def test_initialize_listener_sees_defaults_before_given_attributes():
    class MyModel(Model):
        def defaults(self):
            return {"a": 0}

    seen = []
    MyModel.on("initialize", lambda model: seen.append(model.get()))

    MyModel(a=5, b=1)

    assert seen == [{"a": 0}]


def test_listeners_trigger_in_order():
    MyModel = Model.extend()
    model = MyModel()
    order = []

    MyModel.on("test", lambda m: order.append(1)).on("test", lambda m: order.append(2))

    model.trigger("test")

    assert order == [1, 2]


def test_only_triggers_on_the_listening_type():
    """CRITICAL: Sibling types never see each other's listeners."""
    MyModel1 = Model.extend()
    MyModel2 = Model.extend()
    model1 = MyModel1()
    called = []

    MyModel1.on("foo", lambda m: called.append(m))
    MyModel2.on("foo", lambda m: pytest.fail("sibling listener fired"))

    model1.trigger("foo")

    assert called == [model1]


def test_triggers_multiple_whitespace_separated_events():
    MyModel = Model.extend()
    model = MyModel()
    count = []

    MyModel.on("foo bar", lambda m: count.append(1))

    model.trigger("foo").trigger("bar")

    assert len(count) == 2


def test_trigger_passes_arguments():
    MyModel = Model.extend()
    received = []

    MyModel.on("ping", lambda model, *args, **_: received.append(args))

    MyModel().trigger("ping", 1, "two")

    assert received == [(1, "two")]


def test_unregistered_event_is_noop():
    model = Model.extend()()

    assert model.trigger("nothing") is model


def test_on_as_decorator():
    MyModel = Model.extend()
    called = []

    @MyModel.on("foo")
    def listener(model):
        called.append(model)

    MyModel().trigger("foo")

    assert len(called) == 1
    assert callable(listener)


def test_on_rejects_empty_event_list():
    with pytest.raises(ValueError):
        Model.extend().on("  ", lambda m: None)


def test_parent_registrations_before_extension_are_inherited():
    Parent = Model.extend("Parent")
    calls = []
    Parent.on("foo", lambda m: calls.append("parent-before"))

    Child = Parent.extend("Child")
    Parent.on("foo", lambda m: calls.append("parent-after"))
    Child.on("foo", lambda m: calls.append("child"))

    Child().trigger("foo")
    assert calls == ["parent-before", "child"]

    calls.clear()
    Parent().trigger("foo")
    assert calls == ["parent-before", "parent-after"]


def test_child_listeners_do_not_fire_for_parent_instances():
    Parent = Model.extend()

    class Child(Parent):
        pass

    Child.on("foo", lambda m: pytest.fail("child listener fired"))

    Parent().trigger("foo")


def test_extend_names_type_and_applies_namespace():
    Named = Model.extend("Named", {"defaults": lambda self: {"x": 1}})

    assert Named.__name__ == "Named"
    assert issubclass(Named, Model)
    assert Named().get("x") == 1
    assert Model.extend().__name__ == "Model"
