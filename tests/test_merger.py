from types import SimpleNamespace

import pytest

from captain import (
    InvalidArgumentError,
    MemberKind,
    Module,
    behaviors_of,
    classify_member,
    data_of,
    merge,
    own_members,
)


def test_merge_copies_behaviors_and_links_ancestor(greeter):
    target = Module()

    result = merge(target, greeter)

    assert result is target
    assert target.greet is greeter.greet
    assert target.ancestor is greeter
    assert "count" not in target
    assert not hasattr(target, "count")


def test_merge_skips_every_data_member():
    source = Module(
        run=lambda: 1,
        label="x",
        size=3,
        tags=["a"],
        nested=Module(inner=lambda: 2),
    )
    target = merge(Module(), source)

    assert set(own_members(target)) == {"run"}


def test_merged_behavior_is_shared_not_copied():
    def shout():
        return "HEY"

    source = Module(shout=shout)
    target = merge(Module(), source)
    shout.volume = 11

    assert target.shout is source.shout
    assert target.shout.volume == 11


def test_last_merge_wins():
    first = Module(act=lambda: "first")
    second = Module(act=lambda: "second")
    target = Module()

    merge(target, first)
    merge(target, second)

    assert target.act is second.act
    assert target.act() == "second"
    assert target.ancestor is second


def test_repeated_merge_is_idempotent(greeter):
    once = merge(Module(), greeter)
    twice = merge(merge(Module(), greeter), greeter)

    assert own_members(once) == own_members(twice)
    assert twice.ancestor is greeter


def test_empty_source_still_sets_ancestor():
    source = Module()
    target = Module(existing=lambda: "kept")

    merge(target, source)

    assert target.ancestor is source
    assert target.existing() == "kept"


def test_merge_does_not_copy_source_ancestor():
    grandparent = Module(deep=lambda: "deep")
    parent = merge(Module(mid=lambda: "mid"), grandparent)
    child = merge(Module(), parent)

    assert child.ancestor is parent
    assert child.ancestor is not grandparent
    assert set(own_members(child)) == {"mid", "deep"}


def test_merge_only_copies_one_level():
    b = Module(only_on_b=lambda: "b")
    a = merge(Module(), b)
    del a.only_on_b
    c = merge(Module(), a)

    assert "only_on_b" not in c
    assert c.ancestor is a
    assert c.ancestor.ancestor.only_on_b() == "b"


def test_later_source_mutation_visible_only_through_ancestor():
    source = Module(act=lambda: "old")
    target = merge(Module(), source)

    source.act = lambda: "new"

    assert target.act() == "old"
    assert target.ancestor.act() == "new"


def test_self_merge_is_allowed():
    module = Module(act=lambda: "me")

    merge(module, module)

    assert module.ancestor is module


def test_merge_never_mutates_source(greeter):
    before = dict(own_members(greeter))

    merge(Module(), greeter)

    assert own_members(greeter) == before
    assert greeter.ancestor is None


def test_merge_from_mapping_source():
    source = {"greet": lambda: "hi", "count": 5}
    target = merge(Module(), source)

    assert target.greet is source["greet"]
    assert "count" not in target
    assert target.ancestor is source


def test_merge_into_plain_object():
    target = SimpleNamespace()
    source = SimpleNamespace(greet=lambda: "hi", count=5, _hidden=lambda: "no")

    merge(target, source)

    assert target.greet is source.greet
    assert not hasattr(target, "count")
    assert not hasattr(target, "_hidden")
    assert target.ancestor is source


@pytest.mark.parametrize("target, source", [(None, Module()), (Module(), None)])
def test_merge_rejects_none(target, source):
    with pytest.raises(InvalidArgumentError):
        merge(target, source)


def test_merge_rejects_mapping_target_before_mutation(greeter):
    target = {}

    with pytest.raises(InvalidArgumentError):
        merge(target, greeter)

    assert target == {}


def test_merge_rejects_unenumerable_source_before_mutation():
    target = Module(kept=lambda: "kept")

    with pytest.raises(InvalidArgumentError):
        merge(target, 42)

    assert target.ancestor is None
    assert set(own_members(target)) == {"kept"}


def test_merge_rejects_target_without_namespace(greeter):
    with pytest.raises(InvalidArgumentError):
        merge(object(), greeter)


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


def test_classify_member():
    assert classify_member(len) is MemberKind.BEHAVIOR
    assert classify_member(lambda: None) is MemberKind.BEHAVIOR
    assert classify_member("text") is MemberKind.DATA
    assert classify_member(None) is MemberKind.DATA


def test_own_members_excludes_ancestor():
    source = Module(act=lambda: 1)
    target = merge(Module(size=2), source)

    assert set(own_members(target)) == {"act", "size"}
    assert set(behaviors_of(target)) == {"act"}
    assert set(data_of(target)) == {"size"}


def test_module_repr_lists_members():
    assert repr(Module(b=1, a=lambda: 0)) == "Module(a, b)"


def test_missing_module_member_raises_attribute_error():
    with pytest.raises(AttributeError):
        Module().name


ARBITRARY_NAMES = ["super", "members", "behaviors", "data", "items", "keys"]


@pytest.mark.parametrize("name", ARBITRARY_NAMES)
def test_any_behavior_name_is_copied_from_mapping(name):
    behavior = lambda: name  # noqa: E731
    source = {"alpha": lambda: "a", name: behavior}

    target = merge(Module(), source)

    assert getattr(target, name) is behavior
    assert set(own_members(target)) == {"alpha", name}
    assert target.ancestor is source


@pytest.mark.parametrize("name", ARBITRARY_NAMES)
def test_module_with_any_member_name_stays_mergeable(name):
    behavior = lambda: "shadow"  # noqa: E731
    source = Module(**{name: behavior}, act=lambda: 1)

    target = merge(Module(), source)
    grandchild = merge(Module(), target)

    assert getattr(target, name) is behavior
    assert getattr(grandchild, name) is behavior
    assert set(own_members(grandchild)) == {name, "act"}
    assert name in source
    assert repr(source) == f"Module({', '.join(sorted([name, 'act']))})"


def test_ancestor_behavior_in_source_is_never_copied():
    imposter = lambda: "not an ancestor"  # noqa: E731
    source = {"ancestor": imposter, "act": lambda: 1}

    target = merge(Module(), source)

    assert target.ancestor is source
    assert set(own_members(target)) == {"act"}


def test_module_rejects_ancestor_member():
    with pytest.raises(InvalidArgumentError):
        Module(ancestor=lambda: None)


class Guarded:
    @property
    def locked(self):
        return "fixed"


def test_read_only_target_attribute_fails_before_mutation():
    target = Guarded()
    source = {"alpha": lambda: "a", "locked": lambda: "b"}

    with pytest.raises(InvalidArgumentError, match="locked"):
        merge(target, source)

    assert vars(target) == {}
    assert not hasattr(target, "ancestor")
