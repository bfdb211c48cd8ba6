"""Test the Subscriptions query surface."""

from eventwire.subscriber import Subscriptions
from eventwire.subscription import Subscription


class Context:
    def foo(self):
        pass

    def bar(self):
        pass


def _subscriptions():
    ctx = Context()
    return Subscriptions(
        [
            Subscription("created", ctx.foo),
            Subscription("created", ctx.bar),
            Subscription("deleted", ctx.foo),
        ]
    )


class TestMethodNames:
    def test_returns_methods_for_event_in_order(self):
        assert _subscriptions().method_names("created") == ["foo", "bar"]

    def test_returns_empty_for_unknown_event(self):
        assert _subscriptions().method_names("updated") == []


class TestEventNames:
    def test_returns_events_for_method_in_order(self):
        assert _subscriptions().event_names("foo") == ["created", "deleted"]

    def test_returns_empty_for_unknown_method(self):
        assert _subscriptions().event_names("baz") == []


class TestSubscriptions:
    def test_no_filters_returns_everything_in_order(self):
        # Arrange
        subs = _subscriptions()

        # Act
        result = subs.subscriptions()

        # Assert
        assert [(s.event_name, s.method_name) for s in result] == [
            ("created", "foo"),
            ("created", "bar"),
            ("deleted", "foo"),
        ]

    def test_filter_by_event_name(self):
        result = _subscriptions().subscriptions(event_name="created")
        assert [s.method_name for s in result] == ["foo", "bar"]

    def test_filter_by_method_name(self):
        result = _subscriptions().subscriptions(method_name="foo")
        assert [s.event_name for s in result] == ["created", "deleted"]

    def test_filters_compose_with_and(self):
        result = _subscriptions().subscriptions(event_name="deleted", method_name="foo")
        assert len(result) == 1
        assert result[0].event_name == "deleted"

    def test_filters_with_no_overlap_return_empty(self):
        assert _subscriptions().subscriptions(event_name="deleted", method_name="bar") == []

    def test_unknown_event_filter_returns_empty(self):
        assert _subscriptions().subscriptions(event_name="nope") == []

    def test_returned_list_does_not_mutate_collection(self):
        # Arrange
        subs = _subscriptions()

        # Act
        subs.subscriptions().clear()

        # Assert
        assert len(subs) == 3


class TestCollection:
    def test_len_and_iter(self):
        subs = _subscriptions()
        assert len(subs) == 3
        assert [s.event_name for s in subs] == ["created", "created", "deleted"]

    def test_snapshot_of_source_list(self):
        ctx = Context()
        source = [Subscription("created", ctx.foo)]
        subs = Subscriptions(source)
        source.append(Subscription("deleted", ctx.bar))
        assert len(subs) == 1

    def test_empty(self):
        subs = Subscriptions([])
        assert len(subs) == 0
        assert subs.subscriptions() == []
        assert subs.method_names("created") == []

    def test_repr_lists_pairs(self):
        assert repr(_subscriptions()) == "Subscriptions([created->foo, created->bar, deleted->foo])"
