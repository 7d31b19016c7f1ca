"""Tests for the logger registry"""

import logging
import threading

import pytest

from logbridge import BridgeLogger, Level, LoggerRegistry, LogEvent
from logbridge.core.logger_registry import make_name_from, name_for
from logbridge.formatters import CompactFormatter, TextFormatter
from logbridge.listeners import CollectingListener


Widget = type("Widget", (), {"__module__": "org.example.demo"})
Gadget = type("Gadget", (), {"__module__": "org.example.other"})


class Service:
    class Config:
        pass


class Worker:
    class Config:
        pass


class TestNameDerivation:
    """Test canonical name derivation."""

    def test_abbreviates_all_but_last(self):
        assert make_name_from("com.example.service.UserManager") == "c.e.s.UserManager"

    def test_single_segment(self):
        assert make_name_from("Widget") == "Widget"

    def test_name_for_class(self):
        assert name_for(Widget) == "o.e.d.Widget"

    def test_name_for_rejects_none(self):
        with pytest.raises(ValueError):
            name_for(None)

    def test_string_names_used_as_is(self):
        registry = LoggerRegistry()
        log = registry.create("a.b.c.Name")
        assert log.name == "a.b.c.Name"
        assert registry.get("a.b.c.Name") is log

    def test_nested_classes_keep_enclosing_class(self):
        assert name_for(Service.Config).endswith(".Service$Config")
        assert name_for(Worker.Config).endswith(".Worker$Config")

    def test_nested_classes_get_distinct_loggers(self):
        registry = LoggerRegistry()
        service = registry.create(Service.Config)
        worker = registry.create(Worker.Config)

        assert service.name != worker.name
        assert len(registry) == 2
        assert service._inner is not worker._inner

    def test_class_binding(self):
        registry = LoggerRegistry()
        log = registry.create(Widget)
        assert log.name == "o.e.d.Widget"
        assert registry.get("o.e.d.Widget") is log


class TestCreate:
    """Test logger creation and registry defaults."""

    def test_defaults(self):
        registry = LoggerRegistry()
        assert registry.get_level() == Level.INFO
        assert isinstance(registry.get_formatter(), TextFormatter)

    def test_seeded_with_defaults(self):
        formatter = CompactFormatter()
        registry = LoggerRegistry(level=Level.DEBUG, formatter=formatter)
        log = registry.create("svc")
        assert log.get_level() == Level.DEBUG
        assert log.get_formatter() is formatter

    def test_bound_to_stdlib_channel(self):
        registry = LoggerRegistry()
        log = registry.create("bound.channel")
        assert log._inner is logging.getLogger("bound.channel")

    def test_defaults_not_retroactive(self):
        registry = LoggerRegistry()
        before = registry.create("before")
        registry.set_default_level(Level.ERROR)
        registry.set_formatter(CompactFormatter())
        after = registry.create("after")

        assert before.get_level() == Level.INFO
        assert isinstance(before.get_formatter(), TextFormatter)
        assert after.get_level() == Level.ERROR
        assert isinstance(after.get_formatter(), CompactFormatter)

    def test_create_replaces_existing(self):
        registry = LoggerRegistry()
        first = registry.create("svc")
        second = registry.create("svc")

        assert first is not second
        assert registry.get("svc") is second
        assert len(registry) == 1

    def test_empty_name_stored_under_channel_name(self):
        registry = LoggerRegistry()
        log = registry.create("")

        assert log.name == logging.getLogger().name
        assert registry.get(log.name) is log
        assert dict(registry.loggers()) == {log.name: log}
        assert registry.acquire("") is log

    def test_acquire_reuses(self):
        registry = LoggerRegistry()
        first = registry.acquire("svc")
        assert registry.acquire("svc") is first
        assert registry.acquire(Widget) is registry.acquire(Widget)

    def test_create_rejects_invalid_binding(self):
        registry = LoggerRegistry()
        with pytest.raises(ValueError):
            registry.create(None)
        with pytest.raises(TypeError):
            registry.create(42)
        assert len(registry) == 0

    def test_setters_reject_none(self):
        registry = LoggerRegistry()
        with pytest.raises(ValueError):
            registry.set_formatter(None)
        with pytest.raises(ValueError):
            registry.set_default_level(None)

    def test_logger_class(self):
        assert LoggerRegistry.logger_class() is BridgeLogger


class TestListeners:
    """Test registry listener propagation."""

    def test_new_loggers_get_registry_listeners(self):
        registry = LoggerRegistry()
        listener = CollectingListener()
        registry.add_listener(listener)

        registry.create("svc").info("hi")

        assert listener.events == [LogEvent(Level.INFO, "svc", "hi")]

    def test_late_listener_reaches_existing_loggers(self):
        registry = LoggerRegistry()
        a = registry.create("a")
        b = registry.create("b")
        listener = CollectingListener()

        registry.add_listener(listener)
        a.info("from a")
        b.warn("from b")

        assert listener.messages() == ["from a", "from b"]

    def test_add_twice_notifies_once(self):
        registry = LoggerRegistry()
        log = registry.create("svc")
        listener = CollectingListener()

        assert registry.add_listener(listener) is True
        assert registry.add_listener(listener) is False
        log.info("event")

        assert len(listener) == 1
        assert list(registry.listeners()) == [listener]

    def test_remove_fans_out(self):
        registry = LoggerRegistry()
        log = registry.create("svc")
        listener = CollectingListener()
        registry.add_listener(listener)

        assert registry.remove_listener(listener) is True
        log.info("ignored")

        assert len(listener) == 0
        assert list(log.listeners()) == []

    def test_remove_unknown_is_noop(self):
        registry = LoggerRegistry()
        log = registry.create("svc")
        own = CollectingListener()
        log.add_listener(own)

        assert registry.remove_listener(own) is False
        assert list(log.listeners()) == [own]

    def test_listener_rejects_none(self):
        registry = LoggerRegistry()
        with pytest.raises(ValueError):
            registry.add_listener(None)


class TestSnapshots:
    """Test loggers() and listeners() iteration."""

    def test_loggers_pairs(self):
        registry = LoggerRegistry()
        a = registry.create("a")
        b = registry.create("b")
        assert dict(registry.loggers()) == {"a": a, "b": b}

    def test_loggers_restartable(self):
        registry = LoggerRegistry()
        registry.create("a")
        first = registry.loggers()
        registry.create("b")

        assert [name for name, _ in first] == ["a"]
        assert [name for name, _ in registry.loggers()] == ["a", "b"]

    def test_mutation_during_iteration(self):
        registry = LoggerRegistry()
        registry.create("a")
        for name, _ in registry.loggers():
            registry.create(name + ".child")
        assert len(registry) == 2


class TestSetLevel:
    """Test prefix level updates."""

    def test_prefix_match(self):
        registry = LoggerRegistry()
        ab = registry.create("a.b")
        ac = registry.create("a.c")
        xy = registry.create("x.y")

        assert registry.set_level("a.", Level.WARN) == 2

        assert ab.get_level() == Level.WARN
        assert ac.get_level() == Level.WARN
        assert xy.get_level() == Level.INFO

    def test_plain_prefix_not_segment_aware(self):
        registry = LoggerRegistry()
        abc = registry.create("abc")
        registry.set_level("ab", Level.ERROR)
        assert abc.get_level() == Level.ERROR

    def test_class_prefix(self):
        registry = LoggerRegistry()
        widget = registry.create(Widget)
        gadget = registry.create(Gadget)

        registry.set_level(Widget, Level.DEBUG)

        assert widget.get_level() == Level.DEBUG
        assert gadget.get_level() == Level.INFO

    def test_rejects_none(self):
        registry = LoggerRegistry()
        with pytest.raises(ValueError):
            registry.set_level(None, Level.INFO)
        with pytest.raises(ValueError):
            registry.set_level("a", None)


class TestScenario:
    """End-to-end registry and stdlib backend behavior."""

    def test_svc_scenario(self, caplog):
        caplog.set_level(logging.DEBUG)
        registry = LoggerRegistry(level=Level.INFO)
        listener = CollectingListener()
        registry.add_listener(listener)
        log = registry.create("svc")

        log.debug("x")
        assert [r for r in caplog.records if r.name == "svc"] == []
        assert len(listener) == 0

        log.info("hello {}", "world")
        records = [r for r in caplog.records if r.name == "svc"]
        assert len(records) == 1
        assert records[0].msg.template == "hello {}"
        assert records[0].msg.args == ("world",)
        assert listener.events == [LogEvent(Level.INFO, "svc", "hello world")]

    def test_concurrent_create_and_listeners(self):
        registry = LoggerRegistry()
        errors = []

        def create(prefix):
            try:
                for i in range(100):
                    registry.create(f"{prefix}.{i}").info("created")
            except Exception as e:
                errors.append(e)

        def churn():
            try:
                for _ in range(100):
                    listener = CollectingListener()
                    registry.add_listener(listener)
                    registry.remove_listener(listener)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=create, args=(f"t{n}",)) for n in range(3)]
        threads += [threading.Thread(target=churn) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(registry) == 300
        assert list(registry.listeners()) == []
        for _, log in registry.loggers():
            assert list(log.listeners()) == []
