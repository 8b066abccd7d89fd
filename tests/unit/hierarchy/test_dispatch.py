"""Unit tests for record dispatch: propagation, last resort and diagnostics."""

from __future__ import annotations

import dataclasses

import pytest
from structlog.testing import capture_logs

from logtree.config.settings import LoggingSettings
from logtree.context import LoggingContext, set_default_context
from logtree.destinations import Destination
from logtree.levels import DEBUG, ERROR, INFO, WARNING
from logtree.testing import FailingDestination

# ---------------------------------------------------------------------------
# Propagation
# ---------------------------------------------------------------------------


class TestPropagation:
    def test_reaches_every_ancestor(self, debug_ctx: LoggingContext, make_recorder) -> None:
        recorders = {scope: make_recorder() for scope in ("", "a", "a.b")}
        for scope, rec in recorders.items():
            debug_ctx.get_logger(scope).add_destination(rec)
        debug_ctx.get_logger("a.b").info("up")
        assert all(rec.messages == ["up"] for rec in recorders.values())

    def test_own_destinations_first(self, debug_ctx: LoggingContext) -> None:
        order: list[str] = []

        class Tagging(Destination):
            def __init__(self, tag: str) -> None:
                super().__init__(context=debug_ctx)
                self.tag = tag

            def emit(self, record) -> None:
                order.append(self.tag)

        debug_ctx.root.add_destination(Tagging("root"))
        debug_ctx.get_logger("a").add_destination(Tagging("a"))
        debug_ctx.get_logger("a.b").add_destination(Tagging("a.b"))
        debug_ctx.get_logger("a.b").info("x")
        assert order == ["a.b", "a", "root"]

    def test_propagate_false_stops_after_node(self, debug_ctx: LoggingContext, make_recorder) -> None:
        root_rec, a_rec, ab_rec = make_recorder(), make_recorder(), make_recorder()
        debug_ctx.root.add_destination(root_rec)
        a = debug_ctx.get_logger("a")
        a.add_destination(a_rec)
        a.propagate = False
        debug_ctx.get_logger("a.b").add_destination(ab_rec)
        debug_ctx.get_logger("a.b").info("x")
        assert ab_rec.call_count == 1
        assert a_rec.call_count == 1
        assert root_rec.call_count == 0

    def test_ancestor_logger_filters_not_applied(self, debug_ctx: LoggingContext, make_recorder) -> None:
        rec = make_recorder()
        a = debug_ctx.get_logger("a")
        a.add_destination(rec)
        a.add_filter(lambda r: False)
        debug_ctx.get_logger("a.b").info("passes")
        assert rec.messages == ["passes"]

    def test_ancestor_level_not_consulted(self, debug_ctx: LoggingContext, make_recorder) -> None:
        rec = make_recorder()
        a = debug_ctx.get_logger("a")
        a.set_level(ERROR)
        a.add_destination(rec)
        child = debug_ctx.get_logger("a.b")
        child.set_level(DEBUG)
        child.debug("still delivered")
        assert rec.messages == ["still delivered"]


class TestFoundCount:
    def test_counts_destinations_met(self, debug_ctx: LoggingContext, make_recorder) -> None:
        debug_ctx.root.add_destination(make_recorder())
        debug_ctx.get_logger("a").add_destination(make_recorder())
        lg = debug_ctx.get_logger("a.b")
        assert lg.dispatch(lg.make_record(INFO, "x")) == 2

    def test_below_threshold_destinations_still_count(self, debug_ctx: LoggingContext, make_recorder) -> None:
        rec = make_recorder(ERROR)
        debug_ctx.root.add_destination(rec)
        found = debug_ctx.root.dispatch(debug_ctx.root.make_record(INFO, "x"))
        assert found == 1
        assert rec.records == []

    def test_destination_filter_rejection_still_counts(self, debug_ctx: LoggingContext, make_recorder) -> None:
        rec = make_recorder()
        rec.add_filter(lambda r: False)
        debug_ctx.root.add_destination(rec)
        assert debug_ctx.root.dispatch(debug_ctx.root.make_record(INFO, "x")) == 1

    def test_destination_replacement_is_local(self, debug_ctx: LoggingContext, make_recorder) -> None:
        first, second = make_recorder(), make_recorder()
        first.add_filter(lambda r: dataclasses.replace(r, msg="rewritten"))
        debug_ctx.root.add_destination(first)
        debug_ctx.root.add_destination(second)
        debug_ctx.root.info("original")
        assert first.messages == ["rewritten"]
        assert second.messages == ["original"]


# ---------------------------------------------------------------------------
# Unrouted records
# ---------------------------------------------------------------------------


class TestLastResort:
    def test_writes_to_current_stderr(self, ctx: LoggingContext, capsys: pytest.CaptureFixture[str]) -> None:
        ctx.get_logger("a").warning("nobody listening")
        assert capsys.readouterr().err == "nobody listening\n"

    def test_not_used_when_a_destination_was_found(
        self, ctx: LoggingContext, make_recorder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        ctx.root.add_destination(make_recorder(ERROR))
        ctx.get_logger("a").warning("filtered by threshold")
        assert capsys.readouterr().err == ""

    def test_below_last_resort_level_is_dropped(
        self, debug_ctx: LoggingContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with capture_logs():
            debug_ctx.get_logger("a").info("too quiet")
        assert capsys.readouterr().err == ""


class TestNoHandlersDiagnostic:
    def test_emitted_once(self, debug_ctx: LoggingContext) -> None:
        with capture_logs() as logs:
            debug_ctx.get_logger("a").info("one")
            debug_ctx.get_logger("b").info("two")
        assert logs == [{"event": "no_handlers_found", "scope": "a", "log_level": "warning"}]
        assert debug_ctx.manager.emitted_no_handler_warning is True

    def test_not_emitted_when_last_resort_handles(self, ctx: LoggingContext, capsys) -> None:
        with capture_logs() as logs:
            ctx.get_logger("a").error("loud")
        assert logs == []
        assert ctx.manager.emitted_no_handler_warning is False

    def test_without_last_resort(self, quiet_settings: LoggingSettings) -> None:
        ctx = LoggingContext(quiet_settings)
        previous = set_default_context(ctx)
        try:
            with capture_logs() as logs:
                ctx.get_logger("svc").critical("lost")
        finally:
            set_default_context(previous)
        assert [e["event"] for e in logs] == ["no_handlers_found"]

    def test_suppressed_by_policy(self, debug_ctx: LoggingContext) -> None:
        debug_ctx.warn_no_handlers = False
        with capture_logs() as logs:
            debug_ctx.get_logger("a").info("x")
        assert logs == []
        assert debug_ctx.manager.emitted_no_handler_warning is False


# ---------------------------------------------------------------------------
# Destination failures
# ---------------------------------------------------------------------------


class TestEmitFailures:
    def test_silent_by_default(self, debug_ctx: LoggingContext, make_recorder) -> None:
        failing = FailingDestination(context=debug_ctx)
        rec = make_recorder()
        debug_ctx.root.add_destination(failing)
        debug_ctx.root.add_destination(rec)
        debug_ctx.root.info("x")
        assert failing.error_count == 1
        assert rec.messages == ["x"]

    def test_raised_when_policy_set(self, debug_ctx: LoggingContext) -> None:
        debug_ctx.raise_exceptions = True
        failing = FailingDestination(ConnectionError("down"), context=debug_ctx)
        debug_ctx.root.add_destination(failing)
        with pytest.raises(ConnectionError, match="down"):
            debug_ctx.root.info("x")
        assert failing.error_count == 1

    def test_missing_emit_always_propagates(self, debug_ctx: LoggingContext) -> None:
        debug_ctx.root.add_destination(Destination(context=debug_ctx))
        with pytest.raises(NotImplementedError):
            debug_ctx.root.warning("x")

    def test_below_threshold_records_are_not_emitted(self, debug_ctx: LoggingContext) -> None:
        failing = FailingDestination(level=WARNING, context=debug_ctx)
        debug_ctx.root.add_destination(failing)
        debug_ctx.root.info("x")
        assert failing.error_count == 0
