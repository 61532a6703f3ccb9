"""Tests for observation-only effects."""

import logging

from elevated import log_effect, pure, pure_lazy, pure_task, tap, tap_lazy, tap_task, traced

from .conftest import failing_lazy


class TestTap:
    def test_returns_equal_container(self, calls):
        result = tap(calls.append)(pure(2))

        assert result == pure(2)
        assert calls == [2]

    def test_effect_return_value_is_ignored(self):
        assert tap(lambda x: x * 100)(pure(2)) == pure(2)

    async def test_lazy_runs_on_await(self, calls):
        interp = tap_lazy(calls.append)(pure_lazy("v"))

        assert calls == []
        result = await interp
        assert result.unwrap() == "v"
        assert calls == ["v"]

    async def test_lazy_skips_error(self, calls):
        await tap_lazy(calls.append)(failing_lazy("err"))

        assert calls == []

    async def test_task(self, calls):
        assert await tap_task(calls.append)(pure_task(5)) == 5
        assert calls == [5]


class TestTraced:
    def test_logs_value_with_label(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="elevated"):
            result = traced("after increment")(pure(3))

        assert result == pure(3)
        assert caplog.messages == ["after increment: 3"]

    def test_custom_logger_and_level(self, caplog):
        custom = logging.getLogger("tests.elevated")

        with caplog.at_level(logging.INFO, logger="tests.elevated"):
            traced("seen", logger=custom, level=logging.INFO)(pure("x"))

        assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
            ("tests.elevated", logging.INFO, "seen: 'x'"),
        ]

    async def test_log_effect_with_lazy(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="elevated"):
            await tap_lazy(log_effect("lazy"))(pure_lazy([1, 2]))

        assert caplog.messages == ["lazy: [1, 2]"]
