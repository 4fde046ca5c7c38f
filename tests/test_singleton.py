"""
Tests for the singleton module.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from patternguide.creational.singleton import (
    DoubleCheckedLogger,
    EagerLogger,
    LazyLogger,
    Logger,
    MetaLogger,
    SynchronizedLogger,
    VARIANTS,
)

RESETTABLE = (LazyLogger, SynchronizedLogger, DoubleCheckedLogger, MetaLogger)
THREAD_SAFE = (SynchronizedLogger, DoubleCheckedLogger, MetaLogger)


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Start every test without cached instances."""
    for variant in RESETTABLE:
        variant.reset_instance()
    EagerLogger.get_instance().clear()
    yield
    for variant in RESETTABLE:
        variant.reset_instance()


class TestLogger:
    """Tests for the shared Logger object."""

    def test_log_formats_and_records_entry(self):
        logger = Logger("test")
        entry = logger.log("hello")
        assert entry == "[INFO] hello"
        assert logger.history == ["[INFO] hello"]

    def test_level_is_case_insensitive(self):
        logger = Logger()
        assert logger.log("careful", level="warning") == "[WARNING] careful"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            Logger().log("x", level="LOUD")

    def test_forwards_to_logging(self, caplog):
        caplog.set_level("INFO", logger="patternguide.creational.singleton")
        Logger("svc").log("forwarded")
        assert "svc: forwarded" in caplog.text

    def test_clear(self):
        logger = Logger()
        logger.log("a")
        logger.clear()
        assert logger.history == []


class TestSharedInstance:
    """Every accessor variant returns one identity."""

    @pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.__name__)
    def test_repeated_calls_return_same_object(self, variant):
        assert variant.get_instance() is variant.get_instance()

    @pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.__name__)
    def test_state_is_shared(self, variant):
        variant.get_instance().log("written once")
        assert "[INFO] written once" in variant.get_instance().history

    @pytest.mark.parametrize("variant", RESETTABLE, ids=lambda v: v.__name__)
    def test_constructed_once(self, variant):
        for _ in range(5):
            variant.get_instance()
        assert variant.instances_created == 1

    def test_variants_do_not_share_instances(self):
        assert LazyLogger.get_instance() is not DoubleCheckedLogger.get_instance()

    def test_eager_instance_exists_before_first_call(self):
        assert EagerLogger._instance is not None
        assert EagerLogger.get_instance() is EagerLogger._instance
        assert EagerLogger.instances_created == 1

    def test_reset_creates_a_new_instance(self):
        first = LazyLogger.get_instance()
        LazyLogger.reset_instance()
        assert LazyLogger.get_instance() is not first


class TestMetaclassSingleton:
    """Tests for SingletonMeta."""

    def test_constructor_returns_same_object(self):
        assert MetaLogger() is MetaLogger()

    def test_later_constructor_arguments_ignored(self):
        first = MetaLogger("first")
        second = MetaLogger("second")
        assert second is first
        assert second.name == "first"


class TestConcurrentAccess:
    """Guarded variants construct exactly one instance under contention."""

    @pytest.mark.parametrize("variant", THREAD_SAFE, ids=lambda v: v.__name__)
    def test_single_construction_across_threads(self, variant):
        workers = 16
        barrier = threading.Barrier(workers)

        def grab():
            barrier.wait(timeout=10)
            return variant.get_instance()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: grab(), range(workers)))

        assert len({id(instance) for instance in results}) == 1
        assert variant.instances_created == 1


def test_demo_reports_identity_for_each_variant():
    from patternguide.catalog import Transcript
    from patternguide.creational import singleton

    transcript = Transcript("singleton")
    singleton.demo(transcript)

    lines = transcript.lines
    for variant in VARIANTS:
        assert any(f"{variant.__name__}: first is second -> True" in line for line in lines)
