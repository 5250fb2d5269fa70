import logging
import os
import tempfile
import unittest
import doctest

import utils

from logging_config import LOGGER_NAMES, setup_logging

from dsn.scroll import axes as scroll_axes
from dsn.scroll import options as scroll_options
from dsn.scroll import probe as scroll_probe
from dsn.scroll import utils as scroll_utils
from dsn.scroll_queue import construct as scroll_queue_construct

from dsn.scroll.axes import canonicalize_axis_keys, canonicalize_axis_name
from dsn.scroll.construct import resolve_position
from dsn.scroll.errors import (
    AmbiguousAxis,
    AxisKeywordMismatch,
    InvalidAxisName,
    InvalidPositionValue,
    InvalidScrollMode,
    ScrollResolutionError,
)
from dsn.scroll.options import resolve_options
from dsn.scroll.probe import EmptyQueueView, QueueView, ScrollSurface, SurfaceProbe, last_queued_target
from dsn.scroll.structure import (
    BOTH_AXES,
    Coordinates,
    DEFAULT_QUEUE_ID,
    HORIZONTAL,
    IGNORE_AXIS,
    MODE_APPEND,
    MODE_MERGE,
    MODE_REPLACE,
    ScrollOptions,
    VERTICAL,
)
from dsn.scroll_queue.clef import CompleteScroll, EnqueueScroll, StopScroll
from dsn.scroll_queue.construct import play_scroll_queue_note
from dsn.scroll_queue.structure import ScrollQueue


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(scroll_axes))
    tests.addTests(doctest.DocTestSuite(scroll_options))
    tests.addTests(doctest.DocTestSuite(scroll_probe))
    tests.addTests(doctest.DocTestSuite(scroll_utils))
    tests.addTests(doctest.DocTestSuite(scroll_queue_construct))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/scroll_resolution.txt"))

    return tests


class ListQueueView(QueueView):
    def __init__(self, entries):
        self.entries = entries

    def snapshot(self, queue_id):
        return self.entries


def surface(scroll_left=0, scroll_top=100):
    # 1000 pixels of scroll range on either axis
    return ScrollSurface(1500, 2000, 500, 1000, scroll_left=scroll_left, scroll_top=scroll_top)


def options(axis=VERTICAL, mode=MODE_REPLACE, queue_id=DEFAULT_QUEUE_ID):
    return ScrollOptions(axis, queue_id, mode)


def resolve(position, opts=None, queue_view=None, container=None):
    return resolve_position(
        position,
        container if container is not None else surface(),
        opts if opts is not None else options(),
        SurfaceProbe(),
        queue_view if queue_view is not None else EmptyQueueView())


class AxisNamingTestCase(unittest.TestCase):

    def test_aliases(self):
        for aliases, axis in [
                (("vertical", "v", "y", "top"), VERTICAL),
                (("horizontal", "h", "x", "left"), HORIZONTAL),
                (("both", "vh", "hv", "xy", "yx", "all"), BOTH_AXES)]:
            for alias in aliases:
                self.assertEqual(axis, canonicalize_axis_name(alias))

    def test_unrecognized_names(self):
        for name in ("z", "", "Vertical", "bottom", None, 1):
            with self.assertRaises(InvalidAxisName):
                canonicalize_axis_name(name)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            canonicalize_axis_name("z")

    def test_keys(self):
        original = {"x": 1, "top": 2, "duration": 3}
        self.assertEqual({HORIZONTAL: 1, VERTICAL: 2, "duration": 3}, canonicalize_axis_keys(original))
        self.assertEqual({"x": 1, "top": 2, "duration": 3}, original)


class OptionsTestCase(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(options(), resolve_options())
        self.assertEqual(options(), resolve_options(None, 100))

    def test_axis_from_position(self):
        self.assertEqual(BOTH_AXES, resolve_options({}, {"h": 1, "v": 2}).axis)
        self.assertEqual(HORIZONTAL, resolve_options({}, {"x": 1}).axis)
        self.assertEqual(VERTICAL, resolve_options({}, {"y": 1, "x": False}).axis)
        self.assertEqual(HORIZONTAL, resolve_options({}, {"x": 0, "y": IGNORE_AXIS}).axis)
        self.assertEqual(VERTICAL, resolve_options({}, {}).axis)
        self.assertEqual(VERTICAL, resolve_options({}, "TOP").axis)
        self.assertEqual(HORIZONTAL, resolve_options({}, "Left").axis)

    def test_explicit_axis_wins(self):
        self.assertEqual(HORIZONTAL, resolve_options({"axis": "x"}, {"h": 1, "v": 2}).axis)
        self.assertEqual(BOTH_AXES, resolve_options({"axis": "all"}, 100).axis)

        with self.assertRaises(InvalidAxisName):
            resolve_options({"axis": "diagonal"}, 100)

    def test_queue_id(self):
        self.assertEqual("mine", resolve_options({"queue": "mine"}).queue_id)
        self.assertEqual("mine", resolve_options({"queue_id": "mine"}).queue_id)

    def test_mode(self):
        self.assertEqual(MODE_APPEND, resolve_options({"append": True}).mode)
        self.assertEqual(MODE_MERGE, resolve_options({"merge": True}).mode)
        self.assertEqual(MODE_MERGE, resolve_options({"mode": "Merge", "append": True}).mode)
        self.assertEqual(MODE_REPLACE, resolve_options({"append": False}).mode)

        with self.assertRaises(InvalidScrollMode):
            resolve_options({"mode": "prepend"})

    def test_extra_options_are_kept(self):
        raw = {"duration": 400, "axis": "x"}
        resolved = resolve_options(raw)
        self.assertEqual({"duration": 400}, resolved.extra)

        resolved.extra["duration"] = 0
        self.assertEqual({"duration": 400, "axis": "x"}, raw)


class ResolvePositionTestCase(unittest.TestCase):

    def test_numbers_are_rounded_and_limited(self):
        for n, expected in [(0, 0), (250, 250), (1000, 1000), (-1, 0), (1001, 1000), (10.5, 11), (10.49, 10)]:
            for axis in (HORIZONTAL, VERTICAL):
                self.assertEqual(expected, resolve(n, options(axis)).for_axis(axis))

    def test_in_range_value_is_unchanged(self):
        first = resolve(437).vertical
        self.assertEqual(first, resolve(first).vertical)

    def test_percentages(self):
        self.assertEqual(resolve(500), resolve("50%"))
        self.assertEqual(resolve(333), resolve("33.3%"))

    def test_nothing_to_scroll(self):
        tiny = ScrollSurface(100, 100, 500, 500)
        self.assertEqual(Coordinates(IGNORE_AXIS, 0), resolve("50%", container=tiny))
        self.assertEqual(Coordinates(IGNORE_AXIS, 0), resolve("bottom", container=tiny))

    def test_relative(self):
        self.assertEqual(150, resolve("+=50").vertical)
        self.assertEqual(50, resolve("-=50px").vertical)
        self.assertEqual(0, resolve("-=500").vertical)
        self.assertEqual(1000, resolve("+=bottom").vertical)

    def test_relative_to_queue(self):
        queue = ListQueueView([Coordinates(IGNORE_AXIS, 300)])

        self.assertEqual(150, resolve("+=50", options(mode=MODE_REPLACE), queue).vertical)
        self.assertEqual(350, resolve("+=50", options(mode=MODE_APPEND), queue).vertical)
        self.assertEqual(350, resolve("+=50", options(mode=MODE_MERGE), queue).vertical)

        # Nothing queued for the horizontal axis: start at the current position
        resolved = resolve("+=50", options(HORIZONTAL, MODE_APPEND), queue, surface(scroll_left=20))
        self.assertEqual(70, resolved.horizontal)

    def test_keyword_mismatch(self):
        with self.assertRaises(AxisKeywordMismatch):
            resolve("top", options(HORIZONTAL))
        with self.assertRaises(AxisKeywordMismatch):
            resolve("right", options(VERTICAL))
        with self.assertRaises(AxisKeywordMismatch):
            resolve({"x": "bottom"}, options(BOTH_AXES))

    def test_ambiguous_axis(self):
        with self.assertRaises(AmbiguousAxis):
            resolve(100, options(BOTH_AXES))

    def test_invalid_values(self):
        for value in ("abc", "12abc", "px", "abc%", True, [100], float("nan"), float("inf"), "nan", {"v": {"v": 1}}):
            with self.assertRaises(InvalidPositionValue):
                resolve(value)

    def test_numbers_with_underscores_are_invalid(self):
        for value in ("1_000", "1_0px", "5_0%", "+=1_0"):
            with self.assertRaises(InvalidPositionValue):
                resolve(value)

    def test_non_finite_strings_are_invalid(self):
        for value in ("inf", "-inf%", "nanpx", "+=inf"):
            with self.assertRaises(InvalidPositionValue):
                resolve(value)

    def test_huge_numbers_are_limited(self):
        self.assertEqual(1000, resolve(10 ** 400).vertical)
        self.assertEqual(0, resolve(-10 ** 400).vertical)
        self.assertEqual(1000, resolve(10 ** 400, options(HORIZONTAL)).horizontal)

    def test_overflowing_percentages_are_limited(self):
        self.assertEqual(1000, resolve("1e307%").vertical)
        self.assertEqual(0, resolve("-1e307%").vertical)
        self.assertEqual(1000, resolve("+=1e307%").vertical)
        self.assertEqual(0, resolve("-=1e307%").vertical)

    def test_all_errors_share_a_base(self):
        with self.assertRaises(ScrollResolutionError):
            resolve("left")

    def test_undefined_values(self):
        for value in (None, False, "", IGNORE_AXIS):
            self.assertEqual(Coordinates(IGNORE_AXIS, IGNORE_AXIS), resolve(value))

    def test_undefined_values_in_merge_mode(self):
        queue = ListQueueView([Coordinates(IGNORE_AXIS, 300)])
        for value in (None, False, ""):
            self.assertEqual(Coordinates(IGNORE_AXIS, 300), resolve(value, options(mode=MODE_MERGE), queue))

        # nothing to inherit
        self.assertEqual(Coordinates(IGNORE_AXIS, IGNORE_AXIS), resolve(None, options(HORIZONTAL, MODE_MERGE), queue))

    def test_hash_with_omitted_axis(self):
        self.assertEqual(Coordinates(IGNORE_AXIS, 200), resolve({"vertical": 200}, options(BOTH_AXES)))
        self.assertEqual(Coordinates(IGNORE_AXIS, 200), resolve({"y": 200, "x": None}, options(BOTH_AXES)))

    def test_hash_restricted_by_axis_option(self):
        queue = ListQueueView([Coordinates(80, 50)])
        position = {"x": 300, "y": 400}

        self.assertEqual(Coordinates(IGNORE_AXIS, 400), resolve(position, options(VERTICAL), queue))
        self.assertEqual(Coordinates(300, IGNORE_AXIS), resolve(position, options(HORIZONTAL), queue))
        self.assertEqual(Coordinates(80, 400), resolve(position, options(VERTICAL, MODE_MERGE), queue))
        self.assertEqual(Coordinates(300, 400), resolve(position, options(BOTH_AXES, MODE_MERGE), queue))

    def test_hash_axes_are_resolved_independently(self):
        self.assertEqual(
            Coordinates(0, 150), resolve({"h": "-=10", "v": "+=50"}, options(BOTH_AXES)))

    def test_input_is_not_touched(self):
        position = {"x": "+=10", "top": "50%"}
        resolve(position, options(BOTH_AXES))
        self.assertEqual({"x": "+=10", "top": "50%"}, position)


class LastQueuedTargetTestCase(unittest.TestCase):

    def test_axes_are_found_independently(self):
        queue = ListQueueView([{VERTICAL: 50}, {HORIZONTAL: 80}])
        self.assertEqual(50, last_queued_target(queue, "q", VERTICAL))
        self.assertEqual(80, last_queued_target(queue, "q", HORIZONTAL))

    def test_later_entries_win_unless_ignored(self):
        queue = ListQueueView([
            Coordinates(10, 20),
            Coordinates(30, IGNORE_AXIS),
            None,
            {VERTICAL: None},
            Coordinates(IGNORE_AXIS, 0),
        ])
        self.assertEqual(Coordinates(30, 0), last_queued_target(queue, "q"))

    def test_empty(self):
        self.assertEqual(Coordinates(IGNORE_AXIS, IGNORE_AXIS), last_queued_target(EmptyQueueView(), "q"))


class ScrollQueueTestCase(unittest.TestCase):

    def test_queues_are_separate(self):
        structure = ScrollQueue()
        structure = play_scroll_queue_note(EnqueueScroll("a", Coordinates(1, 2)), structure)
        structure = play_scroll_queue_note(EnqueueScroll("b", Coordinates(3, 4)), structure)

        self.assertEqual((Coordinates(1, 2),), structure.snapshot("a"))
        self.assertEqual((Coordinates(3, 4),), structure.snapshot("b"))
        self.assertEqual((), structure.snapshot("c"))

    def test_structure_is_not_changed_by_playing(self):
        before = play_scroll_queue_note(EnqueueScroll("a", Coordinates(1, 2)), ScrollQueue())
        play_scroll_queue_note(StopScroll("a"), before)
        play_scroll_queue_note(CompleteScroll("a"), before)
        self.assertEqual((Coordinates(1, 2),), before.snapshot("a"))

    def test_complete_on_empty_queue(self):
        self.assertTrue(play_scroll_queue_note(CompleteScroll("a"), ScrollQueue()).is_empty("a"))
        self.assertIsNone(ScrollQueue().head("a"))

    def test_illegal_note(self):
        with self.assertRaises(Exception):
            play_scroll_queue_note(object(), ScrollQueue())

    def test_chained_appends(self):
        structure = ScrollQueue()
        container = surface(scroll_top=100)

        for _ in range(3):
            opts = resolve_options({"append": True}, "+=100")
            target = resolve("+=100", opts, structure, container)
            structure = play_scroll_queue_note(EnqueueScroll(opts.queue_id, target), structure)

        self.assertEqual(400, last_queued_target(structure, DEFAULT_QUEUE_ID, VERTICAL))


class PmtsTestCase(unittest.TestCase):

    def test_pmts(self):
        utils.pmts(Coordinates(1, 2), Coordinates)

        with self.assertRaises(AssertionError):
            utils.pmts((1, 2), Coordinates, "a target")


class LoggingConfigTestCase(unittest.TestCase):

    def tearDown(self):
        for name in LOGGER_NAMES:
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "scroller.log")
            setup_logging(logging.DEBUG, log_file=path)

            resolve(200)
            self.tearDown()

            with open(path, encoding="utf-8") as f:
                content = f.read()

        self.assertIn("dsn.scroll.construct - DEBUG - Resolved 200", content)
        self.assertIn("scroller - INFO - Logging initialized.", content)


if __name__ == "__main__":
    unittest.main()
