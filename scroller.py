import logging
from sys import argv

from kivy.app import App
from kivy.clock import Clock
from kivy.config import Config
from kivy.graphics import Color, Rectangle
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label
from kivy.uix.scrollview import ScrollView
from kivy.uix.textinput import TextInput
from kivy.uix.widget import Widget

from utils import int_or_str, parse_pairs
from logging_config import setup_logging

from dsn.scroll.construct import resolve_position
from dsn.scroll.errors import ScrollResolutionError
from dsn.scroll.options import resolve_options
from dsn.scroll_queue.clef import CompleteScroll, EnqueueScroll, StopScroll
from dsn.scroll_queue.structure import ScrollQueue
from dsn.scroll_queue.construct import play_scroll_queue_note

from widgets.layout_constants import (
    CELL_SIZE,
    CELLS_HIGH,
    CELLS_WIDE,
    DARK_GREY,
    FONT_SIZE,
    INPUT_HEIGHT,
    LIGHT_YELLOW,
    MARGIN,
    QUEUE_TICK,
)
from widgets.scrollview_probe import ScrollViewProbe, apply_coordinates

Config.set('kivy', 'exit_on_escape', '0')

logger = logging.getLogger("scroller")


def position_from_text(text):
    """`v:100 h:+=50` is a position per axis; anything else is a single value."""
    text = text.strip()
    if ":" in text:
        return parse_pairs(text, ":")
    return int_or_str(text)


class CheckerboardWidget(Widget):
    """A document which is large enough to scroll around in, and which shows where you are."""

    def __init__(self, **kwargs):
        super(CheckerboardWidget, self).__init__(**kwargs)
        self.size_hint = (None, None)
        self.size = (CELL_SIZE * CELLS_WIDE, CELL_SIZE * CELLS_HIGH)
        self.bind(pos=self.refresh)
        self.refresh()

    def refresh(self, *args):
        self.canvas.clear()
        with self.canvas:
            for column in range(CELLS_WIDE):
                for row in range(CELLS_HIGH):
                    Color(*(DARK_GREY if (column + row) % 2 else LIGHT_YELLOW))
                    Rectangle(
                        pos=(self.x + column * CELL_SIZE, self.top - (row + 1) * CELL_SIZE),
                        size=(CELL_SIZE, CELL_SIZE))


class ScrollerGUI(App):

    def __init__(self):
        super(ScrollerGUI, self).__init__()
        self.probe = ScrollViewProbe()
        self.queue_ds = ScrollQueue()

    def build(self):
        layout = BoxLayout(orientation='vertical', spacing=MARGIN, padding=MARGIN)

        inputs = BoxLayout(orientation='horizontal', spacing=MARGIN, size_hint=(1, None), height=INPUT_HEIGHT)
        self.position_input = TextInput(
            multiline=False, hint_text="position, e.g. bottom, 50%, +=200, v:100 h:right, stop",
            font_size=FONT_SIZE)
        self.options_input = TextInput(
            multiline=False, hint_text="options, e.g. axis=x mode=append", font_size=FONT_SIZE)
        self.position_input.bind(on_text_validate=self.on_position_entered)
        self.options_input.bind(on_text_validate=self.on_position_entered)
        inputs.add_widget(self.position_input)
        inputs.add_widget(self.options_input)

        self.scroll_view = ScrollView(do_scroll_x=True, do_scroll_y=True)
        self.scroll_view.add_widget(CheckerboardWidget())

        self.status = Label(size_hint=(1, None), height=INPUT_HEIGHT, font_size=FONT_SIZE)

        layout.add_widget(inputs)
        layout.add_widget(self.scroll_view)
        layout.add_widget(self.status)

        Clock.schedule_interval(self.play_queue_heads, QUEUE_TICK)
        return layout

    def on_position_entered(self, *args):
        raw_options = parse_pairs(self.options_input.text, "=")
        text = self.position_input.text.strip()

        try:
            if text.lower() == "stop":
                options = resolve_options(raw_options)
                self.queue_ds = play_scroll_queue_note(StopScroll(options.queue_id), self.queue_ds)
                self.status.text = "stopped %s" % options.queue_id
                return

            raw_position = position_from_text(text)
            options = resolve_options(raw_options, raw_position)
            coordinates = resolve_position(raw_position, self.scroll_view, options, self.probe, self.queue_ds)

        except ScrollResolutionError as e:
            logger.warning("Rejected %r with options %r: %s", text, raw_options, e)
            self.status.text = str(e)
            return

        self.queue_ds = play_scroll_queue_note(EnqueueScroll(options.queue_id, coordinates), self.queue_ds)
        self.status.text = "%s => %s" % (text, coordinates)

    def play_queue_heads(self, dt):
        for queue_id in list(self.queue_ds.queues):
            apply_coordinates(self.scroll_view, self.queue_ds.head(queue_id))
            self.queue_ds = play_scroll_queue_note(CompleteScroll(queue_id), self.queue_ds)


def main():
    level = getattr(logging, argv[1].upper(), None) if len(argv) >= 2 else logging.INFO
    log_file = argv[2] if len(argv) == 3 else None

    if len(argv) > 3 or not isinstance(level, int):
        print("Usage: ", argv[0], "[DEBUG|INFO|WARNING [LOGFILE]]")
        exit()

    setup_logging(level=level, log_file=log_file)
    ScrollerGUI().run()


if __name__ == "__main__":
    main()
