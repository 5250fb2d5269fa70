import logging

from dsn.scroll_queue.clef import CompleteScroll, EnqueueScroll, StopScroll
from dsn.scroll_queue.structure import ScrollQueue

logger = logging.getLogger(__name__)


def play_scroll_queue_note(note, structure):
    """:: note, structure => structure

    >>> from dsn.scroll.structure import Coordinates, IGNORE_AXIS
    >>> q = ScrollQueue()
    >>> q = play_scroll_queue_note(EnqueueScroll("main", Coordinates(IGNORE_AXIS, 50)), q)
    >>> q = play_scroll_queue_note(EnqueueScroll("main", Coordinates(80, IGNORE_AXIS)), q)
    >>> q.snapshot("main")
    (Coordinates(horizontal=IGNORE_AXIS, vertical=50), Coordinates(horizontal=80, vertical=IGNORE_AXIS))

    >>> play_scroll_queue_note(CompleteScroll("main"), q).snapshot("main")
    (Coordinates(horizontal=80, vertical=IGNORE_AXIS),)

    Stopping without clearing the queue drops the movement under way only:
    >>> play_scroll_queue_note(StopScroll("main", clear_queue=False), q).head("main")
    Coordinates(horizontal=80, vertical=IGNORE_AXIS)

    >>> play_scroll_queue_note(StopScroll("main"), q).is_empty("main")
    True
    """
    if isinstance(note, EnqueueScroll):
        entries = structure.snapshot(note.queue_id)
        logger.debug("Queue %s: enqueue %r behind %d pending", note.queue_id, note.target, len(entries))
        return structure.with_entries(note.queue_id, entries + (note.target,))

    elif isinstance(note, CompleteScroll):
        # Completing on an empty queue is a no-op: a movement may have been stopped while it was arriving.
        entries = structure.snapshot(note.queue_id)
        logger.debug("Queue %s: complete %r", note.queue_id, entries[:1])
        return structure.with_entries(note.queue_id, entries[1:])

    elif isinstance(note, StopScroll):
        entries = structure.snapshot(note.queue_id)
        logger.debug("Queue %s: stop (clear_queue=%s)", note.queue_id, note.clear_queue)
        if note.clear_queue:
            return structure.with_entries(note.queue_id, ())
        return structure.with_entries(note.queue_id, entries[1:])

    raise Exception("Illegal note (programming error): %s" % note)
