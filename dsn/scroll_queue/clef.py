from utils import pmts

from dsn.scroll.structure import Coordinates


class ScrollQueueNote(object):
    pass


class EnqueueScroll(ScrollQueueNote):
    def __init__(self, queue_id, target):
        pmts(target, Coordinates)
        self.queue_id = queue_id
        self.target = target

    def __repr__(self):
        return "EnqueueScroll(%s, %s)" % (self.queue_id, self.target)


class CompleteScroll(ScrollQueueNote):
    """The oldest movement in the queue has arrived at its target."""

    def __init__(self, queue_id):
        self.queue_id = queue_id

    def __repr__(self):
        return "CompleteScroll(%s)" % self.queue_id


class StopScroll(ScrollQueueNote):
    def __init__(self, queue_id, clear_queue=True):
        """Stops the movement which is under way; if `clear_queue` is set, the movements which are waiting behind it are
        dropped as well."""
        self.queue_id = queue_id
        self.clear_queue = clear_queue

    def __repr__(self):
        return "StopScroll(%s, clear_queue=%s)" % (self.queue_id, self.clear_queue)
