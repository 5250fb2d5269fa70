from dsn.scroll.probe import QueueView


class ScrollQueue(QueueView):

    def __init__(self, queues=None):
        """`queues` maps each queue_id to a tuple of targets, oldest first. Queues are never empty; an empty queue is
        simply not in the mapping."""
        self.queues = dict(queues) if queues else {}

    def __repr__(self):
        return "ScrollQueue(%s)" % self.queues

    def snapshot(self, queue_id):
        return self.queues.get(queue_id, ())

    def head(self, queue_id):
        entries = self.snapshot(queue_id)
        return entries[0] if entries else None

    def is_empty(self, queue_id):
        return len(self.snapshot(queue_id)) == 0

    def with_entries(self, queue_id, entries):
        queues = dict(self.queues)
        if entries:
            queues[queue_id] = tuple(entries)
        else:
            queues.pop(queue_id, None)
        return ScrollQueue(queues)
