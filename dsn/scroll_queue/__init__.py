"""
The dsn 'scroll_queue' keeps track of scroll movements which have been requested but have not been completed yet.

There's a separate queue for each queue_id; each entry in a queue is the (fully resolved) target of a single movement.
The oldest entry is the one that's being executed; the newest one is what the queue as a whole eventually arrives at.
That last fact is what the dsn 'scroll' relies on when appending to (or merging with) a queue: the ScrollQueue structure
is a QueueView.
"""
