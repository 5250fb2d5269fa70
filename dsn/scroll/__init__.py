"""
The dsn 'scroll' turns a loosely specified scroll target into absolute, bounded coordinates.

A scroll target may be given in many ways: a number of pixels, a string with a unit ("100px", "50%"), a keyword
("top", "right"), an offset relative to some base ("+=50", "-=10%") or a mapping with a value per axis
({"v": 100, "x": "right"}). Whatever the input, what comes out is a Coordinates pair: for each axis either an int in
the range which can actually be scrolled to, or IGNORE_AXIS (meaning: leave that axis alone).

The complication is that scroll movements may be queued. If a movement to 300 is still pending and another one of
"+=50" is appended to it, the user means 350, not "50 more than wherever we happen to be right now". That's why the
resolution takes a view on the queue (anything with a `snapshot(queue_id)`) next to a probe which measures the container
(anything with `current_position` and `max_position`). Neither of these is owned here; they are read, never changed.

The 'mode' of a scroll expresses its relation to the queue:

* replace: the queue is irrelevant; relative moves start at the current position.
* append: relative moves start at the position which the queue eventually arrives at.
* merge: as append; additionally, any axis which is not scrolled takes over its target from the queue.
"""
