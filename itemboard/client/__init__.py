# itemboard/client/__init__.py
"""
Client side of the item board: an HTTP client for ``/api/data`` and the
view state it drives. Run ``python -m itemboard.client`` for a terminal
version of the page.
"""
