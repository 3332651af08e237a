"""View modules for manual routing.

Each screen lives under `views/` and exposes a `view(...)` function. The router
in `app.py` registers them in `PAGE_REGISTRY` and passes in the data and
callbacks they need.
"""
