"""
Repositories package: data-access layer.

`base.py` holds the generic store operations every entity shares; an
entity gets its own file only when it needs queries beyond those
(e.g., invoices.py). Repositories do NOT handle HTTP concerns, ownership
or side effects.

Convention:
    - All functions accept `AsyncSession` as the first argument
    - Use `flush()` internally; the session commit/rollback is handled
      by the `get_db` dependency in the API layer
"""
