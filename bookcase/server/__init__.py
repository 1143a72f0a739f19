"""
Bookcase REST server.

Run it with ``python -m bookcase.server``; host and port come from
``BOOKCASE_SERVER_HOST`` and ``BOOKCASE_SERVER_PORT``.
"""
