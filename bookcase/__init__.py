"""Bookcase.

A personal library cataloging system: a CRUD REST API for authors, books,
series, anthologies, stories and series members, plus a matching client
library.

High-level architecture
-----------------------

- ``bookcase.core``:

  - Domain exceptions shared by the server and the client.
  - Centralized logging configuration.
  - SQLModel entities, repositories and the demo catalog seed data.
  - Request/response (I/O) schemas.

- ``bookcase.server``:

  - The FastAPI application, one router per entity under ``/api/v1``.
  - Settings, exception handlers and request logging middleware.

- ``bookcase.client``:

  - Synchronous httpx clients (one per entity) that map JSON payloads to
    typed models and translate error responses into exceptions.

Typical workflow
----------------

Run the server with ``python -m bookcase.server`` and talk to it with::

    from bookcase.client import BookcaseClient

    with BookcaseClient("http://localhost:8000/api/v1") as bookcase:
        for author in bookcase.authors.find_all():
            print(author.last_name, author.first_name)
"""

__version__ = "0.1.0"
