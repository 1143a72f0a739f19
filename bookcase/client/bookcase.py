from __future__ import annotations

from typing import Optional

import httpx

from .clients import AnthologyClient, AuthorClient, BookClient, MemberClient, SeriesClient, StoryClient
from .config import ClientSettings


class BookcaseClient:
    """
    All six resource clients over one shared ``httpx.Client``.

    ``base_url`` and ``timeout`` default to :class:`ClientSettings`
    (``BOOKCASE_API_URL``, ``BOOKCASE_API_TIMEOUT``). Pass ``client`` to reuse
    an existing ``httpx.Client`` (for example a Starlette ``TestClient``); it
    is then left open on :meth:`close`.

    Example::

        with BookcaseClient() as bookcase:
            fred = bookcase.authors.find_by_name("Fred")[0]
            books = bookcase.books.find_by_author_id(fred.id)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        settings = ClientSettings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.api_timeout,
            follow_redirects=True,
        )
        self.authors = AuthorClient(self.base_url, client=self._client)
        self.books = BookClient(self.base_url, client=self._client)
        self.series = SeriesClient(self.base_url, client=self._client)
        self.anthologies = AnthologyClient(self.base_url, client=self._client)
        self.members = MemberClient(self.base_url, client=self._client)
        self.stories = StoryClient(self.base_url, client=self._client)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "BookcaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
