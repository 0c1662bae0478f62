# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Processing of the documents the document server could not save back."""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)

ForgottenProcessor = Callable[[str, str], Awaitable[bool]]
"""Called with the key and download URL of a forgotten document.

Returns True if the document was handled and can be deleted from the document
server, False to leave it for a later pass.
"""


class ForgottenDocumentStore(Protocol):
    async def get_forgotten_list(self) -> list[str]: ...

    async def get_forgotten(self, key: str) -> str: ...

    async def delete_forgotten(self, key: str) -> str: ...


async def process_forgotten(
    store: ForgottenDocumentStore,
    processor: ForgottenProcessor,
    *,
    rng: random.Random | None = None,
) -> int:
    """
    Call ``processor`` on every forgotten document, deleting those it accepts.

    Documents are visited one at a time in a random order, so that a document
    the processor keeps failing on does not hold back the others across passes.
    Any error, from the store or from the processor, aborts the pass.

    Parameters
    ----------
    store:
        Access to the forgotten document list of the document server.
    processor:
        Handler of a single document, see :data:`ForgottenProcessor`.
    rng:
        Random number generator used to shuffle the documents.

    Returns
    -------
    :
        Number of documents deleted from the document server.
    """
    keys = list(await store.get_forgotten_list())
    if not keys:
        return 0
    (rng or random).shuffle(keys)
    logger.info("forgotten_documents_found", count=len(keys))
    deleted = 0
    for key in keys:
        url = await store.get_forgotten(key)
        logger.info("forgotten_document_processing", key=key, url=url)
        if await processor(key, url):
            logger.info("forgotten_document_deleting", key=key)
            await store.delete_forgotten(key)
            deleted += 1
    return deleted
