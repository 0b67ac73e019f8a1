# -*- coding: utf-8 -*-
import asyncio
import logging
from typing import Any, Dict

import aiohttp

from .config import DEFAULT_MAX_RETRIES
from .errors import NetworkError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = (429, 500, 502, 503, 504)


async def http_get_json(
    session: aiohttp.ClientSession,
    url: str,
    params: Dict[str, Any],
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> Dict[str, Any]:
    """GET com decodificação JSON; erros de transporte viram `NetworkError`.

    Com `max_retries > 0`, status 429/5xx e falhas de transporte são
    repetidos com back-off exponencial.
    """
    attempts = max_retries + 1
    for attempt in range(attempts):
        last = attempt == attempts - 1
        try:
            async with session.get(url, params=params) as r:
                if r.status in RETRYABLE_STATUS and not last:
                    logger.warning("HTTP %s em %s; tentativa %d/%d",
                                   r.status, url, attempt + 1, attempts)
                    await asyncio.sleep((2 ** attempt) + 0.1 * attempt)
                    continue
                r.raise_for_status()
                return await r.json()
        except (aiohttp.ContentTypeError, ValueError) as exc:
            raise NetworkError(f"Resposta não-JSON de {url}: {exc}") from exc
        except aiohttp.ClientResponseError as exc:
            raise NetworkError(f"HTTP {exc.status} em {url}: {exc.message}") from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            if last:
                raise NetworkError(f"Falha de rede em {url}: {exc!r}") from exc
            logger.warning("Falha de rede em %s (%r); tentativa %d/%d",
                           url, exc, attempt + 1, attempts)
            await asyncio.sleep((2 ** attempt) + 0.2 * attempt)
    raise NetworkError(f"Sem resposta de {url}")
