"""Cliente HTTP da integração OpenProject.

Único ponto de IO com o OpenProject. Cada chamada de fetch_project:
- faz exatamente uma requisição GET (sem retry; retry é decisão do chamador)
- é limitada pelo timeout configurado, com cancelamento ativo da requisição
- classifica o resultado por status HTTP, nunca pelo corpo
- devolve ProjectRecord ou OpenProjectError; nada não-classificado escapa
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.openproject.errors import OpenProjectError
from api.connectors.openproject.project_logging import (
    log_fetch_failed,
    log_fetch_started,
    log_fetch_succeeded,
    log_processing_error,
    log_transport_error,
)
from api.normalizers.openproject import normalize_project

if TYPE_CHECKING:
    from api.connectors.openproject.config import ClientConfig
    from app.protocols.models import ProjectRecord

logger: logging.Logger = logging.getLogger(__name__)


class OpenProjectClient:
    """Cliente da API v3 do OpenProject.

    Não guarda estado mutável por chamada: chamadas concorrentes na mesma
    instância são independentes. O httpx.AsyncClient é injetado e seu ciclo
    de vida pertence a quem o criou (lifespan da aplicação).
    """

    __slots__ = ("_config", "_http_client")

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient) -> None:
        """Inicializa cliente OpenProject.

        Args:
            config: Configuração imutável de conexão
            http_client: Cliente HTTP async compartilhado
        """
        self._config = config
        self._http_client = http_client

        if not config.api_token:
            logger.warning(
                "openproject_api_token_missing",
                extra={"base_url": config.base_url},
            )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def fetch_project(self, project_id: str) -> ProjectRecord | OpenProjectError:
        """Busca um projeto no OpenProject e normaliza o resultado.

        Args:
            project_id: ID ou identifier do projeto (não vazio, garantido pela rota)

        Returns:
            ProjectRecord normalizado ou OpenProjectError classificado.
        """
        if not self._config.api_token:
            error = OpenProjectError.config_error()
            log_fetch_failed(project_id, error)
            return error

        url = self._config.project_url(project_id)
        log_fetch_started(project_id, url)

        result = await self._execute_fetch(url, project_id)

        if isinstance(result, OpenProjectError):
            log_fetch_failed(project_id, result)
        else:
            log_fetch_succeeded(result)
        return result

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._config.host_header:
            headers["Host"] = self._config.host_header
        return headers

    async def _execute_fetch(
        self,
        url: str,
        project_id: str,
    ) -> ProjectRecord | OpenProjectError:
        """Executa GET limitado pelo timeout; cancela a requisição ao expirar."""
        try:
            response = await asyncio.wait_for(
                self._http_client.get(url, headers=self._build_headers()),
                timeout=self._config.timeout_seconds,
            )
        except (TimeoutError, httpx.TimeoutException):
            return OpenProjectError.timeout(self._config.timeout_ms)
        except Exception as exc:
            log_transport_error(project_id, url, exc)
            return OpenProjectError.network_error()

        try:
            return self._process_response(response, project_id)
        except Exception as exc:
            log_processing_error(project_id, exc)
            return OpenProjectError.network_error()

    def _process_response(
        self,
        response: httpx.Response,
        project_id: str,
    ) -> ProjectRecord | OpenProjectError:
        """Interpreta o status e normaliza o corpo em caso de sucesso."""
        status_code = response.status_code
        if status_code == 401:
            return OpenProjectError.unauthorized()
        if status_code == 404:
            return OpenProjectError.not_found(project_id)
        if not response.is_success:
            return OpenProjectError.from_status(status_code, response.reason_phrase)

        payload = _parse_json_object(response, project_id)
        if payload is None:
            return OpenProjectError.malformed_payload()
        return normalize_project(payload, project_id)


def _parse_json_object(response: httpx.Response, project_id: str) -> dict[str, Any] | None:
    try:
        data = response.json()
    except (ValueError, RecursionError):
        logger.error("openproject_invalid_json", extra={"project_id": project_id})
        return None

    if not isinstance(data, dict):
        logger.error(
            "openproject_unexpected_payload",
            extra={"project_id": project_id, "payload_type": type(data).__name__},
        )
        return None
    return data
