"""
ViaCEP Client

Resolves a CEP to its city name through https://viacep.com.br.
"""

import logging

import httpx
from pydantic import ValidationError

from core.tracing import TracingProtocol

from ..models import ViaCEPResponse
from ..protocols import PostalLookupError

logger = logging.getLogger(__name__)


class ViaCEPClient:
    """Postal lookup client (implements PostalLookupClientProtocol)"""

    def __init__(self, http_client: httpx.AsyncClient, url_template: str, tracing: TracingProtocol):
        """
        Args:
            http_client: Shared outbound client
            url_template: Endpoint with a {cep} placeholder
            tracing: Tracing capability
        """
        self.http_client = http_client
        self.url_template = url_template
        self.tracing = tracing

    async def get_city(self, cep: str) -> str:
        with self.tracing.span("lookup_city", cep=cep):
            url = self.url_template.format(cep=cep)

            try:
                response = await self.http_client.get(url, headers=self.tracing.inject({}))
            except httpx.HTTPError as e:
                logger.warning(f"ViaCEP request failed for {cep}: {e}")
                raise PostalLookupError(cep, "failed to fetch city") from e

            if not response.is_success:
                logger.warning(f"ViaCEP returned {response.status_code} for {cep}")
                raise PostalLookupError(cep, "failed to fetch city")

            try:
                payload = ViaCEPResponse.model_validate_json(response.content)
            except ValidationError:
                # undecodable body carries neither marker nor city
                payload = ViaCEPResponse()

            if payload.is_not_found:
                raise PostalLookupError(cep, "invalid CEP")

            if payload.localidade is None:
                raise PostalLookupError(cep, "could not find city")

            return payload.localidade


__all__ = ["ViaCEPClient"]
