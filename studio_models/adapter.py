# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""
Uniform entry point for every supported text-generation provider.

The adapter resolves a provider by name, checks that its credential is
configured, issues exactly one POST and hands back the upstream JSON body
untouched. Consumers only ever see `invoke(provider_name, prompt)`.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import requests

from studio_models.base import Provider
from studio_models.claude import ClaudeProvider
from studio_models.errors import (
    ProviderConfigurationError,
    ProviderTransportError,
    UnsupportedProviderError,
    UpstreamError,
)
from studio_models.gemini import GeminiProvider
from studio_models.openai import OpenAIProvider

logger = logging.getLogger(__name__)


def default_providers() -> dict[str, Provider]:
    """Provider registry keyed by lower-case name, aliases included."""
    openai = OpenAIProvider()
    return {
        "gemini": GeminiProvider(),
        "claude": ClaudeProvider(),
        "openai": openai,
        "chatgpt": openai,
    }


class ProviderAdapter:
    def __init__(
        self,
        credentials: Mapping[str, Optional[str]],
        session: requests.Session | None = None,
        providers: Mapping[str, Provider] | None = None,
    ):
        self.credentials = credentials
        self.session = session or requests.Session()
        self.providers = dict(providers) if providers is not None else default_providers()

    def resolve(self, provider_name: str | None) -> Provider:
        provider = self.providers.get((provider_name or "").lower())
        if provider is None:
            raise UnsupportedProviderError(provider_name or "")
        return provider

    def invoke(self, provider_name: str, prompt: str) -> dict:
        """
        Send `prompt` to the named provider and return its JSON response.

        Raises:
            UnsupportedProviderError: the name matches no known provider.
            ProviderConfigurationError: the provider's credential is unset.
            UpstreamError: the provider returned a non-2xx status.
            ProviderTransportError: no usable HTTP response was received.
        """
        provider = self.resolve(provider_name)
        api_key = self.credentials.get(provider.credential_name)
        if not api_key:
            raise ProviderConfigurationError(provider.credential_name)

        request = provider.build_request(prompt, api_key)
        logger.info("Calling %s, prompt length %d", provider.name, len(prompt))
        try:
            response = self.session.post(
                request.url,
                params=request.params,
                headers=request.headers,
                json=request.body,
            )
        except requests.RequestException as e:
            logger.warning("%s request failed: %s", provider.name, e)
            raise ProviderTransportError(provider.name, str(e)) from e

        if not response.ok:
            logger.warning(
                "%s API returned status %s", provider.name, response.status_code
            )
            raise UpstreamError(provider.name, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderTransportError(
                provider.name, f"{provider.name} API returned invalid JSON: {e}"
            ) from e
