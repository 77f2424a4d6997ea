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

"""Typed failures raised by the provider adapter."""


class ProviderError(Exception):
    """Base class for every failure surfaced by a provider invocation."""


class UnsupportedProviderError(ProviderError):
    def __init__(self, provider_name: str):
        super().__init__("Unsupported model")
        self.provider_name = provider_name


class ProviderConfigurationError(ProviderError):
    """The credential a provider needs is not set."""

    def __init__(self, credential_name: str):
        super().__init__(f"{credential_name} not configured")
        self.credential_name = credential_name


class UpstreamError(ProviderError):
    """The provider answered with a non-success status."""

    def __init__(self, provider: str, status_code: int, body: str):
        super().__init__(f"{provider} API error: {status_code} – {body}")
        self.provider = provider
        self.status_code = status_code
        self.body = body


class ProviderTransportError(ProviderError):
    """The request never produced an HTTP response (DNS, TLS, reset...)."""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider
