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

"""Shared shape for provider variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

MAX_OUTPUT_TOKENS = 2048


@dataclass
class ProviderRequest:
    """A fully-built upstream call: where to POST, which headers, what body."""

    url: str
    body: dict
    headers: dict = field(default_factory=dict)
    params: Optional[dict] = None


class Provider(ABC):
    """
    One upstream text-generation API.

    Subclasses declare the display name used in error messages, the
    configuration credential they need and how a prompt becomes a request.
    """

    name: str
    credential_name: str

    @abstractmethod
    def build_request(self, prompt: str, api_key: str) -> ProviderRequest:
        ...
