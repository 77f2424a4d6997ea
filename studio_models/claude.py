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

from __future__ import annotations

from studio_models.base import MAX_OUTPUT_TOKENS, Provider, ProviderRequest

CLAUDE_MODEL = "claude-3-opus-20240229"
CLAUDE_ENDPOINT = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class ClaudeProvider(Provider):
    name = "Claude"
    credential_name = "CLAUDE_API_KEY"

    def build_request(self, prompt: str, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            url=CLAUDE_ENDPOINT,
            headers={
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "Content-Type": "application/json",
            },
            body={
                "model": CLAUDE_MODEL,
                "max_tokens": MAX_OUTPUT_TOKENS,
                "messages": [{"role": "user", "content": prompt}],
            },
        )
