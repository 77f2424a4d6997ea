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

OPENAI_MODEL = "gpt-4-turbo"
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider(Provider):
    """OpenAI chat completions; also served under the `chatgpt` alias."""

    name = "OpenAI"
    credential_name = "OPENAI_API_KEY"

    def build_request(self, prompt: str, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            url=OPENAI_ENDPOINT,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            body={
                "model": OPENAI_MODEL,
                "messages": [{"role": "user", "content": prompt}],
                "max_tokens": MAX_OUTPUT_TOKENS,
            },
        )
