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

GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_TEMPERATURE = 0.7
GEMINI_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1/models/"
    f"{GEMINI_MODEL}:generateContent"
)


class GeminiProvider(Provider):
    """Google Gemini over the public REST endpoint (API key as query param)."""

    name = "Gemini"
    credential_name = "GEMINI_API_KEY"

    def build_request(self, prompt: str, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            url=GEMINI_ENDPOINT,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            body={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "maxOutputTokens": MAX_OUTPUT_TOKENS,
                    "temperature": GEMINI_TEMPERATURE,
                },
            },
        )
