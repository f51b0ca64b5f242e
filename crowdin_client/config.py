#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# config.py
#
# Connection settings for the Crowdin v1 API
#
# Copyright (C) 2025 The LineageOS Project
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

from crowdin_client.errors import MissingApiKeyError

DEFAULT_BASE_URL = "https://api.crowdin.com"
DEFAULT_TIMEOUT = 60

_default_config = None


class CrowdinConfig:
    def __init__(self, api_key=None, base_url=DEFAULT_BASE_URL, timeout=DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    @classmethod
    def from_env(cls):
        """Build a config from CROWDIN_API_KEY, CROWDIN_BASE_URL and CROWDIN_TIMEOUT."""
        timeout = os.getenv("CROWDIN_TIMEOUT")
        if timeout is not None:
            try:
                timeout = float(timeout)
            except ValueError:
                raise ValueError(f"CROWDIN_TIMEOUT is not a number: {timeout!r}")
        else:
            timeout = DEFAULT_TIMEOUT
        return cls(
            api_key=os.getenv("CROWDIN_API_KEY") or None,
            base_url=os.getenv("CROWDIN_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )

    def api_url(self, path):
        return f"{self.base_url.rstrip('/')}/api/{path}"

    def validate_key(self):
        if not self.api_key:
            raise MissingApiKeyError("Please specify Crowdin API key.")

    def __repr__(self):
        # Never print the key itself
        key = "set" if self.api_key else None
        return (
            f"CrowdinConfig(api_key={key}, base_url={self.base_url!r}, "
            f"timeout={self.timeout})"
        )


def get_default_config():
    global _default_config
    if _default_config is None:
        _default_config = CrowdinConfig.from_env()
    return _default_config


def reset_default_config():
    global _default_config
    _default_config = None


def set_key(new_key):
    get_default_config().api_key = new_key


def set_base_path(new_base_path):
    get_default_config().base_url = new_base_path
