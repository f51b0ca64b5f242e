#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# __init__.py
#
# Client library for the Crowdin v1 API
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

from crowdin_client.client import MAX_FILES_PER_REQUEST, CrowdinClient
from crowdin_client.config import (
    DEFAULT_BASE_URL,
    CrowdinConfig,
    get_default_config,
    set_base_path,
    set_key,
)
from crowdin_client.errors import (
    CrowdinApiError,
    CrowdinConnectionError,
    CrowdinError,
    CrowdinHttpError,
    CrowdinResponseError,
    MissingApiKeyError,
)

__all__ = [
    "CrowdinApiError",
    "CrowdinClient",
    "CrowdinConfig",
    "CrowdinConnectionError",
    "CrowdinError",
    "CrowdinHttpError",
    "CrowdinResponseError",
    "DEFAULT_BASE_URL",
    "MAX_FILES_PER_REQUEST",
    "MissingApiKeyError",
    "get_default_config",
    "set_base_path",
    "set_key",
]
