#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# errors.py
#
# Exceptions raised by the Crowdin v1 API client
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


class CrowdinError(Exception):
    pass


class MissingApiKeyError(CrowdinError):
    pass


class CrowdinApiError(CrowdinError):
    """The service answered with an error envelope."""

    def __init__(self, code, message, status_code=None):
        super().__init__(f"Error code {code}: {message}")
        self.code = code
        self.message = message
        self.status_code = status_code


class CrowdinHttpError(CrowdinError):
    """Non-2xx response without a usable error envelope."""

    def __init__(self, status_code, body):
        super().__init__(f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class CrowdinConnectionError(CrowdinError):
    pass


class CrowdinResponseError(CrowdinError):
    pass
