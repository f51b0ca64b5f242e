#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# http.py
#
# Shared request helpers for the Crowdin v1 API: authentication
# parameters, form encoding and error envelope handling
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

import json
import logging

import requests

from crowdin_client.errors import (
    CrowdinApiError,
    CrowdinConnectionError,
    CrowdinHttpError,
    CrowdinResponseError,
)


def auth_params(config, extra=None):
    params = encode_fields(extra or {})
    params.update({"key": config.api_key, "json": "true"})
    return params


def encode_fields(fields, prefix=None):
    """Flatten endpoint parameters into the form the service expects.

    Nested dicts use bracket notation (titles[a.xml]=A), lists become
    name[]=value pairs, booleans are sent as 1/0 and None values are dropped.
    """
    encoded = {}
    for name, value in fields.items():
        key = f"{prefix}[{name}]" if prefix else str(name)
        if value is None:
            continue
        if isinstance(value, dict):
            encoded.update(encode_fields(value, key))
        elif isinstance(value, (list, tuple)):
            encoded[f"{key}[]"] = [_encode_value(v, key) for v in value if v is not None]
        else:
            encoded[key] = _encode_value(value)
    return encoded


def _encode_value(value, key=None):
    if isinstance(value, (dict, list, tuple)):
        raise TypeError(f"Parameter '{key}' can not hold nested values inside a list")
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def get_api_call(session, config, path):
    response = _send(session, config, "GET", path, params=auth_params(config))
    return parse_json(response)


def post_api_call(session, config, path, query=None, form=None, files=None):
    response = _send(
        session,
        config,
        "POST",
        path,
        params=auth_params(config, query),
        files=multipart_parts(form, files) or None,
    )
    return parse_json(response)


def multipart_parts(form=None, files=None):
    """Form fields and file uploads as one multipart body.

    Fields become (name, (None, value)) parts so they are sent as
    multipart/form-data even when no file is attached; list values are
    repeated name[] parts.
    """
    parts = []
    for name, value in encode_fields(form or {}).items():
        values = value if isinstance(value, list) else [value]
        parts.extend((name, (None, v)) for v in values)
    parts.extend((files or {}).items())
    return parts


def get_api_request(session, config, path, method="GET"):
    response = _send(session, config, method, path, params=auth_params(config))
    return response.content


def _send(session, config, method, path, **kwargs):
    config.validate_key()
    url = config.api_url(path)
    logging.debug(f"{method} {url}")

    try:
        response = session.request(method, url, timeout=config.timeout, **kwargs)
    except requests.RequestException as e:
        # The exception text carries the full URL including the key
        raise CrowdinConnectionError(
            f"Request to {url} failed: {type(e).__name__}"
        ) from e

    if not response.ok:
        _raise_for_response(response)
    return response


def _raise_for_response(response):
    envelope = _error_envelope(response.content)
    if envelope is not None:
        logging.warning(
            f"Crowdin returned error {envelope.get('code')} "
            f"(HTTP {response.status_code}): {envelope.get('message')}"
        )
        raise CrowdinApiError(
            envelope.get("code"), envelope.get("message"), response.status_code
        )
    logging.warning(f"Crowdin returned HTTP {response.status_code}")
    raise CrowdinHttpError(response.status_code, response.text)


def _error_envelope(body):
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    if isinstance(parsed, dict) and isinstance(parsed.get("error"), dict):
        return parsed["error"]
    return None


def parse_json(response):
    try:
        result = json.loads(response.content)
    except ValueError as e:
        raise CrowdinResponseError(
            f"Expected a JSON response from {_without_query(response.url)}, "
            f"got: {response.text[:200]}"
        ) from e

    # Not every response carries a "success" flag (e.g. project info)
    if isinstance(result, dict) and isinstance(result.get("error"), dict):
        error = result["error"]
        raise CrowdinApiError(error.get("code"), error.get("message"), response.status_code)
    return result


def _without_query(url):
    return (url or "").split("?", 1)[0]
