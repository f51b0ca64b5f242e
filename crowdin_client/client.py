#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# client.py
#
# Client for the Crowdin v1 project API, one method per endpoint
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

import logging
import os

from collections.abc import Mapping
from contextlib import ExitStack

import requests

from crowdin_client import http
from crowdin_client.config import get_default_config

MAX_FILES_PER_REQUEST = 20


class CrowdinClient:
    def __init__(self, config=None, session=None):
        self._config = config
        self.session = session or requests.Session()

    @property
    def config(self):
        # Resolved per call so set_key() after construction still applies
        return self._config or get_default_config()

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # ################################ HELPERS ################################# #

    def _get(self, path):
        return http.get_api_call(self.session, self.config, path)

    def _post(self, path, query=None, form=None, files=None):
        return http.post_api_call(
            self.session, self.config, path, query=query, form=form, files=files
        )

    def _download(self, path, method="GET"):
        return http.get_api_request(self.session, self.config, path, method)

    def _post_files(self, path, files, form):
        files = _file_mapping(files)
        with ExitStack() as stack:
            parts = {}
            for name, local_path in files.items():
                fh = stack.enter_context(open(local_path, "rb"))
                parts[f"files[{name}]"] = (os.path.basename(local_path), fh)
            logging.info(f"Uploading {len(parts)} file(s) to {path}")
            return self._post(path, form=form, files=parts)

    def _post_single_file(self, path, file):
        if isinstance(file, (str, os.PathLike)):
            with open(file, "rb") as fh:
                return self._post(
                    path, files={"file": (os.path.basename(file), fh)}
                )
        name = os.path.basename(getattr(file, "name", "") or "") or "file"
        return self._post(path, files={"file": (name, file)})

    # ################################# FILES ################################## #

    def add_file(self, project, files, params=None):
        """Add new files to a project.

        files is a list of local paths, each also used as the file name in
        the project, or a mapping of project file name to local path. At
        most 20 files can be sent per call. params carries the optional
        endpoint fields (type, titles, export_patterns, ...).
        """
        return self._post_files(f"project/{project}/add-file", files, params)

    def update_file(self, project, files, params=None):
        """Upload the latest version of existing source files."""
        return self._post_files(f"project/{project}/update-file", files, params)

    def delete_file(self, project, file_name):
        """Delete a file from a project. Its translations are lost for good."""
        return self._post(f"project/{project}/delete-file", form={"file": file_name})

    def update_translations(self, project, files, language, params=None):
        """Upload existing translations for a single target language."""
        form = dict(params or {})
        form["language"] = language
        return self._post_files(f"project/{project}/upload-translation", files, form)

    # ############################### PROJECTS ################################# #

    def translation_status(self, project):
        """Translation progress per language."""
        return self._post(f"project/{project}/status")

    def project_info(self, project):
        return self._post(f"project/{project}/info")

    def edit_project(self, project, params=None):
        return self._post(f"project/{project}/edit-project", form=params)

    def delete_project(self, project):
        """Delete a project with all of its translations."""
        return self._post(f"project/{project}/delete-project")

    # ############################## TRANSLATIONS ############################## #

    def export_translations(self, project):
        """Build the ZIP archive with the latest translations.

        The service only builds once per 30 minutes outside of organization
        plans and skips the build when nothing changed; the returned status
        is "built" or "skipped".
        """
        return self._get(f"project/{project}/export")

    def download_translations(self, project, language_code):
        """ZIP archive with the translations for one language, as bytes."""
        return self._download(f"project/{project}/download/{language_code}.zip")

    def download_all_translations(self, project):
        return self._download(f"project/{project}/download/all.zip")

    # ############################## DIRECTORIES ############################### #

    def create_directory(self, project, directory, params=None):
        """Add a directory; nested directories are created from a full path."""
        return self._post(
            f"project/{project}/add-directory", query=params, form={"name": directory}
        )

    def change_directory(self, project, directory, params=None):
        """Rename a directory or change its attributes.

        directory is the full path of the directory to modify
        (e.g. /MainPage/AboutUs). A new_name in params can not contain a path.
        """
        form = dict(params or {})
        form["name"] = directory
        return self._post(f"project/{project}/change-directory", form=form)

    def delete_directory(self, project, directory):
        """Delete a directory with all nested files and directories."""
        return self._post(
            f"project/{project}/delete-directory", form={"name": directory}
        )

    # ########################## GLOSSARY AND MEMORY ########################### #

    def download_glossary(self, project):
        """Project glossary as TBX bytes."""
        return self._download(f"project/{project}/download-glossary")

    def upload_glossary(self, project, file):
        """Upload a TBX glossary from a path or an open binary file."""
        return self._post_single_file(f"project/{project}/upload-glossary", file)

    def download_translation_memory(self, project):
        """Project translation memory as TMX bytes."""
        return self._download(f"project/{project}/download-tm", method="POST")

    def upload_translation_memory(self, project, file):
        """Upload a TMX translation memory from a path or an open binary file."""
        return self._post_single_file(f"project/{project}/upload-tm", file)

    # ################################# MISC ################################### #

    def supported_languages(self):
        """Supported languages with Crowdin codes mapped to locale names and codes."""
        return self._get("supported-languages")


def _file_mapping(files):
    if isinstance(files, (str, os.PathLike)):
        raise TypeError("files must be a list of paths or a mapping, not a single path")
    if isinstance(files, Mapping):
        mapping = dict(files)
    else:
        mapping = {os.fspath(f): f for f in files}
    if not mapping:
        raise ValueError("No files given")
    if len(mapping) > MAX_FILES_PER_REQUEST:
        raise ValueError(
            f"At most {MAX_FILES_PER_REQUEST} files can be sent per request, "
            f"got {len(mapping)}"
        )
    return mapping
