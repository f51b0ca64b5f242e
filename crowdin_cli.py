#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# crowdin_cli.py
#
# Command line access to the Crowdin v1 project API: upload sources and
# translations, export and download translations, manage directories,
# glossaries and translation memories
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

# ################################# IMPORTS ################################## #

import argparse
import itertools
import json
import logging
import sys
import threading
import time

from signal import signal, SIGINT

from crowdin_client import CrowdinClient, CrowdinConfig, CrowdinError

# ################################# GLOBALS ################################## #

_DONE = False

# ################################ FUNCTIONS ################################# #


def start_spinner(show_spinner):
    global _DONE
    _DONE = False
    if not show_spinner:
        return None
    t = threading.Thread(target=spin_cursor, daemon=True)
    t.start()
    return t


def stop_spinner(t):
    global _DONE
    if t is None:
        return
    _DONE = True
    t.join(1)


def spin_cursor():
    spinner = itertools.cycle([".", "..", "...", "....", "....."])
    while not _DONE:
        sys.stderr.write("\x1b[1K\r")
        sys.stderr.write(next(spinner))
        sys.stderr.flush()
        time.sleep(0.5)
    sys.stderr.write("\x1b[1K\r")


def user_prompt(question):
    while True:
        user_input = input(question + " [y/n]: ").strip().lower()
        if user_input in ("y", "yes"):
            return True
        if user_input in ("n", "no"):
            return False
        print("Please use y/n or yes/no.\n")


def parse_params(pairs):
    """Turn repeated name=value arguments into endpoint parameters.

    Bracketed names (titles[strings.xml]=Strings) are passed through as is.
    """
    params = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Parameter '{pair}' is not in name=value form")
        name, value = pair.split("=", 1)
        params[name.strip()] = value
    return params


def parse_files(entries):
    """Either plain paths or crowdin_name=local_path entries."""
    if not any("=" in e for e in entries):
        return list(entries)
    files = {}
    for entry in entries:
        name, _, local_path = entry.partition("=")
        files[name] = local_path or name
    return files


def print_json(result):
    print(json.dumps(result, indent=2, sort_keys=True))


def write_download(data, output):
    with open(output, "wb") as fh:
        fh.write(data)
    logging.info(f"Wrote {len(data)} bytes to {output}")


# ################################ COMMANDS ################################## #


def cmd_add_file(client, args):
    print_json(client.add_file(args.project, parse_files(args.files), parse_params(args.param)))


def cmd_update_file(client, args):
    print_json(
        client.update_file(args.project, parse_files(args.files), parse_params(args.param))
    )


def cmd_delete_file(client, args):
    print_json(client.delete_file(args.project, args.file))


def cmd_upload_translations(client, args):
    print_json(
        client.update_translations(
            args.project,
            parse_files(args.files),
            args.language,
            parse_params(args.param),
        )
    )


def cmd_status(client, args):
    print_json(client.translation_status(args.project))


def cmd_info(client, args):
    print_json(client.project_info(args.project))


def cmd_export(client, args):
    result = client.export_translations(args.project)
    success = result.get("success") if isinstance(result, dict) else None
    if isinstance(success, dict) and success.get("status"):
        logging.info(f"Export {success['status']}")
    print_json(result)


def cmd_download(client, args):
    t = start_spinner(args.spinner)
    try:
        if args.language == "all":
            data = client.download_all_translations(args.project)
        else:
            data = client.download_translations(args.project, args.language)
    finally:
        stop_spinner(t)
    write_download(data, args.output or f"{args.language}.zip")


def cmd_edit_project(client, args):
    print_json(client.edit_project(args.project, parse_params(args.param)))


def cmd_delete_project(client, args):
    if not args.yes and not user_prompt(
        f"Delete project '{args.project}' with all translations?"
    ):
        logging.info("Aborted")
        return
    print_json(client.delete_project(args.project))


def cmd_add_directory(client, args):
    print_json(
        client.create_directory(args.project, args.directory, parse_params(args.param))
    )


def cmd_change_directory(client, args):
    print_json(
        client.change_directory(args.project, args.directory, parse_params(args.param))
    )


def cmd_delete_directory(client, args):
    print_json(client.delete_directory(args.project, args.directory))


def cmd_download_glossary(client, args):
    write_download(client.download_glossary(args.project), args.output or f"{args.project}.tbx")


def cmd_upload_glossary(client, args):
    print_json(client.upload_glossary(args.project, args.file))


def cmd_download_tm(client, args):
    t = start_spinner(args.spinner)
    try:
        data = client.download_translation_memory(args.project)
    finally:
        stop_spinner(t)
    write_download(data, args.output or f"{args.project}.tmx")


def cmd_upload_tm(client, args):
    print_json(client.upload_translation_memory(args.project, args.file))


def cmd_languages(client, args):
    print_json(client.supported_languages())


# ############################################################################ #


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Access Crowdin projects through the v1 API"
    )
    parser.add_argument(
        "-k", "--key", help="Crowdin API key (defaults to $CROWDIN_API_KEY)"
    )
    parser.add_argument(
        "--base-url", help="Crowdin base URL (defaults to $CROWDIN_BASE_URL)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every request"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    def add_command(name, func, help_text, project=True):
        p = subparsers.add_parser(name, help=help_text)
        p.set_defaults(func=func)
        if project:
            p.add_argument("project", help="Crowdin project identifier")
        return p

    def add_params(p):
        p.add_argument(
            "-P",
            "--param",
            action="append",
            metavar="NAME=VALUE",
            help="Extra endpoint parameter, may be repeated",
        )

    def add_output(p):
        p.add_argument("-o", "--output", help="File to write the download to")
        p.add_argument(
            "--spinner", action="store_true", help="Show a spinner while downloading"
        )

    p = add_command("add-file", cmd_add_file, "Add new source files")
    p.add_argument("files", nargs="+", help="Local paths or crowdin_name=local_path")
    add_params(p)

    p = add_command("update-file", cmd_update_file, "Update existing source files")
    p.add_argument("files", nargs="+", help="Local paths or crowdin_name=local_path")
    add_params(p)

    p = add_command("delete-file", cmd_delete_file, "Delete a file from the project")
    p.add_argument("file", help="File name in the project")

    p = add_command(
        "upload-translations", cmd_upload_translations, "Upload existing translations"
    )
    p.add_argument("-l", "--language", required=True, help="Target language code")
    p.add_argument("files", nargs="+", help="Local paths or crowdin_name=local_path")
    add_params(p)

    add_command("status", cmd_status, "Translation progress per language")
    add_command("info", cmd_info, "Project details")
    add_command("export", cmd_export, "Build the archive with the latest translations")

    p = add_command("download", cmd_download, "Download the translations archive")
    p.add_argument(
        "-l", "--language", default="all", help="Language code, or 'all' (default)"
    )
    add_output(p)

    p = add_command("edit-project", cmd_edit_project, "Change project settings")
    add_params(p)

    p = add_command("delete-project", cmd_delete_project, "Delete the project")
    p.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")

    for name, func, help_text in (
        ("add-directory", cmd_add_directory, "Add a directory"),
        ("change-directory", cmd_change_directory, "Rename or modify a directory"),
    ):
        p = add_command(name, func, help_text)
        p.add_argument("directory", help="Directory path in the project")
        add_params(p)

    p = add_command("delete-directory", cmd_delete_directory, "Delete a directory")
    p.add_argument("directory", help="Directory path in the project")

    p = add_command("download-glossary", cmd_download_glossary, "Download the TBX glossary")
    add_output(p)
    p = add_command("upload-glossary", cmd_upload_glossary, "Upload a TBX glossary")
    p.add_argument("file", help="TBX file to upload")

    p = add_command("download-tm", cmd_download_tm, "Download the TMX translation memory")
    add_output(p)
    p = add_command("upload-tm", cmd_upload_tm, "Upload a TMX translation memory")
    p.add_argument("file", help="TMX file to upload")

    add_command("languages", cmd_languages, "List supported languages", project=False)

    return parser.parse_args(argv)


def sig_handler(signal_received, frame):
    global _DONE
    print("")
    print("SIGINT or CTRL-C detected. Exiting gracefully")
    _DONE = True
    sys.exit(0)


# ################################### MAIN ################################### #


def main(argv=None):
    signal(SIGINT, sig_handler)
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    # urllib3 logs request lines with the query string, which holds the key
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        config = CrowdinConfig.from_env()
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)
    if args.key:
        config.api_key = args.key
    if args.base_url:
        config.base_url = args.base_url
    if not config.api_key:
        logging.error(
            "Could not determine api key, please pass -k/--key or export "
            "CROWDIN_API_KEY to the environment!"
        )
        sys.exit(1)

    with CrowdinClient(config) as client:
        try:
            args.func(client, args)
        except (CrowdinError, ValueError, OSError) as e:
            logging.error(f"Failed: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
