# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import re
from collections.abc import Iterable
from typing import Protocol

from . import RemoteTag
from .errors import ParseError, SelectionError
from .gh_logging import Logger
from .version import VERSION_PATTERN, Version

log = Logger(__name__)


class TagSource(Protocol):
    def list_tags(self, url: str) -> str:
        """Return raw `<commit-id>\\t<ref-name>` lines for the repository."""
        ...


def parse_ls_remote_output(stdout: str) -> list[RemoteTag]:
    """Parse `git ls-remote` output; lines without exactly one tab are dropped."""
    result: list[RemoteTag] = []
    for line in stdout.split("\n"):
        fields = line.split("\t")
        if len(fields) == 2:
            result.append(RemoteTag(commit_id=fields[0], ref_name=fields[1]))
        elif line:
            log.debug(f"Ignoring malformed ls-remote line: {line!r}")
    return result


def tags_from_ls_remote_output(stdout: str) -> list[str]:
    """Return only the reference names (e.g. refs/tags/v1.0) of the output."""
    return [tag.ref_name for tag in parse_ls_remote_output(stdout)]


def matching_tags(tags: Iterable[str], prefix: str) -> list[str]:
    """Keep the tags that are exactly `<prefix><version>`.

    Note: prefix is used as a regex fragment, so "." in it matches any
    character. Callers wanting literal matching must re.escape() it.
    A top-level "|" in prefix splits the anchors: "a|b" keeps every tag
    starting with "a" and every tag ending in "b<version>".
    """
    # \Z, unlike $, does not accept a trailing newline.
    valid_tag = re.compile("^" + prefix + VERSION_PATTERN + r"\Z", re.ASCII)
    return [tag for tag in tags if valid_tag.search(tag)]


def filter_and_strip(tags: Iterable[str], prefix: str) -> list[str]:
    """Return the version part of every tag matching `<prefix><version>`."""
    return [tag[len(prefix) :] for tag in matching_tags(tags, prefix)]


def latest_version(versions: Iterable[str]) -> str:
    """Return the biggest of the given version literals, as written.

    Returns an empty string if versions is empty. If any literal is not a
    valid version the whole selection fails with SelectionError.
    """
    parsed: list[Version] = []
    for literal in versions:
        try:
            parsed.append(Version.parse(literal))
        except ParseError as e:
            raise SelectionError(literal, str(e)) from e

    return biggest_version(parsed)


def biggest_version(versions: Iterable[Version]) -> str:
    """Return the biggest of already parsed versions, or "" if there is none."""
    latest: Version | None = None
    for candidate in versions:
        # Strictly greater: on ties the first one seen wins.
        if latest is None or candidate > latest:
            latest = candidate

    return latest.render() if latest is not None else ""


def latest_tagged_version(url: str, prefix: str, source: TagSource) -> str:
    """Return the latest version tagged in the repository at url.

    For Go, url is "https://go.googlesource.com/go" and prefix is
    "refs/tags/go". Returns an empty string if no tag matches prefix.
    Errors of the source are not handled here.
    """
    tags = tags_from_ls_remote_output(source.list_tags(url))
    versions = filter_and_strip(tags, prefix)
    log.debug(f"{len(versions)} of {len(tags)} refs of {url} match {prefix!r}")
    return latest_version(versions)
