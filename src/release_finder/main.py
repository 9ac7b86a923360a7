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

import argparse
import os
import subprocess
import sys
from pathlib import Path

from . import __version__
from .errors import SelectionError, TransportError
from .gh_logging import Logger
from .git_wrapper import FileTagSource, GitConfig, GitTagSource
from .github_wrapper import GithubTagSource
from .tags import TagSource, latest_tagged_version
from .version import Version

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the latest version tagged in a git repository."
    )
    parser.add_argument(
        "url",
        help="Repository URL (or org/repo with --github).",
    )
    parser.add_argument(
        "--prefix",
        default="refs/tags/",
        help=(
            "Regex fragment preceding the version in the tag name, "
            "e.g. 'refs/tags/go' or 'refs/tags/v' (default: %(default)s)."
        ),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--git",
        type=str,
        default=None,
        help="Path to the git binary; defaults to $RELEASE_FINDER_GIT or git on PATH.",
    )
    source.add_argument(
        "--github",
        action="store_true",
        help="List tags through the GitHub API instead of `git ls-remote`.",
    )
    source.add_argument(
        "--tags-file",
        type=Path,
        default=None,
        help="Read saved `git ls-remote --tags` output instead of contacting url.",
    )
    parser.add_argument(
        "--github-token",
        type=str,
        default=None,
        help=(
            "GitHub token for accessing the GitHub API (avoids rate limits); "
            "defaults to $GITHUB_TOKEN or `gh auth token`."
        ),
    )
    parser.add_argument(
        "--semver",
        action="store_true",
        help="Print the version as MAJOR.MINOR.PATCH, filling missing parts with 0.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(args)


def get_token(args: argparse.Namespace) -> str | None:
    """Get GitHub API token from CLI, environment, or gh CLI tool.

    Tries sources in order:
    1. --github-token CLI argument
    2. GITHUB_TOKEN environment variable
    3. Output of `gh auth token`
    """
    if args.github_token:
        log.debug("Using GitHub token from command-line argument.")
        return args.github_token
    elif token := os.getenv("GITHUB_TOKEN"):
        log.debug("Using GitHub token from environment variable.")
        return token
    else:
        try:
            token = (
                subprocess.check_output(["gh", "auth", "token"]).decode("utf-8").strip()
            )
            log.debug("Using GitHub token from `gh auth token`.")
            return token
        except (subprocess.CalledProcessError, OSError):
            log.debug("No GitHub token provided; proceeding without one.")
            return None


def make_source(args: argparse.Namespace) -> TagSource:
    if args.tags_file:
        return FileTagSource(args.tags_file)
    if args.github:
        return GithubTagSource(get_token(args))
    return GitTagSource(GitConfig.discover(args.git))


def format_version(literal: str, as_semver: bool) -> str:
    if not as_semver:
        return literal
    semantic = Version.parse(literal).semver
    if semantic is None:
        log.fatal(f"{literal} has more than three components; cannot print as semver")
    return str(semantic)


def main(args: list[str]) -> None:
    """Main entry point: look up the tags of the repository and print the latest version."""
    p = parse_args(args)

    try:
        latest = latest_tagged_version(p.url, p.prefix, make_source(p))
    except (SelectionError, TransportError) as e:
        log.fatal(str(e))

    if not latest:
        log.warning(f"No tag of {p.url} matches prefix {p.prefix!r}.")
        raise SystemExit(1)

    print(format_version(latest, p.semver))


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()
