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

import github

from . import RemoteTag
from .errors import TransportError
from .gh_logging import Logger

log = Logger(__name__)

_GITHUB_URL = re.compile(
    r"^(?:github:|https?://github\.com/|git@github\.com:)?"
    r"(?P<org_and_repo>[\w.-]+/[\w.-]+?)(?:\.git)?/?$"
)


def org_and_repo_from_url(url: str) -> str:
    """Turn "github:org/repo" or "https://github.com/org/repo.git" into "org/repo"."""
    m = _GITHUB_URL.match(url)
    if not m:
        raise TransportError(f"{url} is not a GitHub repository")
    return m.group("org_and_repo")


class GithubTagSource:
    """Lists tags through the GitHub API instead of the git binary.

    The output has the same `<sha>\\t<ref>` format as `git ls-remote`.
    """

    def __init__(self, github_token: str | None):
        auth = github.Auth.Token(github_token) if github_token else None
        self.gh = github.Github(auth=auth)
        self._tags_cache: dict[str, str] = {}

    def list_tags(self, url: str) -> str:
        """Caches results to avoid redundant API calls."""
        org_and_repo = org_and_repo_from_url(url)
        if org_and_repo in self._tags_cache:
            return self._tags_cache[org_and_repo]

        try:
            repo = self.gh.get_repo(org_and_repo)
            lines = [
                RemoteTag(commit_id=ref.object.sha, ref_name=ref.ref).to_line()
                for ref in repo.get_git_matching_refs("tags")
            ]
        except github.GithubException as e:
            raise TransportError(
                f"Error fetching tags for {org_and_repo}: {e}"
            ) from e

        log.debug(f"Fetched {len(lines)} tags of {org_and_repo} from GitHub.")
        result = "\n".join(lines)
        self._tags_cache[org_and_repo] = result
        return result
