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

from pathlib import Path

import pytest

from src.release_finder.main import parse_args


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_parse_args_url_only(self):
        args = parse_args(["https://go.googlesource.com/go"])
        assert args.url == "https://go.googlesource.com/go"
        assert args.prefix == "refs/tags/"
        assert args.git is None
        assert args.github is False
        assert args.tags_file is None
        assert args.github_token is None
        assert args.semver is False

    def test_parse_args_with_prefix(self):
        args = parse_args(["--prefix", "refs/tags/go", "https://go.googlesource.com/go"])
        assert args.prefix == "refs/tags/go"

    def test_parse_args_with_github_and_token(self):
        args = parse_args(["--github", "--github-token", "mytoken123", "org/repo"])
        assert args.github is True
        assert args.github_token == "mytoken123"

    def test_parse_args_with_tags_file(self):
        args = parse_args(["--tags-file", "tags.txt", "--semver", "ignored"])
        assert args.tags_file == Path("tags.txt")
        assert args.semver is True

    def test_sources_are_mutually_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--github", "--git", "/usr/bin/git", "org/repo"])

    def test_url_is_required(self):
        with pytest.raises(SystemExit):
            parse_args([])
