from __future__ import annotations

import pytest

from demo_server.domain.paths import hidden_segment


@pytest.mark.parametrize(
    ("path", "segment"),
    [
        (".env", ".env"),
        ("docs/.git/config", ".git"),
        (".hidden/index.html", ".hidden"),
        ("img\\.DS_Store", ".DS_Store"),
    ],
)
def test_hidden_segment_found(path, segment):
    assert hidden_segment(path) == segment


@pytest.mark.parametrize(
    "path",
    [".", "", "index.html", "docs/index.html", "../secret.txt", "a/./b", "v1.2/file.tar.gz"],
)
def test_hidden_segment_absent(path):
    assert hidden_segment(path) is None
