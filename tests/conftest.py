"""Shared fixtures for capresolve tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

VISIBILITY = "dev/com.ibm.websphere.appserver.features/visibility"


@pytest.fixture
def checkout_dir(tmp_path: Path) -> Path:
    """Create a minimal platform checkout with public and private units.

    Public units: servlet-4.0, jsp-2.2, jsp-2.3, el-3.0.
    The descriptors reference two implementation artifacts, one of them
    twice, to exercise de-duplication by structural identity.
    """
    root = tmp_path / "open-liberty"
    visibility = root / VISIBILITY
    for unit in ("servlet-4.0", "jsp-2.2", "jsp-2.3", "el-3.0"):
        (visibility / "public" / unit).mkdir(parents=True)
    (visibility / "public" / "README.md").write_text("not a unit\n")

    (visibility / "public" / "jsp-2.3" / "jsp-2.3.feature").write_text(
        "symbolicName=com.ibm.websphere.appserver.jsp-2.3\n"
        '-bundles=com.ibm.ws.jsp.2.3; mavenCoordinates="com.ibm.ws:com.ibm.ws.jsp.2.3:1.0.57"\n'
    )
    private = visibility / "private" / "jspImpl"
    private.mkdir(parents=True)
    (private / "jspImpl.feature").write_text(
        '-bundles=com.ibm.ws.jsp.2.3; mavenCoordinates="com.ibm.ws:com.ibm.ws.jsp.2.3:1.0.57",\n'
        ' com.ibm.ws.servlet; mavenCoordinates="com.ibm.ws:com.ibm.ws.servlet:1.0.57"\n'
    )
    return root


@pytest.fixture
def graph_document() -> dict:
    """Dependency graph of two managed units sharing a servlet implementation.

    jsp-2.3 -> (private jsp) -> com.ibm.ws.jsp.2.3
                             -> servlet-4.0 -> com.ibm.ws.servlet
    servlet-4.0 -> com.ibm.ws.servlet
    """
    servlet_subtree = {
        "coordinate": "io.openliberty.features:servlet-4.0:21.0.0.3",
        "type": "esa",
        "dependencies": [
            {"coordinate": "com.ibm.ws:com.ibm.ws.servlet:1.0.57"},
        ],
    }
    return {
        "roots": [
            {
                "coordinate": "io.openliberty.features:jsp-2.3:21.0.0.3",
                "type": "pom",
                "dependencies": [
                    {
                        "coordinate": "io.openliberty.features:io.openliberty.jspImpl:21.0.0.3",
                        "dependencies": [
                            {"coordinate": "com.ibm.ws:com.ibm.ws.jsp.2.3:1.0.57"},
                            servlet_subtree,
                        ],
                    },
                ],
            },
            dict(servlet_subtree, type="pom"),
        ],
        "packages": {
            "com.ibm.ws:com.ibm.ws.jsp.2.3:1.0.57": ["org.apache.jasper"],
        },
    }


@pytest.fixture
def graph_file(tmp_path: Path, graph_document: dict) -> Path:
    """Write the graph document as JSON (a YAML subset)."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph_document))
    return path
