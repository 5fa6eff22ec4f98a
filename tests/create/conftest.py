"""Shared fixtures for create workflow tests."""

import os
import sys

import pytest

# Ensure tests/create/ is on sys.path so test files can import the fakes
# and helpers unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from tree_helpers import write_template  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if os.path.join("tests", "create") in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def library_templates(tmp_path):
    """A templates directory holding small library/javascript and library/typescript trees."""
    templates_dir = tmp_path / "project-templates"
    write_template(templates_dir / "library" / "javascript", {
        "package.json": '{"name": "lib"}\n',
        "gitignore": "node_modules/\n",
        "src/index.js": "export const x = 1;\n",
    })
    write_template(templates_dir / "library" / "typescript", {
        "package.json": '{"name": "lib"}\n',
        "gitignore": "node_modules/\n",
        "tsconfig.json": "{}\n",
        "src/index.ts": "export const x: number = 1;\n",
    })
    return templates_dir
