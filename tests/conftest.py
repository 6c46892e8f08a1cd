"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, Union

import pytest

WritePackage = Callable[[Path, Union[dict[str, Any], str]], Path]


@pytest.fixture
def write_package() -> WritePackage:
    """Return a helper that writes a package.json into a directory.

    A dict is serialized as JSON; a string is written as-is so tests can
    create broken manifests.
    """

    def _write(directory: Path, manifest: Union[dict[str, Any], str]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        content = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (directory / "package.json").write_text(content, encoding="utf-8")
        return directory

    return _write


@pytest.fixture
def project(tmp_path: Path, write_package: WritePackage) -> Path:
    """Create a project root with a small installed dependency tree.

    Layout:
        package.json              (the project itself)
        node_modules/pkg-a        MIT, with homepage
        node_modules/pkg-b        "MIT OR Apache-2.0", repository only
        node_modules/@types/foo   MIT, excluded by default config
    """
    root = tmp_path / "project"
    write_package(root, {"name": "app", "version": "0.0.1", "private": True})

    node_modules = root / "node_modules"
    write_package(
        node_modules / "pkg-a",
        {
            "name": "pkg-a",
            "version": "1.0.0",
            "license": "MIT",
            "homepage": "https://example.com/pkg-a",
        },
    )
    write_package(
        node_modules / "pkg-b",
        {
            "name": "pkg-b",
            "version": "2.0.0",
            "license": "MIT OR Apache-2.0",
            "repository": {"type": "git", "url": "git+https://github.com/example/pkg-b.git"},
        },
    )
    write_package(
        node_modules / "@types" / "foo",
        {"name": "@types/foo", "version": "1.0.0", "license": "MIT"},
    )
    return root


@pytest.fixture
def license_templates(project: Path) -> Path:
    """Add MIT and Apache-2.0 license texts under templates/licenses."""
    templates_dir = project / "templates" / "licenses"
    templates_dir.mkdir(parents=True)
    (templates_dir / "MIT.txt").write_text(
        "MIT License\n\nPermission is hereby granted, free of charge.\n",
        encoding="utf-8",
    )
    (templates_dir / "Apache-2.0.txt").write_text(
        "Apache License\nVersion 2.0, January 2004\n",
        encoding="utf-8",
    )
    return templates_dir
