"""Shared pytest fixtures for building scan trees on disk."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

TreeBuilder: TypeAlias = Callable[[dict[str, str | bytes]], Path]


@pytest.fixture()
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a factory that writes ``{relative path: content}`` under a fresh root."""
    root = tmp_path / "tree"
    root.mkdir()

    def _build(files: dict[str, str | bytes]) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _build


@pytest.fixture()
def release_tree(make_tree: TreeBuilder) -> Path:
    """A small release directory exercising every detector once."""
    artifact = b"release payload\n"
    return make_tree(
        {
            "dist/myapp-1.0.tar.gz": artifact,
            "dist/myapp-1.0.tar.gz.sha256": f"{hashlib.sha256(artifact).hexdigest()}  myapp-1.0.tar.gz\n",
            "dist/myapp-1.0.tar.gz.asc": "-----BEGIN PGP SIGNATURE-----\n",
            "dist/tool.whl": b"wheel bytes",
            "bundle/app.zip": b"zip bytes",
            "bundle/SHA256SUMS": f"{'0' * 64}  app.zip\n",
            "web/package-lock.json": (
                '{"packages": {"": {"name": "web"}, '
                '"node_modules/left-pad": {"version": "1.3.0", '
                '"resolved": "https://registry.npmjs.org/left-pad/-/left-pad-1.3.0.tgz", "integrity": ""}}}'
            ),
            "svc/go.sum": (
                "example.com/mod v1.0.0 h1:aaaa=\n"
                "example.com/mod v1.0.0 h1:bbbb=\n"
            ),
        }
    )
