import os

import pytest


@pytest.fixture
def make_dirs():
    """Create directories (relative paths, parents included) under a base"""
    def _make(base, names):
        for name in names:
            (base / name).mkdir(parents=True)
        return base
    return _make


@pytest.fixture
def dir_names():
    """Sorted directory names directly under a path"""
    def _names(path):
        return sorted(p.name for p in path.iterdir() if p.is_dir())
    return _names


@pytest.fixture
def tree_snapshot():
    """Every path under a root, relative and sorted"""
    def _snapshot(root):
        entries = []
        for dirpath, dirnames, filenames in os.walk(root):
            for name in dirnames + filenames:
                entries.append(os.path.relpath(os.path.join(dirpath, name), root))
        return sorted(entries)
    return _snapshot
