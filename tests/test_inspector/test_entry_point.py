"""Unit tests for entry point lookups (configurator.inspector.entry_point).

Tests cover:
- Fixed candidate order (main before index, src before app/pages)
- TypeScript and source directory derivation
- Recursive fallback search (node_modules excluded)
- Default when nothing is found
- App file and global stylesheet lookups
"""

from __future__ import annotations

import pytest

from configurator.inspector.entry_point import (
    DEFAULT_ENTRY_POINT,
    detect_app_file,
    detect_entry_point,
    detect_global_css_file,
    find_entry_point,
)

pytestmark = pytest.mark.unit


class TestFindEntryPoint:
    def test_main_tsx(self, react_project):
        info = find_entry_point(react_project)
        assert info.file == "src/main.tsx"
        assert info.has_typescript is True
        assert info.src_directory == "src"

    def test_main_preferred_over_index(self, make_project):
        root = make_project(files={"src/index.tsx": "", "src/main.jsx": ""})
        assert find_entry_point(root).file == "src/main.jsx"

    def test_javascript_entry(self, make_project):
        root = make_project(files={"src/index.js": ""})
        info = find_entry_point(root)
        assert info.file == "src/index.js"
        assert info.has_typescript is False

    def test_next_app_router(self, make_project):
        root = make_project(files={"app/page.tsx": ""})
        info = find_entry_point(root)
        assert info.file == "app/page.tsx"
        assert info.src_directory == "app"

    def test_recursive_fallback(self, make_project):
        root = make_project(files={"packages/web/client/main.jsx": ""})
        info = find_entry_point(root)
        assert info.file == "packages/web/client/main.jsx"
        assert info.has_typescript is False
        assert info.src_directory == "packages/web/client"

    def test_recursive_fallback_prefers_tsx(self, make_project):
        root = make_project(files={"a/main.jsx": "", "b/main.tsx": ""})
        assert find_entry_point(root).file == "b/main.tsx"

    def test_node_modules_ignored(self, make_project):
        root = make_project(files={"node_modules/pkg/main.tsx": ""})
        assert find_entry_point(root).file == DEFAULT_ENTRY_POINT

    def test_default(self, make_project):
        info = find_entry_point(make_project())
        assert info.file == "src/main.tsx"
        assert info.has_typescript is True
        assert info.src_directory == "src"


class TestAsyncLookups:
    @pytest.mark.asyncio
    async def test_detect_entry_point(self, react_project):
        info = await detect_entry_point(react_project)
        assert info.file == "src/main.tsx"

    @pytest.mark.asyncio
    async def test_detect_app_file(self, react_project, make_project):
        assert await detect_app_file(react_project) == "src/App.tsx"
        assert await detect_app_file(make_project()) is None

    @pytest.mark.asyncio
    async def test_detect_app_file_next_layout(self, make_project):
        root = make_project(files={"app/layout.tsx": ""})
        assert await detect_app_file(root) == "app/layout.tsx"

    @pytest.mark.asyncio
    async def test_detect_global_css(self, make_project):
        root = make_project(files={"src/styles/globals.css": "", "styles/globals.css": ""})
        assert await detect_global_css_file(root) == "src/styles/globals.css"
        assert await detect_global_css_file(make_project()) is None
