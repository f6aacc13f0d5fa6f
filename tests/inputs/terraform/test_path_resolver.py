"""Tests for module source path resolution."""

import os

import pytest

from tfmodtree.inputs.terraform.path_resolver import ModulePathResolver


class TestModulePathResolver:
    """Test resolution of module sources against the caller directory."""

    def test_resolves_existing_directory(self, project_dir):
        resolved = ModulePathResolver.resolve(project_dir, "./modules/vpc")
        assert resolved == project_dir / "modules" / "vpc"

    def test_resolves_parent_references(self, project_dir):
        caller = project_dir / "modules" / "net"
        resolved = ModulePathResolver.resolve(caller, "../vpc")
        assert resolved == project_dir / "modules" / "vpc"

    def test_absolute_source(self, project_dir, tmp_path):
        elsewhere = (tmp_path / "shared").resolve()
        elsewhere.mkdir()

        resolved = ModulePathResolver.resolve(project_dir, str(elsewhere))
        assert resolved == elsewhere

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_resolves_symlinks(self, project_dir):
        link = project_dir / "modules" / "vpc-link"
        link.symlink_to(project_dir / "modules" / "vpc", target_is_directory=True)

        resolved = ModulePathResolver.resolve(project_dir, "./modules/vpc-link")
        assert resolved == project_dir / "modules" / "vpc"

    def test_missing_path_falls_back_to_joined_path(self, project_dir):
        resolved = ModulePathResolver.resolve(project_dir, "./missing")
        assert resolved == project_dir / "missing"
        assert str(resolved) == f"{project_dir}/missing"

    def test_missing_path_keeps_parent_references(self, project_dir):
        resolved = ModulePathResolver.resolve(project_dir, "../gone/module")
        assert resolved == project_dir / ".." / "gone" / "module"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_loop_falls_back(self, project_dir):
        loop = project_dir / "loop"
        loop.symlink_to(loop)

        resolved = ModulePathResolver.resolve(project_dir, "./loop")
        assert resolved == project_dir / "loop"

    def test_null_byte_falls_back_to_joined_path(self, project_dir):
        resolved = ModulePathResolver.resolve(project_dir, "./bad\x00dir")
        assert resolved == project_dir / "bad\x00dir"

    def test_join_does_not_touch_disk(self, tmp_path):
        joined = ModulePathResolver.join(tmp_path / "nowhere", "./a/b")
        assert joined == tmp_path / "nowhere" / "a" / "b"


class TestRelativeToProject:
    """Test project-relative path computation."""

    def test_inside_project(self, project_dir):
        path = project_dir / "modules" / "vpc"
        relative = ModulePathResolver.relative_to_project(path, project_dir)
        assert str(relative) == os.path.join("modules", "vpc")

    def test_outside_project(self, project_dir, tmp_path):
        assert ModulePathResolver.relative_to_project(tmp_path, project_dir) is None
