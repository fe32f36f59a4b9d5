"""
Unit tests for isilon_mount.request module.
"""

import dataclasses
from pathlib import Path

import pytest

from isilon_mount.errors import MountPointUnavailable
from isilon_mount.request import (
    MountRequest,
    derive_paths,
    ensure_local_directory,
    host_from_unc,
)


class TestDerivePaths:
    def test_lab_a(self, home: Path):
        request = derive_paths("LabA")

        assert request.remote_path == "//data.ucdenver.pvt/dept/SOM/DBMI/LabA"
        assert request.local_path == home / "mnt" / "LabA"
        assert request.remote_host == "data.ucdenver.pvt"
        assert request.share_name == "LabA"

    def test_mode_and_octal_form(self, home: Path):
        request = derive_paths("LabA", "750")

        assert request.local_mode == "750"
        assert request.octal_mode == "0750"

    def test_default_mode(self, home: Path):
        assert derive_paths("LabA").octal_mode == "0775"

    def test_custom_prefix_and_root(self, tmp_path: Path):
        request = derive_paths(
            "Genomics",
            remote_prefix="//nas.example.org/share/",
            local_root=str(tmp_path / "mounts"),
        )

        assert request.remote_path == "//nas.example.org/share/Genomics"
        assert request.local_path == tmp_path / "mounts" / "Genomics"
        assert request.remote_host == "nas.example.org"

    def test_request_is_immutable(self, home: Path):
        request = derive_paths("LabA")

        assert isinstance(request, MountRequest)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.share_name = "LabB"


class TestHostFromUnc:
    def test_strips_prefix_and_path(self):
        assert host_from_unc("//host.example/a/b/c") == "host.example"

    def test_host_only(self):
        assert host_from_unc("//host.example") == "host.example"


class TestEnsureLocalDirectory:
    def test_creates_missing_parents(self, tmp_path: Path):
        target = tmp_path / "home" / "mnt" / "LabA"

        assert ensure_local_directory(target) is True
        assert target.is_dir()

    def test_idempotent(self, tmp_path: Path):
        target = tmp_path / "mnt" / "LabA"

        assert ensure_local_directory(target) is True
        assert ensure_local_directory(target) is False
        assert target.is_dir()
        assert [p.name for p in (tmp_path / "mnt").iterdir()] == ["LabA"]

    def test_existing_contents_untouched(self, tmp_path: Path):
        target = tmp_path / "mnt" / "LabA"
        target.mkdir(parents=True)
        (target / "keep.txt").write_text("x", encoding="utf-8")

        ensure_local_directory(target)

        assert (target / "keep.txt").read_text(encoding="utf-8") == "x"

    def test_file_in_the_way_raises(self, tmp_path: Path):
        target = tmp_path / "mnt" / "LabA"
        target.parent.mkdir()
        target.write_text("not a directory", encoding="utf-8")

        with pytest.raises(MountPointUnavailable, match="Cannot create mount point"):
            ensure_local_directory(target)
        assert target.is_file()

    def test_file_as_parent_raises(self, tmp_path: Path):
        (tmp_path / "mnt").write_text("", encoding="utf-8")

        with pytest.raises(MountPointUnavailable) as exc_info:
            ensure_local_directory(tmp_path / "mnt" / "LabA")
        assert str(tmp_path / "mnt" / "LabA") in exc_info.value.message
