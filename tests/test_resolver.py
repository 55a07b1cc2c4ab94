"""Tests for resolver.py — locating the java executable."""

import os

from jvm_launch.host import HostSnapshot, PlatformFamily
from jvm_launch.resolver import ExecutableResolver, resolve_executable


def test_resolves_existing_executable(java_home):
    path = resolve_executable(java_home, PlatformFamily.UNIX)
    assert path == os.path.join(java_home, "bin", "java")


def test_windows_uses_exe_suffix(tmp_path):
    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "java.exe").write_text("")
    path = resolve_executable(str(tmp_path), PlatformFamily.WINDOWS)
    assert path == os.path.join(str(tmp_path), "bin", "java.exe")


def test_windows_ignores_suffixless_file(java_home):
    assert resolve_executable(java_home, PlatformFamily.WINDOWS) is None


def test_missing_file_is_none(tmp_path, capsys):
    assert resolve_executable(str(tmp_path), PlatformFamily.UNIX) is None
    assert "could not find the java executable" in capsys.readouterr().err


def test_missing_home_is_none(capsys):
    assert resolve_executable(None, PlatformFamily.UNIX) is None
    assert "could not determine the java home" in capsys.readouterr().err


def test_missing_family_is_none(java_home, capsys):
    assert resolve_executable(java_home, None) is None
    assert "could not determine the OS family" in capsys.readouterr().err


def test_both_missing_warns_twice(capsys):
    assert resolve_executable(None, None) is None
    err = capsys.readouterr().err
    assert "java home" in err
    assert "OS family" in err


def test_resolver_uses_snapshot(host):
    resolver = ExecutableResolver(host)
    first = resolver.resolve()
    assert first == os.path.join(host.runtime_home, "bin", "java")
    assert resolver.resolve() == first


def test_resolver_custom_name(tmp_path):
    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "javaw").write_text("")
    snap = HostSnapshot(runtime_home=str(tmp_path), platform_family=PlatformFamily.UNIX)
    assert ExecutableResolver(snap, name="javaw").resolve() == os.path.join(str(tmp_path), "bin", "javaw")
