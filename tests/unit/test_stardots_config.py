"""Unit tests for platform tags."""

import pytest

from stardots.sdk.config import get_arch_tag, get_os_tag


@pytest.mark.parametrize(
    "system,expected",
    [("linux", "linux"), ("darwin", "macos"), ("win32", "windows"), ("freebsd13", "unknown")],
)
def test_os_tag(system, expected):
    assert get_os_tag(system) == expected


@pytest.mark.parametrize(
    "machine,expected",
    [("x86_64", "x86_64"), ("AMD64", "x86_64"), ("aarch64", "arm64"), ("i686", "i386"), ("riscv64", "unknown")],
)
def test_arch_tag(machine, expected):
    assert get_arch_tag(machine) == expected
