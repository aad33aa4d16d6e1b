from dataclasses import FrozenInstanceError, replace

import pytest

from enclaveregistry.version import VERSION, NativeVersion, native_version


def test_native_version_identity():
    version = native_version().runtime_version
    assert version.spec_name == "ternoa"
    assert version.impl_name == "capsule-corp-node"
    assert version.spec_version == 43


def test_native_version_wraps_runtime_version():
    native = native_version()
    assert native.runtime_version == VERSION
    assert native.can_author_with == frozenset()


def test_native_version_is_stable():
    assert native_version() == NativeVersion(VERSION)


def test_can_use_native_with_itself():
    assert VERSION.can_use_native(VERSION) is True


def test_impl_differences_are_compatible():
    other = replace(VERSION, impl_name="other", impl_version=VERSION.impl_version + 1)
    assert VERSION.can_use_native(other) is True


@pytest.mark.parametrize(
    "changes",
    [
        {"spec_name": "other"},
        {"spec_version": VERSION.spec_version + 1},
        {"authoring_version": VERSION.authoring_version + 1},
    ],
)
def test_spec_differences_are_incompatible(changes):
    other = replace(VERSION, **changes)
    assert VERSION.can_use_native(other) is False
    assert other.can_use_native(VERSION) is False


def test_native_version_is_immutable():
    native = native_version()
    with pytest.raises(FrozenInstanceError):
        native.runtime_version.spec_version = 0
    assert native.runtime_version.spec_version == 43