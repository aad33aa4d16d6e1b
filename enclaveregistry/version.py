"""Runtime version identifying this chain's rules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RuntimeVersion:
    """Identity and version numbers of a runtime."""

    spec_name: str
    impl_name: str
    authoring_version: int
    spec_version: int
    impl_version: int
    apis: tuple[tuple[bytes, int], ...]
    transaction_version: int
    state_version: int

    def can_use_native(self, other: "RuntimeVersion") -> bool:
        """Whether a native runtime may stand in for ``other``.

        That holds only when spec name, spec version and authoring version
        all match; implementation details may differ.
        """
        return (
            self.spec_name == other.spec_name
            and self.spec_version == other.spec_version
            and self.authoring_version == other.authoring_version
        )


VERSION = RuntimeVersion(
    spec_name="ternoa",
    impl_name="capsule-corp-node",
    authoring_version=1,
    spec_version=43,
    impl_version=0,
    apis=(),
    transaction_version=6,
    state_version=1,
)


@dataclass(frozen=True)
class NativeVersion:
    """Version of the natively compiled runtime and the authoring versions it accepts."""

    runtime_version: RuntimeVersion
    can_author_with: frozenset[int] = field(default_factory=frozenset)


def native_version() -> NativeVersion:
    """The version used to identify this runtime when run natively."""
    return NativeVersion(runtime_version=VERSION)