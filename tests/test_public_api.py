"""Tests for the top-level msgbundle namespace."""

import msgbundle
from msgbundle import MessageBundle, MessageBundleBuilder, MessageSource


class TestPublicApi:
    """Test exported names."""

    def test_all_names_importable(self) -> None:
        """Every name in __all__ exists on the package."""
        for name in msgbundle.__all__:
            assert hasattr(msgbundle, name)

    def test_version_is_string(self) -> None:
        """__version__ is populated (installed or dev fallback)."""
        assert isinstance(msgbundle.__version__, str)
        assert msgbundle.__version__

    def test_builder_type(self) -> None:
        """MessageBundle.builder() returns the exported builder class."""
        assert isinstance(MessageBundle.builder(), MessageBundleBuilder)

    def test_protocol_is_runtime_checkable(self) -> None:
        """Objects with lookup() pass isinstance against MessageSource."""

        class Source:
            def lookup(self, key: str) -> str | None:
                return None

        assert isinstance(Source(), MessageSource)
        assert not isinstance(object(), MessageSource)
