"""
Unit tests for remote file spec resolution.
"""

import pytest

from devbridge.core.exceptions import TransportError
from devbridge.domain.deploy import FilePattern, list_remote_files


class TestLiteralSpecs:
    """Literal paths never reach the device."""

    def test_string_is_wrapped_in_list(self, transport):
        assert list_remote_files(transport, "/tmp/package.wgt") == ["/tmp/package.wgt"]
        transport.shell.assert_not_called()

    def test_list_is_returned_unchanged(self, transport):
        filenames = ["/tmp/package.wgt", "/tmp/package2.wgt"]

        result = list_remote_files(transport, filenames)

        assert result is filenames
        transport.shell.assert_not_called()

    def test_tuple_becomes_list(self, transport):
        assert list_remote_files(transport, ("/tmp/a", "/tmp/b")) == ["/tmp/a", "/tmp/b"]
        transport.shell.assert_not_called()

    def test_missing_literal_path_is_not_checked(self, transport):
        transport.shell.return_value = ("stat: /nope: No such file or directory", "")

        assert list_remote_files(transport, "/nope") == ["/nope"]
        transport.shell.assert_not_called()


class TestPatternSpecs:
    """Patterns are expanded with `ls -1 -c` on the device."""

    def test_matching_files_in_listing_order(self, transport):
        transport.shell.return_value = ("young.wgt\nold.wgt", "")

        result = list_remote_files(transport, FilePattern("/tmp/*.wgt"))

        assert result == ["young.wgt", "old.wgt"]
        transport.shell.assert_called_once_with("ls -1 -c /tmp/*.wgt")

    def test_latest_filter_keeps_first_entry(self, transport):
        transport.shell.return_value = ("young.wgt\nold.wgt\n", "")

        result = list_remote_files(transport, FilePattern("/tmp/*.wgt", filter="latest"))

        assert result == ["young.wgt"]

    def test_mapping_spec_is_accepted(self, transport):
        transport.shell.return_value = ("young.wgt\nold.wgt", "")

        result = list_remote_files(transport, {"pattern": "/tmp/*.wgt", "filter": "latest"})

        assert result == ["young.wgt"]
        transport.shell.assert_called_once_with("ls -1 -c /tmp/*.wgt")

    def test_blank_and_trailing_lines_are_dropped(self, transport):
        transport.shell.return_value = ("a.wgt\r\n\r\nb.wgt\n\n", "")

        assert list_remote_files(transport, FilePattern("*.wgt")) == ["a.wgt", "b.wgt"]

    def test_no_matches_is_empty_not_error(self, transport):
        transport.shell.return_value = ("", "")

        assert list_remote_files(transport, FilePattern("/tmp/*.none")) == []
        assert list_remote_files(transport, FilePattern("/tmp/*.none", filter="latest")) == []

    @pytest.mark.parametrize("filter", [None, "latest"])
    def test_ls_no_match_message_is_empty(self, transport, filter):
        transport.shell.return_value = ("ls: /tmp/*.none: No such file or directory\r\n", "")

        assert list_remote_files(transport, FilePattern("/tmp/*.none", filter)) == []

    def test_ls_no_match_message_among_matches(self, transport):
        transport.shell.return_value = (
            "/tmp/a.wgt\r\nls: /tmp/b*.wgt: No such file or directory\r\n", ""
        )

        assert list_remote_files(transport, FilePattern("/tmp/a.wgt /tmp/b*.wgt")) == ["/tmp/a.wgt"]

    def test_unknown_filter_returns_everything(self, transport):
        transport.shell.return_value = ("a\nb", "")

        assert list_remote_files(transport, FilePattern("*", filter="oldest")) == ["a", "b"]

    def test_transport_error_propagates_unchanged(self, transport):
        error = TransportError("sdb daemon not running")
        transport.shell.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            list_remote_files(transport, FilePattern("/tmp/*.wgt"))

        assert exc_info.value is error


class TestInvalidSpecs:

    def test_mapping_without_pattern(self, transport):
        with pytest.raises(ValueError):
            list_remote_files(transport, {"filter": "latest"})

    def test_unsupported_type(self, transport):
        with pytest.raises(TypeError):
            list_remote_files(transport, 42)
