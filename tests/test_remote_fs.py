"""
Unit tests for remote existence checks and chmod.
"""

import pytest

from devbridge.core.exceptions import TransportError
from devbridge.domain.deploy import remote_exists, remote_chmod


class TestRemoteExists:
    remote_path = "/tmp/foo.txt"

    def test_true_if_file_exists(self, transport):
        transport.shell.return_value = ("  File: /tmp/foo.txt\n  Size: 3", "")

        assert remote_exists(transport, self.remote_path) is True
        transport.shell.assert_called_once_with("stat /tmp/foo.txt")

    def test_true_for_empty_output(self, transport):
        transport.shell.return_value = ("", "")

        assert remote_exists(transport, self.remote_path) is True

    def test_false_if_file_does_not_exist(self, transport):
        transport.shell.return_value = ("No such file or directory", "")

        assert remote_exists(transport, self.remote_path) is False

    def test_only_stdout_is_inspected(self, transport):
        transport.shell.return_value = ("", "No such file or directory")

        assert remote_exists(transport, self.remote_path) is True

    def test_error_when_invoking_bridge(self, transport):
        transport.shell.side_effect = TransportError("device offline")

        with pytest.raises(TransportError):
            remote_exists(transport, self.remote_path)


class TestRemoteChmod:
    remote_path = "/tmp/somescript.sh"

    def test_chmod_command(self, transport):
        remote_chmod(transport, self.remote_path, "+x")

        transport.shell.assert_called_once_with("chmod +x /tmp/somescript.sh")

    def test_output_is_ignored(self, transport):
        transport.shell.return_value = ("chmod: Operation not permitted", "")

        remote_chmod(transport, self.remote_path, "755")

    def test_error_propagates(self, transport):
        error = TransportError("device offline")
        transport.shell.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            remote_chmod(transport, self.remote_path, "+x")

        assert exc_info.value is error
