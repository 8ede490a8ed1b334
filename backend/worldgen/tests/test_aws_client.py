"""Tests for DynamoDB table resolution."""

import unittest
from os import environ
from unittest import mock


class TestTableResolution(unittest.TestCase):
    """Tables are named by environment variables."""

    def test_unset_table_raises(self):
        """An unset or empty variable is a configuration error."""
        from worldgen.aws_client import get_dynamodb_table, has_table_configured

        with mock.patch.dict(environ, {"ROOM_TABLE": ""}):
            self.assertFalse(has_table_configured("ROOM_TABLE"))
            with self.assertRaises(ValueError):
                get_dynamodb_table("ROOM_TABLE")

    def test_localstack_options(self):
        """LOCALSTACK_ENDPOINT redirects the resource."""
        from worldgen.aws_client import _resource_options

        with mock.patch.dict(environ, {"LOCALSTACK_ENDPOINT": "http://localhost:4566"}):
            options = _resource_options()
        self.assertEqual(options["endpoint_url"], "http://localhost:4566")
        with mock.patch.dict(environ, {}, clear=False):
            environ.pop("LOCALSTACK_ENDPOINT", None)
            self.assertEqual(_resource_options(), {})


if __name__ == "__main__":
    unittest.main()
