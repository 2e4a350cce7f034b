import io
import logging
import os
import unittest
from unittest.mock import patch

from redis_backed_model.bootstrap import connect
from redis_backed_model.config.runtime import StoreSettings
from redis_backed_model.infrastructure.redis.redis_store_client import RedisStoreClient
from redis_backed_model.utils.logging_config import setup_logging


class TestStoreSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = StoreSettings.from_env()
        self.assertEqual(settings.redis_host, "localhost")
        self.assertEqual(settings.redis_port, 6379)
        self.assertEqual(settings.redis_db, 0)
        self.assertEqual(settings.log_level, "INFO")

    def test_env_overrides(self):
        env = {"REDIS_HOST": "cache", "REDIS_PORT": "6380", "REDIS_DB": "3", "LOG_LEVEL": "DEBUG"}
        with patch.dict(os.environ, env, clear=True):
            settings = StoreSettings.from_env()
        self.assertEqual(settings, StoreSettings("cache", 6380, 3, "DEBUG"))


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_replaces_handlers_and_formats_lines(self):
        stream = io.StringIO()
        logger = setup_logging("debug", stream=stream)
        setup_logging("debug", stream=stream)

        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

        logging.getLogger("redis_backed_model.test").debug("hello")
        self.assertIn(" | D | redis_backed_model.test", stream.getvalue())
        self.assertTrue(stream.getvalue().rstrip().endswith("| hello"))

    def test_unknown_level_name_falls_back_to_info(self):
        logger = setup_logging("chatty", stream=io.StringIO())
        self.assertEqual(logger.level, logging.INFO)


class TestConnect(unittest.TestCase):
    @patch("redis_backed_model.infrastructure.redis.redis_store_client.Redis")
    @patch("redis_backed_model.bootstrap.setup_logging")
    def test_uses_settings_for_logging_and_redis(self, mock_setup_logging, mock_redis):
        settings = StoreSettings("cache", 6380, 3, "DEBUG")
        client = connect(settings)

        mock_setup_logging.assert_called_once_with("DEBUG")
        mock_redis.assert_called_once_with(host="cache", port=6380, db=3, decode_responses=True)
        self.assertIsInstance(client, RedisStoreClient)

    @patch("redis_backed_model.infrastructure.redis.redis_store_client.Redis")
    @patch("redis_backed_model.bootstrap.setup_logging")
    def test_reads_settings_from_env_by_default(self, mock_setup_logging, mock_redis):
        with patch.dict(os.environ, {"REDIS_HOST": "store", "LOG_LEVEL": "WARNING"}, clear=True):
            connect()

        mock_setup_logging.assert_called_once_with("WARNING")
        mock_redis.assert_called_once_with(host="store", port=6379, db=0, decode_responses=True)


if __name__ == "__main__":
    unittest.main()
