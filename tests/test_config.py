import os
from unittest import TestCase, mock

from feedlocator.main.config import Config


class TestConfig(TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        self.assertEqual(config, Config())
        self.assertEqual(config.parser_hash_algo, "sha256")
        self.assertIsNone(config.get_proxies())

    def test_values_from_environment(self) -> None:
        env = {
            "FEEDLOCATOR_CLIENT_TIMEOUT": "30",
            "FEEDLOCATOR_CLIENT_USER_AGENT": "agent/1.0",
            "FEEDLOCATOR_MAX_REDIRECTIONS": "1",
            "FEEDLOCATOR_MAX_BODY_SIZE": "1024",
            "FEEDLOCATOR_PROXY_HOSTNAME": "proxy.local",
            "FEEDLOCATOR_PROXY_PORT": "8888",
            "FEEDLOCATOR_PARSER_HASH_ALGO": "md5",
            "FEEDLOCATOR_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        self.assertEqual(config.client_timeout, 30)
        self.assertEqual(config.client_user_agent, "agent/1.0")
        self.assertEqual(config.max_redirections, 1)
        self.assertEqual(config.max_body_size, 1024)
        self.assertEqual(config.parser_hash_algo, "md5")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(
            config.get_proxies(),
            {"http": "http://proxy.local:8888", "https": "http://proxy.local:8888"},
        )

    def test_invalid_integer(self) -> None:
        with mock.patch.dict(os.environ, {"FEEDLOCATOR_CLIENT_TIMEOUT": "soon"}, clear=True):
            with self.assertRaises(ValueError):
                Config.from_env()
