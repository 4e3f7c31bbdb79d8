"""
Unit tests for ConfigManager.
"""

import unittest

from trigram_similarity import cfg, config
from trigram_similarity.config import ConfigManager


class TestConfigManager(unittest.TestCase):
    """Test configuration loading"""

    def tearDown(self):
        config.reload()

    def test_package_config_loaded(self):
        """Test defaults are loaded at import"""
        self.assertEqual(cfg.scanner.threshold, 0.3)
        self.assertEqual(cfg.demo.needle, "buffalo")
        self.assertGreater(cfg.benchmark.iterations, 0)

    def test_select(self):
        """Test dotted lookup with default"""
        self.assertEqual(config.select("logging.level"), "WARNING")
        self.assertEqual(config.select("no.such.key", default=7), 7)

    def test_reload_with_overrides(self):
        """Test overrides replace values"""
        reloaded = config.reload(overrides=["scanner.threshold=0.9"])
        self.assertEqual(reloaded.scanner.threshold, 0.9)
        self.assertEqual(config.select("scanner.threshold"), 0.9)

    def test_lazy_cfg(self):
        """Test cfg loads on first access"""
        manager = ConfigManager()
        self.assertEqual(manager.cfg.scanner.threshold, 0.3)


if __name__ == '__main__':
    unittest.main()
