import unittest

from blockfall_config import CONFIG, validate_config
from blockfall_exceptions import ConfigError


def config_with(**changes):
    config = dict(CONFIG)
    config.update(changes)
    return config


class TestValidateConfig(unittest.TestCase):

    def test_reference_config_is_valid(self):
        validate_config(CONFIG)

    def test_spawn_against_wall_rejected(self):
        # horizontal I reaches two columns to the left of its anchor
        with self.assertRaises(ConfigError):
            validate_config(config_with(SPAWN_X=1))

    def test_spawn_too_high_rejected(self):
        with self.assertRaises(ConfigError):
            validate_config(config_with(SPAWN_Y=23))

    def test_spawn_on_border_rejected(self):
        with self.assertRaises(ConfigError):
            validate_config(config_with(SPAWN_X=11))

    def test_non_positive_timing_rejected(self):
        for key in ("TICK", "TICK_HZ", "INPUT_EVERY"):
            with self.assertRaises(ConfigError):
                validate_config(config_with(**{key: 0}))

    def test_tiny_board_rejected(self):
        with self.assertRaises(ConfigError):
            validate_config(config_with(BOARD_WIDTH=2))

    def test_visible_rows_bounded(self):
        with self.assertRaises(ConfigError):
            validate_config(config_with(VISIBLE_ROWS=25))

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))


if __name__ == '__main__':
    unittest.main()
