"""Tests for glogkit.levels.

Covers:
- Fixed severity order of Level
- ConfigLevel sentinels and conversion from Level
- Name lookup and aliases
- Registration of custom level names with logging
"""

import logging

import pytest

from glogkit.levels import ConfigLevel, Level


class TestLevelOrder:
    """Severity ordering is total and fixed."""

    def test_definition_order_is_highest_first(self):
        assert list(Level) == [
            Level.EMERGENCY,
            Level.ALERT,
            Level.CRITICAL,
            Level.ERROR,
            Level.WARNING,
            Level.NOTICE,
            Level.INFO,
            Level.DEBUG,
        ]

    def test_comparison_follows_severity(self):
        assert (
            Level.EMERGENCY
            > Level.ALERT
            > Level.CRITICAL
            > Level.ERROR
            > Level.WARNING
            > Level.NOTICE
            > Level.INFO
            > Level.DEBUG
        )

    def test_sorting_matches_definition_order(self):
        assert sorted(Level, reverse=True) == list(Level)

    def test_values_are_logging_numbers(self):
        assert Level.DEBUG == logging.DEBUG
        assert Level.INFO == logging.INFO
        assert Level.WARNING == logging.WARNING
        assert Level.ERROR == logging.ERROR
        assert Level.CRITICAL == logging.CRITICAL
        assert logging.INFO < Level.NOTICE < logging.WARNING
        assert Level.ALERT > logging.CRITICAL


class TestLevelNames:
    def test_custom_names_registered(self):
        assert logging.getLevelName(int(Level.NOTICE)) == "NOTICE"
        assert logging.getLevelName(int(Level.ALERT)) == "ALERT"
        assert logging.getLevelName(int(Level.EMERGENCY)) == "EMERGENCY"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("error", Level.ERROR),
            ("ERROR", Level.ERROR),
            (" Notice ", Level.NOTICE),
            ("warn", Level.WARNING),
            ("fatal", Level.CRITICAL),
            ("emerg", Level.EMERGENCY),
        ],
    )
    def test_from_name(self, name, expected):
        assert Level.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown Level"):
            Level.from_name("verbose")

    def test_sentinels_are_not_emission_levels(self):
        with pytest.raises(ValueError):
            Level.from_name("all")
        with pytest.raises(ValueError):
            Level.from_name("none")

    def test_method_name(self):
        assert Level.WARNING.method_name == "warning"


class TestConfigLevel:
    def test_distinct_type(self):
        assert not isinstance(ConfigLevel.ERROR, Level)
        assert not isinstance(Level.ERROR, ConfigLevel)

    def test_has_every_severity(self):
        for level in Level:
            assert ConfigLevel[level.name] == int(level)

    def test_sentinels_bracket_severities(self):
        assert ConfigLevel.ALL < min(Level)
        assert ConfigLevel.NONE > max(Level)
        assert ConfigLevel.ALL > logging.NOTSET

    def test_from_level(self):
        assert ConfigLevel.from_level(Level.NOTICE) is ConfigLevel.NOTICE

    def test_level_config_property(self):
        assert Level.EMERGENCY.config is ConfigLevel.EMERGENCY

    def test_from_name_sentinels(self):
        assert ConfigLevel.from_name("all") is ConfigLevel.ALL
        assert ConfigLevel.from_name("NONE") is ConfigLevel.NONE
