"""
Weather utility functions for unit conversion and label formatting.
"""

import math


def celsius_to_fahrenheit(celsius: float) -> float:
    """
    Convert a temperature from Celsius to Fahrenheit.

    :param celsius: Temperature in degrees Celsius
    :return: Temperature in degrees Fahrenheit
    """
    return celsius * 9 / 5 + 32


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def format_temperature_label(celsius: float) -> str:
    """
    Format a Celsius reading as a whole-degree Fahrenheit label, e.g. ``72º``.

    :param celsius: Temperature in degrees Celsius
    :return: Label string
    """
    return f"{round_half_up(celsius_to_fahrenheit(celsius))}º"
