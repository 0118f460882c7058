"""Closed-form scale formulas shared by the converter implementations"""

K_OFFSET = 273.15


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


def celsius_to_kelvin(value: float) -> float:
    return value + K_OFFSET


def kelvin_to_celsius(value: float) -> float:
    return value - K_OFFSET
