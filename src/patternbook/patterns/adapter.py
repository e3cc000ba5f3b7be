"""Adapter pattern: a legacy Fahrenheit sensor behind a Celsius interface."""

from __future__ import annotations

import abc


class TemperatureSensor(abc.ABC):
    """Target interface the rest of the application expects."""

    @abc.abstractmethod
    def celsius(self) -> float: ...


class DigitalSensor(TemperatureSensor):
    """A sensor that already speaks Celsius; no adapting needed."""

    def __init__(self, reading: float) -> None:
        self._reading = reading

    def celsius(self) -> float:
        return self._reading


class LegacyFahrenheitSensor:
    """Adaptee: an existing class with an incompatible API."""

    def __init__(self, reading_f: float) -> None:
        self._reading_f = reading_f

    def get_temperature_f(self) -> float:
        return self._reading_f


class FahrenheitToCelsiusAdapter(TemperatureSensor):
    """Presents a `LegacyFahrenheitSensor` as a `TemperatureSensor`.

    Readings are converted to Celsius and rounded to two decimals. The legacy
    sensor is wrapped, not modified.
    """

    def __init__(self, sensor: LegacyFahrenheitSensor) -> None:
        self._sensor = sensor

    def celsius(self) -> float:
        return round((self._sensor.get_temperature_f() - 32) * 5 / 9, 2)


def average_celsius(sensors: list[TemperatureSensor]) -> float:
    """Client code: only knows about `TemperatureSensor`."""
    return round(sum(s.celsius() for s in sensors) / len(sensors), 2)


def demo() -> list[str]:
    sensors: list[TemperatureSensor] = [
        DigitalSensor(21.5),
        FahrenheitToCelsiusAdapter(LegacyFahrenheitSensor(212)),
        FahrenheitToCelsiusAdapter(LegacyFahrenheitSensor(32)),
    ]
    lines = [f"{type(s).__name__}: {s.celsius()} C" for s in sensors]
    lines.append(f"average: {average_celsius(sensors)} C")
    return lines
