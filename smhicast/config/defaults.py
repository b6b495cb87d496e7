"""Compiled-in forecast location."""

from smhicast.config.schema import Location

DEFAULT_LOCATION = Location(name="Karlskrona", lon=15.5869, lat=56.1612)
