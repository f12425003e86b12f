"""Simulated coverage map — synthetic zones per provider, no real geodata.

Modules:
    config        Zone geometry constants
    geometry      Random hexagonal zones around a country centre
    map_surface   Render surface boundary + in-memory GeoJSON implementation
    visibility    Per-provider show/hide over a surface, country switching
"""
