"""Render integer height maps as coloured grid images; also reads XPM pixmaps and X11 colour names."""

__version__ = "0.1.0"