"""Presentation layer for Eldar.

Everything except ``gui.window`` and ``gui.components.status_bar`` is free of
Tkinter so it can be imported in headless test runs.
"""
