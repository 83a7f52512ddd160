"""Soccer API package.

This package is organized by feature modules (leagues, teams, players, ...)
with a thin Flask controller layer over service/repository layers.
"""
