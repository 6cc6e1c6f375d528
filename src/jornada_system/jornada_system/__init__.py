"""Jornada (time-attendance) package.

Organized by feature modules (colaboradores, jornada, reports) with a thin
Flask controller layer over service/repository layers.
"""
