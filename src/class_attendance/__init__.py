"""Class attendance backend.

Feature modules (accounts, students, attendance) each carry a thin Flask
controller on top of service and repository layers.
"""
