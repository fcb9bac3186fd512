"""
Configuration, constants, exceptions and dependency wiring
"""
