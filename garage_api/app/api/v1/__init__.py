"""
Version 1 of the Garage Records API.
"""
