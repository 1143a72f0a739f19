"""
Version 1 of the Bookcase REST API.

One router per catalog entity, plus the health and version endpoints.
"""
