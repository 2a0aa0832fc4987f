"""Constants for the BVG transport.rest API.

API Documentation: https://v6.bvg.transport.rest/api.html
"""

BVG_API_BASE_URL = "https://v6.bvg.transport.rest"
