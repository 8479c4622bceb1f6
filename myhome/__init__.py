"""
MyHome community management backend.

Users, communities, houses, house members, amenities, bookings and
payments, with email-confirmation / password-reset security tokens and
JWT-based authentication.
"""

__version__ = "0.1.0"
