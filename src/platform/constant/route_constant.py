# API Route Constants

# Booking routes
BOOKING_BASE = '/booking'

# Common routes
HEALTH = '/health'
METRICS = '/metrics'
