# app/db/collections.py
# Collection names in the motionMaxDB database.
USERS = "users"
WORK_SHEETS = "workSheets"
PAYMENTS = "payments"
MESSAGES = "messages"

SLIDER = "slider"
SERVICES = "services"
TESTIMONIALS = "testimonials"
FEATURED_VEHICLES = "featuredVehicles"
PARTNERS = "partners"

STATIC_CONTENT = (SLIDER, SERVICES, TESTIMONIALS, FEATURED_VEHICLES, PARTNERS)
