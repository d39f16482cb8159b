from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    SERVICES = "catalog_services"
    PACKAGES = "catalog_packages"
    EVENT_PLANS = "event_plans"
    SERVICE_LINES = "cart_service_lines"
    PACKAGE_LINES = "cart_package_lines"
    TESTIMONIALS = "testimonials"
    CONTACT_MESSAGES = "contact_messages"
